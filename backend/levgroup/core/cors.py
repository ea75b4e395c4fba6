from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from levgroup.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """Allow the configured front-end origins to call the API."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
