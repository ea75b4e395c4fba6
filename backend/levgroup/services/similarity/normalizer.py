#normalizer.py - Removes the parts of a key that change between otherwise identical messages.

from __future__ import annotations
import re


# 8-4-4-4-12 hex digits, hyphens optional, hex letters in either case.
IDENTIFIER_RE = re.compile(r"[A-Fa-f0-9]{8}(?:-?[A-Fa-f0-9]{4}){3}-?[A-Fa-f0-9]{12}")

# Digits together with the separators used in numbers: "3.000,00", "-3,87".
# A lone "-" or "." is removed as well.
DIGIT_RUN_RE = re.compile(r"[-.,0-9]+")


def strip_identifiers(text: str) -> str:
    return IDENTIFIER_RE.sub("", text)


def strip_digits(text: str) -> str:
    return DIGIT_RUN_RE.sub("", text)


def normalize_key(text: str, strip_digits: bool = False, strip_identifiers: bool = False) -> str:
    """
    Prepare a key for comparison.

    Identifiers go first: their hyphens would otherwise be eaten by the
    digit-run pattern and leave hex letters behind.
    """
    if strip_identifiers:
        text = IDENTIFIER_RE.sub("", text)
    if strip_digits:
        text = DIGIT_RUN_RE.sub("", text)
    return text
