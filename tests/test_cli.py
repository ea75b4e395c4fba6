"""
Tests for the command line entry point.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from levgroup.cli import main

LINES = "timeout after 3 seconds\ntimeout after 13 seconds\n\ndisk full\n"

LOG_LINES = (
    "2026-01-17 14:32:10 ERROR auth-service TimeoutError: upstream took 3012 ms\n"
    "2026-01-17 14:33:10 ERROR auth-service TimeoutError: upstream took 2950 ms\n"
)


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, text: str) -> str:
        path = os.path.join(self.tmp.name, "input.log")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _run(self, argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_text_output(self):
        code, out, _ = self._run([self._write(LINES), "-t", "0", "--strip-digits"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "2\ttimeout after  seconds\n1\tdisk full\n")

    def test_json_output(self):
        code, out, _ = self._run([self._write(LINES), "--tolerance", "1", "--json"])
        self.assertEqual(code, 0)
        groups = json.loads(out)
        self.assertEqual(groups[0], {
            "key": "timeout after 13 seconds",
            "count": 2,
            "items": ["timeout after 13 seconds", "timeout after 3 seconds"],
        })

    def test_percentage(self):
        code, out, _ = self._run([self._write("aaaa\naaab\n"), "-t", "25", "--percentage"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "2\taaaa\n")

    def test_logs_mode(self):
        code, out, _ = self._run([self._write(LOG_LINES), "--logs", "-t", "0", "--strip-digits"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "2\tauth-service\tERROR\tTimeoutError: upstream took  ms\n")

    def test_top_k_limits_log_clusters(self):
        text = LOG_LINES + "2026-01-17 14:34:10 WARN db-service slow query\n"
        code, out, _ = self._run([self._write(text), "--logs", "-t", "0", "--strip-digits", "--top-k", "1"])
        self.assertEqual(code, 0)
        self.assertEqual(out.count("\n"), 1)

    def test_top_k_must_be_positive(self):
        for value in ("0", "-2"):
            with self.assertRaises(SystemExit) as ctx:
                self._run([self._write(LOG_LINES), "--logs", "--top-k", value])
            self.assertEqual(ctx.exception.code, 2)

    def test_missing_file(self):
        code, out, err = self._run([os.path.join(self.tmp.name, "nope.log")])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)

    def test_negative_tolerance(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run([self._write(LINES), "-t", "-1"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
