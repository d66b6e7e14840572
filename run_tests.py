#!/usr/bin/env python3
"""Run the kanascript test suite.

Extra arguments are handed to pytest, e.g. ``./run_tests.py -k long_vowel``.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_DIR = Path(__file__).resolve().parent


def run_tests(args):
    command = [
        sys.executable, "-m", "pytest",
        "--rootdir", str(PROJECT_DIR),
        str(PROJECT_DIR / "tests"),
        *args,
    ]
    return subprocess.run(command, check=False).returncode


if __name__ == "__main__":
    sys.exit(run_tests(sys.argv[1:]))
