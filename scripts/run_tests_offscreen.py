#!/usr/bin/env python3
"""Run pytest in Qt offscreen mode so the window tests work without a display.

Usage:
  python scripts/run_tests_offscreen.py [--timeout SECONDS] [--] [pytest args...]

Examples:
  python scripts/run_tests_offscreen.py -- tests/test_carousel_window.py -q
  python scripts/run_tests_offscreen.py -- -k dir_loader
"""

from __future__ import annotations

import argparse
import os
import shlex
import subprocess
import sys

_PER_TEST_TIMEOUT = 60


def main() -> int:
    p = argparse.ArgumentParser(description="Run pytest with QT_QPA_PLATFORM=offscreen")
    p.add_argument("--timeout", type=int, default=300, help="Maximum seconds to allow the whole pytest run")
    p.add_argument("pytest_args", nargs=argparse.REMAINDER, help="Additional pytest args")
    args = p.parse_args()

    env = os.environ.copy()
    env.setdefault("QT_QPA_PLATFORM", "offscreen")

    # Per-test timeout via the pytest-timeout plugin; explicit user args win.
    cmd = [sys.executable, "-m", "pytest", f"--timeout={min(_PER_TEST_TIMEOUT, args.timeout)}"]
    cmd += [a for a in args.pytest_args if a != "--"]

    print("Running:", " ".join(shlex.quote(c) for c in cmd))
    try:
        completed = subprocess.run(cmd, env=env, check=False, timeout=args.timeout)
    except subprocess.TimeoutExpired:
        print(f"pytest run timed out after {args.timeout} seconds", file=sys.stderr)
        return 124
    return completed.returncode


if __name__ == "__main__":
    raise SystemExit(main())
