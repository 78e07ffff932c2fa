#!/usr/bin/env python3
"""Run the unitalgebra test suite with a fixed hypothesis seed.

Coverage is reported when pytest-cov is installed. Extra arguments are passed
through to pytest.
"""

from __future__ import annotations

import importlib.util
import os
import subprocess
import sys


def _pytest_command(extra: list[str]) -> list[str]:
    cmd = [
        sys.executable,
        "-m",
        "pytest",
        "-q",
        "--maxfail=1",
        "--hypothesis-seed=0",
    ]
    if importlib.util.find_spec("pytest_cov") is not None:
        cmd.extend(["--cov=unitalgebra", "--cov-report=term-missing"])
    return cmd + extra


def main(argv: list[str] | None = None) -> int:
    env = dict(os.environ, PYTHONHASHSEED="0")
    env.pop("UNITALGEBRA_STRICT_DEFINITIONS", None)
    result = subprocess.run(_pytest_command(list(argv or [])), env=env, check=False)
    return result.returncode


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
