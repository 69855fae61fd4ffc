#!/usr/bin/env python3
"""Run repository quality checks.

Checks included:
- Python bytecode compilation for the package and tools
- Version consistency between pyproject.toml, the package and the app
- Unit tests in tests/
"""

from __future__ import annotations

import argparse
import compileall
import re
import subprocess
import sys
from pathlib import Path

COMPILE_PATHS = [
    "digirain",
    "tools",
]

VERSION_FILES = {
    "pyproject.toml": r'^\s*version\s*=\s*"([^"]+)"',
    "digirain/__init__.py": r"^__version__\s*=\s*['\"]([^'\"]+)['\"]",
    "digirain/core/app.py": r"^APP_VERSION\s*=\s*['\"]([^'\"]+)['\"]",
}


def check_compile(paths: list[str]) -> int:
    """Compile Python files to bytecode to catch syntax errors."""
    success = True
    for path in paths:
        if not Path(path).exists():
            continue
        if not compileall.compile_dir(path, quiet=1, force=False):
            success = False

    if success:
        print("[OK] compileall passed.")
        return 0

    print("[FAIL] compileall failed.")
    return 1


def check_tests() -> int:
    """Run unit tests."""
    cmd = [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-v"]
    result = subprocess.run(cmd, check=False)
    if result.returncode == 0:
        print("[OK] unit tests passed.")
        return 0

    print("[FAIL] unit tests failed.")
    return result.returncode


def check_version_sync() -> int:
    """Verify version strings agree across release-critical files."""
    versions = {}
    for file_name, pattern in VERSION_FILES.items():
        path = Path(file_name)
        if not path.exists():
            print(f"[FAIL] version sync check: {file_name} missing.")
            return 1
        match = re.search(pattern, path.read_text(encoding="utf-8"), flags=re.MULTILINE)
        if not match:
            print(f"[FAIL] version sync check: no version in {file_name}.")
            return 1
        versions[file_name] = match.group(1)

    if len(set(versions.values())) != 1:
        found = ", ".join(f"{name}={version}" for name, version in versions.items())
        print(f"[FAIL] version sync mismatch: {found}")
        return 1

    print(f"[OK] version sync passed ({versions['pyproject.toml']}).")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Run digirain quality checks.")
    parser.add_argument("--skip-compile", action="store_true", help="Skip compileall check.")
    parser.add_argument("--skip-version-sync", action="store_true", help="Skip version consistency check.")
    parser.add_argument("--skip-tests", action="store_true", help="Skip unit tests.")
    args = parser.parse_args()

    exit_code = 0

    if not args.skip_compile:
        exit_code |= check_compile(COMPILE_PATHS)

    if not args.skip_version_sync:
        exit_code |= check_version_sync()

    if not args.skip_tests:
        exit_code |= check_tests()

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
