#!/usr/bin/env python
"""Local quality checks and tests runner with auto-fix capabilities.

Runs formatting, import ordering, lint, type, dead code and complexity
checks followed by the test suite with coverage.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Run all checks + auto fixes
    python run_quality_checks.py --skip lint type   # Skip linting and mypy
    python run_quality_checks.py --verbose          # Detailed output
"""

import argparse
import subprocess
import sys
from typing import Optional

# Directories to check
PACKAGE_DIR = "life_simulator"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR]


class CheckRunner:
    """Runs quality checks and tests with optional auto-fixes."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks: Optional[list[str]] = None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = skip_checks or []
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, key: str, cmd: list[str], name: str) -> bool:
        """Run a tool and record whether it succeeded.

        Args:
            key: Short name used by --skip
            cmd: Command and arguments as list
            name: Friendly name for the check

        Returns:
            True if the command succeeded or was skipped
        """
        if key in self.skip_checks:
            print(f"Skipping {name}")
            return True

        print(f"\n{'=' * 70}\n> {name}: {' '.join(cmd)}\n{'=' * 70}")
        try:
            result = subprocess.run(
                cmd, check=False, capture_output=not self.verbose, text=True
            )
        except FileNotFoundError as exc:
            print(f"Error: {exc}")
            print("   Make sure all tools are installed: pip install -e .[dev]")
            self.failed_checks.append(name)
            return False

        success = result.returncode == 0
        if not success and not self.verbose:
            print(result.stdout)
            print(result.stderr)

        print(f"{name} {'passed' if success else 'failed'}")
        (self.passed_checks if success else self.failed_checks).append(name)
        return success

    def check_formatting(self) -> bool:
        cmd = ["black", *DIRS_TO_CHECK] if self.fix else ["black", "--check", *DIRS_TO_CHECK]
        return self.run_command("formatting", cmd, "Black")

    def check_imports(self) -> bool:
        cmd = ["isort", *DIRS_TO_CHECK] if self.fix else ["isort", "--check-only", *DIRS_TO_CHECK]
        return self.run_command("imports", cmd, "isort")

    def check_lint(self) -> bool:
        return self.run_command("lint", ["pylint", PACKAGE_DIR], "Pylint")

    def check_types(self) -> bool:
        return self.run_command("type", ["mypy", PACKAGE_DIR], "Mypy")

    def check_dead_code(self) -> bool:
        return self.run_command("deadcode", ["vulture", PACKAGE_DIR], "Vulture")

    def check_complexity(self) -> bool:
        return self.run_command("complexity", ["radon", "cc", PACKAGE_DIR, "-a"], "Radon")

    def run_tests(self) -> bool:
        cmd = ["pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing", TESTS_DIR]
        return self.run_command("tests", cmd, "Pytest + Coverage")

    def print_summary(self) -> None:
        print(f"\n{'=' * 70}\nSUMMARY\n{'=' * 70}")
        for check in self.passed_checks:
            print(f"   passed: {check}")
        for check in self.failed_checks:
            print(f"   FAILED: {check}")
        if not self.failed_checks:
            print("\nAll checks passed!")

    def run_all(self) -> int:
        """Run all checks in order.

        Returns:
            0 if all checks passed, non-zero otherwise
        """
        for check in (
            self.check_formatting,
            self.check_imports,
            self.check_lint,
            self.check_types,
            self.check_dead_code,
            self.check_complexity,
            self.run_tests,
        ):
            check()

        self.print_summary()
        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run local quality checks and tests with optional auto-fixes",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Automatically fix formatting and import order",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show all output")
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        help="Skip checks (formatting, imports, lint, type, deadcode, complexity, tests)",
    )
    args = parser.parse_args()

    return CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip).run_all()


if __name__ == "__main__":
    sys.exit(main())
