"""
Lint script runner.
"""
import subprocess
import sys

TARGETS = ["./loxlang", "./lox.py"]


def main() -> int:
    """
    Lint the Lox project using flake8 and pylint.
    """
    print("Running flake8...")
    flake8 = subprocess.run(
        ["flake8", *TARGETS, "--max-line-length=100", "--exclude=loxlang/tests"],
        check=False,
    )

    print("Running pylint...")
    pylint = subprocess.run(
        ["pylint", *TARGETS, "--ignore=tests", "--max-line-length=100"],
        check=False,
    )
    return flake8.returncode or pylint.returncode


if __name__ == "__main__":
    sys.exit(main())
