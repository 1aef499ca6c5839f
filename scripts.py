import subprocess
import sys

PATHS = ["src", "tests"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_lint():
    subprocess.run(["flake8", *PATHS], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)


def run_format():
    subprocess.run(["black", *PATHS], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=flattree", "tests/", "--cov-report=xml"], check=True)


if __name__ == "__main__":
    globals()[sys.argv[1]]()
