"""Command-line entry point that prints a greeting."""

import argparse
from collections.abc import Sequence

GREETING = "Hello, world!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(prog="exerkit", description="Print a greeting.")
    parser.parse_args(argv)
    print(GREETING)
    return 0