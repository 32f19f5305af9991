"""
Console shell for pyunify.

Reads two terms (from the command line or interactively), unifies them,
and prints the resulting bindings or "no".
"""

from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

from .parser import parse_term, ParseError
from .printer import print_substitution
from .unify import unify


def run_session(source1: str, source2: str, out: TextIO | None = None,
                separator: str = ", ") -> bool:
    """
    Unify two term strings and print the report.

    Args:
        source1: First term
        source2: Second term
        out: Stream to write to (default: sys.stdout)
        separator: Text between printed bindings

    Returns:
        True if the terms unify

    Raises:
        ParseError: If either term is malformed
    """
    if out is None:
        out = sys.stdout
    t1 = parse_term(source1)
    t2 = parse_term(source2)

    print("Unifying...", file=out)
    print(f"Term 1: {source1}", file=out)
    print(f"Term 2: {source2}", file=out)

    subst = unify(t1, t2)
    if subst is None:
        print("Result: no", file=out)
        return False

    print(f"Result: {print_substitution(subst, separator)}", file=out)
    print("yes", file=out)
    return True


def read_terms() -> tuple[str, str]:
    """Prompt for two terms on the console."""
    print("Enter your terms:")
    source1 = input("Term 1, press enter when done: ")
    source2 = input("Term 2, press enter when done: ")
    return source1, source2


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the shell."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Unify two first-order terms with occurs check"
    )
    parser.add_argument(
        "terms",
        nargs="*",
        metavar="TERM",
        help="The two terms to unify (prompted for when omitted)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each binding as it is made"
    )
    parser.add_argument(
        "--separator",
        default=", ",
        help="Text between printed bindings (default: ', ')"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(name)s: %(message)s")

    if args.terms and len(args.terms) != 2:
        parser.error("expected exactly two terms")

    if args.terms:
        source1, source2 = args.terms
    else:
        try:
            source1, source2 = read_terms()
        except (EOFError, KeyboardInterrupt):
            print()
            return 1

    try:
        unified = run_session(source1, source2, separator=args.separator)
    except ParseError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        return 2

    return 0 if unified else 1


if __name__ == "__main__":
    sys.exit(main())
