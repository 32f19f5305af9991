"""
pyunify - first-order term unification with occurs check.

Parses terms such as f(X, g(a)), computes their most general unifier
with Robinson's algorithm, and prints the resulting substitution.
"""

from .term import (
    Term,
    Var,
    Atom,
    Struct,
    same_shape,
    variables,
)

from .parser import parse_term, parse_terms, Parser, ParseError
from .subst import Substitution, resolve, bind
from .unify import (
    UnificationFailure,
    StructuralClash,
    OccursCheckFailed,
    occurs,
    mgu,
    unify,
    can_unify,
    unify_strings,
)
from .printer import print_term, print_substitution, NO_BINDINGS

__version__ = "0.1.0"

__all__ = [
    # Terms
    "Term",
    "Var",
    "Atom",
    "Struct",
    "same_shape",
    "variables",
    # Parser
    "parse_term",
    "parse_terms",
    "Parser",
    "ParseError",
    # Substitution
    "Substitution",
    "resolve",
    "bind",
    # Unification
    "UnificationFailure",
    "StructuralClash",
    "OccursCheckFailed",
    "occurs",
    "mgu",
    "unify",
    "can_unify",
    "unify_strings",
    # Printer
    "print_term",
    "print_substitution",
    "NO_BINDINGS",
]
