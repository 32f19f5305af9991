"""
Unification algorithm for first-order terms.

Implements Robinson's unification algorithm with:
- Mandatory occurs check
- An explicit worklist instead of recursion over arguments
- A fresh Substitution per attempt; input terms are never modified
"""

from __future__ import annotations
import logging
from typing import Optional

from .term import Term, Var, Atom, Struct, same_shape
from .subst import Substitution
from .parser import parse_term

logger = logging.getLogger(__name__)


class UnificationFailure(Exception):
    """
    Two terms do not unify.

    This is the expected negative answer, not a fatal error.

    Attributes:
        left: Resolved left-hand term at the point of failure
        right: Resolved right-hand term at the point of failure
    """

    def __init__(self, message: str, left: Term, right: Term) -> None:
        self.left = left
        self.right = right
        super().__init__(message)


class StructuralClash(UnificationFailure):
    """Two non-variable terms differ in kind, name or arity."""

    def __init__(self, left: Term, right: Term) -> None:
        super().__init__(f"Cannot unify {left} with {right}", left, right)


class OccursCheckFailed(UnificationFailure):
    """Binding a variable would make the substitution cyclic."""

    def __init__(self, var_name: str, term: Term) -> None:
        self.var_name = var_name
        super().__init__(f"{var_name} occurs in {term}", Var(var_name), term)


def occurs(var_name: str, term: Term, subst: Substitution) -> bool:
    """
    Check if a variable occurs in a term, seeing through existing bindings.

    Args:
        var_name: Name of the variable about to be bound
        term: The term it would be bound to
        subst: Current bindings

    Returns:
        True if binding var_name to term would create a cycle
    """
    stack: list[Term] = [term]
    # Bound variables already followed; their bindings need no second visit
    followed: set[str] = set()

    while stack:
        current = stack.pop()

        if isinstance(current, Var):
            bound = subst.lookup(current.name)
            if bound is None:
                if current.name == var_name:
                    return True
            elif current.name not in followed:
                followed.add(current.name)
                stack.append(bound)
        elif isinstance(current, Struct):
            stack.extend(reversed(current.args))
        elif not isinstance(current, Atom):
            raise TypeError(f"Not a term: {current!r}")

    return False


def _bind_var(var: Var, term: Term, subst: Substitution) -> None:
    """Bind an unbound variable to a term after the occurs check."""
    if occurs(var.name, term, subst):
        logger.debug("occurs check failed: %s in %s", var.name, term)
        raise OccursCheckFailed(var.name, term)
    logger.debug("bind %s = %s", var.name, term)
    subst.bind(var.name, term)


def mgu(t1: Term, t2: Term) -> Substitution:
    """
    Compute the most general unifier of two terms.

    Args:
        t1: First term
        t2: Second term

    Returns:
        A new Substitution that makes t1 and t2 identical

    Raises:
        StructuralClash: If two non-variable subterms disagree
        OccursCheckFailed: If a binding would be cyclic
    """
    subst = Substitution()
    worklist: list[tuple[Term, Term]] = [(t1, t2)]

    while worklist:
        a, b = worklist.pop()
        a = subst.resolve(a)
        b = subst.resolve(b)

        if same_shape(a, b):
            if isinstance(a, Struct) and isinstance(b, Struct):
                # Reversed so the leftmost pair is popped first
                worklist.extend(reversed(list(zip(a.args, b.args))))
            continue

        if isinstance(a, Var):
            _bind_var(a, b, subst)
        elif isinstance(b, Var):
            _bind_var(b, a, subst)
        else:
            logger.debug("clash: %s vs %s", a, b)
            raise StructuralClash(a, b)

    return subst


def unify(t1: Term, t2: Term) -> Optional[Substitution]:
    """
    Unify two terms.

    Returns:
        The most general unifier, or None if the terms do not unify
    """
    try:
        return mgu(t1, t2)
    except UnificationFailure:
        return None


def can_unify(t1: Term, t2: Term) -> bool:
    """Check if two terms unify."""
    return unify(t1, t2) is not None


def unify_strings(source1: str, source2: str) -> Optional[Substitution]:
    """
    Parse two terms and unify them.

    Raises:
        ParseError: If either source is not a well-formed term
    """
    return unify(parse_term(source1), parse_term(source2))
