"""
Printer for terms and substitutions.

Converts Term objects back to term syntax, and renders a Substitution as
a comma-separated list of "Name = term" bindings.

Names are written verbatim. The term syntax has no quoting, so an Atom
built in code with a name outside the grammar (e.g. Atom("Foo")) prints
as text that does not parse back to the same term.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from .term import Term, Var, Atom, Struct

if TYPE_CHECKING:
    from .subst import Substitution


NO_BINDINGS = "no bindings"


def print_term(term: Term, subst: Optional[Substitution] = None) -> str:
    """
    Convert a Term to term syntax.

    Args:
        term: The term to print
        subst: If given, every variable in the term is resolved through
            it before printing

    Returns:
        String such as "f(a, g(X))" or "f()"
    """
    if subst is not None:
        term = subst.apply(term)
    return _write_out(term)


def _write_out(term: Term) -> str:
    stack: list[tuple[Term, bool]] = [(term, False)]
    parts: list[str] = []

    while stack:
        current, args_done = stack.pop()

        if args_done:
            n = len(current.args)
            args_str = ', '.join(parts[len(parts) - n:])
            del parts[len(parts) - n:]
            parts.append(f"{current.functor}({args_str})")
        elif isinstance(current, (Var, Atom)):
            parts.append(current.name)
        elif isinstance(current, Struct):
            stack.append((current, True))
            stack.extend((arg, False) for arg in reversed(current.args))
        else:
            raise TypeError(f"Not a term: {current!r}")

    return parts[0]


def print_binding(name: str, subst: Substitution) -> str:
    """Print one binding as "Name = term", fully resolved."""
    return f"{name} = {print_term(Var(name), subst)}"


def print_substitution(subst: Substitution, separator: str = ", ") -> str:
    """
    Render every binding of a substitution.

    Bindings appear in ascending variable-name order, each fully resolved,
    so the output never shows a variable the substitution could still
    replace.

    Returns:
        e.g. "X = b, Y = f(b)", or NO_BINDINGS for an empty substitution
    """
    if not subst:
        return NO_BINDINGS
    return separator.join(print_binding(name, subst) for name in subst)
