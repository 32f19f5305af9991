"""
Substitution store.

A Substitution maps variable names to the terms they are bound to. Each
unification attempt builds its own store; there is no shared binding state.

Resolution comes in two strengths:
- resolve() follows the binding chain of a variable and stops at the first
  unbound variable, atom or struct. Struct arguments are left alone.
- apply() resolves every variable anywhere inside a term and rebuilds the
  term. The input term is never modified.
"""

from __future__ import annotations
from typing import Iterator, Optional

from .term import Term, Var, Atom, Struct


class Substitution:
    """
    Mapping from variable name to bound term.

    Keys are unique: binding an already bound variable raises ValueError.
    Iteration yields variable names in ascending order.
    """

    __slots__ = ('_bindings',)

    def __init__(self, bindings: Optional[dict[str, Term]] = None) -> None:
        self._bindings: dict[str, Term] = {}
        if bindings:
            for name, term in bindings.items():
                self.bind(name, term)

    def is_bound(self, name: str) -> bool:
        """Check if a variable has a binding."""
        return name in self._bindings

    def lookup(self, name: str) -> Optional[Term]:
        """Return the direct binding of a variable, or None."""
        return self._bindings.get(name)

    def bind(self, name: str, term: Term) -> None:
        """
        Bind a variable to a term.

        The caller is responsible for running the occurs-check first.

        Raises:
            ValueError: If the variable is already bound
        """
        if name in self._bindings:
            raise ValueError(
                f"Cannot rebind variable {name}: already bound to "
                f"{self._bindings[name]!r}"
            )
        self._bindings[name] = term

    def resolve(self, term: Term) -> Term:
        """Follow variable bindings until an unbound Var, Atom or Struct."""
        while isinstance(term, Var):
            bound = self._bindings.get(term.name)
            if bound is None:
                return term
            term = bound
        return term

    def apply(self, term: Term) -> Term:
        """Fully resolve a term, including everything inside struct arguments."""
        # Post-order walk: a struct is rebuilt once its arguments are done
        stack: list[tuple[Term, bool]] = [(term, False)]
        results: list[Term] = []

        while stack:
            current, args_done = stack.pop()

            if args_done:
                n = len(current.args)
                args = tuple(results[len(results) - n:])
                del results[len(results) - n:]
                results.append(Struct(current.functor, args))
                continue

            current = self.resolve(current)
            if isinstance(current, (Var, Atom)):
                results.append(current)
            elif isinstance(current, Struct):
                stack.append((current, True))
                stack.extend((arg, False) for arg in reversed(current.args))
            else:
                raise TypeError(f"Not a term: {current!r}")

        return results[0]

    # Read-only mapping protocol

    def get(self, name: str, default: Optional[Term] = None) -> Optional[Term]:
        return self._bindings.get(name, default)

    def items(self) -> list[tuple[str, Term]]:
        """Bindings as (name, term) pairs in ascending name order."""
        return [(name, self._bindings[name]) for name in self]

    def __getitem__(self, name: str) -> Term:
        return self._bindings[name]

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)

    def __bool__(self) -> bool:
        return bool(self._bindings)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Substitution):
            return self._bindings == other._bindings
        return False

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}: {term!r}" for name, term in self.items())
        return f"Substitution({{{inner}}})"


def resolve(term: Term, subst: Substitution) -> Term:
    """Dereference a term against a substitution (see Substitution.resolve)."""
    return subst.resolve(term)


def bind(name: str, term: Term, subst: Substitution) -> None:
    """Add a binding to a substitution (see Substitution.bind)."""
    subst.bind(name, term)
