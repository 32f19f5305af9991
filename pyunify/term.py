"""
Term representation for pyunify.

This module implements the data structures for first-order terms:
- Var: Logic variables, identified by name
- Atom: Named constants
- Struct: Compound terms (functor + args)

Key design decisions:
- Terms are frozen dataclasses; nothing mutates a term after construction
- Variable bindings live in a Substitution, never inside the term
- Variables are identified by name, so Var("X") == Var("X")
- A zero-arity Struct has the same shape as the Atom of the same name
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator


class Term(ABC):
    """
    Base class for all terms.

    The variant is closed: every term is a Var, an Atom or a Struct.
    """

    __slots__ = ()

    @abstractmethod
    def shape(self) -> tuple[str, str, int]:
        """Return (kind, name, arity) used for structural matching."""

    def __str__(self) -> str:
        from .printer import print_term
        return print_term(self)


@dataclass(frozen=True)
class Var(Term):
    """
    Logic variable.

    Attributes:
        name: Variable name, starting with an uppercase letter
    """

    name: str

    def shape(self) -> tuple[str, str, int]:
        return ("var", self.name, 0)

    def __repr__(self) -> str:
        return f"Var({self.name!r})"


@dataclass(frozen=True)
class Atom(Term):
    """
    Named constant.

    Attributes:
        name: The atom's name
    """

    name: str

    def shape(self) -> tuple[str, str, int]:
        return ("functor", self.name, 0)

    def __repr__(self) -> str:
        return f"Atom({self.name!r})"


@dataclass(frozen=True)
class Struct(Term):
    """
    Compound term: functor(arg1, arg2, ..., argN).

    Attributes:
        functor: The functor name
        args: Tuple of argument terms (may be empty)
    """

    functor: str
    args: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def arity(self) -> int:
        """Number of arguments."""
        return len(self.args)

    def shape(self) -> tuple[str, str, int]:
        return ("functor", self.functor, len(self.args))

    def __repr__(self) -> str:
        return f"Struct({self.functor!r}, {self.args!r})"


def same_shape(t1: Term, t2: Term) -> bool:
    """
    Check whether two terms agree at the top level.

    True when both are the same variable, or both are atoms/structs with
    the same name and arity. Arguments are not compared.
    """
    return t1.shape() == t2.shape()


def variables(term: Term) -> Iterator[str]:
    """
    Yield the distinct variable names of a term in left-to-right order.

    Bindings are not followed; use Substitution.apply() first for that.
    """
    seen: set[str] = set()
    stack: list[Term] = [term]
    while stack:
        current = stack.pop()
        if isinstance(current, Var):
            if current.name not in seen:
                seen.add(current.name)
                yield current.name
        elif isinstance(current, Struct):
            stack.extend(reversed(current.args))
