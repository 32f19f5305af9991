"""
Tests for the substitution store.
"""

import pytest
from pyunify import Substitution, Var, Atom, Struct, resolve, bind


class TestBinding:
    """Adding and looking up bindings."""

    def test_empty(self):
        s = Substitution()
        assert len(s) == 0
        assert not s
        assert not s.is_bound("X")
        assert s.lookup("X") is None

    def test_bind(self):
        s = Substitution()
        s.bind("X", Atom("a"))
        assert s.is_bound("X")
        assert "X" in s
        assert s["X"] == Atom("a")
        assert s.lookup("X") == Atom("a")

    def test_rebind_raises(self):
        s = Substitution()
        s.bind("X", Atom("a"))
        with pytest.raises(ValueError):
            s.bind("X", Atom("b"))
        assert s["X"] == Atom("a")

    def test_initial_bindings(self):
        s = Substitution({"X": Atom("a"), "Y": Var("X")})
        assert len(s) == 2

    def test_iteration_sorted(self):
        s = Substitution()
        s.bind("Z", Atom("c"))
        s.bind("A", Atom("a"))
        s.bind("M", Atom("b"))
        assert list(s) == ["A", "M", "Z"]
        assert [name for name, _ in s.items()] == ["A", "M", "Z"]

    def test_module_bind(self):
        s = Substitution()
        bind("X", Atom("a"), s)
        assert s["X"] == Atom("a")

    def test_equality(self):
        assert Substitution({"X": Atom("a")}) == Substitution({"X": Atom("a")})
        assert Substitution({"X": Atom("a")}) != Substitution({"X": Atom("b")})

    def test_independent_stores(self):
        s1 = Substitution()
        s2 = Substitution()
        s1.bind("X", Atom("a"))
        assert not s2.is_bound("X")


class TestResolve:
    """Lazy dereferencing."""

    def test_unbound_variable(self):
        s = Substitution()
        assert s.resolve(Var("X")) == Var("X")

    def test_atom_returned_as_is(self):
        s = Substitution({"X": Atom("b")})
        assert s.resolve(Atom("a")) == Atom("a")

    def test_direct_binding(self):
        s = Substitution({"X": Atom("a")})
        assert s.resolve(Var("X")) == Atom("a")

    def test_transitive_binding(self):
        s = Substitution({"X": Var("Y"), "Y": Atom("a")})
        assert s.resolve(Var("X")) == Atom("a")

    def test_chain_to_unbound_variable(self):
        s = Substitution({"X": Var("Y"), "Y": Var("Z")})
        assert s.resolve(Var("X")) == Var("Z")

    def test_struct_arguments_not_resolved(self):
        s = Substitution({"X": Struct("f", (Var("Y"),)), "Y": Atom("a")})
        assert s.resolve(Var("X")) == Struct("f", (Var("Y"),))

    def test_module_resolve(self):
        s = Substitution({"X": Atom("a")})
        assert resolve(Var("X"), s) == Atom("a")


class TestApply:
    """Full resolution."""

    def test_apply_resolves_arguments(self):
        s = Substitution({"X": Struct("f", (Var("Y"),)), "Y": Atom("a")})
        assert s.apply(Var("X")) == Struct("f", (Atom("a"),))

    def test_apply_nested(self):
        s = Substitution({"Y": Var("Z"), "Z": Struct("g", (Atom("b"),))})
        t = Struct("f", (Var("X"), Struct("h", (Var("Y"),))))
        assert s.apply(t) == Struct("f", (
            Var("X"), Struct("h", (Struct("g", (Atom("b"),)),))
        ))

    def test_apply_does_not_modify_term(self):
        s = Substitution({"X": Atom("a")})
        t = Struct("f", (Var("X"),))
        s.apply(t)
        assert t == Struct("f", (Var("X"),))

    def test_apply_rejects_non_terms(self):
        with pytest.raises(TypeError):
            Substitution().apply("X")

    def test_apply_deeply_nested(self):
        t = Var("X")
        for _ in range(5000):
            t = Struct("f", (t,))
        s = Substitution({"X": Atom("a")})
        result = s.apply(t)
        for _ in range(5000):
            assert result.functor == "f"
            result = result.args[0]
        assert result == Atom("a")
