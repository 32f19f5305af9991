"""
Tests for the pyunify console shell.
"""

import logging
from io import StringIO

import pytest
from pyunify.parser import ParseError
from pyunify.repl import run_session, main


class TestRunSession:
    """Tests for the run_session function."""

    def test_success_report(self):
        out = StringIO()
        assert run_session("f(X, a)", "f(b, Y)", out)
        assert out.getvalue() == (
            "Unifying...\n"
            "Term 1: f(X, a)\n"
            "Term 2: f(b, Y)\n"
            "Result: X = b, Y = a\n"
            "yes\n"
        )

    def test_failure_report(self):
        out = StringIO()
        assert not run_session("f(a)", "g(a)", out)
        assert out.getvalue().endswith("Result: no\n")
        assert "yes" not in out.getvalue()

    def test_occurs_check_report(self):
        out = StringIO()
        assert not run_session("X", "f(X)", out)
        assert "Result: no" in out.getvalue()

    def test_no_bindings(self):
        out = StringIO()
        assert run_session("a", "a", out)
        assert "Result: no bindings\n" in out.getvalue()

    def test_separator(self):
        out = StringIO()
        run_session("f(X, Y)", "f(a, b)", out, separator="; ")
        assert "Result: X = a; Y = b\n" in out.getvalue()

    def test_parse_error(self):
        with pytest.raises(ParseError):
            run_session("f(", "a", StringIO())

    def test_default_stdout(self, capsys):
        run_session("X", "a")
        captured = capsys.readouterr()
        assert "Result: X = a" in captured.out


class TestMain:
    """Tests for the command-line entry point."""

    def test_terms_as_arguments(self, capsys):
        assert main(["f(X, a)", "f(b, Y)"]) == 0
        captured = capsys.readouterr()
        assert "Result: X = b, Y = a" in captured.out
        assert "yes" in captured.out

    def test_failure_exit_status(self, capsys):
        assert main(["a", "b"]) == 1
        captured = capsys.readouterr()
        assert "Result: no" in captured.out

    def test_syntax_error(self, capsys):
        assert main(["f(a", "b"]) == 2
        captured = capsys.readouterr()
        assert "Syntax error" in captured.err

    def test_wrong_number_of_terms(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["a"])
        assert exc_info.value.code == 2

    def test_interactive(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", StringIO("f(X)\nf(a)\n"))
        assert main([]) == 0
        captured = capsys.readouterr()
        assert "Enter your terms:" in captured.out
        assert "Term 1, press enter when done: " in captured.out
        assert "Result: X = a" in captured.out

    def test_interactive_eof(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", StringIO(""))
        assert main([]) == 1

    def test_verbose_logs_bindings(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pyunify.unify"):
            assert main(["-v", "X", "a"]) == 0
        assert "bind X = a" in caplog.text
