import io
import logging
import os

import pytest

from tramp.__main__ import main
from tramp.interpreter import Interpreter
from tramp.printer import to_string
from tramp.repl import run_repl
from tramp.types import errors
from tramp.types.symbol import Symbol


# -------------------------------
# Interpreter
# -------------------------------
def test_eval_single_expression(interp):
    assert interp.eval("(+ 1 2)") == 3.0
    assert interp.eval("(if #f 1 2)") == 2.0
    assert interp.eval("(if 0 1 2)") == 1.0


def test_definitions_persist_across_calls(interp):
    assert interp.eval("(define x 5)") is None
    assert interp.eval("x") == 5.0


def test_eval_rejects_multiple_expressions(interp):
    with pytest.raises(errors.TrailingInput):
        interp.eval("(define x 5) x")


def test_eval_source_runs_all_expressions(interp):
    result = interp.eval_source("""
        (define square (lambda (x) (* x x)))
        (define y 4)
        (square y)
    """)
    assert result == 16.0
    assert interp.eval_source("") is None


def test_prelude_is_evaluated():
    interp = Interpreter(prelude="(define one 1) (define two (+ one one))")
    assert interp.eval("two") == 2.0


def test_read_returns_unevaluated_form(interp):
    assert to_string(interp.read("(a b)")) == "(a b)"


def test_load_file(interp, tmp_path):
    src = tmp_path / "lib.scm"
    src.write_text("(define twice (lambda (f x) (f (f x))))\n(define inc (lambda (n) (+ n 1)))\n")
    interp.load(src)
    assert interp.eval("(twice inc 5)") == 7.0


def test_prelude_files_from_environment(monkeypatch, tmp_path):
    first = tmp_path / "a.scm"
    first.write_text("(define base 10)")
    second = tmp_path / "b.scm"
    second.write_text("(define derived (* base 2))")
    monkeypatch.setenv("TRAMP_PRELUDE_PATH", f"{first}{os.pathsep}{second}")
    interp = Interpreter()
    assert interp.eval("derived") == 20.0


def test_deeply_nested_source_is_reported(interp):
    with pytest.raises(errors.RecursionDepthExceeded):
        interp.eval("(" * 100000 + ")" * 100000)


def test_errors_do_not_corrupt_environment(interp):
    interp.eval("(define x 1)")
    with pytest.raises(errors.UndefinedVariable):
        interp.eval("(define x (undefined))")
    assert interp.eval("x") == 1.0


# -------------------------------
# Read loop
# -------------------------------
def _session(interp, text, prompt="> "):
    out = io.StringIO()
    run_repl(interp, io.StringIO(text), out, prompt=prompt)
    return out.getvalue()


def test_repl_prints_results(interp):
    out = _session(interp, "(+ 1 2)\n'(1 2 3)\n#t\n")
    assert out == "> 3\n> (1 2 3)\n> #t\n> \n"


def test_repl_skips_unspecified_and_blank_lines(interp):
    out = _session(interp, "(define x 5)\n\n   \nx\n")
    assert out == "> > > > 5\n> \n"


def test_repl_reports_errors_and_continues(interp):
    out = _session(interp, "(oops)\n(+ 1\n)\n(1 2)\n(+ 2 2)\n")
    lines = out.split("> ")
    assert "error: Undefined variable: oops" in lines[1]
    assert "error: Unmatched parenthesis" in lines[2]
    assert "error: Unexpected closing parenthesis" in lines[3]
    assert "error: Not a procedure: 1" in lines[4]
    assert lines[5] == "4\n"


def test_repl_prints_deeply_nested_results(interp):
    depth = 100000
    out = _session(
        interp,
        "(define build (lambda (n acc) (if (= n 0) acc (build (- n 1) (cons acc '())))))\n"
        f"(build {depth} '())\n"
        "(+ 1 2)\n",
    )
    lines = out.split("> ")
    assert lines[2] == "(" * (depth + 1) + ")" * (depth + 1) + "\n"
    assert lines[3] == "3\n"


def test_repl_stops_at_end_of_stream(interp):
    assert _session(interp, "") == "> \n"


def test_repl_uses_configured_prompt(interp, monkeypatch):
    monkeypatch.setenv("TRAMP_PROMPT", "tramp$ ")
    out = io.StringIO()
    run_repl(interp, io.StringIO("1\n"), out)
    assert out.getvalue() == "tramp$ 1\ntramp$ \n"


def test_repl_logs_errors_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="tramp.repl"):
        _session(interp, "nope\n")
    assert any("error evaluating" in r.getMessage() for r in caplog.records)


# -------------------------------
# Command line
# -------------------------------
def test_main_eval_expression(capsys):
    assert main(["-e", "(* 6 7)"]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_loads_files_then_evaluates(tmp_path, capsys):
    src = tmp_path / "prog.scm"
    src.write_text("(define loop (lambda (n acc) (if (= n 0) acc (loop (- n 1) (+ acc 2)))))")
    assert main([str(src), "-e", "(loop 1000 0)"]) == 0
    assert capsys.readouterr().out == "2000\n"


def test_main_reports_errors(tmp_path, capsys):
    src = tmp_path / "bad.scm"
    src.write_text("(define x 1) (x)")
    assert main([str(src)]) == 1
    assert "error: Not a procedure: 1" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.scm")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_main_reports_undecodable_file(tmp_path, capsys):
    src = tmp_path / "latin1.scm"
    src.write_bytes(b"(+ 1 \xff)")
    assert main([str(src)]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_main_interactive_after_files(tmp_path, monkeypatch, capsys):
    src = tmp_path / "defs.scm"
    src.write_text("(define answer 42)")
    monkeypatch.setattr("sys.stdin", io.StringIO("answer\n"))
    monkeypatch.setenv("TRAMP_PROMPT", "")
    assert main([str(src), "-i"]) == 0
    assert capsys.readouterr().out == "42\n\n"


def test_symbols_read_back_through_interpreter(interp):
    assert interp.eval("'hello") == Symbol("hello")
