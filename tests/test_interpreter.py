import io
import logging

import pytest

from skeme import config
from skeme.errors import SkemeEvalError, SkemeSyntaxError, SkemeUnboundSymbol
from skeme.interpreter import Interpreter, repl
from skeme.printer import to_string


def test_session_keeps_definitions(interp):
    interp.eval("(define x 10)")
    assert interp.eval("(+ x 5)") == 15


def test_sessions_are_isolated():
    first, second = Interpreter(), Interpreter()
    first.eval("(define only-here 1)")
    with pytest.raises(SkemeUnboundSymbol):
        second.eval("only-here")


def test_eval_raises(interp):
    with pytest.raises(SkemeSyntaxError):
        interp.eval("(+ 1 2")


def test_run_line_reports_errors_and_continues(interp):
    assert interp.run_line("(define x 1)").ok
    bad = interp.run_line("(+ 1 2")
    assert not bad.ok
    assert isinstance(bad.error, SkemeSyntaxError)

    missing = interp.run_line("undefined-thing")
    assert isinstance(missing.error, SkemeUnboundSymbol)

    result = interp.run_line("(+ x 1)")
    assert result.ok
    assert result.value == 2


def test_run_line_wraps_builtin_failures(interp):
    result = interp.run_line("(car (quote ()))")
    assert isinstance(result.error, SkemeEvalError)
    assert "cannot use car on empty list" in str(result.error)


def test_failed_line_logs_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="skeme"):
        interp.run_line("(car 1)")
    assert any("failed" in record.getMessage() for record in caplog.records)


def test_repl_prints_values_and_errors():
    stdin = io.StringIO(
        "(define sq (lambda (n) (* n n)))\n"
        "(sq 5)\n"
        "\n"
        "(+ 1 2.5)\n"
        "(car (quote ()))\n"
        "(quote (1 #t x))\n"
        "nope\n"
        "(> 3 2)\n"
    )
    stdout = io.StringIO()
    repl(stdin, stdout, prompt="")
    lines = stdout.getvalue().splitlines()
    assert lines[0] == "()"
    assert lines[1] == "25"
    assert lines[2] == "3.5"
    assert lines[3].startswith("error: ")
    assert "empty list" in lines[3]
    assert lines[4] == "(1 #t x)"
    assert lines[5].startswith("error: ")
    assert lines[6] == "#t"


def test_repl_uses_configured_prompt(monkeypatch):
    monkeypatch.setenv("SKEME_PROMPT", "skeme> ")
    stdout = io.StringIO()
    repl(io.StringIO("(+ 1 1)\n"), stdout)
    assert stdout.getvalue().startswith("skeme> 2\n")


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("SKEME_PROMPT", raising=False)
    monkeypatch.delenv("SKEME_RECURSION_LIMIT", raising=False)
    monkeypatch.delenv("SKEME_LOG_LEVEL", raising=False)
    assert config.get_prompt() == "-> "
    assert config.get_recursion_limit() is None
    assert config.get_log_level() == logging.WARNING


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("SKEME_RECURSION_LIMIT", "5000")
    monkeypatch.setenv("SKEME_LOG_LEVEL", "debug")
    assert config.get_recursion_limit() == 5000
    assert config.get_log_level() == logging.DEBUG


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_config_rejects_bad_recursion_limit(monkeypatch, raw):
    monkeypatch.setenv("SKEME_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError):
        config.get_recursion_limit()


DEEP = 3000


def test_run_line_reads_deeply_nested_input(interp):
    result = interp.run_line("(quote " + "(" * DEEP + ")" * DEEP + ")")
    assert result.ok
    depth, value = 0, result.value
    while value:
        value = value[0]
        depth += 1
    assert depth == DEEP - 1


def test_run_line_prints_deeply_nested_value(interp):
    interp.eval("(define x (quote ()))")
    for _ in range(1200):
        interp.eval("(set! x (cons x (quote ())))")
    assert interp.run_line("x").ok
    assert to_string(interp.eval("x")) == "(" * 1201 + ")" * 1201


def test_repl_survives_deeply_nested_line():
    line = "(quote " + "(" * DEEP + ")" * DEEP + ")\n"
    stdout = io.StringIO()
    repl(io.StringIO(line + "(+ 1 1)\n"), stdout, prompt="")
    lines = stdout.getvalue().splitlines()
    assert lines[0] == "(" * DEEP + ")" * DEEP
    assert lines[1] == "2"


def test_repl_survives_deep_evaluation():
    line = "(" * DEEP + "+ 1 1" + ")" * DEEP + "\n"
    stdout = io.StringIO()
    repl(io.StringIO(line + "(+ 2 2)\n"), stdout, prompt="")
    lines = stdout.getvalue().splitlines()
    assert lines[0].startswith("error: ")
    assert lines[1] == "4"
