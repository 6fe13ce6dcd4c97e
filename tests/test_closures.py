import pytest

from skeme import errors
from skeme.evaluation.evaluator import evaluate
from skeme.reader.parser import parse


def run(source, env):
    return evaluate(parse(source), env)


def test_immediate_application(env):
    assert run("((lambda (n) (* n n)) 5)", env) == 25


def test_named_closure(env):
    run("(define add (lambda (a b) (+ a b)))", env)
    assert run("(add 2 3)", env) == 5
    assert run("(add 2.5 3)", env) == 5.5


def test_zero_argument_closure(env):
    run("(define five (lambda () 5))", env)
    assert run("(five)", env) == 5


def test_closure_arity_is_exact(env):
    run("(define add (lambda (a b) (+ a b)))", env)
    with pytest.raises(errors.SkemeArityError):
        run("(add 1)", env)
    with pytest.raises(errors.SkemeArityError):
        run("(add 1 2 3)", env)


@pytest.mark.parametrize(
    "source, error",
    [
        ("(lambda (x 1) x)", errors.SkemeTypeError),
        ("(lambda x x)", errors.SkemeTypeError),
        ("(lambda (x))", errors.SkemeArityError),
        ("(lambda (x) x x)", errors.SkemeArityError),
    ]
)
def test_lambda_form_errors(env, source, error):
    with pytest.raises(error):
        run(source, env)


def test_closure_does_not_see_later_set(env):
    run("(define x 1)", env)
    run("(define get-x (lambda () x))", env)
    run("(set! x 2)", env)
    assert run("x", env) == 2
    assert run("(get-x)", env) == 1


def test_closure_does_not_see_later_define(env):
    run("(define f (lambda () later))", env)
    run("(define later 1)", env)
    with pytest.raises(errors.SkemeUnboundSymbol):
        run("(f)", env)


def test_closure_cannot_name_itself_through_define(env):
    # The binding for `fact` does not exist yet when the lambda captures its copy
    run("(define fact (lambda (n) (if (= n 0) 1 (* n (fact (- n 1))))))", env)
    with pytest.raises(errors.SkemeUnboundSymbol):
        run("(fact 3)", env)


def test_set_inside_closure_stays_private(env):
    run("(define counter 0)", env)
    run("(define bump (lambda () (begin (set! counter (+ counter 1)) counter)))", env)
    assert run("(bump)", env) == 1
    assert run("counter", env) == 0


def test_closures_do_not_keep_call_state(env):
    run("(define remember (lambda (v) (begin (define seen v) seen)))", env)
    assert run("(remember 1)", env) == 1
    assert run("(remember 2)", env) == 2
    with pytest.raises(errors.SkemeUnboundSymbol):
        run("seen", env)


def test_self_application_recursion(env):
    source = (
        "((lambda (f n) (f f n))"
        " (lambda (self n) (if (= n 0) 1 (* n (self self (- n 1)))))"
        " 5)"
    )
    assert run(source, env) == 120


def test_recursive_call_does_not_clobber_caller_bindings(env):
    # n is read after the inner call returns
    source = (
        "((lambda (f n) (f f n))"
        " (lambda (self n) (if (= n 0) 0 (+ (self self (- n 1)) n)))"
        " 4)"
    )
    assert run(source, env) == 10


def test_higher_order_closures(env):
    run("(define make-adder (lambda (k) (lambda (x) (+ x k))))", env)
    run("(define add3 (make-adder 3))", env)
    run("(define add10 (make-adder 10))", env)
    assert run("(add3 1)", env) == 4
    assert run("(add10 1)", env) == 11


def test_closure_over_list_data(env):
    run("(define second (lambda (xs) (car (cdr xs))))", env)
    assert run("(second (quote (7 8 9)))", env) == 8
