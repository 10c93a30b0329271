import pytest

from schemelet.evaluator import apply_closure, apply_primitive, evaluate
from schemelet.parser import parse
from schemelet.primitives import first, global_frame
from schemelet.tokenizer import tokenize
from schemelet.values import (
    NIL,
    VOID,
    Closure,
    EvaluationError,
    Frame,
    Pair,
    Primitive,
    Symbol,
    iter_list,
    make_list,
)


def run(source, frame=None):
    if frame is None:
        frame = global_frame()
    result = VOID
    for expr in iter_list(parse(tokenize(source))):
        result = evaluate(expr, frame)
    return result


@pytest.mark.parametrize("atom", [7, 2.5, "text", True, False])
def test_atoms_evaluate_to_themselves(atom):
    assert evaluate(atom, Frame()) == atom


def test_empty_list_evaluates_to_itself():
    assert evaluate(NIL, Frame()) is NIL


def test_symbol_lookup():
    assert run("(define x 42) x") == 42


def test_unbound_symbol_raises():
    with pytest.raises(EvaluationError):
        run("nothing")


def test_if_true_branch():
    assert run("(if #t 5 7)") == 5


def test_if_false_branch():
    assert run("(if #f 5 7)") == 7


def test_if_requires_boolean():
    with pytest.raises(EvaluationError):
        run("(if 1 5 7)")


def test_if_requires_false_case():
    with pytest.raises(EvaluationError):
        run("(if #t 5)")


def test_let_binds_values():
    assert run("(let ((x 4) (y 9)) y)") == 9


def test_let_returns_last_body():
    assert run("(let ((x 1)) x 3)") == 3


def test_let_inits_use_outer_frame():
    assert run("(define x 5) (let ((x 8) (y x)) y)") == 5


def test_let_with_no_bindings():
    assert run("(let () 6)") == 6


def test_let_does_not_leak_bindings():
    frame = global_frame()
    run("(let ((z 1)) z)", frame)
    with pytest.raises(EvaluationError):
        frame.lookup("z")


@pytest.mark.parametrize(
    "source",
    ["(let ((x 1) (x 2)) x)", "(let (x) x)", "(let ((x 1)))", "(let ((1 2)) 3)"],
)
def test_let_errors(source):
    with pytest.raises(EvaluationError):
        run(source)


def test_letrec_recursion():
    source = (
        "(letrec ((f (lambda (n) (if (= n 0) 0 (+ n (f (- n 1))))))) (f 10))"
    )
    assert run(source) == sum(range(11))


def test_letrec_direct_self_reference_raises():
    with pytest.raises(EvaluationError):
        run("(letrec ((x x)) x)")


def test_quote_returns_datum():
    assert run("(quote (a 1))") == make_list([Symbol("a"), 1])


def test_quote_symbol():
    assert run("(quote a)") == Symbol("a")


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_argument_count(source):
    with pytest.raises(EvaluationError):
        run(source)


def test_define_returns_void_and_binds():
    frame = global_frame()
    assert run("(define x 3)", frame) is VOID
    assert frame.lookup("x") == 3


@pytest.mark.parametrize("source", ["(define x)", "(define x 1 2)", "(define 1 2)"])
def test_define_errors(source):
    with pytest.raises(EvaluationError):
        run(source)


def test_lambda_builds_closure():
    frame = global_frame()
    closure = run("(lambda (a b) b)", frame)
    assert isinstance(closure, Closure)
    assert closure.params == (Symbol("a"), Symbol("b"))
    assert closure.body == Symbol("b")
    assert closure.frame is frame


@pytest.mark.parametrize(
    "source",
    [
        "(lambda)",
        "(lambda (x))",
        "(lambda (x) x x)",
        "(lambda (x x) x)",
        "(lambda (1) 1)",
    ],
)
def test_lambda_errors(source):
    with pytest.raises(EvaluationError):
        run(source)


def test_anonymous_application():
    assert run("((lambda (x y) y) 1 2)") == 2


def test_named_application():
    assert run("(define id (lambda (x) x)) (id 6)") == 6


def test_closure_captures_defining_frame():
    assert run("(define make (lambda (n) (lambda (m) n))) ((make 3) 4)") == 3


def test_arguments_are_evaluated():
    assert run("(define id (lambda (x) x)) (id (car (cons 8 9)))") == 8


def test_wrong_argument_count_raises():
    with pytest.raises(EvaluationError):
        run("((lambda (x) x) 1 2)")


def test_set_changes_binding():
    frame = global_frame()
    assert run("(define x 1) (set! x 5)", frame) is VOID
    assert frame.lookup("x") == 5


def test_set_changes_enclosing_binding():
    assert run("(define x 1) (define f (lambda () (set! x 2))) (f) x") == 2


@pytest.mark.parametrize(
    "source",
    [
        "(set! y 1)",
        "(define x 1) (set! x (quote ()))",
        "(define x 1) (set! x)",
        "(set! 1 2)",
    ],
)
def test_set_errors(source):
    with pytest.raises(EvaluationError):
        run(source)


def test_begin_empty_is_void():
    assert run("(begin)") is VOID


def test_begin_returns_last():
    assert run("(begin 1 2 4)") == 4


def test_primitive_call():
    assert run("(car (cons 1 2))") == 1


def test_list_bound_to_variable():
    assert run("(define xs (quote (1 2))) (car xs)") == 1


def test_non_procedure_head_raises():
    with pytest.raises(EvaluationError):
        run("(1 2)")


def test_calling_non_procedure_raises():
    with pytest.raises(EvaluationError):
        run("(define x 1) (x)")


def test_apply_primitive_evaluates_arguments():
    frame = global_frame()
    args = make_list([make_list([Symbol("quote"), make_list([7, 8])])])
    assert apply_primitive(Primitive("car", first), args, frame) == 7


def test_apply_closure_binds_parameters():
    closure = Closure((Symbol("a"), Symbol("b")), Symbol("a"), Frame())
    assert apply_closure(closure, ["left", "right"]) == "left"


def test_apply_closure_count_mismatch():
    closure = Closure((Symbol("a"),), Symbol("a"), Frame())
    with pytest.raises(EvaluationError):
        apply_closure(closure, [])


def test_cons_result_is_pair():
    result = run("(cons 1 (quote ()))")
    assert result == Pair(1, NIL)