"""Core evaluator for the minilisp interpreter.

`evaluate` dispatches on the shape of the expression: atoms evaluate to
themselves, symbols are resolved, and lists are routed to the operator
folder, a special form, or function application.

Evaluation recurses directly; there is no trampoline, so deep recursion in
Lisp code surfaces as Python's RecursionError.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.errors import (
    EmptyExpression,
    ExpectedSymbolOrApplicable,
    NotApplicable,
)
from minilisp.types import Void, kind_of
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol
from minilisp.evaluation.apply import apply_lambda
from minilisp.evaluation.operators import OPERATORS, fold
from minilisp.evaluation.special_forms import SPECIAL_FORMS

LAMBDA = Symbol("lambda")


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case bool() | int() | float():
            return expr
        case Lambda():
            # Lambda values are not self-evaluating
            return Void
        case Symbol():
            # Whatever is bound is handed back as-is, even an unevaluated form
            return env.resolve(expr)
        case []:
            raise EmptyExpression("Cannot evaluate the empty list")
        case [head, *rest]:
            return evaluate_list(head, rest, env)

    # --- Void and anything else return as-is ---
    return expr


def evaluate_list(head: SExpression, rest: list[SExpression], env: Environment) -> LispValue:
    """Dispatch a non-empty list form on its head."""
    if not isinstance(head, Symbol):
        value = evaluate(head, env)
        if isinstance(value, Lambda):
            # Immediate application, e.g. ((lambda (x) (+ x 1)) 5)
            frame = Environment(outer=env)
            frame.define(LAMBDA, value)
            return apply_lambda(value, rest, frame, evaluate)
        if isinstance(value, bool):
            return value
        raise ExpectedSymbolOrApplicable(
            f"Cannot apply a list whose head evaluates to {kind_of(value)}"
        )

    # --- Operators and special forms, by name ---
    if head in OPERATORS:
        return fold(head, rest, env, evaluate)
    if head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](rest, env, evaluate)

    # --- Named function application ---
    fn = env.resolve(head)
    if not isinstance(fn, Lambda):
        raise NotApplicable(f"{head} is bound to {kind_of(fn)}, not a lambda")
    return apply_lambda(fn, rest, env, evaluate)
