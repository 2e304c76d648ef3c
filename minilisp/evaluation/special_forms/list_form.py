from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types import Void
from minilisp.types.environment import Environment


def list_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(list a b ...): evaluate each item in order, keeping every non-Void result."""
    results = []
    for expr in tail:
        value = evaluate_fn(expr, env)
        if value is not Void:
            results.append(value)
    return results
