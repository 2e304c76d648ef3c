from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ExpectedBoolean, ExpectedExpression
from minilisp.types import Void, kind_of
from minilisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if condition then)
    There is no else-branch: a false condition yields Void and anything after
    the then-expression is ignored.
    """
    if not tail:
        raise ExpectedExpression("if requires a condition")

    cond = evaluate_fn(tail[0], env)
    if not isinstance(cond, bool):
        raise ExpectedBoolean(f"if condition must be a Bool, got {kind_of(cond)}")

    if not cond or len(tail) < 2:
        return Void
    return evaluate_fn(tail[1], env)
