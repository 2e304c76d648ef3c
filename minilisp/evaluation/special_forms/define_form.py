import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ExpectedSymbol, ExpectedExpression
from minilisp.types import Void
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the frame passed to this evaluation, never in an ancestor.
    """
    if not tail or not isinstance(tail[0], Symbol):
        raise ExpectedSymbol("define requires a symbol to bind")
    if len(tail) < 2:
        raise ExpectedExpression(f"define of {tail[0]} requires a value expression")

    name, val_expr = tail[0], tail[1]
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("define %s = %r", name, value)
    return Void
