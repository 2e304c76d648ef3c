"""Application engine for minilisp.

Arguments reach the callee exactly as written at the call site: each
parameter is bound to its raw argument expression, never to a computed
value. The call frame's parent is the caller's environment, not the
environment the lambda was built in.
"""

from __future__ import annotations

import logging

from minilisp import EvaluatorFn, SExpression, LispValue
from minilisp.errors import ArityMismatch
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def bind_arguments(fn: Lambda, args: list[SExpression], caller_env: Environment) -> Environment:
    """Create the call frame for `fn`, binding formals to `args` one to one."""
    expected, got = fn.arity, len(args)
    if got < expected:
        raise ArityMismatch(expected, got, missing=fn.formals[got])
    if got > expected:
        raise ArityMismatch(expected, got)

    frame = Environment(outer=caller_env)
    for formal, arg in zip(fn.formals, args):
        frame.define(formal, arg)
    return frame


def apply_lambda(
    fn: Lambda,
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda to unevaluated argument expressions.

    Parameters:
    - fn: The Lambda being applied.
    - args: The argument expressions from the call site, not evaluated.
    - env: The caller's environment; it becomes the parent of the call frame.
    - evaluate_fn: Evaluator used for the body.
    """
    frame = bind_arguments(fn, args, env)
    logger.debug("apply %s to %r", fn, args)
    return evaluate_fn(list(fn.body), frame)
