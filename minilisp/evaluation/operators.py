"""Binary-operator folder.

Arithmetic and comparison operators are not bindings in the environment;
the evaluator routes them here by name. Each operator is a pairwise rule
applied as a left fold over its evaluated operands:

    (+ 2 3 4)  ->  (2 + 3) + 4

The first operand seeds the accumulator unchanged, so `(+)` is Void and
`(+ x)` is just the value of x, whatever its kind.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

from minilisp import EvaluatorFn, SExpression, LispValue
from minilisp.errors import IncompatibleType
from minilisp.types import Void, kind_of
from minilisp.types.environment import Environment
from minilisp.types.numeric import wrap_int64, int_div, float_div
from minilisp.types.symbol import Symbol


@dataclass(frozen=True)
class BinaryOperator:
    """Pairwise rule plus the single kind both sides must have."""

    name: str
    kind: str
    combine: Callable[[LispValue, LispValue], LispValue]

    def __call__(self, acc: LispValue, value: LispValue) -> LispValue:
        for side in (acc, value):
            got = kind_of(side)
            if got != self.kind:
                raise IncompatibleType(self.kind, got, self.name)
        return self.combine(acc, value)


def _integer(fn: Callable[[int, int], int]) -> Callable[[int, int], int]:
    return lambda a, b: wrap_int64(fn(a, b))


_RULES = [
    BinaryOperator("+", "Integer", _integer(operator.add)),
    BinaryOperator("-", "Integer", _integer(operator.sub)),
    BinaryOperator("*", "Integer", _integer(operator.mul)),
    BinaryOperator("/", "Integer", int_div),
    BinaryOperator("+.", "Float", operator.add),
    BinaryOperator("-.", "Float", operator.sub),
    BinaryOperator("*.", "Float", operator.mul),
    BinaryOperator("/.", "Float", float_div),
    # Comparisons fold over booleans, not numbers
    BinaryOperator("=", "Bool", operator.eq),
    BinaryOperator(">=", "Bool", operator.ge),
    BinaryOperator("<=", "Bool", operator.le),
    BinaryOperator("<", "Bool", operator.lt),
    BinaryOperator(">", "Bool", operator.gt),
]

OPERATORS: dict[Symbol, BinaryOperator] = {Symbol(rule.name): rule for rule in _RULES}


def fold(
    op: Symbol,
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `operands` left to right and reduce them with `op`."""
    rule = OPERATORS[op]
    acc = None
    for expr in operands:
        value = evaluate_fn(expr, env)
        acc = value if acc is None else rule(acc, value)
    return Void if acc is None else acc
