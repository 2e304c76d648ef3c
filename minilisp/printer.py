"""Render minilisp values back to source text."""

from __future__ import annotations

import math

from minilisp import LispValue
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol
from minilisp.types.void import Void


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(value)


def to_lisp_string(value: LispValue) -> str:
    """Return the source-like text for `value`.

    Lists, lambdas and atoms print so that the reader reads them back
    (lambdas print as the lambda form that builds them); Void prints as
    #<void>, which has no literal syntax.
    """
    if value is Void:
        return "#<void>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, (list, tuple)):
        return "(" + " ".join(to_lisp_string(v) for v in value) + ")"
    if isinstance(value, Lambda):
        return str(value)
    return repr(value)
