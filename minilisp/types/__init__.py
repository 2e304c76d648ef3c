"""Runtime value types for minilisp."""

from minilisp.types.symbol import Symbol
from minilisp.types.void import Void, VoidType
from minilisp.types.lambda_fn import Lambda
from minilisp.types.environment import Environment


def kind_of(value) -> str:
    """Name of the value kind, as reported in type errors."""
    # bool is a subclass of int, so it is checked first
    if isinstance(value, bool):
        return "Bool"
    if isinstance(value, int):
        return "Integer"
    if isinstance(value, float):
        return "Float"
    if isinstance(value, Symbol):
        return "Symbol"
    if isinstance(value, list):
        return "List"
    if isinstance(value, Lambda):
        return "Lambda"
    if value is Void:
        return "Void"
    return type(value).__name__


__all__ = ["Symbol", "Void", "VoidType", "Lambda", "Environment", "kind_of"]
