# Core type aliases for minilisp's data model.
# Code (forms) and runtime values share one representation: plain Python
# int, float, bool and list, plus Symbol, Lambda and the Void singleton from
# minilisp.types. There is no separate AST node type.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms.
# - LispValue:  use in evaluator code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms and the operator folder
EvaluatorFn = Callable[..., LispValue]
