from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ExpectedParameterList, ExpectedBody
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) (body)): the body is exactly one list expression.
    # The defining environment is not stored in the Lambda.
    if not tail or not isinstance(tail[0], list) or not all(isinstance(p, Symbol) for p in tail[0]):
        raise ExpectedParameterList("lambda requires a list of symbols as parameters")
    if len(tail) < 2 or not isinstance(tail[1], list):
        raise ExpectedBody("lambda requires a list expression as its body")

    return Lambda(tail[0], tail[1])
