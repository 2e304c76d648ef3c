import pytest

from minilisp.reader.parser import lex, TokenStream
from minilisp.types.environment import Environment
from minilisp.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh, empty root environment."""
    return Environment()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`, returning the last value."""
    def _run(source):
        result = None
        for expr in TokenStream(lex(source)).parse_all():
            result = evaluate(expr, env)
        return result
    return _run
