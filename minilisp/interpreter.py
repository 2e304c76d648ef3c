from __future__ import annotations

import logging
from pathlib import Path

from minilisp import LispValue
from minilisp.errors import StackExhausted
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import lex, TokenStream
from minilisp.types.environment import Environment
from minilisp.types.void import Void

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reader plus evaluator around one root environment.
    Each instance owns its root frame, so independent interpreters never
    see each other's definitions.
    """
    def __init__(self, prelude: str | None = None, env: Environment | None = None):
        self.env = env if env is not None else Environment()
        if prelude:
            self.eval_all(prelude)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every form in `code` in order and return their values.

        Forms are read lazily: an error in one form stops evaluation there,
        leaving the definitions made by earlier forms in place.
        """
        stream = TokenStream(lex(code))
        results = []
        for expr in stream.parse_all():
            logger.debug("eval %r", expr)
            results.append(self.evaluate(expr))
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form (Void if none)."""
        results = self.eval_all(code)
        return results[-1] if results else Void

    def evaluate(self, expr) -> LispValue:
        """Evaluate one already-read form in the root environment."""
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            raise StackExhausted("Maximum evaluation depth exceeded") from None

    def load(self, path: str | Path) -> list[LispValue]:
        """Evaluate the contents of a source file."""
        path = Path(path)
        logger.info("loading %s", path)
        return self.eval_all(path.read_text(encoding="utf-8"))
