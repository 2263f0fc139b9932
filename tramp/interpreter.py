from __future__ import annotations
import logging
from pathlib import Path

from tramp import SExpression, LispValue
from tramp.builtins import global_environment
from tramp.config import get_prelude_files
from tramp.evaluation.evaluator import evaluate
from tramp.reader.parser import read_one, read_all
from tramp.types.environment import Environment
from tramp.types.errors import RecursionDepthExceeded

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating tramp code.
    Owns the global Environment, which persists across calls: definitions made
    by one call (including those made before a later failure) stay visible.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = global_environment()
        for path in get_prelude_files():
            logger.debug("loading prelude file %s", path)
            self.load(path)
        if prelude:
            self.eval_source(prelude)

    def read(self, code: str) -> SExpression:
        """Read exactly one expression."""
        return read_one(code)

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate a parsed expression in the global environment."""
        try:
            return evaluate(expr, self.env)
        except RecursionError as ex:
            raise RecursionDepthExceeded(
                "Maximum recursion depth exceeded (non-tail recursion is too deep)"
            ) from ex

    def eval(self, code: str) -> LispValue:
        """Read and evaluate a source string holding exactly one expression."""
        try:
            expr = self.read(code)
        except RecursionError as ex:
            raise RecursionDepthExceeded("Expression is nested too deeply to read") from ex
        logger.debug("parsed %r", expr)
        return self.evaluate(expr)

    def eval_source(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order; return the last value."""
        result: LispValue = None
        exprs = read_all(code)
        while True:
            try:
                expr = next(exprs)
            except StopIteration:
                break
            except RecursionError as ex:
                raise RecursionDepthExceeded("Expression is nested too deeply to read") from ex
            result = self.evaluate(expr)
        return result

    def load(self, path: str | Path) -> LispValue:
        """Evaluate the source file at `path`."""
        return self.eval_source(Path(path).read_text(encoding="utf-8"))
