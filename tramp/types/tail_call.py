from tramp import SExpression
from tramp.types.environment import Environment


class TailCall:
    """Pending continuation: the answer is whatever `expr` yields in `env`."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
