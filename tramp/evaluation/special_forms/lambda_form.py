from tramp import EvaluatorFn
from tramp import SExpression, LispValue
from tramp.types.environment import Environment
from tramp.types.errors import MalformedForm
from tramp.types.pair import Pair, to_list
from tramp.types.procedure import Closure
from tramp.types.symbol import Symbol

BEGIN = Symbol("begin")


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) takes one or more body forms.
    # Several body forms become an implicit begin, so a closure always holds
    # exactly one body expression.
    args = to_list(tail, "lambda form")
    if len(args) < 2:
        raise MalformedForm("lambda requires a parameter list and a body")

    params = to_list(args[0], "parameter list")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalformedForm(f"lambda parameter must be a symbol, got {p!r}")
    if len(set(params)) != len(params):
        raise MalformedForm("lambda parameters must be distinct")

    if len(args) == 2:
        body = args[1]
    else:
        body = Pair(BEGIN, tail.cdr)

    return Closure(params, body, env)
