from tramp import EvaluatorFn
from tramp import SExpression, LispValue
from tramp.types.environment import Environment
from tramp.types.errors import InvalidSymbol, MalformedForm
from tramp.types.pair import to_list
from tramp.types.symbol import Symbol


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value expression is not in tail position: it is fully evaluated before
    the binding is made, and define itself yields no value.
    """
    args = to_list(tail, "define form")
    if len(args) != 2:
        raise MalformedForm("define requires exactly 2 arguments")

    name, val_expr = args
    if not isinstance(name, Symbol):
        raise InvalidSymbol(f"Cannot define {name!r} as a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return None
