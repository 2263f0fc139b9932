from tramp import SExpression, LispValue, EvaluatorFn
from tramp.types.environment import Environment
from tramp.types.errors import MalformedForm
from tramp.types.pair import to_list


def quote_form(
    tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    args = to_list(tail, "quote form")
    if len(args) != 1:
        raise MalformedForm("quote expects exactly 1 argument")
    return args[0]
