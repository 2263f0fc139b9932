from tramp import EvaluatorFn
from tramp import SExpression, LispValue
from tramp.types.environment import Environment
from tramp.types.errors import MalformedForm
from tramp.types.pair import to_list
from tramp.types.tail_call import TailCall


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    args = to_list(tail, "if form")
    if len(args) not in (2, 3):
        raise MalformedForm("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(args[0], env)
    # Only #f is false; () and 0 are true
    if cond is not False:
        return TailCall(args[1], env)
    elif len(args) == 3:
        return TailCall(args[2], env)
    else:
        return None
