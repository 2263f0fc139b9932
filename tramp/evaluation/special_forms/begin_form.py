from tramp import EvaluatorFn
from tramp import SExpression, LispValue
from tramp.types.environment import Environment
from tramp.types.pair import to_list
from tramp.types.tail_call import TailCall


def begin_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    body = to_list(tail, "begin form")
    if not body:
        return None
    for e in body[:-1]:
        evaluate_fn(e, env)
    return TailCall(body[-1], env)
