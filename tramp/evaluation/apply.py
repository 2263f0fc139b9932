"""Application engine for tramp.

Closures are not run here: applying one binds a fresh frame under the
closure's captured environment and hands the body back as a TailCall, which
the trampoline in the evaluator consumes. Primitives run to completion.
"""

from tramp import LispValue
from tramp.types.environment import Environment
from tramp.types.errors import ArityMismatch, NotAProcedure
from tramp.types.procedure import Closure, Primitive
from tramp.types.tail_call import TailCall


def apply_closure(fn: Closure, args: list[LispValue]) -> TailCall:
    """Bind `args` to the closure's parameters; the body is the continuation."""
    if len(args) != len(fn.params):
        raise ArityMismatch(repr(fn), len(fn.params), len(args))
    return TailCall(fn.body, fn.bind(args))


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
) -> LispValue | TailCall:
    """Apply either a Closure or a Primitive to evaluated arguments.

    - For Closure, return a TailCall for the body in a new frame.
    - For Primitive, check the arity and invoke it with the caller env and args.
    - Otherwise, raise NotAProcedure.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args)
    elif isinstance(head, Primitive):
        if len(args) != head.arity:
            raise ArityMismatch(head.name, head.arity, len(args))
        return head.fn(env, args)
    else:
        raise NotAProcedure(head)
