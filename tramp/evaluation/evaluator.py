"""Core evaluator and trampoline for the tramp interpreter.

`evaluate0` performs one step: it either produces a final value or returns a
TailCall naming the expression and environment to continue with. `evaluate`
loops over those TailCalls, so tail calls (if branches, the last expression
of begin, closure bodies) never deepen the Python stack. Every non-tail
sub-evaluation (if tests, operators, operands, define values, leading begin
expressions) goes through `evaluate` and is fully resolved on the spot.
"""

from __future__ import annotations

from tramp import SExpression, LispValue
from tramp.types.environment import Environment
from tramp.types.pair import Pair
from tramp.types.symbol import Symbol
from tramp.types.tail_call import TailCall
from tramp.evaluation.apply import apply
from tramp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: never returns a TailCall.
    """
    result = evaluate0(expr, env)
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, result.env)
    return result


def evaluate0(expr: SExpression, env: Environment) -> LispValue | TailCall:
    """
    Core evaluator: single-step evaluation.
    Returns either a value or a TailCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(head, operands):
            # --- Special forms handling ---
            if isinstance(head, Symbol):
                form = SPECIAL_FORMS.get(head)
                if form is not None:
                    return form(operands, env, evaluate)

            # --- Procedure application ---
            proc = evaluate(head, env)
            args = []
            while isinstance(operands, Pair):
                args.append(evaluate(operands.car, env))
                operands = operands.cdr
            return apply(proc, args, env)

    # --- Atoms return as-is ---
    return expr
