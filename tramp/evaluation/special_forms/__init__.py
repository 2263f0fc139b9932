"""Registry of special forms for the tramp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application.

Handlers are called as `handler(operands, env, evaluate_fn)` where `operands` is
the Pair chain after the operator and `evaluate_fn` fully evaluates a
sub-expression. A handler returns either a final value or a TailCall for the
sub-expression in tail position.
"""

from tramp.types.symbol import Symbol
from tramp.evaluation.special_forms.quote_form import quote_form
from tramp.evaluation.special_forms.if_form import if_form
from tramp.evaluation.special_forms.lambda_form import lambda_form
from tramp.evaluation.special_forms.define_form import define_form
from tramp.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("begin"): begin_form,
}
