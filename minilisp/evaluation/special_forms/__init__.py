"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Every handler takes (tail, env, evaluate_fn).
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.list_form import list_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("list"): list_form,
}
