"""Registry of special forms for the Skeme evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table on the literal head of a list before ordinary
procedure application, so these names cannot be rebound as variables.
"""

from skeme.types.symbol import Symbol
from skeme.evaluation.special_forms.set_form import set_form
from skeme.evaluation.special_forms.begin_form import begin_form
from skeme.evaluation.special_forms.quote_forms import quote_form
from skeme.evaluation.special_forms.lambda_form import lambda_form
from skeme.evaluation.special_forms.define_form import define_form
from skeme.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("set!"): set_form,
    Symbol("begin"): begin_form,
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
}
