"""Registry of special forms for the kons evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. The set is closed: there is no way to add forms from
Lisp code.
"""

from kons.types.symbol import Symbol
from kons.evaluation.special_forms.quote_form import quote_form
from kons.evaluation.special_forms.set_form import set_form
from kons.evaluation.special_forms.cond_form import cond_form
from kons.evaluation.special_forms.defun_form import defun_form
from kons.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("setf"): set_form,
    Symbol("cond"): cond_form,
    Symbol("defun"): defun_form,
    Symbol("lambda"): lambda_form,
}
