"""Registry of special forms for the halftau evaluator.

Special forms are the built-ins that receive their operands unevaluated and
decide themselves what to evaluate.
"""

from halftau.types.builtin import Builtin
from halftau.evaluation.special_forms.define_form import define_form
from halftau.evaluation.special_forms.lambda_form import lambda_form, macro_form
from halftau.evaluation.special_forms.quote_forms import quote_form
from halftau.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Builtin.DEF: define_form,
    Builtin.FN: lambda_form,
    Builtin.MACRO: macro_form,
    Builtin.QUOTE: quote_form,
    Builtin.IF: if_form,
}
