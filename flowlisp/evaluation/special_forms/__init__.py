"""Registry of special forms for the flow evaluator.

Maps head names to handlers that receive their arguments unevaluated. The set
is closed: a user identifier ending in `!` is an ordinary call unless it is
listed here. The evaluator consults this table before any other dispatch.
"""

from types import MappingProxyType

from flowlisp.evaluation.special_forms.define_form import define_form, defn_form
from flowlisp.evaluation.special_forms.fn_form import fn_form
from flowlisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = MappingProxyType({
    "def!": define_form,
    "defn!": defn_form,
    "fn!": fn_form,
    "if!": if_form,
})
