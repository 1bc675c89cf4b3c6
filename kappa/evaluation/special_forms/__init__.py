"""Registry of special forms for the Kappa evaluator.

Maps form names to handler functions `handler(tail, env, evaluate_fn)`. Every
built-in operation is a special form: handlers receive their arguments
unevaluated and choose which ones to evaluate, and in what order.
"""

from kappa.evaluation.special_forms.arithmetic_forms import (
    add_form,
    subtract_form,
    multiply_form,
    divide_form,
    mod_form,
)
from kappa.evaluation.special_forms.comparison_forms import gt_form, lt_form, ge_form, le_form, equal_form
from kappa.evaluation.special_forms.define_form import def_form, defn_form
from kappa.evaluation.special_forms.lambda_form import fn_form
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.logic_forms import and_form, or_form
from kappa.evaluation.special_forms.do_form import do_form
from kappa.evaluation.special_forms.let_form import let_form
from kappa.evaluation.special_forms.print_form import println_form
from kappa.evaluation.special_forms.sequence_forms import (
    conj_form,
    nth_form,
    count_form,
    range_form,
    for_form,
    reduce_form,
)

SPECIAL_FORMS = {
    "+": add_form,
    "-": subtract_form,
    "*": multiply_form,
    "/": divide_form,
    ">": gt_form,
    "<": lt_form,
    ">=": ge_form,
    "<=": le_form,
    "=": equal_form,
    "def": def_form,
    "defn": defn_form,
    "if": if_form,
    "or": or_form,
    "and": and_form,
    "do": do_form,
    "fn": fn_form,
    "nth": nth_form,
    "println": println_form,
    "let": let_form,
    "conj": conj_form,
    "for": for_form,
    "reduce": reduce_form,
    "range": range_form,
    "count": count_form,
    "mod": mod_form,
}
