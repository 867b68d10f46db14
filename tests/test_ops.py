import math

import numpy as np
import pytest

from scalar_aad.aad import ADVar, check_grads, GradCheckConfig
from scalar_aad.aad import ops


BINARY_CASES = [
    ("add", lambda a, b: a + b, lambda a, b: a + b),
    ("sub", lambda a, b: a - b, lambda a, b: a - b),
    ("mul", lambda a, b: a * b, lambda a, b: a * b),
    ("div", lambda a, b: a / b, lambda a, b: a / b),
    ("pow", lambda a, b: a ** b, lambda a, b: a ** b),
]

UNARY_CASES = [
    ("neg", lambda a: -a, lambda a: -a),
    ("sin", lambda a: a.sin(), math.sin),
    ("cos", lambda a: a.cos(), math.cos),
    ("tan", lambda a: a.tan(), math.tan),
    ("exp", lambda a: a.exp(), math.exp),
    ("log", lambda a: a.log(), math.log),
]


@pytest.mark.parametrize("tag, op, ref", BINARY_CASES)
def test_binary_forward_value(tag, op, ref):
    a, b = ADVar(1.7), ADVar(0.6)
    out = op(a, b)
    assert out.node.op_tag == tag
    assert float(out.value) == pytest.approx(ref(1.7, 0.6), abs=1e-9)
    assert out.node.parents == (a.node, b.node)


@pytest.mark.parametrize("tag, op, ref", UNARY_CASES)
def test_unary_forward_value(tag, op, ref):
    a = ADVar(0.9)
    out = op(a)
    assert out.node.op_tag == tag
    assert float(out.value) == pytest.approx(ref(0.9), abs=1e-9)
    assert out.node.parents == (a.node,)


@pytest.mark.parametrize("tag, op, _", BINARY_CASES)
def test_binary_gradient_matches_central_difference(tag, op, _):
    check_grads(lambda v: op(v["a"], v["b"]), {"a": 1.7, "b": 0.6})


@pytest.mark.parametrize("tag, op, _", UNARY_CASES)
def test_unary_gradient_matches_central_difference(tag, op, _):
    check_grads(lambda v: op(v["a"]), {"a": 0.9}, GradCheckConfig(eps=1e-6, rtol=1e-6))


def test_local_rules_closed_form():
    a, b = ADVar(2.0), ADVar(5.0)
    out = a / b
    out.backward()
    assert float(a.grad) == pytest.approx(1.0 / 5.0)
    assert float(b.grad) == pytest.approx(-2.0 / 25.0)

    x = ADVar(0.3)
    t = x.tan()
    t.backward()
    assert float(x.grad) == pytest.approx(1.0 / math.cos(0.3) ** 2)


def test_pow_gradients_for_both_operands():
    x, y = ADVar(1.5), ADVar(2.5)
    out = x ** y
    out.backward()
    assert float(x.grad) == pytest.approx(2.5 * 1.5 ** 1.5)
    assert float(y.grad) == pytest.approx(1.5 ** 2.5 * math.log(1.5))


def test_exp_rule_reuses_output_value():
    x = ADVar(1.3)
    e = x.exp()
    e.backward()
    assert x.grad == e.value


def test_scalar_constants_promote_on_either_side():
    x = ADVar(4.0)
    assert float((5 + x).value) == 9.0
    assert float((x + 5).value) == 9.0
    assert float((5 - x).value) == 1.0
    assert float((x - 5).value) == -1.0
    assert float((3 * x).value) == 12.0
    assert float((2 / x).value) == 0.5
    assert float((x / 2).value) == 2.0
    assert float((2 ** ADVar(3.0)).value) == 8.0


def test_reflected_ops_attribute_gradient_to_the_handle():
    x = ADVar(4.0)
    out = 5 - x
    out.backward()
    assert float(x.grad) == -1.0

    x = ADVar(4.0)
    out = 2 / x
    out.backward()
    assert float(x.grad) == pytest.approx(-2.0 / 16.0)

    x = ADVar(3.0)
    out = 2 ** x
    out.backward()
    assert float(x.grad) == pytest.approx(8.0 * math.log(2.0))


def test_promoted_constant_is_a_leaf_that_collects_nothing():
    x = ADVar(-3.0)
    out = x ** 2
    const = out.node.parents[1]
    assert const.is_leaf
    assert not const.requires_grad
    out.backward()
    # log(-3) is never evaluated for the constant exponent
    assert float(x.grad) == -6.0
    assert const.grad == 0.0


def test_functional_forms_accept_plain_numbers():
    x = ADVar(0.5)
    out = ops.add(ops.mul(2.0, x), ops.sin(x))
    out.backward()
    assert float(out.value) == pytest.approx(1.0 + math.sin(0.5))
    assert float(x.grad) == pytest.approx(2.0 + math.cos(0.5))


def test_long_form_method_names():
    x = ADVar(0.4)
    assert x.sine().value == x.sin().value
    assert x.cosine().value == x.cos().value
    assert x.tangent().value == x.tan().value
    assert x.exponential().value == x.exp().value
    assert x.logarithm().value == x.log().value
    assert x.power(ADVar(2.0)).value == (x ** 2).value


def test_non_numeric_leaf_rejected():
    with pytest.raises(TypeError):
        ADVar("1.0")
    with pytest.raises(TypeError):
        ADVar(True)
    with pytest.raises(TypeError):
        ADVar([1.0, 2.0])


# --------------------- IEEE-754 propagation, no exceptions --------------------- #

def test_division_by_zero_gives_infinity():
    with np.errstate(all="ignore"):
        x = ADVar(1.0)
        out = x / 0.0
        out.backward()
    assert np.isinf(out.value)
    assert np.isinf(x.grad)


def test_log_of_non_positive_values():
    with np.errstate(all="ignore"):
        zero = ADVar(0.0).log()
        negative = ADVar(-1.0).log()
    assert zero.value == -np.inf
    assert np.isnan(negative.value)


def test_non_integer_power_of_negative_base_is_nan():
    with np.errstate(all="ignore"):
        x = ADVar(-8.0)
        out = x ** (1.0 / 3.0)
        total = out + 1.0
    assert np.isnan(out.value)
    assert np.isnan(total.value)


def test_constant_base_partial_is_not_evaluated():
    # (1e-300) ** (-1.1) overflows, but only the constant base would need it
    x = ADVar(-0.1)
    out = 1e-300 ** x
    with np.errstate(over="raise", divide="raise", invalid="raise"):
        out.backward()
    assert float(x.grad) == pytest.approx(1e-300 ** -0.1 * math.log(1e-300))
    assert out.node.parents[0].grad == 0.0


def test_node_name_is_optional():
    assert ADVar(1.0).node.name is None
    assert ADVar(1.0, name="w").node.name == "w"
