import math

import pytest

from scalar_aad.aad import (
    ADVar,
    GradCheckConfig,
    GradientCheckError,
    check_grads,
    grad,
    grads,
    grads_list,
    numerical_grads,
    value,
)
from scalar_aad.aad import ops


def test_value_passthrough():
    assert value(ADVar(2.5)) == 2.5
    assert value(7) == 7


def test_grad_single_input():
    assert float(grad(lambda x: x * x.sin(), 1.2)) == pytest.approx(
        math.sin(1.2) + 1.2 * math.cos(1.2))


def test_grads_dict_preserves_key_order():
    out = grads(lambda v: v["b"] * v["a"] + v["a"].exp(), {"b": 3.0, "a": 0.5})
    assert list(out) == ["b", "a"]
    assert float(out["a"]) == pytest.approx(3.0 + math.exp(0.5))
    assert float(out["b"]) == pytest.approx(0.5)


def test_grads_list_docstring_example():
    out = grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0])
    assert [float(g) for g in out] == [4.0, 3.0]


def test_repeated_calls_build_fresh_graphs():
    f = lambda x: x * x * x
    assert float(grad(f, 2.0)) == 12.0
    assert float(grad(f, 2.0)) == 12.0


def test_constant_function_has_zero_gradient():
    out = grads(lambda v: 4.0, {"x": 1.0})
    assert out["x"] == 0.0


def test_numerical_grads_central_difference():
    num = numerical_grads(lambda v: v["x"] * v["x"] * v["y"], {"x": 1.5, "y": -2.0})
    assert num["x"] == pytest.approx(2 * 1.5 * -2.0, rel=1e-6)
    assert num["y"] == pytest.approx(1.5 ** 2, rel=1e-6)


def test_numerical_grads_rejects_bad_step():
    with pytest.raises(ValueError):
        numerical_grads(lambda v: v["x"], {"x": 1.0}, eps=0.0)


def test_check_grads_returns_both_sides():
    f = lambda v: v["x"] / v["y"] - v["x"].tan() * v["y"].cos()
    analytic, numeric = check_grads(f, {"x": 0.4, "y": 1.3})
    assert analytic.keys() == numeric.keys() == {"x", "y"}
    for k in analytic:
        assert analytic[k] == pytest.approx(numeric[k], rel=1e-5)


def test_check_grads_detects_a_wrong_rule(monkeypatch):
    def wrong_sin_rule(c):
        (a,) = c.parents
        a.grad = a.grad + c.grad  # should be cos(a) * c.grad

    monkeypatch.setitem(ops.BACKWARD_RULES, "sin", wrong_sin_rule)
    with pytest.raises(GradientCheckError) as excinfo:
        check_grads(lambda v: v["x"].sin() * v["y"], {"x": 0.8, "y": 2.0})
    assert set(excinfo.value.mismatches) == {"x"}
    assert "x" in str(excinfo.value)


def test_gradcheck_config_validation():
    with pytest.raises(ValueError):
        GradCheckConfig(eps=-1.0)
    with pytest.raises(ValueError):
        GradCheckConfig(rtol=-1e-3)
