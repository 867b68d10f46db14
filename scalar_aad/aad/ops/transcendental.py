# aad/ops/transcendental.py
import numpy as np
from ..core.node import Node
from .arithmetic import _as_ad, _record, _push


def sin(x):
    x = _as_ad(x)
    return _record("sin", np.sin(x.node.value), x.node)


def cos(x):
    x = _as_ad(x)
    return _record("cos", np.cos(x.node.value), x.node)


def tan(x):
    x = _as_ad(x)
    return _record("tan", np.tan(x.node.value), x.node)


def exp(x):
    x = _as_ad(x)
    return _record("exp", np.exp(x.node.value), x.node)


def log(x):
    """Natural logarithm; log(0) = -inf and log(<0) = NaN flow through unchanged."""
    x = _as_ad(x)
    return _record("log", np.log(x.node.value), x.node)


def _sin_backward(c: Node):
    (a,) = c.parents
    _push(a, np.cos(a.value) * c.grad)


def _cos_backward(c: Node):
    (a,) = c.parents
    _push(a, -np.sin(a.value) * c.grad)


def _tan_backward(c: Node):
    (a,) = c.parents
    _push(a, (1.0 / np.square(np.cos(a.value))) * c.grad)


def _exp_backward(c: Node):
    # d/dx e^x = e^x, already stored as c.value
    (a,) = c.parents
    _push(a, c.value * c.grad)


def _log_backward(c: Node):
    (a,) = c.parents
    _push(a, (1.0 / a.value) * c.grad)


RULES = {
    "sin": _sin_backward,
    "cos": _cos_backward,
    "tan": _tan_backward,
    "exp": _exp_backward,
    "log": _log_backward,
}
