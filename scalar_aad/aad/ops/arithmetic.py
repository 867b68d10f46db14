# aad/ops/arithmetic.py
import numpy as np
from ..core.var import ADVar
from ..core.node import Node


def _as_ad(x, requires_grad=False):
    """Ensure x is an ADVar; otherwise wrap it as a constant leaf."""
    if isinstance(x, ADVar):
        return x
    v = ADVar(x)
    v.node.requires_grad = requires_grad
    return v


def _record(tag, value, *parents):
    """Create the output node for a primitive and hand back its handle."""
    return ADVar._from_node(Node(value=np.float64(value), op_tag=tag, parents=parents))


def _push(p: Node, delta):
    """Accumulate a contribution into a parent: p.grad += delta."""
    if not p.requires_grad:
        return
    p.grad = p.grad + delta


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - promotes plain numbers to constant leaves
      - computes out.value = f(x.value, y.value)
      - records the output node with parents (x, y) in call order
    """
    x = _as_ad(x)
    y = _as_ad(y)
    return _record(tag, f(x.node.value, y.node.value), x.node, y.node)


def add(x, y): return _binary(x, y, np.add,      "add")
def sub(x, y): return _binary(x, y, np.subtract, "sub")
def mul(x, y): return _binary(x, y, np.multiply, "mul")
def div(x, y): return _binary(x, y, np.divide,   "div")


def neg(x):
    x = _as_ad(x)
    return _record("neg", -x.node.value, x.node)


def pow(x, y):
    """
    Power with no domain handling:
      out.value = x ** y

    Local partials:
      ∂out/∂x = y * x^(y-1)
      ∂out/∂y = x^y * log(x)        (NaN for x<=0; only computed when y is differentiable)
    """
    return _binary(x, y, np.power, "pow")


# ------------------------- local backward rules ------------------------- #
# Each rule reads c.grad (already fully accumulated) and pushes the chain-rule
# contribution into c.parents, in the same order the parents were recorded.

def _add_backward(c: Node):
    a, b = c.parents
    _push(a, c.grad)
    _push(b, c.grad)


def _sub_backward(c: Node):
    a, b = c.parents
    _push(a, c.grad)
    _push(b, -c.grad)


def _neg_backward(c: Node):
    (a,) = c.parents
    _push(a, -c.grad)


def _mul_backward(c: Node):
    a, b = c.parents
    _push(a, b.value * c.grad)
    _push(b, a.value * c.grad)


def _div_backward(c: Node):
    a, b = c.parents
    _push(a, (1.0 / b.value) * c.grad)
    _push(b, -(a.value / (b.value * b.value)) * c.grad)


def _pow_backward(c: Node):
    a, b = c.parents
    if a.requires_grad:
        _push(a, b.value * np.power(a.value, b.value - 1.0) * c.grad)
    if b.requires_grad:
        _push(b, np.power(a.value, b.value) * np.log(a.value) * c.grad)


RULES = {
    "add": _add_backward,
    "sub": _sub_backward,
    "neg": _neg_backward,
    "mul": _mul_backward,
    "div": _div_backward,
    "pow": _pow_backward,
}
