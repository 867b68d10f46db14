# aad/core/var.py
from __future__ import annotations
import numpy as np
from numbers import Real
from typing import Any, Optional

from .node import Node


def _check_scalar(val: Any):
    # bool is an int subclass; reject it so flags are never silently differentiated
    if isinstance(val, bool) or not isinstance(val, (Real, np.floating, np.integer)):
        raise TypeError(
            f"ADVar only accepts real numeric scalars (int, float, numpy scalar), "
            f"but got {type(val)}"
        )


class ADVar:
    """
    Expression handle for reverse-mode Automatic Differentiation (AD).

    An ADVar is a thin wrapper around one shared graph `Node`. Copying the
    handle (assignment, passing it around) shares the node; every operator
    call creates a new node wired to its operands, so evaluating an
    expression *is* building the graph.

    Attributes
    ----------
    node : Node
        The graph vertex this handle refers to.

    Example
    -------
        x = ADVar(2.0)
        y = ADVar(3.0)
        f = x * y + x
        f.backward()
        x.grad   # 4.0
        y.grad   # 2.0
    """

    __slots__ = ("node",)

    def __init__(self, val: Any = None, *, name: Optional[str] = None, node: Optional[Node] = None):
        if node is not None:
            self.node = node
            return
        _check_scalar(val)
        self.node = Node(value=np.float64(val), name=name)

    @classmethod
    def _from_node(cls, node: Node) -> ADVar:
        return cls(node=node)

    # ----------------------------- accessors ----------------------------- #
    @property
    def value(self) -> np.float64:
        return self.node.value

    @property
    def grad(self) -> np.float64:
        return self.node.grad

    # short aliases: primal `val`, adjoint `adj`
    val = value
    adj = grad

    @property
    def name(self) -> Optional[str]:
        return self.node.name

    @property
    def is_leaf(self) -> bool:
        return self.node.is_leaf

    def __repr__(self):
        label = self.node.name or self.node.op_tag
        return f"ADVar({float(self.value)!r}, grad={float(self.grad)!r}, {label})"

    def __float__(self):
        return float(self.value)

    # ------------------------------ backward ----------------------------- #
    def backward(self, seed=1.0):
        """Run one reverse pass from this handle; see `engine.reverse`."""
        from .engine import reverse
        reverse(self, seed=seed)

    def zero_grad(self):
        """Reset grad/visited on every node reachable from this handle."""
        from .engine import zero_grad
        zero_grad(self)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    # Transcendental functions as methods
    def sin(self):
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self):
        from ..ops.transcendental import cos
        return cos(self)

    def tan(self):
        from ..ops.transcendental import tan
        return tan(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def log(self):
        from ..ops.transcendental import log
        return log(self)

    def power(self, other):
        return self.__pow__(other)

    # long-form names
    sine = sin
    cosine = cos
    tangent = tan
    exponential = exp
    logarithm = log
