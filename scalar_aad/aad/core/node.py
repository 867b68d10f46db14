# aad/core/node.py
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np


@dataclass(eq=False)
class Node:
    """
    One vertex of the computation graph, produced by a leaf or a primitive op.

    Attributes
    ----------
    value   : np.float64
        Forward result of the op (or the leaf's initial value). Never changes.
    op_tag  : str
        Which local derivative rule applies ("leaf", "add", "mul", ...).
        The rule itself lives in `aad.ops.BACKWARD_RULES`.
    parents : Tuple[Node, ...]
        Operands in call order. Order matters: rule contributions are
        attributed positionally. Empty for leaves.
    grad    : np.float64
        Adjoint accumulator, 0.0 until a backward pass reaches this node.
    visited : bool
        Set once this node's rule has run during a backward pass.
    requires_grad : bool
        False for plain numbers promoted to leaves by an op; rules do not
        accumulate into them.
    name    : str | None
        Optional debug label.
    """
    value: np.float64
    op_tag: str = "leaf"
    parents: Tuple["Node", ...] = ()
    grad: np.float64 = field(default_factory=lambda: np.float64(0.0))
    visited: bool = False
    requires_grad: bool = True
    name: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return not self.parents

    def local_backward(self):
        """
        Push this node's current `grad` onto its parents using the rule
        registered for `op_tag`. A no-op for leaves.
        """
        if self.is_leaf:
            return
        from ..ops import BACKWARD_RULES
        BACKWARD_RULES[self.op_tag](self)
