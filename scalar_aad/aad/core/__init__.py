# aad/core/__init__.py

"""
Core public API for the AAD package.

This module exposes the minimal set of symbols that users of the AAD framework
should import from `aad.core`.

Exports:
    ADVar             : The differentiable scalar handle; operators build the graph.
    Node              : One graph vertex (value, grad, parents, op tag).
    reverse           : Run a single reverse pass to accumulate first-order adjoints.
    zero_grad         : Reset adjoints/visited flags on a graph so it can be swept again.
    topological_order : Nodes reachable from an output, parents before consumers.
    grad, grads       : Convenience: gradients of a function at a point.
    value             : Convenience: extract the primal value from ADVar.
"""

from .node import Node
from .var import ADVar
from .engine import reverse, zero_grad, zero_adjoints, topological_order
from .seeds import grad, grads, grads_list, value

__all__ = [
    "ADVar",
    "Node",
    "reverse",
    "zero_grad",
    "zero_adjoints",
    "topological_order",
    "grad",
    "grads",
    "grads_list",
    "value",
]
