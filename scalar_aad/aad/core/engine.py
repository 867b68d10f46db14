# aad/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import List, Union

from .node import Node
from .var import ADVar

logger = logging.getLogger(__name__)


def _as_node(x: Union[ADVar, Node]) -> Node:
    if isinstance(x, ADVar):
        return x.node
    if isinstance(x, Node):
        return x
    raise TypeError(f"expected ADVar or Node, got {type(x)}")


def topological_order(output: Union[ADVar, Node]) -> List[Node]:
    """
    Every node reachable from `output` (through `parents`) in DFS post-order:
    each node appears after all of its parents, so the reversed list puts
    every consumer ahead of the values it consumed.

    Iterative: a running sum over thousands of terms is deeper than
    Python's recursion limit.
    """
    root = _as_node(output)
    order: List[Node] = []
    seen = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.append((node, True))
        # reversed so the first operand is explored first
        for p in reversed(node.parents):
            if id(p) not in seen:
                stack.append((p, False))
    return order


def reverse(output: Union[ADVar, Node], seed=1.0):
    """
    Run a single reverse pass from `output`.

    Args:
        output: the handle (or node) whose derivatives are wanted.
        seed: adjoint assigned to the output, 1.0 for plain gradients.

    Notes:
        - The output's grad is *set* to `seed`; every other node only
          accumulates (p.grad += c.grad * ∂c/∂p).
        - Rules run in reverse topological order, so a node shared by
          several sub-expressions has received every contribution before
          its own rule reads its grad.
        - Each op node can be swept once. Call `zero_grad(output)` before
          sweeping the same graph again. Leaves carry no rule, so a new
          graph built from already-used leaves sweeps fine and keeps
          accumulating into them.
    """
    root = _as_node(output)
    order = topological_order(root)

    for node in order:
        if node.visited and not node.is_leaf:
            raise RuntimeError(
                "Trying to run backward through a graph that was already swept; "
                "call zero_grad() on the output first"
            )

    root.grad = np.float64(seed)
    for node in reversed(order):
        node.local_backward()
        node.visited = True

    logger.debug("reverse sweep: %d nodes from %s", len(order), root.op_tag)


def zero_grad(output: Union[ADVar, Node]):
    """
    Reset grad to 0.0 and clear the visited flag on every node reachable
    from `output`, making the graph ready for another reverse pass.
    """
    order = topological_order(output)
    for node in order:
        node.grad = np.float64(0.0)
        node.visited = False
    logger.debug("zeroed %d nodes", len(order))


zero_adjoints = zero_grad
