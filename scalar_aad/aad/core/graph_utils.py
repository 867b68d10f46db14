"""
Computation graph utilities
Summaries and statistics of the DAG reachable from an output handle.
"""

import numpy as np
from typing import Dict, Union
from collections import Counter

from .engine import topological_order
from .node import Node
from .var import ADVar


def get_graph_stats(output: Union[ADVar, Node]) -> Dict:
    """
    Collect graph statistics without printing anything.

    Fan-in of a node is its number of parents; fan-out is the number of
    reachable nodes that consume it. A fan-out above one marks a shared
    sub-expression (diamond dependency).

    Returns:
        dict with nodes, edges, leaves, fan-in/fan-out extremes and means,
        and a per-op_tag count under 'operations'.
    """
    order = topological_order(output)

    n_nodes = len(order)
    n_edges = sum(len(node.parents) for node in order)
    n_leaves = sum(1 for node in order if node.is_leaf)

    fan_ins = [len(node.parents) for node in order]
    max_fan_in = max(fan_ins)
    avg_fan_in = float(np.mean(fan_ins))

    # fan-out counts consumers inside this graph only
    fan_outs = Counter()
    for node in order:
        for parent in node.parents:
            fan_outs[id(parent)] += 1
    fan_out_list = [fan_outs[id(node)] for node in order]
    max_fan_out = max(fan_out_list)
    avg_fan_out = float(np.mean(fan_out_list))

    op_counter = Counter(node.op_tag for node in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': n_leaves,
        'max_fan_in': max_fan_in,
        'avg_fan_in': avg_fan_in,
        'max_fan_out': max_fan_out,
        'avg_fan_out': avg_fan_out,
        'operations': dict(op_counter)
    }


def format_graph_summary(output: Union[ADVar, Node], detailed: bool = False, max_nodes: int = 50) -> str:
    """
    Text report of the graph reachable from `output`.

    Args:
        output: handle or node the graph is rooted at
        detailed: also list nodes (first `max_nodes`, in evaluation order)
        max_nodes: cap on the detailed listing
    """
    stats = get_graph_stats(output)

    lines = []
    lines.append("=" * 70)
    lines.append("COMPUTATION GRAPH SUMMARY")
    lines.append("=" * 70)
    lines.append(f"Total nodes:        {stats['nodes']:,}")
    lines.append(f"Total edges:        {stats['edges']:,}")
    lines.append(f"Leaves:             {stats['leaves']:,}")
    lines.append(f"Max fan-in:         {stats['max_fan_in']}")
    lines.append(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    lines.append(f"Max fan-out:        {stats['max_fan_out']}")
    lines.append(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    lines.append("")
    lines.append("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        lines.append(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed:
        order = topological_order(output)
        index = {id(node): i for i, node in enumerate(order)}
        lines.append("")
        lines.append("=" * 70)
        lines.append(f"NODE LIST (first {max_nodes} nodes)")
        lines.append("=" * 70)
        for i, node in enumerate(order[:max_nodes]):
            label = node.name or node.op_tag
            if node.parents:
                parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.parents)
                lines.append(f"Node {i:4d}: {label:12s} ({float(node.value):12.6f}) <- [{parent_info}]")
            else:
                lines.append(f"Node {i:4d}: {label:12s} ({float(node.value):12.6f}) [leaf]")
        if len(order) > max_nodes:
            lines.append(f"... ({len(order) - max_nodes} more nodes)")

    lines.append("=" * 70)
    return "\n".join(lines)
