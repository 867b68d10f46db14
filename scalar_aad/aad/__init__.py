# aad/__init__.py
# Scalar reverse-mode Automatic Adjoint Differentiation

from .core.var import ADVar
from .core.node import Node
from .core.engine import reverse, zero_grad, zero_adjoints, topological_order
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import get_graph_stats, format_graph_summary

# Primitive operations (functional form)
from .ops import add, sub, mul, div, neg, pow, sin, cos, tan, exp, log

from .config import GradCheckConfig
from .gradcheck import GradientCheckError, numerical_grads, check_grads

__all__ = [
    # Core
    'ADVar',
    'Node',
    # Engine
    'reverse',
    'zero_grad',
    'zero_adjoints',
    'topological_order',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'get_graph_stats',
    'format_graph_summary',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'sin', 'cos', 'tan', 'exp', 'log',
    # Gradient check
    'GradCheckConfig',
    'GradientCheckError',
    'numerical_grads',
    'check_grads',
]
