# aad/ops/__init__.py

from . import arithmetic
from . import transcendental

# Convenience re-exports so users can do: from scalar_aad.aad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import sin, cos, tan, exp, log

# op_tag -> local backward rule, consulted by Node.local_backward
BACKWARD_RULES = {**arithmetic.RULES, **transcendental.RULES}

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "sin", "cos", "tan", "exp", "log",
    "BACKWARD_RULES",
]
