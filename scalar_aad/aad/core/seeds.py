# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Every helper builds its own fresh graph, so
# calls never see adjoints left over from a previous sweep.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

import numpy as np

from .var import ADVar
from .engine import reverse


def value(x: Any) -> Any:
    """Return the numeric value of an ADVar; pass through plain numbers unchanged."""
    return x.value if isinstance(x, ADVar) else x


def _ensure_ad(v: Any, *, name: str) -> ADVar:
    """Wrap a plain value as ADVar if needed; otherwise return the ADVar itself."""
    return v if isinstance(v, ADVar) else ADVar(v, name=name)


def _ensure_output(y: Any) -> ADVar:
    # f may return a plain number when it ignores its inputs
    return y if isinstance(y, ADVar) else ADVar(y, name="y")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[ADVar], ADVar], x0: float) -> np.float64:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    """
    x = _ensure_ad(x0, name="x")
    y = _ensure_output(f(x))
    reverse(y, seed=1.0)
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, ADVar]], ADVar],
          inputs: Dict[str, float]) -> Dict[str, np.float64]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: ADVar} and returning a scalar ADVar
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # gradients in the same key order as `inputs`
    """
    vars_ad: Dict[str, ADVar] = {k: _ensure_ad(v, name=k) for k, v in inputs.items()}
    y = _ensure_output(f(vars_ad))
    reverse(y, seed=1.0)
    return {k: vars_ad[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[ADVar]], ADVar],
               x0_list: Iterable[float]) -> List[np.float64]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[ADVar] = [_ensure_ad(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _ensure_output(f(xs))
    reverse(y, seed=1.0)
    return [x.grad for x in xs]
