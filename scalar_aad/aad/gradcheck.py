"""
Gradient check: reverse-mode AAD vs central-difference bumping.

Formula:
    df/dx_i ≈ [f(x + eps e_i) - f(x - eps e_i)] / (2 eps)

Two function evaluations per input. Used to validate the local backward
rules, not for production gradients.
"""

import logging
import numpy as np
from typing import Callable, Dict, Optional, Tuple

from .config import GradCheckConfig
from .core.seeds import grads, value
from .core.var import ADVar

logger = logging.getLogger(__name__)


class GradientCheckError(AssertionError):
    """Raised by check_grads when analytic and numeric gradients disagree."""

    def __init__(self, mismatches: Dict[str, Tuple[float, float]]):
        self.mismatches = mismatches
        details = ", ".join(
            f"{k}: analytic={a:.10g} numeric={n:.10g}" for k, (a, n) in mismatches.items()
        )
        super().__init__(f"gradient check failed for {len(mismatches)} input(s): {details}")


def _evaluate(f: Callable[[Dict[str, ADVar]], ADVar], point: Dict[str, float]) -> float:
    vars_ad = {k: ADVar(v, name=k) for k, v in point.items()}
    return float(value(f(vars_ad)))


def numerical_grads(f: Callable[[Dict[str, ADVar]], ADVar],
                    inputs: Dict[str, float],
                    eps: float = 1e-6) -> Dict[str, float]:
    """
    Central-difference gradient of a scalar function y=f(vars) (dict form).

    Args:
        f: function taking {name: ADVar} and returning a scalar ADVar
        inputs: {name: numeric} evaluation point
        eps: bump size

    Returns:
        {name: float} in the key order of `inputs`
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    base = {k: float(v) for k, v in inputs.items()}
    out = {}
    for k in base:
        up = dict(base)
        up[k] += eps
        down = dict(base)
        down[k] -= eps
        out[k] = (_evaluate(f, up) - _evaluate(f, down)) / (2.0 * eps)
    return out


def check_grads(f: Callable[[Dict[str, ADVar]], ADVar],
                inputs: Dict[str, float],
                config: Optional[GradCheckConfig] = None):
    """
    Compare reverse-mode gradients against central differences.

    Returns:
        (analytic, numeric) dicts keyed like `inputs`

    Raises:
        GradientCheckError: listing every input whose partials differ
            beyond numpy.isclose(rtol, atol)
    """
    config = config or GradCheckConfig()

    analytic = {k: float(g) for k, g in grads(f, inputs).items()}
    numeric = numerical_grads(f, inputs, eps=config.eps)

    mismatches = {}
    for k in inputs:
        a, n = analytic[k], numeric[k]
        logger.debug("gradcheck %s: analytic=%.12g numeric=%.12g", k, a, n)
        if not np.isclose(a, n, rtol=config.rtol, atol=config.atol):
            mismatches[k] = (a, n)

    if mismatches:
        raise GradientCheckError(mismatches)
    return analytic, numeric
