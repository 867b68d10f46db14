"""
Gradient-check configuration

Step size and tolerances shared by the central-difference checker.
"""

from dataclasses import dataclass


@dataclass
class GradCheckConfig:
    """
    Settings for comparing reverse-mode gradients against bumping.

    Attributes:
        eps: Bump size for the central difference [f(x+eps) - f(x-eps)] / (2 eps).
             Truncation error is O(eps^2), round-off error O(1e-16 / eps);
             1e-6 balances the two for well-scaled inputs.
        rtol: Relative tolerance passed to numpy.isclose
        atol: Absolute tolerance passed to numpy.isclose
    """
    eps: float = 1e-6
    rtol: float = 1e-5
    atol: float = 1e-7

    def __post_init__(self):
        if self.eps <= 0:
            raise ValueError(f"eps must be positive, got {self.eps}")
        if self.rtol < 0 or self.atol < 0:
            raise ValueError("tolerances must be non-negative")
