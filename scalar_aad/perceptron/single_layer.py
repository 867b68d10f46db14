"""
Single-layer perceptron with hand-coded gradients.

Independent from the AAD engine: the sigmoid derivative and the weight/bias
updates are written out in closed form.

    pred   = sigmoid(X @ w + b)
    error  = y - pred
    delta  = error * pred * (1 - pred)
    w     += lr * X^T @ delta
    b     += lr * sum(delta)
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class TrainerConfig:
    """
    Attributes:
        n_inputs: Number of input features (one weight each)
        learning_rate: Scale applied to every weight/bias update
        iterations: Default number of full-batch updates for train()
        log_every: Log the mean squared error every this many iterations
        seed: Seed for the random source used to initialise weights and bias
    """
    n_inputs: int
    learning_rate: float = 1.0
    iterations: int = 10000
    log_every: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        if self.n_inputs <= 0:
            raise ValueError(f"n_inputs must be positive, got {self.n_inputs}")
        if self.log_every <= 0:
            raise ValueError(f"log_every must be positive, got {self.log_every}")


class SingleLayerPerceptron:
    """
    One sigmoid neuron trained by full-batch gradient steps.

    Args:
        config: TrainerConfig
        rng: Optional random Generator; built from config.seed when omitted.
             Weights and bias are drawn uniformly from [0, 1).
    """

    def __init__(self, config: TrainerConfig, rng: Optional[np.random.Generator] = None):
        self.config = config
        rng = rng if rng is not None else np.random.default_rng(config.seed)
        self._weights = rng.random(config.n_inputs)
        self._bias = float(rng.random())

    @property
    def weights(self) -> np.ndarray:
        return self._weights.copy()

    @property
    def bias(self) -> float:
        return self._bias

    @staticmethod
    def sigmoid(z):
        return 1.0 / (1.0 + np.exp(-np.asarray(z, dtype=np.float64)))

    @staticmethod
    def sigmoid_derivative(s):
        """Derivative of the sigmoid expressed through its output s = sigmoid(z)."""
        s = np.asarray(s, dtype=np.float64)
        return s * (1.0 - s)

    def _check_inputs(self, inputs) -> np.ndarray:
        X = np.asarray(inputs, dtype=np.float64)
        if X.ndim != 2 or X.shape[1] != self.config.n_inputs:
            raise ValueError(
                f"inputs must have shape (n_samples, {self.config.n_inputs}), got {X.shape}"
            )
        return X

    def forward(self, inputs) -> np.ndarray:
        """Predictions sigmoid(X @ w + b) for a (n_samples, n_inputs) matrix."""
        X = self._check_inputs(inputs)
        return self.sigmoid(X @ self._weights + self._bias)

    @staticmethod
    def loss(predicted, targets) -> np.ndarray:
        """Per-sample error vector targets - predicted."""
        predicted = np.asarray(predicted, dtype=np.float64)
        targets = np.asarray(targets, dtype=np.float64)
        if predicted.shape != targets.shape:
            raise ValueError(f"shape mismatch: predicted {predicted.shape} vs targets {targets.shape}")
        return targets - predicted

    def weight_update(self, inputs, error, predicted) -> np.ndarray:
        X = self._check_inputs(inputs)
        delta = np.asarray(error, dtype=np.float64) * self.sigmoid_derivative(predicted)
        return X.T @ delta

    def bias_update(self, error, predicted) -> float:
        delta = np.asarray(error, dtype=np.float64) * self.sigmoid_derivative(predicted)
        return float(np.sum(delta))

    def train(self, inputs, targets, iterations: Optional[int] = None) -> List[float]:
        """
        Full-batch training loop.

        Returns:
            Mean squared errors logged every `config.log_every` iterations
            (measured before that iteration's update).
        """
        X = self._check_inputs(inputs)
        y = np.asarray(targets, dtype=np.float64)
        if y.shape != (X.shape[0],):
            raise ValueError(f"targets must have shape ({X.shape[0]},), got {y.shape}")

        iterations = self.config.iterations if iterations is None else iterations
        lr = self.config.learning_rate
        history = []
        for iteration in range(iterations):
            predicted = self.forward(X)
            error = self.loss(predicted, y)

            self._weights += lr * self.weight_update(X, error, predicted)
            self._bias += lr * self.bias_update(error, predicted)

            if iteration % self.config.log_every == 0:
                mse = float(np.mean(error ** 2))
                history.append(mse)
                logger.info("iteration %d: loss = %.6f", iteration, mse)
        return history
