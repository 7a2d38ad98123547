"""Gradient-descent optimisers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .backend import ShapeError


class Optimizer(ABC):
    """Applies a gradient update to model parameters in place."""

    @abstractmethod
    def step(self, weights, bias, weight_grad, bias_grad) -> None:
        """Update ``weights`` and ``bias`` in place from their gradients."""


def _check_same_shape(name: str, param: np.ndarray, grad: np.ndarray) -> None:
    if np.shape(param) != np.shape(grad):
        raise ShapeError(
            f"{name} of shape {np.shape(param)} does not match gradient of shape "
            f"{np.shape(grad)}"
        )


@dataclass
class GradientDescent(Optimizer):
    """Plain gradient descent with a fixed learning rate."""

    id: str
    learning_rate: float

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("Missing id")
        if self.learning_rate is None:
            raise ValueError("Missing learning_rate")

    def step(
        self,
        weights: np.ndarray,
        bias: np.ndarray,
        weight_grad: np.ndarray,
        bias_grad: np.ndarray,
    ) -> None:
        """Subtract ``learning_rate`` times each gradient from its parameter."""
        _check_same_shape("weights", weights, weight_grad)
        _check_same_shape("bias", bias, bias_grad)
        weights -= np.asarray(weight_grad, dtype=np.float64) * self.learning_rate
        bias -= np.asarray(bias_grad, dtype=np.float64) * self.learning_rate