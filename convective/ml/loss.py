"""Loss functions that return the loss value together with parameter gradients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .backend import ShapeError


class RegType(Enum):
    """Kinds of weight regularisation."""

    L1 = "L1"
    L2 = "L2"
    ELASTICNET = "Elasticnet"


@dataclass
class LossOutput:
    """Scalar loss and the gradients of the loss with respect to weights and bias."""

    loss_value: float
    weight_grad: np.ndarray
    bias_grad: np.ndarray


class LossFunction(ABC):
    """A loss that computes its value and the parameter gradients in one call."""

    @abstractmethod
    def loss_and_gradients(
        self, features, logits, targets, weights, bias
    ) -> LossOutput:
        """Loss value and gradients for ``features`` (n, m), ``logits`` and ``targets`` (n, 1)."""


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 0.5 * (1.0 + np.tanh(0.5 * x))


@dataclass
class CrossEntropy(LossFunction):
    """Binary cross-entropy computed from logits, with closed-form gradients."""

    id: str

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("Missing id value")

    def regularize(
        self, weights: Sequence[float], operation: RegType, params: Sequence[float]
    ) -> float:
        """Penalty for ``weights``; ``params`` holds the strength and the mixing ratio."""
        if len(params) < 2:
            raise ValueError("params must hold a strength and a ratio")
        r_c, r_lambda = float(params[0]), float(params[1])
        values = np.asarray(weights, dtype=np.float64).ravel()
        l1 = float(np.sum(np.abs(values)))
        l2 = float(np.sum(values * values))
        if operation is RegType.L1:
            return r_c * r_lambda * l1
        if operation is RegType.L2:
            return r_c * r_lambda * l2
        return r_c * (r_lambda * l1 + (1.0 - r_lambda) * l2)

    def loss_and_gradients(
        self, features, logits, targets, weights, bias
    ) -> LossOutput:
        """Mean BCE-with-logits loss and gradients for a logistic-regression model."""
        x = np.asarray(features, dtype=np.float64)
        z = np.asarray(logits, dtype=np.float64)
        y = np.asarray(targets, dtype=np.float64)
        if x.ndim != 2 or z.ndim != 2:
            raise ShapeError("features and logits must be two-dimensional")
        if z.shape != y.shape:
            raise ShapeError(
                f"logits of shape {z.shape} do not match targets of shape {y.shape}"
            )
        if x.shape[0] != z.shape[0]:
            raise ShapeError(
                f"features have {x.shape[0]} rows but logits have {z.shape[0]}"
            )

        n = float(x.shape[0])
        with np.errstate(divide="ignore", invalid="ignore"):
            per_sample = np.maximum(z, 0.0) - z * y + np.log1p(np.exp(-np.abs(z)))
            loss_value = float(np.sum(per_sample)) / n if n else float("nan")
            delta = _sigmoid(z) - y
            weight_grad = (x.T @ delta) / n
            bias_grad = np.full((1, 1), float(np.sum(delta)) / n if n else float("nan"))

        return LossOutput(
            loss_value=loss_value, weight_grad=weight_grad, bias_grad=bias_grad
        )