"""Model interface and the linear (logistic-regression) model."""

from __future__ import annotations

import json
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np

from .backend import BackendError, ShapeError

_log = logging.getLogger(__name__)


class ModelMode(Enum):
    """Whether a model is being trained or used for inference."""

    TRAINING = "Training"
    INFERENCE = "Inference"


class Model(ABC):
    """A model with an identifier, a mode, a forward pass and persistence."""

    id: str
    mode: ModelMode

    @abstractmethod
    def forward(self, inputs):
        """Compute the model output for ``inputs``."""

    @abstractmethod
    def save_model(self, path) -> None:
        """Persist the model parameters to ``path``."""

    @abstractmethod
    def load_model(self, path) -> None:
        """Restore the model parameters from ``path``."""


def _count(fields: dict[str, Any], key: str) -> int:
    value = fields.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ShapeError(f"missing {key}")
    return value


@dataclass(eq=False)
class LinearModel(Model):
    """Single-layer linear model ``z = X w + b`` returning raw logits.

    ``weights`` has shape (m, 1) and ``bias`` shape (1, 1).
    """

    id: str
    weights: np.ndarray
    bias: np.ndarray
    mode: ModelMode = ModelMode.TRAINING

    @classmethod
    def glorot_uniform_init(
        cls,
        input_dim: int,
        id: str = "",
        rng: np.random.Generator | None = None,
    ) -> LinearModel:
        """Glorot-uniform weights for ``input_dim`` inputs and a zero bias."""
        if input_dim < 0:
            raise ValueError("input_dim must not be negative")
        generator = rng if rng is not None else np.random.default_rng()
        limit = math.sqrt(6.0) / math.sqrt(input_dim + 1)
        weights = generator.uniform(-limit, limit, size=(input_dim, 1))
        bias = np.zeros((1, 1))
        return cls(id=id, weights=weights, bias=bias, mode=ModelMode.TRAINING)

    def forward(self, inputs) -> np.ndarray:
        """Logits of shape (n, 1) for an (n, m) input matrix."""
        matrix = np.asarray(inputs, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[1] != self.weights.shape[0]:
            raise ShapeError(
                f"input of shape {matrix.shape} does not fit weights of shape "
                f"{self.weights.shape}"
            )
        _log.debug("forward model_id=%s mode=%s", self.id, self.mode.value)
        return matrix @ self.weights + self.bias[0, 0]

    def save_model(self, path) -> None:
        """Write weights and bias as JSON, data in column-major order."""
        payload = [
            {
                "name": name,
                "rows": int(tensor.shape[0]),
                "cols": int(tensor.shape[1]),
                "data": [float(v) for v in tensor.flatten(order="F")],
            }
            for name, tensor in (("weights", self.weights), ("bias", self.bias))
        ]
        try:
            Path(path).write_text(
                json.dumps(payload, separators=(",", ":")), encoding="utf-8"
            )
        except OSError as exc:
            raise BackendError(f"I/O error: {exc}") from exc
        _log.debug("saved model_id=%s to %s", self.id, path)

    def load_model(self, path) -> None:
        """Read weights and bias written by :meth:`save_model`."""
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise BackendError(f"I/O error: {exc}") from exc
        try:
            entries = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise BackendError(f"JSON error: {exc}") from exc
        if not isinstance(entries, list):
            raise BackendError("JSON error: expected a list of tensors")

        for entry in entries:
            fields = entry if isinstance(entry, dict) else {}
            name = fields.get("name")
            if not isinstance(name, str):
                raise ShapeError("missing name")
            rows = _count(fields, "rows")
            cols = _count(fields, "cols")
            data = fields.get("data")
            if not isinstance(data, list):
                raise ShapeError("missing data")
            values = [
                float(v)
                for v in data
                if isinstance(v, (int, float)) and not isinstance(v, bool)
            ]
            if len(values) != rows * cols:
                raise ShapeError(
                    f"{name} holds {len(values)} values, expected {rows * cols}"
                )
            matrix = np.array(values, dtype=np.float64).reshape(
                (rows, cols), order="F"
            )
            if name == "weights":
                self.weights = matrix
            elif name == "bias":
                self.bias = matrix
            else:
                raise ShapeError(f"unexpected tensor name: {name}")
        _log.debug("loaded model_id=%s from %s", self.id, path)