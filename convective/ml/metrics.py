"""Classification and regression metrics with a history of recorded values."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class MetricUsage(Enum):
    """Kind of model a metric is meant for."""

    CLASS = "Class"
    REGRESS = "Regress"
    MULTIPLE = "Multiple"


class MetricKind(Enum):
    """Shape of a metric value."""

    NUMERIC = "Numeric"
    SCALAR = "Scalar"
    SCALAR_MATRIX = "ScalarMatrix"
    CATEGORICAL_MATRIX = "CategoricalMatrix"
    MULTIPLE = "Multiple"


@dataclass(frozen=True)
class MetricValue:
    """A computed metric: its kind and its payload."""

    kind: MetricKind
    value: Any

    def as_numeric(self) -> int | None:
        """The integer payload, or None if this is not a numeric value."""
        return self.value if self.kind is MetricKind.NUMERIC else None

    def as_scalar(self) -> float | None:
        """The float payload, or None if this is not a scalar value."""
        return self.value if self.kind is MetricKind.SCALAR else None

    def as_scalar_matrix(self) -> list[list[float]] | None:
        """The matrix payload, or None if this is not a scalar matrix."""
        return self.value if self.kind is MetricKind.SCALAR_MATRIX else None

    def as_mapping(self) -> dict[str, float] | None:
        """The name-to-value payload, or None if this is not a multiple value."""
        return self.value if self.kind is MetricKind.MULTIPLE else None


@dataclass
class MetricClass(ABC):
    """A metric that computes values and keeps the ones recorded with it."""

    usage: ClassVar[MetricUsage] = MetricUsage.CLASS

    id: str = ""
    values: list[MetricValue] = field(default_factory=list)

    @abstractmethod
    def compute(
        self,
        y_true: Sequence[float],
        y_hat: Sequence[float],
        threshold: float | None = None,
    ) -> MetricValue:
        """Compare predictions ``y_hat`` with ``y_true``."""

    def update(self, value: MetricValue) -> None:
        """Record a computed value."""
        self.values.append(value)

    def latest(self) -> MetricValue | None:
        """The most recently recorded value, if any."""
        return self.values[-1] if self.values else None

    def history(self) -> list[MetricValue]:
        """All recorded values, oldest first."""
        return list(self.values)

    def reset(self) -> None:
        """Forget every recorded value."""
        self.values.clear()


@dataclass
class Accuracy(MetricClass):
    """Share of above-threshold values over both sequences, in whole units."""

    usage: ClassVar[MetricUsage] = MetricUsage.CLASS

    id: str = "accuracy"

    def compute(
        self,
        y_true: Sequence[float],
        y_hat: Sequence[float],
        threshold: float | None = None,
    ) -> MetricValue:
        """1.0 when every value of both sequences exceeds the threshold, else 0.0."""
        limit = 0.5 if threshold is None else threshold
        true_values, hat_values = list(y_true), list(y_hat)
        total = len(true_values) + len(hat_values)
        if total == 0:
            raise ValueError("accuracy needs at least one value")
        above = sum(1 for v in true_values if v > limit) + sum(
            1 for v in hat_values if v > limit
        )
        return MetricValue(MetricKind.SCALAR, float(above // total))


@dataclass
class Rmse(MetricClass):
    """Root mean squared error between predictions and true values."""

    usage: ClassVar[MetricUsage] = MetricUsage.CLASS

    id: str = "accuracy"

    def compute(
        self,
        y_true: Sequence[float],
        y_hat: Sequence[float],
        threshold: float | None = None,
    ) -> MetricValue:
        """Square root of the summed squared errors over ``len(y_true)``; NaN if empty."""
        true_values = list(y_true)
        n = len(true_values)
        sse = sum((h - t) ** 2 for t, h in zip(true_values, y_hat))
        if n == 0:
            return MetricValue(MetricKind.SCALAR, math.nan)
        return MetricValue(MetricKind.SCALAR, math.sqrt(sse / n))


@dataclass
class Metrics:
    """A list of collected metric values and a decision threshold."""

    metrics: list[float] = field(default_factory=list)
    threshold: float = 0.5

    @classmethod
    def with_threshold(cls, threshold: float) -> Metrics:
        """An empty collection using ``threshold``."""
        return cls(threshold=threshold)

    def add_metric(self, metric: float) -> None:
        """Append a metric value."""
        self.metrics.append(metric)