"""Selection of orderbook features by name and their joint computation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..errors import FeatureNotFoundError
from .interface import Feature, OrderbookConfig
from .market import Orderbook
from .orderbook import (
    ImbalanceFeature,
    MicropriceFeature,
    MidpriceFeature,
    SpreadFeature,
    TAVFeature,
    VWAPFeature,
    WeightedMidpriceFeature,
)

_KNOWN: dict[str, type[Feature]] = {
    cls.name: cls
    for cls in (
        SpreadFeature,
        MidpriceFeature,
        WeightedMidpriceFeature,
        VWAPFeature,
        ImbalanceFeature,
        TAVFeature,
        MicropriceFeature,
    )
}


class FeatureSelector:
    """An ordered set of orderbook features computed together."""

    def __init__(self, feature_names: Iterable[str]) -> None:
        features = []
        for name in feature_names:
            try:
                features.append(_KNOWN[name]())
            except KeyError:
                raise FeatureNotFoundError(name) from None
        self._features: list[Feature] = features
        self._names: list[str] = [f.name for f in features]

    @classmethod
    def from_features(cls, features: Sequence[Feature]) -> FeatureSelector:
        """Build a selector from already constructed feature objects."""
        selector = cls(())
        selector._features = list(features)
        selector._names = [f.name for f in selector._features]
        return selector

    def compute_values(
        self, orderbook: Orderbook, config: OrderbookConfig
    ) -> list[float]:
        """Values of every selected feature, in selection order."""
        return [feature.compute(orderbook, config) for feature in self._features]

    def compute_values_with_defaults(self, orderbook: Orderbook) -> list[float]:
        """Values of every selected feature under the default configuration."""
        return self.compute_values(orderbook, OrderbookConfig())

    def feature_names(self) -> list[str]:
        """Names of the selected features, in selection order."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._features)