"""Registries that map feature names to their categories."""

from __future__ import annotations

import threading

from .interface import FeatureCategory


class FeatureRegistry:
    """Thread-safe index of feature names and the categories they belong to."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._names: dict[str, FeatureCategory] = {}
        self._categories: dict[FeatureCategory, list[str]] = {}

    def register_feature(self, name: str, category: FeatureCategory) -> None:
        """Record ``name`` under ``category``."""
        with self._lock:
            self._names[name] = category
            self._categories.setdefault(category, []).append(name)

    def list_features(self) -> list[str]:
        """All registered feature names."""
        with self._lock:
            return list(self._names)

    def list_by_category(self, category: FeatureCategory) -> list[str]:
        """Names registered under ``category``, in registration order."""
        with self._lock:
            return list(self._categories.get(category, []))

    def feature_exists(self, name: str) -> bool:
        """Whether ``name`` has been registered."""
        with self._lock:
            return name in self._names

    def get_category(self, name: str) -> FeatureCategory | None:
        """The category of ``name``, or None if it is unknown."""
        with self._lock:
            return self._names.get(name)


def _registry(*entries: tuple[str, FeatureCategory]) -> FeatureRegistry:
    registry = FeatureRegistry()
    for name, category in entries:
        registry.register_feature(name, category)
    return registry


ORDERBOOK_FEATURES = _registry(
    ("spread", FeatureCategory.SPREAD),
    ("midprice", FeatureCategory.PRICE),
    ("w_midprice", FeatureCategory.PRICE),
    ("microprice", FeatureCategory.PRICE),
    ("vwap", FeatureCategory.VOLUME),
    ("imb", FeatureCategory.IMBALANCE),
    ("tav", FeatureCategory.VOLUME),
)

TRADE_FEATURES = _registry(
    ("trade_intensity", FeatureCategory.FLOW),
    ("trade_direction_imbalance", FeatureCategory.FLOW),
)

LIQUIDATION_FEATURES = _registry(
    ("liquidation_pressure", FeatureCategory.FLOW),
    ("liquidation_imbalance", FeatureCategory.IMBALANCE),
)

MARKET_FEATURES = _registry(
    ("funding_rate", FeatureCategory.FLOW),
    ("oi_change", FeatureCategory.VOLUME),
    ("price_impact", FeatureCategory.LIQUIDITY),
    ("trade_flow_toxicity", FeatureCategory.FLOW),
)