"""Feature matrices computed over sequences of orderbooks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from .interface import OrderbookConfig
from .market import Orderbook
from .selector import FeatureSelector


class FeaturesOutput(Enum):
    """Requested shape of computed features."""

    VALUES = "Values"
    HASHMAP = "HashMap"


def compute_features(
    orderbooks: Iterable[Orderbook],
    feature_names: Sequence[str],
    depth: int,
    bps: float,
    output_format: FeaturesOutput = FeaturesOutput.VALUES,
) -> list[list[float]]:
    """One row of feature values per orderbook, columns in ``feature_names`` order."""
    return compute_features_with_config(
        orderbooks, feature_names, OrderbookConfig(depth=depth, bps=bps)
    )


def compute_features_with_config(
    orderbooks: Iterable[Orderbook],
    feature_names: Sequence[str],
    config: OrderbookConfig,
) -> list[list[float]]:
    """Like :func:`compute_features`, with an explicit configuration."""
    selector = FeatureSelector(feature_names)
    return [selector.compute_values(ob, config) for ob in orderbooks]


def compute_single_orderbook(
    orderbook: Orderbook,
    feature_names: Sequence[str],
    config: OrderbookConfig,
) -> list[float]:
    """Feature values for one orderbook."""
    return FeatureSelector(feature_names).compute_values(orderbook, config)