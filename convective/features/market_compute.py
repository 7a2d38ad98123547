"""All features computed together over a sequence of market snapshots."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import FeatureError
from .flow import (
    FundingRateFeature,
    LiquidationImbalanceFeature,
    LiquidationPressureFeature,
    OIChangeFeature,
    PriceImpactFeature,
    TradeDirectionImbalanceFeature,
    TradeFlowToxicityFeature,
    TradeIntensityFeature,
)
from .interface import Feature, MarketConfig, OrderbookConfig
from .market import MarketSnapshot
from .orderbook import (
    ImbalanceFeature,
    MicropriceFeature,
    MidpriceFeature,
    SpreadFeature,
    TAVFeature,
    VWAPFeature,
    WeightedMidpriceFeature,
)

ALL_FEATURE_NAMES: tuple[str, ...] = (
    "spread",
    "midprice",
    "w_midprice",
    "microprice",
    "vwap",
    "tav",
    "imb",
    "trade_intensity",
    "trade_direction_imbalance",
    "liquidation_pressure",
    "liquidation_imbalance",
    "funding_rate",
    "oi_change",
    "price_impact",
    "trade_flow_toxicity",
)

_ORDERBOOK_FEATURES: tuple[Feature, ...] = (
    SpreadFeature(),
    MidpriceFeature(),
    WeightedMidpriceFeature(),
    MicropriceFeature(),
    VWAPFeature(),
    TAVFeature(),
    ImbalanceFeature(),
)

_TRADE_INTENSITY = TradeIntensityFeature()
_TRADE_DIRECTION = TradeDirectionImbalanceFeature()
_LIQ_PRESSURE = LiquidationPressureFeature()
_LIQ_IMBALANCE = LiquidationImbalanceFeature()
_FUNDING = FundingRateFeature()
_OI_CHANGE = OIChangeFeature()
_PRICE_IMPACT = PriceImpactFeature()
_TOXICITY = TradeFlowToxicityFeature()


def _or_zero(feature: Feature, data: object, config: object) -> float:
    try:
        return feature.compute(data, config)
    except FeatureError:
        return 0.0


def compute_all_features(
    snapshots: Iterable[MarketSnapshot], config: MarketConfig
) -> list[list[float]]:
    """One row per snapshot, columns in :data:`ALL_FEATURE_NAMES` order.

    A feature whose data is missing or cannot be computed yields 0.0.
    Open-interest change is measured against the last snapshot that carried
    open interest.
    """
    ob_config = OrderbookConfig(depth=config.depth, bps=config.bps)
    prev_oi: float | None = None
    matrix: list[list[float]] = []

    for snap in snapshots:
        if snap.orderbook is not None:
            row = [_or_zero(f, snap.orderbook, ob_config) for f in _ORDERBOOK_FEATURES]
        else:
            row = [0.0] * len(_ORDERBOOK_FEATURES)

        row.append(_or_zero(_TRADE_INTENSITY, snap.trades, config))
        row.append(_or_zero(_TRADE_DIRECTION, snap.trades, config))
        row.append(_or_zero(_LIQ_PRESSURE, snap.liquidations, config))
        row.append(_or_zero(_LIQ_IMBALANCE, snap.liquidations, config))

        if snap.funding_rate is not None:
            row.append(_or_zero(_FUNDING, snap.funding_rate, config))
        else:
            row.append(0.0)

        if snap.open_interest is not None:
            curr = snap.open_interest.open_interest
            prev = curr if prev_oi is None else prev_oi
            row.append(_or_zero(_OI_CHANGE, (prev, curr), config))
            prev_oi = curr
        else:
            row.append(0.0)

        row.append(_or_zero(_PRICE_IMPACT, snap, config))
        row.append(_or_zero(_TOXICITY, snap, config))
        matrix.append(row)

    return matrix