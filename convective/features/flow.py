"""Trade, liquidation, funding, open-interest and composite market features."""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import EmptyOrderbookError, FeatureComputationError
from ..utils import truncate_to_decimal
from .interface import Feature, FeatureCategory, MarketConfig
from .market import FundingRate, Liquidation, MarketSnapshot, Trade

_PLACES = 8


def _side_volumes(records: Sequence[Trade | Liquidation]) -> tuple[float, float]:
    """Summed amounts on the "Buy" and "Sell" sides; other sides are ignored."""
    buy = sum(r.amount for r in records if r.side == "Buy")
    sell = sum(r.amount for r in records if r.side == "Sell")
    return buy, sell


def _signed_imbalance(records: Sequence[Trade | Liquidation]) -> float:
    if not records:
        return 0.0
    buy, sell = _side_volumes(records)
    total = buy + sell
    if total == 0.0:
        return 0.0
    return truncate_to_decimal((buy - sell) / total, _PLACES)


class TradeIntensityFeature(Feature):
    """Total traded amount in the period."""

    name = "trade_intensity"
    description = "Total trade volume (sum of amounts) in the period"
    category = FeatureCategory.FLOW
    config_type = MarketConfig

    def compute(self, trades: Sequence[Trade], config: MarketConfig) -> float:
        if not trades:
            return 0.0
        return truncate_to_decimal(sum(t.amount for t in trades), _PLACES)


class TradeDirectionImbalanceFeature(Feature):
    """Net aggressor direction, (buy - sell) / total, in [-1, 1]."""

    name = "trade_direction_imbalance"
    description = "Signed net aggressor imbalance: (buy_vol - sell_vol) / total_vol"
    category = FeatureCategory.FLOW
    config_type = MarketConfig

    def compute(self, trades: Sequence[Trade], config: MarketConfig) -> float:
        return _signed_imbalance(trades)


class LiquidationPressureFeature(Feature):
    """Total liquidated notional (price times amount) in the period."""

    name = "liquidation_pressure"
    description = "Total liquidation notional (price * amount) in the period"
    category = FeatureCategory.FLOW
    config_type = MarketConfig

    def compute(
        self, liquidations: Sequence[Liquidation], config: MarketConfig
    ) -> float:
        if not liquidations:
            return 0.0
        notional = sum(l.price * l.amount for l in liquidations)
        return truncate_to_decimal(notional, _PLACES)


class LiquidationImbalanceFeature(Feature):
    """Directional skew of liquidations, (buy - sell) / total."""

    name = "liquidation_imbalance"
    description = "Liquidation direction imbalance: (buy - sell) / total"
    category = FeatureCategory.IMBALANCE
    config_type = MarketConfig

    def compute(
        self, liquidations: Sequence[Liquidation], config: MarketConfig
    ) -> float:
        return _signed_imbalance(liquidations)


class FundingRateFeature(Feature):
    """Signed funding rate scaled to basis points."""

    name = "funding_rate"
    description = "Signed funding rate in basis points (×10000)"
    category = FeatureCategory.FLOW
    config_type = MarketConfig

    def compute(self, funding_rate: FundingRate, config: MarketConfig) -> float:
        return funding_rate.funding_rate * 10_000.0


class OIChangeFeature(Feature):
    """Percentage change in open interest from a ``(previous, current)`` pair."""

    name = "oi_change"
    description = "Percentage change in open interest: (curr - prev) / prev * 100"
    category = FeatureCategory.VOLUME
    config_type = MarketConfig

    def compute(self, oi_pair: Sequence[float], config: MarketConfig) -> float:
        prev, curr = oi_pair
        if prev == 0.0:
            if curr == 0.0:
                return 0.0
            raise FeatureComputationError(
                "previous OI is zero, cannot compute percentage change"
            )
        return (curr - prev) / prev * 100.0


class PriceImpactFeature(Feature):
    """Mean deviation of trade prices from the best-level midprice."""

    name = "price_impact"
    description = "Mean trade price deviation from midprice"
    category = FeatureCategory.LIQUIDITY
    config_type = MarketConfig

    def compute(self, snapshot: MarketSnapshot, config: MarketConfig) -> float:
        ob = snapshot.orderbook
        if ob is None or not ob.bids or not ob.asks:
            raise EmptyOrderbookError()
        trades = snapshot.trades
        if not trades:
            return 0.0
        mid = (ob.bids[0].price + ob.asks[0].price) / 2.0
        total_impact = sum(t.price - mid for t in trades)
        return truncate_to_decimal(total_impact / len(trades), _PLACES)


class TradeFlowToxicityFeature(Feature):
    """Unsigned flow imbalance, |buy - sell| / total, in [0, 1]."""

    name = "trade_flow_toxicity"
    description = "VPIN-inspired toxicity: |buy_vol - sell_vol| / total_vol"
    category = FeatureCategory.FLOW
    config_type = MarketConfig

    def compute(self, snapshot: MarketSnapshot, config: MarketConfig) -> float:
        trades = snapshot.trades
        if not trades:
            return 0.0
        buy, sell = _side_volumes(trades)
        total = buy + sell
        if total == 0.0:
            return 0.0
        return truncate_to_decimal(abs(buy - sell) / total, _PLACES)