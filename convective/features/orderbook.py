"""Features computed from a single limit orderbook."""

from __future__ import annotations

from ..errors import EmptyOrderbookError, InsufficientDepthError, ZeroVolumeError
from ..utils import truncate_to_decimal
from .interface import Feature, FeatureCategory, OrderbookConfig
from .market import Level, Orderbook

_PLACES = 8


def _best_levels(orderbook: Orderbook) -> tuple[Level, Level]:
    """Best bid and best ask, or raise if either side is empty."""
    if not orderbook.bids or not orderbook.asks:
        raise EmptyOrderbookError()
    return orderbook.bids[0], orderbook.asks[0]


class SpreadFeature(Feature):
    """Bid-ask spread at the best levels."""

    name = "spread"
    description = "Bid-ask spread (ask_price - bid_price)"
    category = FeatureCategory.SPREAD
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _best_levels(orderbook)
        return truncate_to_decimal(ask.price - bid.price, _PLACES)


class MidpriceFeature(Feature):
    """Mean of the best bid and best ask prices."""

    name = "midprice"
    description = "Mid price: (best_bid + best_ask) / 2"
    category = FeatureCategory.PRICE
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _best_levels(orderbook)
        return truncate_to_decimal((ask.price + bid.price) / 2.0, _PLACES)


class WeightedMidpriceFeature(Feature):
    """Best-level prices weighted by their own side's volume."""

    name = "w_midprice"
    description = "Volume-weighted mid price at best levels"
    category = FeatureCategory.PRICE
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _best_levels(orderbook)
        total_volume = ask.volume + bid.volume
        if total_volume == 0.0:
            raise ZeroVolumeError()
        value = (bid.price * bid.volume + ask.price * ask.volume) / total_volume
        return truncate_to_decimal(value, _PLACES)


class MicropriceFeature(Feature):
    """Best-level prices weighted by the opposite side's size.

    The estimate leans toward the side with less resting liquidity, the
    side more likely to be consumed next.
    """

    name = "microprice"
    description = "Microprice: size-imbalance-weighted fair value"
    category = FeatureCategory.PRICE
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _best_levels(orderbook)
        total_size = bid.volume + ask.volume
        if total_size == 0.0:
            raise ZeroVolumeError()
        value = bid.price * (ask.volume / total_size) + ask.price * (
            bid.volume / total_size
        )
        return truncate_to_decimal(value, _PLACES)


class VWAPFeature(Feature):
    """Volume-weighted average price over the top ``depth`` levels of both sides."""

    name = "vwap"
    description = "Volume-Weighted Average Price up to specified depth"
    category = FeatureCategory.VOLUME
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        _best_levels(orderbook)
        depth = config.depth
        n_bids, n_asks = len(orderbook.bids), len(orderbook.asks)
        if depth > n_bids or depth > n_asks:
            raise InsufficientDepthError(depth, min(n_bids, n_asks))

        levels = [*orderbook.bids[:depth], *orderbook.asks[:depth]]
        sum_pv = sum(level.price * level.volume for level in levels)
        sum_v = sum(level.volume for level in levels)
        if sum_v > 0.0:
            return truncate_to_decimal(sum_pv / sum_v, _PLACES)
        raise ZeroVolumeError()


class TAVFeature(Feature):
    """Total volume resting within a basis-point band of the best prices."""

    name = "tav"
    description = "Total Available Volume within X bps of midprice"
    category = FeatureCategory.VOLUME
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _best_levels(orderbook)
        upper_ask = ask.price * (1.0 + config.bps)
        lower_bid = bid.price * (1.0 - config.bps)

        bid_volume = sum(
            level.volume for level in orderbook.bids if level.price >= lower_bid
        )
        ask_volume = sum(
            level.volume for level in orderbook.asks if level.price <= upper_ask
        )
        return truncate_to_decimal(bid_volume + ask_volume, _PLACES)


class ImbalanceFeature(Feature):
    """Share of best-level volume that sits on the ask side."""

    name = "imb"
    description = "Order imbalance: ask_volume / (ask_volume + bid_volume)"
    category = FeatureCategory.IMBALANCE
    config_type = OrderbookConfig

    def compute(self, orderbook: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _best_levels(orderbook)
        total_volume = ask.volume + bid.volume
        if total_volume == 0.0:
            raise ZeroVolumeError()
        return truncate_to_decimal(ask.volume / total_volume, _PLACES)