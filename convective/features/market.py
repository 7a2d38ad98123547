"""Market data records that features compute over."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Level:
    """One price level of an orderbook side."""

    price: float
    volume: float


@dataclass
class Orderbook:
    """Bid and ask levels, best level first on each side."""

    bids: list[Level] = field(default_factory=list)
    asks: list[Level] = field(default_factory=list)


@dataclass(frozen=True)
class Trade:
    """An executed trade; ``side`` is the aggressor, "Buy" or "Sell"."""

    price: float
    amount: float
    side: str


@dataclass(frozen=True)
class Liquidation:
    """A forced position closure; ``side`` is "Buy" or "Sell"."""

    price: float
    amount: float
    side: str


@dataclass(frozen=True)
class FundingRate:
    """A perpetual funding rate as a fraction."""

    funding_rate: float


@dataclass(frozen=True)
class OpenInterest:
    """Total open interest at a moment."""

    open_interest: float


@dataclass
class MarketSnapshot:
    """All market data gathered for one synchronisation period."""

    orderbook: Orderbook | None = None
    trades: list[Trade] = field(default_factory=list)
    liquidations: list[Liquidation] = field(default_factory=list)
    funding_rate: FundingRate | None = None
    open_interest: OpenInterest | None = None