"""Common interface and configuration types for features."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class FeatureCategory(Enum):
    """Groups that features are organised by."""

    SPREAD = "Spread"
    PRICE = "Price"
    VOLUME = "Volume"
    LIQUIDITY = "Liquidity"
    IMBALANCE = "Imbalance"
    VOLATILITY = "Volatility"
    FLOW = "Flow"
    TIMING = "Timing"


@dataclass
class OrderbookConfig:
    """Settings for orderbook features: level depth and basis-point band."""

    depth: int = 5
    bps: float = 0.001


@dataclass
class MarketConfig:
    """Settings for market-snapshot features."""

    depth: int = 5
    bps: float = 0.001


class Feature(ABC):
    """A named computation from market data to a value."""

    name: ClassVar[str]
    description: ClassVar[str]
    category: ClassVar[FeatureCategory]
    config_type: ClassVar[type] = OrderbookConfig

    @abstractmethod
    def compute(self, data: Any, config: Any) -> Any:
        """Compute the feature value from ``data`` under ``config``."""

    def default_config(self) -> Any:
        """A fresh default configuration for this feature."""
        return self.config_type()

    def dependencies(self) -> list[str]:
        """Names of features this one depends on."""
        return []