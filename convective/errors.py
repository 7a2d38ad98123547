"""Exceptions raised by configuration loading, persistence and feature computation."""


class ConfigError(Exception):
    """A configuration file could not be read or parsed."""


class PersistError(Exception):
    """Saving or loading persisted data failed."""


class _DefaultMessageError(Exception):
    """Exception that falls back to a fixed message when raised without one."""

    default_message = ""

    def __str__(self) -> str:
        if self.args:
            return str(self.args[0])
        return self.default_message


class DatasetError(_DefaultMessageError):
    """A dataset generator failed."""

    default_message = "The Datset Generator function failed"


class FeatureError(_DefaultMessageError):
    """Base class for errors raised while computing features."""

    default_message = "Feature error"


class EmptyOrderbookError(FeatureError):
    """The orderbook has no bids or no asks."""

    default_message = "Empty orderbook"


class NoTradesError(FeatureError):
    """No trades happened in the period."""

    default_message = "No trades in period"


class NoLiquidationsError(FeatureError):
    """No liquidations happened in the period."""

    default_message = "No liquidations in period"


class ZeroVolumeError(FeatureError):
    """The volume a feature divides by is zero."""

    default_message = "Zero volume"


class InsufficientDepthError(FeatureError):
    """The orderbook holds fewer levels than were requested."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient depth: requested {requested}, available {available}"
        )


class InvalidConfigError(FeatureError):
    """A feature configuration is not valid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid configuration: {message}")


class FeatureComputationError(FeatureError):
    """A feature could not be computed from its input."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Computation error: {message}")


class FeatureNotFoundError(FeatureError):
    """No feature is known under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Feature not found: {name}")