"""Market microstructure features, configuration types, linear models and helpers."""

__version__ = "0.0.10"