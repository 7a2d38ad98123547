"""Experiment, feature and model configuration read from TOML."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .errors import ConfigError

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class FeatureKind(Enum):
    """Kinds of feature sets a configuration can name."""

    OB = "OB"


class ModelKind(Enum):
    """Kinds of generating models a configuration can name."""

    UNIFORM = "Uniform"
    GBM = "GBM"
    HAWKES = "Hawkes"
    GD = "GD"


def _get_str(data: Mapping[str, Any], key: str, required: bool = False) -> str | None:
    value = data.get(key)
    if value is None:
        if required:
            raise ConfigError(f"missing field `{key}`")
        return None
    if not isinstance(value, str):
        raise ConfigError(f"invalid type for `{key}`: expected a string")
    return value


def _get_int(
    data: Mapping[str, Any], key: str, maximum: int, required: bool = False
) -> int | None:
    value = data.get(key)
    if value is None:
        if required:
            raise ConfigError(f"missing field `{key}`")
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"invalid type for `{key}`: expected an integer")
    if not 0 <= value <= maximum:
        raise ConfigError(f"invalid value for `{key}`: {value} is out of range")
    return value


def _get_str_list(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"invalid type for `{key}`: expected a list of strings")
    return list(value)


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"invalid type for `{key}`: expected a list of numbers")
    return float(value)


def _get_float_list(data: Mapping[str, Any], key: str) -> list[float] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ConfigError(f"invalid type for `{key}`: expected a list of numbers")
    return [_as_float(v, key) for v in value]


def _get_enum(data: Mapping[str, Any], key: str, kind: type[Enum]) -> Any:
    value = _get_str(data, key)
    if value is None:
        return None
    try:
        return kind(value)
    except ValueError:
        raise ConfigError(f"unknown variant `{value}` for `{key}`") from None


def _get_tables(
    data: Mapping[str, Any], key: str, required: bool = False
) -> list[Mapping[str, Any]] | None:
    value = data.get(key)
    if value is None:
        if required:
            raise ConfigError(f"missing field `{key}`")
        return None
    if not isinstance(value, list) or not all(isinstance(v, Mapping) for v in value):
        raise ConfigError(f"invalid type for `{key}`: expected a list of tables")
    return value


@dataclass
class ExpConfig:
    """One experiment entry."""

    id: str
    n_progressions: int
    n_agents: int | None = None

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> ExpConfig:
        return cls(
            id=_get_str(data, "id", required=True),
            n_progressions=_get_int(data, "n_progressions", _U32_MAX, required=True),
            n_agents=_get_int(data, "n_agents", _U32_MAX),
        )


@dataclass
class FeatureConfig:
    """One feature entry; every field may be absent in a file."""

    id: str | None = None
    label: FeatureKind | None = None
    description: str | None = None
    params_labels: list[str] | None = None
    params_values: list[float] | None = None

    @classmethod
    def build(
        cls,
        id=None,
        label=None,
        description=None,
        params_labels=None,
        params_values=None,
    ) -> FeatureConfig:
        """Create a fully populated feature config; every field is required."""
        required = (
            (id, "Missing Feature's id"),
            (label, "Missing Features's label"),
            (description, "Missing Feature's description"),
            (params_labels, "Missing Features's params_labels"),
            (params_values, "Missing Features's params_values"),
        )
        for value, message in required:
            if value is None:
                raise ValueError(message)
        return cls(
            id=id,
            label=FeatureKind(label),
            description=description,
            params_labels=list(params_labels),
            params_values=[float(v) for v in params_values],
        )

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> FeatureConfig:
        return cls(
            id=_get_str(data, "id"),
            label=_get_enum(data, "label", FeatureKind),
            description=_get_str(data, "description"),
            params_labels=_get_str_list(data, "params_labels"),
            params_values=_get_float_list(data, "params_values"),
        )


@dataclass
class ModelConfig:
    """One model entry; every field may be absent in a file."""

    id: str | None = None
    label: ModelKind | None = None
    description: str | None = None
    params_labels: list[str] | None = None
    params_values: list[float] | None = None
    seed: int | None = None

    @classmethod
    def build(
        cls,
        id=None,
        label=None,
        description=None,
        params_labels=None,
        params_values=None,
        seed=None,
    ) -> ModelConfig:
        """Create a fully populated model config; every field is required."""
        required = (
            (id, "Missing Model's id"),
            (label, "Missing Model's label"),
            (description, "Missing Model's description"),
            (params_labels, "Missing Model's params_labels"),
            (params_values, "Missing Model's params_values"),
            (seed, "Missing Model's seed"),
        )
        for value, message in required:
            if value is None:
                raise ValueError(message)
        return cls(
            id=id,
            label=ModelKind(label),
            description=description,
            params_labels=list(params_labels),
            params_values=[float(v) for v in params_values],
            seed=seed,
        )

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> ModelConfig:
        return cls(
            id=_get_str(data, "id"),
            label=_get_enum(data, "label", ModelKind),
            description=_get_str(data, "description"),
            params_labels=_get_str_list(data, "params_labels"),
            params_values=_get_float_list(data, "params_values"),
            seed=_get_int(data, "seed", _U64_MAX),
        )


@dataclass
class Config:
    """A whole configuration: experiments plus optional features and models."""

    experiments: list[ExpConfig] = field(default_factory=list)
    features: list[FeatureConfig] | None = None
    models: list[ModelConfig] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from parsed TOML-like data."""
        if not isinstance(data, Mapping):
            raise ConfigError("invalid type: expected a table")
        experiments = _get_tables(data, "experiments", required=True)
        features = _get_tables(data, "features")
        models = _get_tables(data, "models")
        return cls(
            experiments=[ExpConfig._from_mapping(e) for e in experiments],
            features=None
            if features is None
            else [FeatureConfig._from_mapping(f) for f in features],
            models=None if models is None else [ModelConfig._from_mapping(m) for m in models],
        )

    @classmethod
    def load_from_toml(cls, path: str | Path) -> Config:
        """Read and parse a TOML configuration file."""
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"IO error: {exc}") from exc
        try:
            data = tomllib.loads(contents)
            return cls.from_dict(data)
        except (tomllib.TOMLDecodeError, ConfigError) as exc:
            raise ConfigError(f"Toml error: {exc}") from exc