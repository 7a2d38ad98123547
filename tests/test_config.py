import pytest

from convective.config import (
    Config,
    ExpConfig,
    FeatureConfig,
    FeatureKind,
    ModelConfig,
    ModelKind,
)
from convective.errors import ConfigError

SAMPLE = """
[[experiments]]
id = "exp_00"
n_progressions = 100
n_agents = 3

[[features]]
id = "feat_00"
label = "OB"
description = "orderbook"
params_labels = ["depth"]
params_values = [5]

[[models]]
id = "model_00"
label = "GBM"
description = "gbm"
params_labels = ["mu", "sigma"]
params_values = [0.1, 0.2]
seed = 42
"""


def test_load_full_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE, encoding="utf-8")
    config = Config.load_from_toml(path)
    assert config.experiments == [ExpConfig(id="exp_00", n_progressions=100, n_agents=3)]
    feature = config.features[0]
    assert feature.label is FeatureKind.OB
    assert feature.params_labels == ["depth"]
    assert feature.params_values == [5.0]
    model = config.models[0]
    assert model.label is ModelKind.GBM
    assert model.params_values == [0.1, 0.2]
    assert model.seed == 42


def test_optional_sections_absent(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[[experiments]]\nid = "e"\nn_progressions = 1\n', encoding="utf-8")
    config = Config.load_from_toml(str(path))
    assert config.features is None
    assert config.models is None
    assert config.experiments[0].n_agents is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="IO error"):
        Config.load_from_toml(tmp_path / "absent.toml")


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("experiments = [", encoding="utf-8")
    with pytest.raises(ConfigError, match="Toml error"):
        Config.load_from_toml(path)


def test_missing_experiments_raises():
    with pytest.raises(ConfigError, match="experiments"):
        Config.from_dict({"models": []})


def test_unknown_label_raises():
    data = {
        "experiments": [{"id": "e", "n_progressions": 1}],
        "models": [{"label": "Nope"}],
    }
    with pytest.raises(ConfigError, match="Nope"):
        Config.from_dict(data)


def test_negative_progressions_rejected():
    with pytest.raises(ConfigError):
        Config.from_dict({"experiments": [{"id": "e", "n_progressions": -1}]})


def test_from_dict_partial_model():
    config = Config.from_dict(
        {"experiments": [{"id": "e", "n_progressions": 2}], "models": [{"id": "m"}]}
    )
    assert config.models == [ModelConfig(id="m")]


def test_model_builder_complete():
    model = ModelConfig.build(
        id="m0",
        label=ModelKind.HAWKES,
        description="hawkes",
        params_labels=["a"],
        params_values=[1],
        seed=7,
    )
    assert model.label is ModelKind.HAWKES
    assert model.params_values == [1.0]
    assert model.seed == 7


def test_model_builder_missing_seed():
    with pytest.raises(ValueError, match="Missing Model's seed"):
        ModelConfig.build(
            id="m0",
            label="GD",
            description="d",
            params_labels=[],
            params_values=[],
        )


def test_feature_builder_missing_id():
    with pytest.raises(ValueError, match="Missing Feature's id"):
        FeatureConfig.build(label="OB")


def test_feature_builder_accepts_label_string():
    feature = FeatureConfig.build(
        id="f", label="OB", description="d", params_labels=["x"], params_values=[0.5]
    )
    assert feature.label is FeatureKind.OB
    assert feature.params_values == [0.5]