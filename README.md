# convective

A library for market-microstructure research. It covers three areas:

- **Features.** Scalar features computed from limit order books, trades, liquidations, funding rates and open interest.
- **Configuration.** Experiment, feature and model configuration that can be loaded from TOML.
- **Models.** A small linear (logistic-regression) model with binary cross-entropy loss, gradient descent and basic metrics, built on NumPy.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Market data records

`convective.features.market` defines the records that features compute over:
`Level`, `Orderbook` (bids and asks, best level first), `Trade`, `Liquidation`,
`FundingRate`, `OpenInterest` and `MarketSnapshot`, which holds all of them for
one period.

## Order book features

```python
from convective.features.market import Level, Orderbook
from convective.features.interface import OrderbookConfig
from convective.features.compute import compute_features_with_config

ob = Orderbook(
    bids=[Level(price=99.0, volume=2.0), Level(price=98.0, volume=1.0)],
    asks=[Level(price=101.0, volume=1.0), Level(price=102.0, volume=3.0)],
)
rows = compute_features_with_config(
    [ob], ["spread", "midprice", "imb"], OrderbookConfig(depth=2, bps=0.001)
)
```

`compute_features(orderbooks, feature_names, depth, bps)` does the same with the
depth and band given directly, and `compute_single_orderbook` returns the values
for one book. `FeatureSelector` in `convective.features.selector` holds a chosen
set of features and computes them together.

The order book features, in `convective.features.orderbook`, are:

| Name | Class | Feature |
| --- | --- | --- |
| `spread` | `SpreadFeature` | Best ask minus best bid |
| `midprice` | `MidpriceFeature` | Mean of best bid and best ask |
| `w_midprice` | `WeightedMidpriceFeature` | Best prices weighted by their own volume |
| `microprice` | `MicropriceFeature` | Best prices weighted by the opposite side's volume |
| `vwap` | `VWAPFeature` | Volume-weighted average price over the top `depth` levels |
| `tav` | `TAVFeature` | Total volume within a `bps` band of the best prices |
| `imb` | `ImbalanceFeature` | Ask share of best-level volume |

Results are truncated to 8 decimal places. A name that is not known raises
`FeatureNotFoundError`; an empty side raises `EmptyOrderbookError`, zero volume
`ZeroVolumeError`, and a book shallower than `depth` `InsufficientDepthError`.
All of these derive from `FeatureError` in `convective.errors`.

## Flow and composite features

`convective.features.flow` holds `TradeIntensityFeature`,
`TradeDirectionImbalanceFeature`, `LiquidationPressureFeature`,
`LiquidationImbalanceFeature`, `FundingRateFeature` (rate in basis points),
`OIChangeFeature` (percentage change from a `(previous, current)` pair),
`PriceImpactFeature` and `TradeFlowToxicityFeature`.

## All features from market snapshots

`compute_all_features(snapshots, config)` in `convective.features.market_compute`
takes a sequence of `MarketSnapshot` objects and a `MarketConfig`, and returns one
row of 15 values per snapshot. The order of the columns is given by
`ALL_FEATURE_NAMES`. If a data source is missing from a snapshot, or a feature
fails for it, the value is `0.0`. Open-interest change is measured against the
last snapshot that carried open interest.

The registries `ORDERBOOK_FEATURES`, `TRADE_FEATURES`, `LIQUIDATION_FEATURES` and
`MARKET_FEATURES` in `convective.features.registry` map each feature name to its
`FeatureCategory`.

## Configuration

```python
from convective.config import Config

config = Config.load_from_toml("experiment.toml")
print(config.experiments[0].id)
```

A file holds an `experiments` array of tables (`id`, `n_progressions`, optional
`n_agents`) and optional `features` and `models` arrays. Read and parse failures
raise `ConfigError`. `Config.from_dict` builds the same from already parsed data,
and `FeatureConfig.build` / `ModelConfig.build` create entries with every field
required.

## Training a linear model

```python
import numpy as np
from convective.ml.models import LinearModel
from convective.ml.loss import CrossEntropy
from convective.ml.optimizers import GradientDescent

rng = np.random.default_rng(0)
X = rng.uniform(-2, 2, (200, 4))
y = (X.sum(axis=1) > 0).astype(float).reshape(-1, 1)

model = LinearModel.glorot_uniform_init(4, id="model_00", rng=rng)
loss = CrossEntropy(id="bce_00")
opt = GradientDescent(id="sgd_00", learning_rate=0.05)

for _ in range(500):
    logits = model.forward(X)
    out = loss.loss_and_gradients(X, logits, y, model.weights, model.bias)
    opt.step(model.weights, model.bias, out.weight_grad, out.bias_grad)

model.save_model("model.json")
```

`save_model` writes a JSON list of tensors, each with `name`, `rows`, `cols` and
column-major `data`; `load_model` reads it back. Shape problems raise
`ShapeError`, other backend failures `BackendError`. `NumpyBackend` builds
matrices and column vectors from plain Python sequences.

`convective.ml.metrics` provides `Accuracy` and `Rmse`, which return a
`MetricValue` and keep a history of recorded values, and `Metrics`, a plain list
of values with a decision threshold.

## What this package does not do

It does not fetch market data from exchanges or read data files into snapshots;
the records must be built by the caller. It has no ready-made training loop or
distributed trainer and no command-line program: training is written by hand as
in the example above.

## Running the tests

```
pytest
```