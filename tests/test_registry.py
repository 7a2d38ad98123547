import threading

from convective.features.interface import FeatureCategory
from convective.features.registry import (
    LIQUIDATION_FEATURES,
    MARKET_FEATURES,
    ORDERBOOK_FEATURES,
    TRADE_FEATURES,
    FeatureRegistry,
)


def test_orderbook_registry_contents():
    assert set(ORDERBOOK_FEATURES.list_features()) == {
        "spread",
        "midprice",
        "w_midprice",
        "microprice",
        "vwap",
        "imb",
        "tav",
    }


def test_orderbook_price_category_in_registration_order():
    assert ORDERBOOK_FEATURES.list_by_category(FeatureCategory.PRICE) == [
        "midprice",
        "w_midprice",
        "microprice",
    ]
    assert ORDERBOOK_FEATURES.list_by_category(FeatureCategory.VOLUME) == [
        "vwap",
        "tav",
    ]


def test_other_registries():
    assert TRADE_FEATURES.list_by_category(FeatureCategory.FLOW) == [
        "trade_intensity",
        "trade_direction_imbalance",
    ]
    assert LIQUIDATION_FEATURES.get_category("liquidation_imbalance") is (
        FeatureCategory.IMBALANCE
    )
    assert MARKET_FEATURES.get_category("price_impact") is FeatureCategory.LIQUIDITY
    assert MARKET_FEATURES.get_category("oi_change") is FeatureCategory.VOLUME


def test_unknown_lookups():
    registry = FeatureRegistry()
    assert registry.list_features() == []
    assert registry.feature_exists("spread") is False
    assert registry.get_category("spread") is None
    assert registry.list_by_category(FeatureCategory.TIMING) == []


def test_register_and_query():
    registry = FeatureRegistry()
    registry.register_feature("alpha", FeatureCategory.TIMING)
    assert registry.feature_exists("alpha") is True
    assert registry.get_category("alpha") is FeatureCategory.TIMING
    assert registry.list_by_category(FeatureCategory.TIMING) == ["alpha"]


def test_reregistration_updates_category_and_appends():
    registry = FeatureRegistry()
    registry.register_feature("alpha", FeatureCategory.TIMING)
    registry.register_feature("alpha", FeatureCategory.FLOW)
    assert registry.get_category("alpha") is FeatureCategory.FLOW
    assert registry.list_features() == ["alpha"]
    assert registry.list_by_category(FeatureCategory.TIMING) == ["alpha"]
    assert registry.list_by_category(FeatureCategory.FLOW) == ["alpha"]


def test_returned_lists_are_copies():
    registry = FeatureRegistry()
    registry.register_feature("alpha", FeatureCategory.TIMING)
    registry.list_by_category(FeatureCategory.TIMING).append("beta")
    registry.list_features().append("beta")
    assert registry.list_by_category(FeatureCategory.TIMING) == ["alpha"]
    assert registry.feature_exists("beta") is False


def test_concurrent_registration():
    registry = FeatureRegistry()

    def worker(offset):
        for i in range(100):
            registry.register_feature(f"f{offset}_{i}", FeatureCategory.FLOW)

    threads = [threading.Thread(target=worker, args=(k,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(registry.list_features()) == 400
    assert len(registry.list_by_category(FeatureCategory.FLOW)) == 400