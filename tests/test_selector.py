import pytest

from convective.errors import FeatureNotFoundError, InsufficientDepthError
from convective.features.interface import OrderbookConfig
from convective.features.market import Level, Orderbook
from convective.features.orderbook import (
    ImbalanceFeature,
    MidpriceFeature,
    SpreadFeature,
    VWAPFeature,
)
from convective.features.selector import FeatureSelector

ALL_NAMES = ["spread", "midprice", "w_midprice", "microprice", "vwap", "tav", "imb"]


@pytest.fixture
def book():
    return Orderbook(
        bids=[Level(100.0, 2.0), Level(99.0, 1.0), Level(98.0, 4.0)],
        asks=[Level(101.0, 1.0), Level(102.0, 3.0), Level(103.0, 2.0)],
    )


def test_names_and_length_follow_selection():
    selector = FeatureSelector(["imb", "spread", "vwap"])
    assert selector.feature_names() == ["imb", "spread", "vwap"]
    assert len(selector) == 3


def test_all_known_names_accepted():
    selector = FeatureSelector(ALL_NAMES)
    assert selector.feature_names() == ALL_NAMES


def test_unknown_name_raises():
    with pytest.raises(FeatureNotFoundError) as info:
        FeatureSelector(["spread", "bogus"])
    assert info.value.name == "bogus"
    assert str(info.value) == "Feature not found: bogus"


def test_empty_selector(book):
    selector = FeatureSelector([])
    assert len(selector) == 0
    assert selector.compute_values(book, OrderbookConfig()) == []


def test_compute_values_match_individual_features(book):
    config = OrderbookConfig(depth=2, bps=0.01)
    selector = FeatureSelector(["spread", "midprice", "imb", "vwap"])
    assert selector.compute_values(book, config) == [
        SpreadFeature().compute(book, config),
        MidpriceFeature().compute(book, config),
        ImbalanceFeature().compute(book, config),
        VWAPFeature().compute(book, config),
    ]


def test_from_features_uses_feature_names(book):
    selector = FeatureSelector.from_features([MidpriceFeature(), SpreadFeature()])
    assert selector.feature_names() == ["midprice", "spread"]
    assert len(selector) == 2
    assert selector.compute_values(book, OrderbookConfig()) == FeatureSelector(
        ["midprice", "spread"]
    ).compute_values(book, OrderbookConfig())


def test_defaults_use_default_config(book):
    selector = FeatureSelector(["spread", "tav"])
    assert selector.compute_values_with_defaults(book) == selector.compute_values(
        book, OrderbookConfig()
    )


def test_defaults_depth_too_large_for_book(book):
    # the default depth of 5 exceeds the three levels in the book
    with pytest.raises(InsufficientDepthError):
        FeatureSelector(["vwap"]).compute_values_with_defaults(book)


def test_feature_names_returns_copy():
    selector = FeatureSelector(["spread"])
    selector.feature_names().append("imb")
    assert selector.feature_names() == ["spread"]