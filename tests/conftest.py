from decimal import Decimal

import pytest

from tokenlist.data.config import ChainConfig
from tokenlist.data.models import RawAsset, RawMarketPair


class FakeOracle:
    """Dict-backed existence oracle that records every lookup."""

    def __init__(self, active):
        self.active = set(active)
        self.calls = []

    def exists_and_active(self, symbol):
        self.calls.append(symbol)
        return symbol in self.active


def market(base, quote, lot="0.001", tick="0.00000001"):
    return RawMarketPair(base=base, quote=quote, lot_size=Decimal(lot), tick_size=Decimal(tick))


def asset(symbol, name=None, original=None):
    return RawAsset(symbol=symbol, original_symbol=original or symbol.split("-")[0], name=name or f"{symbol} token")


@pytest.fixture
def chain():
    return ChainConfig()


@pytest.fixture
def raw_tokens():
    return [
        asset("BNB", name="Binance Chain Native Token"),
        asset("BUSD-BD1"),
        asset("BTCB-1DE"),
        asset("ETH-1C9"),
        asset("TWT-8C2"),
        asset("DEAD-000"),
    ]


@pytest.fixture
def raw_markets():
    return [
        market("BUSD-BD1", "BNB"),
        market("BTCB-1DE", "BNB"),
        market("ETH-1C9", "BNB"),
        market("TWT-8C2", "BUSD-BD1"),
        market("ETH-1C9", "BUSD-BD1"),
        market("DEAD-000", "BNB"),
    ]


@pytest.fixture
def oracle():
    return FakeOracle({"BUSD-BD1", "BTCB-1DE", "ETH-1C9", "TWT-8C2"})
