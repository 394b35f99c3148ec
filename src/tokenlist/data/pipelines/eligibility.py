from typing import Dict, Protocol

from loguru import logger

from ..models import RawMarketPair


class AssetExistenceOracle(Protocol):
    def exists_and_active(self, symbol: str) -> bool:
        ...


class PairFilter:
    """Admits a market pair only when both legs are known, active assets.

    Answers are memoised for the lifetime of the filter, one run.
    """

    def __init__(self, oracle: AssetExistenceOracle, native_symbol: str):
        self.oracle = oracle
        self.native_symbol = native_symbol
        self._seen: Dict[str, bool] = {}

    def is_eligible(self, symbol: str) -> bool:
        if symbol == self.native_symbol:
            return True
        if symbol not in self._seen:
            self._seen[symbol] = bool(self.oracle.exists_and_active(symbol))
        return self._seen[symbol]

    def is_pair_eligible(self, pair: RawMarketPair) -> bool:
        ok = self.is_eligible(pair.base) and self.is_eligible(pair.quote)
        if not ok:
            logger.debug(f"skipping market {pair.base}/{pair.quote}: inactive or unknown leg")
        return ok
