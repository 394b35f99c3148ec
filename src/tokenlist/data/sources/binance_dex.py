from typing import Dict, Any, List
from pydantic import TypeAdapter
from loguru import logger
from .base import DataSource
from ..http_client import get_json
from ..models import RawAsset, RawMarketPair

_PAIRS = TypeAdapter(List[RawMarketPair])
_TOKENS = TypeAdapter(List[RawAsset])

class BinanceDex(DataSource):
    name = "binance_dex"
    BASE = "https://dex.binance.org"

    async def health(self) -> Dict[str, Any]:
        try:
            await get_json(self.url("api/v1/time"))
            return {"ok": True}
        except Exception as e:
            return {"ok": False, "error": str(e)}

    async def fetch_market_pairs(self, limit: int = 1000) -> List[RawMarketPair]:
        data = await get_json(self.url("api/v1/markets"), params={"limit": limit})
        pairs = _PAIRS.validate_python(data)
        logger.info(f"{self.name}: fetched {len(pairs)} market pairs")
        return pairs

    async def fetch_tokens(self, limit: int = 10000) -> List[RawAsset]:
        data = await get_json(self.url("api/v1/tokens"), params={"limit": limit})
        tokens = _TOKENS.validate_python(data)
        logger.info(f"{self.name}: fetched {len(tokens)} tokens")
        return tokens
