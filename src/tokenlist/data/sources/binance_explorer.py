from typing import Dict, Any
from loguru import logger
from .base import DataSource
from ..http_client import get_json
from ..models import ExplorerAssetPage

class BinanceExplorer(DataSource):
    name = "binance_explorer"
    BASE = "https://explorer.binance.org"

    async def health(self) -> Dict[str, Any]:
        try:
            page = await self.fetch_assets(page=1, rows=1)
            return {"ok": True, "assets": page.total_num}
        except Exception as e:
            return {"ok": False, "error": str(e)}

    async def fetch_assets(self, page: int = 1, rows: int = 1000) -> ExplorerAssetPage:
        data = await get_json(self.url("api/v1/assets"), params={"page": page, "rows": rows})
        result = ExplorerAssetPage.model_validate(data)
        logger.info(f"{self.name}: fetched {len(result.asset_info_list)} of {result.total_num} assets")
        return result
