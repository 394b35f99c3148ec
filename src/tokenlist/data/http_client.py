import aiohttp
from loguru import logger
from typing import Optional, Dict, Any
from contextlib import asynccontextmanager

DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=15)
DEFAULT_HEADERS = {"User-Agent": "bep2-tokenlist/1.0", "Accept": "application/json"}

@asynccontextmanager
async def http_session():
    async with aiohttp.ClientSession(timeout=DEFAULT_TIMEOUT, headers=DEFAULT_HEADERS) as s:
        yield s

async def get_json(url: str, params: Optional[Dict[str, Any]]=None, headers: Optional[Dict[str,str]]=None):
    async with http_session() as s:
        async with s.get(url, params=params, headers=headers) as r:
            r.raise_for_status()
            logger.debug(f"GET {r.url} -> {r.status}")
            # some Binance endpoints answer JSON as text/plain
            return await r.json(content_type=None)

async def get_bytes(url: str) -> bytes:
    """Raw body of ``url``; used for logo downloads."""
    async with http_session() as s:
        async with s.get(url, headers={"Accept": "*/*"}) as r:
            r.raise_for_status()
            return await r.read()
