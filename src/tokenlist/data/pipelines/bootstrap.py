from typing import Awaitable, Callable, Iterable, Optional

from loguru import logger

from ..config import ChainConfig
from ..http_client import get_bytes
from ..models import AssetInfo, ExplorerAsset
from ..storage import ACTIVE_STATUS, AssetStore

Downloader = Callable[[str], Awaitable[bytes]]


def needs_bootstrap(asset: ExplorerAsset, store: AssetStore) -> bool:
    if not asset.asset_img or asset.decimals == 0:
        return False
    return not store.has_logo(asset.asset)


def build_asset_info(asset: ExplorerAsset, chain: ChainConfig) -> AssetInfo:
    return AssetInfo(
        name=asset.name,
        symbol=asset.mapped_asset,
        type=chain.token_type,
        decimals=asset.decimals,
        description="-",
        website="",
        explorer=chain.explorer_url(asset.asset),
        status=ACTIVE_STATUS,
        id=asset.asset,
    )


async def fetch_missing_assets(
    assets: Iterable[ExplorerAsset],
    store: AssetStore,
    download: Optional[Downloader] = None,
) -> int:
    """Create logo and info.json for explorer assets not yet in the repository.

    Assets without an image or with zero decimals are ignored, as are assets
    whose logo already exists. Returns the number of assets created.
    """
    download = download or get_bytes
    created = 0
    for asset in assets:
        if not needs_bootstrap(asset, store):
            continue
        logo = await download(asset.asset_img)
        store.write_logo(asset.asset, logo)
        store.write_asset_info(asset.asset, build_asset_info(asset, store.chain))
        logger.info(f"added new asset {asset.asset} ({asset.name})")
        created += 1
    return created
