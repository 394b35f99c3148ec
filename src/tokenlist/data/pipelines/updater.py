from loguru import logger

from ..config import Settings
from ..registry import DataRegistry
from ..storage import AssetStore
from .aggregator import generate_token_list
from .bootstrap import fetch_missing_assets
from .reconcile import MergeDecision, ReconcilePolicy, reconcile
from .sorter import count_total_pairs, sort_tokens


class TokenListUpdater:
    """One sequential run: fetch, bootstrap new assets, aggregate, sort, reconcile, write."""

    def __init__(self, settings: Settings, registry: DataRegistry | None = None,
                 store: AssetStore | None = None, bootstrap_assets: bool = True):
        self.settings = settings
        self.registry = registry or DataRegistry(settings)
        self.store = store or AssetStore(settings.assets_root, settings.chain)
        self.bootstrap_assets = bootstrap_assets
        self.policy = ReconcilePolicy(
            bootstrap_missing=settings.bootstrap_missing,
            list_logo_uri=settings.list_logo_uri,
            time_format=settings.time_format,
        )

    async def run(self) -> MergeDecision:
        s = self.settings
        explorer_page = await self.registry.explorer.fetch_assets(s.assets_page, s.assets_rows)
        market_pairs = await self.registry.dex.fetch_market_pairs(s.market_pairs_limit)
        raw_tokens = await self.registry.dex.fetch_tokens(s.tokens_limit)

        if self.bootstrap_assets:
            created = await fetch_missing_assets(explorer_page.asset_info_list, self.store)
            logger.info(f"bootstrap: {created} new assets")

        tokens = sort_tokens(generate_token_list(market_pairs, raw_tokens, self.store, s.chain))

        previous = self.store.read_token_list()
        decision = reconcile(tokens, previous, s.chain, self.policy)
        if decision.should_write:
            path = self.store.write_token_list(decision.document)
            logger.info(f"Tokenlist: list with {len(tokens)} tokens and "
                        f"{count_total_pairs(tokens)} pairs written to {path}.")
        else:
            logger.info(f"Tokenlist: no changes written ({decision.reason}).")
        return decision
