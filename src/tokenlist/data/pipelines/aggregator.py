from typing import Dict, Iterable, List, Sequence

from loguru import logger

from ..config import ChainConfig
from ..errors import PlausibilityError
from ..models import Pair, RawAsset, RawMarketPair, Token
from ..numbers import to_satoshi
from .eligibility import AssetExistenceOracle, PairFilter

MIN_UPSTREAM_ENTRIES = 5
COIN_TYPE = "coin"


def resolve_asset_id(symbol: str, native_symbol: str, coin_type: int) -> str:
    """`c714` for the native asset, `c714_tFOO-123` for tokens."""
    if symbol == native_symbol:
        return f"c{coin_type}"
    return f"c{coin_type}_t{symbol}"


def token_type(symbol: str, chain: ChainConfig) -> str:
    return COIN_TYPE if symbol == chain.symbol else chain.token_type


def logo_uri(symbol: str, chain: ChainConfig) -> str:
    if symbol == chain.symbol:
        return chain.chain_logo_url()
    return chain.asset_logo_url(symbol)


def token_name(asset: RawAsset, chain: ChainConfig) -> str:
    return chain.legacy_names.get((asset.symbol, asset.name), asset.name)


def build_pair(market: RawMarketPair, chain: ChainConfig) -> Pair:
    return Pair(
        base=resolve_asset_id(market.base, chain.symbol, chain.coin_id),
        lot_size=str(to_satoshi(market.lot_size)),
        tick_size=str(to_satoshi(market.tick_size)),
    )


def check_plausible(market_pairs: Sequence[RawMarketPair], tokens: Sequence[RawAsset]) -> None:
    if len(market_pairs) < MIN_UPSTREAM_ENTRIES:
        raise PlausibilityError("markets", len(market_pairs), MIN_UPSTREAM_ENTRIES)
    if len(tokens) < MIN_UPSTREAM_ENTRIES:
        raise PlausibilityError("tokens", len(tokens), MIN_UPSTREAM_ENTRIES)


def generate_token_list(
    market_pairs: Sequence[RawMarketPair],
    tokens: Iterable[RawAsset],
    oracle: AssetExistenceOracle,
    chain: ChainConfig,
) -> List[Token]:
    """Fold eligible markets into one token per traded symbol.

    Each market is recorded as a pair of its quote-side token. Every symbol
    seen on either side of an eligible market gets a token, even when it
    only ever appears as a base (its pair list is then empty).

    Raises PlausibilityError when either upstream list is shorter than
    MIN_UPSTREAM_ENTRIES.
    """
    tokens = list(tokens)
    check_plausible(market_pairs, tokens)

    metadata: Dict[str, RawAsset] = {t.symbol: t for t in tokens}
    pair_filter = PairFilter(oracle, chain.symbol)

    pairs_by_quote: Dict[str, List[Pair]] = {}
    # dict as an insertion-ordered set
    symbols: Dict[str, None] = {}

    for market in market_pairs:
        if not pair_filter.is_pair_eligible(market):
            continue
        pairs_by_quote.setdefault(market.quote, []).append(build_pair(market, chain))
        symbols[market.base] = None
        symbols[market.quote] = None

    result: List[Token] = []
    for symbol in symbols:
        asset = metadata.get(symbol)
        if asset is None:
            logger.warning(f"no token metadata for traded symbol {symbol}, skipping")
            continue
        result.append(Token(
            asset=resolve_asset_id(symbol, chain.symbol, chain.coin_id),
            type=token_type(symbol, chain),
            address=symbol,
            name=token_name(asset, chain),
            symbol=asset.original_symbol,
            decimals=chain.decimals,
            logo_uri=logo_uri(symbol, chain),
            pairs=list(pairs_by_quote.get(symbol, [])),
        ))

    logger.debug(f"aggregated {len(result)} tokens from {len(market_pairs)} markets")
    return result
