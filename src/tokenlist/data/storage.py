"""
On-disk asset repository.

Layout under ``root``::

    blockchains/<chain>/assets/<symbol>/info.json
    blockchains/<chain>/assets/<symbol>/logo.png
    blockchains/<chain>/tokenlist.json
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from .config import ChainConfig
from .models import AssetInfo, TokenListDocument

ACTIVE_STATUS = "active"

def asset_dir(root: Path, chain: str, symbol: str) -> Path:
    return Path(root) / "blockchains" / chain / "assets" / symbol

def asset_info_path(root: Path, chain: str, symbol: str) -> Path:
    return asset_dir(root, chain, symbol) / "info.json"

def asset_logo_path(root: Path, chain: str, symbol: str) -> Path:
    return asset_dir(root, chain, symbol) / "logo.png"

def tokenlist_path(root: Path, chain: str) -> Path:
    return Path(root) / "blockchains" / chain / "tokenlist.json"

def read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def write_json(path: Path, payload: Any) -> None:
    """Write ``payload`` with 4-space indent and a trailing newline, creating parents.

    The target is replaced atomically: a failed write leaves the old file intact.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(payload, indent=4, ensure_ascii=False) + "\n"
    tmp = path.with_suffix(".tmp" + path.suffix)
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise

class AssetStore:
    """File-backed asset records for one chain; also the existence oracle."""

    def __init__(self, root: Union[str, Path], chain: ChainConfig):
        self.root = Path(root)
        self.chain = chain

    def info_path(self, symbol: str) -> Path:
        return asset_info_path(self.root, self.chain.handle, symbol)

    def logo_path(self, symbol: str) -> Path:
        return asset_logo_path(self.root, self.chain.handle, symbol)

    @property
    def tokenlist_path(self) -> Path:
        return tokenlist_path(self.root, self.chain.handle)

    def exists_and_active(self, symbol: str) -> bool:
        if symbol == self.chain.symbol:
            return True
        path = self.info_path(symbol)
        try:
            info = AssetInfo.model_validate(read_json(path))
        except (OSError, ValueError) as e:
            logger.debug(f"asset [{symbol}] unreadable at {path}: {e}")
            return False
        if info.status != ACTIVE_STATUS:
            logger.debug(f"asset status [{symbol}] is not active")
            return False
        return True

    def has_logo(self, symbol: str) -> bool:
        return self.logo_path(symbol).exists()

    def write_logo(self, symbol: str, data: bytes) -> Path:
        path = self.logo_path(symbol)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    def write_asset_info(self, symbol: str, info: AssetInfo) -> Path:
        path = self.info_path(symbol)
        write_json(path, info.model_dump(exclude_none=True))
        return path

    def read_token_list(self) -> Optional[TokenListDocument]:
        """Previous token list, or None when it is missing or cannot be parsed."""
        path = self.tokenlist_path
        try:
            return TokenListDocument.model_validate(read_json(path))
        except FileNotFoundError:
            logger.info(f"Tokenlist: no previous list at {path}")
            return None
        except (OSError, ValueError) as e:
            logger.error(f"Tokenlist: previous list at {path} is unreadable: {e}")
            return None

    def write_token_list(self, document: TokenListDocument) -> Path:
        path = self.tokenlist_path
        write_json(path, document.model_dump(by_alias=True))
        return path