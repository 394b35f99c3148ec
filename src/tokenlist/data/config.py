
import os
import json
from typing import Dict, Any, Optional, Tuple
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

# (symbol, name reported upstream) -> name to publish
LEGACY_NAMES: Dict[Tuple[str, str], str] = {
    ("BNB", "Binance Chain Native Token"): "BNB Beacon Chain",
}

class ChainConfig(BaseModel):
    """Static metadata of the chain a token list is built for."""
    model_config = ConfigDict(frozen=True)

    coin_id: int = 714
    handle: str = "binance"
    name: str = "BNB Beacon Chain"
    symbol: str = "BNB"
    decimals: int = 8
    token_type: str = "BEP2"
    assets_app_url: str = "https://assets-cdn.trustwallet.com"
    explorer_asset_url: str = "https://explorer.bnbchain.org/asset/"
    legacy_names: Dict[Tuple[str, str], str] = Field(default_factory=lambda: dict(LEGACY_NAMES))

    def chain_logo_url(self) -> str:
        return f"{self.assets_app_url}/blockchains/{self.handle}/info/logo.png"

    def asset_logo_url(self, symbol: str) -> str:
        return f"{self.assets_app_url}/blockchains/{self.handle}/assets/{symbol}/logo.png"

    def explorer_url(self, symbol: str) -> str:
        return f"{self.explorer_asset_url}{symbol}"

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    dex_url: str = "https://dex.binance.org"
    explorer_url: str = "https://explorer.binance.org"
    list_logo_uri: str = "https://trustwallet.com/assets/images/favicon.png"
    time_format: str = "%Y-%m-%dT%H:%M:%S.%f"
    assets_root: str = "."
    assets_page: int = 1
    assets_rows: int = 1000
    market_pairs_limit: int = 1000
    tokens_limit: int = 10000
    bootstrap_missing: bool = False
    chain: ChainConfig = Field(default_factory=ChainConfig)

# env var -> settings key
ENV_OVERRIDES = {
    "TOKENLIST_ASSETS_ROOT": "assets_root",
    "TOKENLIST_DEX_URL": "dex_url",
    "TOKENLIST_EXPLORER_URL": "explorer_url",
}

class ConfigManager:
    """
    Centralized configuration manager.
    Singleton: the first construction loads the file, later ones reuse it
    unless an explicit path is passed.
    """
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None):
        if cls._instance is None or config_path is not None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._load_config(config_path)
        return cls._instance

    @classmethod
    def reset(cls):
        cls._instance = None

    def _load_config(self, config_path: Optional[str] = None):
        """Load configuration from JSON file"""
        if config_path:
            path = Path(config_path)
        elif os.getenv("TOKENLIST_CONFIG"):
            path = Path(os.environ["TOKENLIST_CONFIG"])
        else:
            # Default path: project_root/config/config.json
            path = Path(__file__).parent.parent.parent.parent / "config" / "config.json"

        self.path = path
        try:
            if path.exists():
                with open(path, "r") as f:
                    self._config = json.load(f)
                logger.info(f"Loaded config from {path}")
            else:
                logger.warning(f"Config file not found at {path}. Using defaults.")
                self._config = {}
        except (OSError, ValueError) as e:
            logger.error(f"Error loading config {path}: {e}")
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by key (dot notation supported)"""
        keys = key.split(".")
        value = self._config

        try:
            for k in keys:
                value = value.get(k)
                if value is None:
                    return default
            return value
        except AttributeError:
            return default

    @property
    def chain_config(self) -> ChainConfig:
        raw = dict(self.get("chain", {}))
        names = raw.pop("legacy_names", None)
        if names:
            raw["legacy_names"] = {
                (entry["symbol"], entry["name"]): entry["replacement"] for entry in names
            }
        return ChainConfig(**raw)

    @property
    def settings(self) -> Settings:
        raw = dict(self.get("tokenlist", {}))
        for env, key in ENV_OVERRIDES.items():
            if os.getenv(env):
                raw[key] = os.environ[env]
        return Settings(**raw, chain=self.chain_config)
