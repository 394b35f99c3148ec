import json

import pytest
from pydantic import ValidationError

from tokenlist.data.config import ChainConfig, ConfigManager


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for var in ("TOKENLIST_CONFIG", "TOKENLIST_ASSETS_ROOT", "TOKENLIST_DEX_URL", "TOKENLIST_EXPLORER_URL"):
        monkeypatch.delenv(var, raising=False)
    ConfigManager.reset()
    yield
    ConfigManager.reset()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "tokenlist": {"assets_root": "/srv/assets", "tokens_limit": 50, "bootstrap_missing": True},
        "chain": {
            "name": "Test Chain",
            "legacy_names": [{"symbol": "BNB", "name": "Old", "replacement": "New"}],
        },
    }))
    return path


class TestConfigManager:
    """Loading settings from config.json and the environment"""

    def test_loads_file(self, config_file):
        settings = ConfigManager(str(config_file)).settings
        assert settings.assets_root == "/srv/assets"
        assert settings.tokens_limit == 50
        assert settings.bootstrap_missing is True
        assert settings.market_pairs_limit == 1000
        assert settings.chain.name == "Test Chain"
        assert settings.chain.legacy_names == {("BNB", "Old"): "New"}

    def test_singleton(self, config_file):
        first = ConfigManager(str(config_file))
        assert ConfigManager() is first

    def test_dotted_get(self, config_file):
        cfg = ConfigManager(str(config_file))
        assert cfg.get("tokenlist.tokens_limit") == 50
        assert cfg.get("tokenlist.nope", "fallback") == "fallback"
        assert cfg.get("tokenlist.tokens_limit.deeper", 1) == 1

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = ConfigManager(str(tmp_path / "absent.json")).settings
        assert settings.dex_url == "https://dex.binance.org"
        assert settings.chain == ChainConfig()

    def test_corrupt_file_uses_defaults(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        assert ConfigManager(str(path)).settings.tokens_limit == 10000

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("TOKENLIST_ASSETS_ROOT", "/env/assets")
        assert ConfigManager(str(config_file)).settings.assets_root == "/env/assets"


class TestChainConfig:
    def test_urls(self):
        chain = ChainConfig()
        assert chain.explorer_url("TWT-8C2") == "https://explorer.bnbchain.org/asset/TWT-8C2"
        assert chain.chain_logo_url().endswith("/blockchains/binance/info/logo.png")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            ChainConfig().symbol = "ETH"
