import logging

from evmchains import metadata
from evmchains.chain import Chain
from evmchains.config import Settings, explorer_api_key, get_settings
from evmchains.domain.enums import NamedChain


class TestSettings:
    def test_every_api_key_variable_has_a_field(self):
        for chain in NamedChain:
            env_var = metadata.explorer_api_key_env_var(chain)
            if env_var is not None:
                assert env_var.lower() in Settings.model_fields, env_var

    def test_api_key_lookup(self, monkeypatch):
        monkeypatch.setenv("FTMSCAN_API_KEY", "ftm-key")
        settings = Settings(_env_file=None)
        assert settings.api_key("FTMSCAN_API_KEY") == "ftm-key"

    def test_empty_api_key_is_none(self, monkeypatch):
        monkeypatch.setenv("MOONSCAN_API_KEY", "")
        assert Settings(_env_file=None).api_key("MOONSCAN_API_KEY") is None

    def test_unknown_variable(self):
        assert Settings(_env_file=None).api_key("NOPE_API_KEY") is None

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestExplorerApiKey:
    def test_reads_family_variable(self, monkeypatch):
        monkeypatch.setenv("ETHERSCAN_API_KEY", "secret")
        settings = Settings(_env_file=None)
        assert explorer_api_key(NamedChain.MAINNET, settings) == "secret"
        assert explorer_api_key(Chain.from_id(42161), settings) == "secret"

    def test_uses_cached_settings(self, monkeypatch):
        monkeypatch.setenv("BLOCKSCOUT_API_KEY", "bs")
        assert explorer_api_key(NamedChain.ZORA) == "bs"

    def test_missing_key(self, monkeypatch, caplog):
        monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)
        settings = Settings(_env_file=None)
        with caplog.at_level(logging.DEBUG, logger="evmchains.config"):
            assert explorer_api_key(NamedChain.MAINNET, settings) is None
        assert "ETHERSCAN_API_KEY" in caplog.text

    def test_chain_without_explorer(self):
        settings = Settings(_env_file=None)
        assert explorer_api_key(NamedChain.ANVIL_HARDHAT, settings) is None
        assert explorer_api_key(Chain.from_id(999999999999), settings) is None
