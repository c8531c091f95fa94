import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from evmchains.chain import Chain
from evmchains.domain.enums import NamedChain

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Explorer API keys, one per vendor family (see metadata.explorer_api_key_env_var)
    etherscan_api_key: str = ""
    blockscout_api_key: str = ""
    routescan_api_key: str = ""
    ftmscan_api_key: str = ""
    moonscan_api_key: str = ""
    bobascan_api_key: str = ""
    corescan_api_key: str = ""
    merlinscan_api_key: str = ""
    bitlayerscan_api_key: str = ""
    zetascan_api_key: str = ""
    kaiascan_api_key: str = ""
    berascan_api_key: str = ""

    def api_key(self, env_var: str) -> str | None:
        """Configured value for an explorer API key variable, None when unset or empty."""
        value = getattr(self, env_var.lower(), None)
        if not isinstance(value, str) or not value:
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def explorer_api_key(chain: Chain | NamedChain, settings: Settings | None = None) -> str | None:
    """Read the chain's explorer API key from the environment.

    The variable name comes from ``metadata.explorer_api_key_env_var``.
    """
    chain = Chain.parse(chain)
    env_var = chain.explorer_api_key_env_var()
    if env_var is None:
        return None
    settings = settings or get_settings()
    key = settings.api_key(env_var)
    if key is None:
        logger.debug("No %s configured for chain %s", env_var, chain)
    return key
