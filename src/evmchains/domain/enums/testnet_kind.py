from enum import Enum


class TestnetKind(str, Enum):
    """How a chain is classified for ``is_testnet``. Everything but MAINNET is a testnet."""

    __test__ = False  # not a pytest class

    ETHEREUM_TESTNET = "ethereum_testnet"
    TESTNET = "testnet"
    DEV = "dev"
    MAINNET = "mainnet"
