from datetime import timedelta

import pytest
from eth_utils import is_checksum_address, to_checksum_address

from evmchains import metadata
from evmchains.domain.enums import NamedChain, TestnetKind, VerifierType
from evmchains.exceptions import ChainTableError


class TestTablesAreExhaustive:
    """Every accessor answers for every NamedChain without raising."""

    def test_all_accessors_for_all_chains(self):
        for chain in NamedChain:
            block_time = metadata.average_block_time(chain)
            assert block_time is None or (isinstance(block_time, timedelta) and block_time > timedelta(0))
            assert isinstance(metadata.is_legacy(chain), bool)
            assert isinstance(metadata.supports_shanghai(chain), bool)
            assert isinstance(metadata.testnet_kind(chain), TestnetKind)
            assert isinstance(metadata.is_testnet(chain), bool)
            symbol = metadata.native_currency_symbol(chain)
            assert symbol is None or (isinstance(symbol, str) and symbol)
            metadata.explorer_api_key_env_var(chain)
            metadata.explorer_verifier(chain)
            metadata.dns_discovery_seed(chain)

    def test_explorer_urls_have_no_trailing_slash(self):
        for chain in NamedChain:
            urls = metadata.explorer_urls(chain)
            if urls is None:
                continue
            api_url, browser_url = urls
            assert api_url.startswith("http"), chain
            assert browser_url.startswith("http"), chain
            assert not api_url.endswith("/"), chain
            assert not browser_url.endswith("/"), chain

    def test_wrapped_native_tokens_are_checksummed(self):
        for chain in NamedChain:
            address = metadata.wrapped_native_token(chain)
            if address is not None:
                assert is_checksum_address(address), chain

    def test_api_key_env_vars_are_upper_snake(self):
        for chain in NamedChain:
            env_var = metadata.explorer_api_key_env_var(chain)
            if env_var is not None:
                assert env_var.endswith("_API_KEY")
                assert env_var == env_var.upper()


class TestTableBuilder:
    def test_missing_member(self):
        with pytest.raises(ChainTableError, match="no entry"):
            metadata._table("partial", [(True, (NamedChain.MAINNET,))])

    def test_duplicate_member(self):
        arms = [(True, tuple(NamedChain)), (False, (NamedChain.MAINNET,))]
        with pytest.raises(ChainTableError, match="more than once"):
            metadata._table("duplicate", arms)

    def test_complete(self):
        table = metadata._table("complete", [(1, tuple(NamedChain))])
        assert len(table) == len(NamedChain)


class TestBlockTime:
    def test_known_values(self):
        assert metadata.average_block_time(NamedChain.MAINNET) == timedelta(seconds=12)
        assert metadata.average_block_time(NamedChain.OPTIMISM) == timedelta(seconds=2)
        assert metadata.average_block_time(NamedChain.ARBITRUM) == timedelta(milliseconds=260)


class TestProtocolFlags:
    def test_legacy(self):
        assert metadata.is_legacy(NamedChain.FANTOM)
        assert not metadata.is_legacy(NamedChain.MAINNET)

    def test_shanghai(self):
        assert metadata.supports_shanghai(NamedChain.MAINNET)
        assert metadata.supports_shanghai(NamedChain.SEPOLIA)
        assert not metadata.supports_shanghai(NamedChain.FANTOM)


class TestTestnet:
    def test_ethereum_testnets(self):
        assert metadata.testnet_kind(NamedChain.SEPOLIA) is TestnetKind.ETHEREUM_TESTNET
        assert metadata.is_testnet(NamedChain.SEPOLIA)
        assert metadata.is_testnet(NamedChain.GOERLI)

    def test_dev_chains_are_testnets(self):
        assert metadata.testnet_kind(NamedChain.ANVIL_HARDHAT) is TestnetKind.DEV
        assert metadata.is_testnet(NamedChain.DEV)

    def test_mainnets(self):
        assert not metadata.is_testnet(NamedChain.MAINNET)
        assert not metadata.is_testnet(NamedChain.POLYGON)
        assert metadata.is_testnet(NamedChain.POLYGON_AMOY)


class TestCurrency:
    def test_symbols(self):
        assert metadata.native_currency_symbol(NamedChain.MAINNET) == "ETH"
        assert metadata.native_currency_symbol(NamedChain.POLYGON) == "POL"
        assert metadata.native_currency_symbol(NamedChain.CORN) == "BTCN"


class TestExplorer:
    def test_mainnet_urls(self):
        assert metadata.explorer_urls(NamedChain.MAINNET) == (
            "https://api.etherscan.io/v2/api?chainid=1",
            "https://etherscan.io",
        )

    def test_local_chain_has_no_explorer(self):
        assert metadata.explorer_urls(NamedChain.ANVIL_HARDHAT) is None
        assert metadata.explorer_api_key_env_var(NamedChain.ANVIL_HARDHAT) is None

    def test_api_key_env_var(self):
        assert metadata.explorer_api_key_env_var(NamedChain.MAINNET) == "ETHERSCAN_API_KEY"
        assert metadata.explorer_api_key_env_var(NamedChain.FANTOM) == "FTMSCAN_API_KEY"
        assert metadata.explorer_api_key_env_var(NamedChain.ZORA) == "BLOCKSCOUT_API_KEY"

    def test_verifier(self):
        assert metadata.explorer_verifier(NamedChain.MAINNET) is VerifierType.ETHERSCAN
        assert metadata.explorer_verifier(NamedChain.ZORA) is VerifierType.BLOCKSCOUT
        assert metadata.explorer_verifier(NamedChain.CORN) is VerifierType.ROUTESCAN
        assert metadata.explorer_verifier(NamedChain.BOBA) is VerifierType.CUSTOM
        assert metadata.explorer_verifier(NamedChain.DEV) is None


class TestWrappedNativeToken:
    def test_weth(self):
        assert metadata.wrapped_native_token(NamedChain.MAINNET) == "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"

    def test_op_stack_predeploy(self):
        for chain in (NamedChain.OPTIMISM, NamedChain.BASE):
            assert metadata.wrapped_native_token(chain) == "0x4200000000000000000000000000000000000006"

    def test_lowercase_source_is_checksummed(self):
        expected = to_checksum_address("0x21be370d5312f44cb42ce377bc9b8a0cef1a4c83")
        assert metadata.wrapped_native_token(NamedChain.FANTOM) == expected


class TestDnsDiscovery:
    def test_mainnet(self):
        assert metadata.dns_discovery_seed(NamedChain.MAINNET) == (
            "enrtree://AKA3AM6LPBYEUDMVNU3BSVQJ5AD45Y7YPOHJLEF6W26QOE4VTUDPE@all.mainnet.ethdisco.net"
        )

    def test_only_ethereum_networks(self):
        for chain in NamedChain:
            seed = metadata.dns_discovery_seed(chain)
            if seed is None:
                continue
            assert seed.startswith(metadata.DNS_PREFIX)
            assert seed.endswith(f".{chain}.ethdisco.net")
        assert metadata.dns_discovery_seed(NamedChain.ARBITRUM) is None


class TestFamilies:
    def test_predicates(self):
        assert metadata.is_ethereum(NamedChain.SEPOLIA)
        assert metadata.is_optimism(NamedChain.BASE)
        assert metadata.is_arbitrum(NamedChain.ARBITRUM_NOVA)
        assert metadata.is_polygon(NamedChain.POLYGON_AMOY)
        assert metadata.is_gnosis(NamedChain.CHIADO)
        assert metadata.is_elastic(NamedChain.ABSTRACT)

    def test_families_are_disjoint(self):
        families = [
            metadata.ETHEREUM_CHAINS,
            metadata.OPTIMISM_CHAINS,
            metadata.ARBITRUM_CHAINS,
            metadata.POLYGON_CHAINS,
            metadata.GNOSIS_CHAINS,
            metadata.ELASTIC_CHAINS,
        ]
        members = [chain for family in families for chain in family]
        assert len(members) == len(set(members))
