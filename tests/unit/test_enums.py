import pytest

from evmchains.domain.enums import NamedChain, TestnetKind, VerifierType
from evmchains.exceptions import InvalidChainIdentifier, ParseError


# snake_case names written by serde-based tooling, one per member
SERDE_NAMES = [
    "mainnet", "morden", "ropsten", "rinkeby", "goerli",
    "kovan", "holesky", "hoodi", "sepolia", "odyssey",
    "optimism", "optimism_kovan", "optimism_goerli", "optimism_sepolia", "bob",
    "bob_sepolia", "arbitrum", "arbitrum_testnet", "arbitrum_goerli", "arbitrum_sepolia",
    "arbitrum_nova", "cronos", "cronos_testnet", "rsk", "rsk_testnet",
    "telos_evm", "telos_evm_testnet", "crab", "darwinia", "koi",
    "binance_smart_chain", "binance_smart_chain_testnet", "poa", "sokol", "scroll",
    "scroll_sepolia", "metis", "cfx_testnet", "cfx", "gnosis",
    "polygon", "polygon_amoy", "fantom", "fantom_testnet", "moonbeam",
    "moonbeam_dev", "moonriver", "moonbase", "dev", "anvil_hardhat",
    "gravity_alpha_mainnet", "gravity_alpha_testnet_sepolia", "evmos", "evmos_testnet", "plasma",
    "chiado", "oasis", "emerald", "emerald_testnet", "filecoin_mainnet",
    "filecoin_calibration_testnet", "avalanche", "avalanche_fuji", "celo", "celo_sepolia",
    "aurora", "aurora_testnet", "canto", "canto_testnet", "boba",
    "base", "base_goerli", "base_sepolia", "syndr", "syndr_sepolia",
    "shimmer", "ink", "ink_sepolia", "fraxtal", "fraxtal_testnet",
    "blast", "blast_sepolia", "linea", "linea_goerli", "linea_sepolia",
    "zk_sync", "zk_sync_testnet", "mantle", "mantle_sepolia", "xai",
    "xai_sepolia", "happychain_testnet", "viction", "zora", "zora_sepolia",
    "pgn", "pgn_sepolia", "mode", "mode_sepolia", "elastos",
    "etherlink", "etherlink_testnet", "degen", "op_bnb_mainnet", "op_bnb_testnet",
    "ronin", "ronin_testnet", "taiko", "taiko_hekla", "autonomys_nova_testnet",
    "flare", "flare_coston2", "acala", "acala_mandala_testnet", "acala_testnet",
    "karura", "karura_testnet", "pulsechain", "pulsechain_testnet", "cannon",
    "immutable", "immutable_testnet", "soneium", "soneium_minato_testnet", "world",
    "world_sepolia", "iotex", "core", "merlin", "bitlayer",
    "vana", "zeta", "kaia", "story", "sei",
    "sei_testnet", "stable_mainnet", "stable_testnet", "unichain", "unichain_sepolia",
    "signet_pecorino", "ape_chain", "curtis", "sonic", "sonic_testnet",
    "treasure", "treasure_topaz", "berachain_bepolia", "berachain", "superposition_testnet",
    "superposition", "monad", "monad_testnet", "hyperliquid", "abstract",
    "abstract_testnet", "corn", "corn_testnet", "sophon", "sophon_testnet",
    "polkadot_testnet", "lens", "lens_testnet", "injective", "injective_testnet",
    "katana", "lisk", "fuse", "fluent_devnet", "fluent_testnet",
    "skale_base", "skale_base_testnet", "meme_core", "formicarium", "insectarium",
]


class TestEnumsAreStringMixin:
    """Classification enums use (str, Enum) so they serialize to strings."""

    def test_testnet_kind_is_str(self):
        assert isinstance(TestnetKind.DEV, str)
        assert TestnetKind.DEV == "dev"

    def test_verifier_type_is_str(self):
        assert isinstance(VerifierType.ETHERSCAN, str)
        assert VerifierType.BLOCKSCOUT == "BLOCKSCOUT"


class TestEnumCounts:
    """Verify expected member counts to catch accidental additions/removals."""

    def test_named_chain_has_175(self):
        assert len(NamedChain) == 175

    def test_testnet_kind_has_4(self):
        assert len(TestnetKind) == 4

    def test_verifier_type_has_5(self):
        assert len(VerifierType) == 5


class TestNamedChainIds:
    def test_values_are_chain_ids(self):
        assert NamedChain.MAINNET == 1
        assert NamedChain.SEPOLIA == 11155111
        assert NamedChain.XAI_SEPOLIA == 37714555429
        assert NamedChain.SKALE_BASE == 1562508942

    def test_ids_are_unique(self):
        ids = [int(chain) for chain in NamedChain]
        assert len(ids) == len(set(ids))

    def test_try_from_id(self):
        assert NamedChain.try_from_id(10) is NamedChain.OPTIMISM
        assert NamedChain.try_from_id(999999999999) is None

    def test_default_is_mainnet(self):
        assert NamedChain.default() is NamedChain.MAINNET


class TestNamedChainDisplay:
    def test_str_is_kebab_case(self):
        assert str(NamedChain.MAINNET) == "mainnet"
        assert str(NamedChain.ARBITRUM_SEPOLIA) == "arbitrum-sepolia"
        assert str(NamedChain.FLARE_COSTON2) == "flare-coston2"

    def test_str_overrides(self):
        assert str(NamedChain.BINANCE_SMART_CHAIN) == "bsc"
        assert str(NamedChain.BINANCE_SMART_CHAIN_TESTNET) == "bsc-testnet"
        assert str(NamedChain.GNOSIS) == "xdai"
        assert str(NamedChain.POLYGON_AMOY) == "amoy"
        assert str(NamedChain.AVALANCHE_FUJI) == "fuji"
        assert str(NamedChain.TELOS_EVM) == "telos"

    def test_format_matches_str(self):
        for chain in NamedChain:
            assert f"{chain}" == str(chain) == chain.canonical_name

    def test_canonical_names_are_lowercase_without_trailing_separator(self):
        for chain in NamedChain:
            name = str(chain)
            assert name == name.lower()
            assert "_" not in name
            assert not name.endswith("-")


class TestNamedChainParse:
    ALIASES = [
        (NamedChain.MAINNET, ["ethlive"]),
        (NamedChain.BINANCE_SMART_CHAIN, ["bsc", "bnb-smart-chain", "binance-smart-chain"]),
        (
            NamedChain.BINANCE_SMART_CHAIN_TESTNET,
            ["bsc-testnet", "bnb-smart-chain-testnet", "binance-smart-chain-testnet"],
        ),
        (NamedChain.GNOSIS, ["xdai", "gnosis", "gnosis-chain"]),
        (NamedChain.POLYGON_AMOY, ["amoy", "polygon-amoy"]),
        (NamedChain.ANVIL_HARDHAT, ["anvil", "hardhat", "anvil-hardhat"]),
        (NamedChain.AVALANCHE_FUJI, ["fuji", "avalanche-fuji"]),
        (NamedChain.ZKSYNC, ["zksync"]),
        (NamedChain.ZKSYNC_TESTNET, ["zksync-testnet"]),
        (NamedChain.GRAVITY_ALPHA_TESTNET_SEPOLIA, ["gravity-alpha-testnet-sepolia"]),
        (NamedChain.OPBNB_MAINNET, ["opbnb-mainnet"]),
        (NamedChain.APECHAIN, ["apechain"]),
        (NamedChain.CURTIS, ["apechain-testnet", "curtis"]),
        (NamedChain.TREASURE_TOPAZ, ["treasure-topaz-testnet", "treasure-topaz"]),
        (NamedChain.BERACHAIN_BEPOLIA, ["berachain-bepolia-testnet", "berachain-bepolia"]),
        (NamedChain.SONEIUM_MINATO_TESTNET, ["soneium-minato-testnet"]),
        (NamedChain.MEMECORE, ["memecore"]),
        (NamedChain.FORMICARIUM, ["formicarium", "memecore-formicarium"]),
        (NamedChain.INSECTARIUM, ["insectarium", "memecore-insectarium"]),
    ]

    def test_aliases(self):
        for chain, aliases in self.ALIASES:
            for alias in aliases:
                assert NamedChain.parse(alias) is chain, alias

    def test_aliases_property_excludes_canonical(self):
        assert NamedChain.MAINNET.aliases == ("ethlive",)
        assert NamedChain.OPTIMISM.aliases == ()
        for chain in NamedChain:
            assert str(chain) not in chain.aliases

    def test_canonical_roundtrip(self):
        for chain in NamedChain:
            assert NamedChain.parse(str(chain)) is chain

    def test_parse_is_case_sensitive(self):
        with pytest.raises(InvalidChainIdentifier):
            NamedChain.parse("Mainnet")

    def test_parse_rejects_decode_only_aliases(self):
        with pytest.raises(InvalidChainIdentifier):
            NamedChain.parse("arbitrum_one")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            NamedChain.parse("bogus-chain")
        assert isinstance(exc_info.value, ParseError)
        assert exc_info.value.text == "bogus-chain"


class TestNamedChainDecode:
    def test_snake_and_upper_case_roundtrip(self):
        for chain in NamedChain:
            assert NamedChain.decode(str(chain).replace("-", "_")) is chain
            assert NamedChain.decode(str(chain).upper()) is chain

    def test_member_names(self):
        for chain in NamedChain:
            assert NamedChain.decode(chain.name) is chain
            assert NamedChain.decode(chain.name.lower()) is chain

    def test_decode_only_aliases(self):
        assert NamedChain.decode("arbitrum_one") is NamedChain.ARBITRUM
        assert NamedChain.decode("arbitrum-one") is NamedChain.ARBITRUM
        assert NamedChain.decode("telos_evm") is NamedChain.TELOS_EVM
        assert NamedChain.decode("telos_evm_testnet") is NamedChain.TELOS_EVM_TESTNET
        assert NamedChain.decode("scroll_sepolia_testnet") is NamedChain.SCROLL_SEPOLIA
        assert NamedChain.decode("conflux-espace") is NamedChain.CFX
        assert NamedChain.decode("worldchain") is NamedChain.WORLD
        assert NamedChain.decode("worldchain-sepolia") is NamedChain.WORLD_SEPOLIA
        assert NamedChain.decode("op-bnb-testnet") is NamedChain.OPBNB_TESTNET

    def test_serde_snake_case_names(self):
        decoded = {NamedChain.decode(name) for name in SERDE_NAMES}
        assert decoded == set(NamedChain)

    def test_split_word_serde_names(self):
        assert NamedChain.decode("zk_sync") is NamedChain.ZKSYNC
        assert NamedChain.decode("zk_sync_testnet") is NamedChain.ZKSYNC_TESTNET
        assert NamedChain.decode("ape_chain") is NamedChain.APECHAIN
        assert NamedChain.decode("meme_core") is NamedChain.MEMECORE
        assert NamedChain.decode("op_bnb_mainnet") is NamedChain.OPBNB_MAINNET

    def test_parse_aliases_are_decodable(self):
        assert NamedChain.decode("BNB_SMART_CHAIN") is NamedChain.BINANCE_SMART_CHAIN
        assert NamedChain.decode("ethlive") is NamedChain.MAINNET

    def test_unknown_name(self):
        with pytest.raises(InvalidChainIdentifier):
            NamedChain.decode("bogus_chain")

    def test_non_string(self):
        with pytest.raises(InvalidChainIdentifier):
            NamedChain.decode(None)
