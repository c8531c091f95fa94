"""Static per-chain facts.

Each table is written as a list of ``(value, chains)`` arms and must mention
every NamedChain exactly once, including the chains where the answer is
``None``/``False``. ``_table`` enforces this when the module is imported, so
adding a NamedChain member without classifying it everywhere fails fast.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TypeVar

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from evmchains.domain.enums import NamedChain, TestnetKind, VerifierType
from evmchains.exceptions import ChainTableError

T = TypeVar("T")

N = NamedChain

# Node discovery tree signer, see https://github.com/ethereum/discv4-dns-lists
DNS_PREFIX = "enrtree://AKA3AM6LPBYEUDMVNU3BSVQJ5AD45Y7YPOHJLEF6W26QOE4VTUDPE@"


def _table(name: str, arms: list[tuple[T, tuple[NamedChain, ...]]]) -> dict[NamedChain, T]:
    table: dict[NamedChain, T] = {}
    for value, chains in arms:
        for chain in chains:
            if chain in table:
                raise ChainTableError(f"{name}: {chain.name} is listed more than once")
            table[chain] = value
    missing = [chain.name for chain in NamedChain if chain not in table]
    if missing:
        raise ChainTableError(f"{name}: no entry for {', '.join(missing)}")
    return table


def _ms(millis: int) -> timedelta:
    return timedelta(milliseconds=millis)


# Sensible polling defaults derived from explorer block-time charts, not exact averages.
_AVERAGE_BLOCK_TIME = _table("average_block_time", [
    (_ms(12_000), (N.MAINNET, N.TAIKO, N.TAIKO_HEKLA, N.SIGNET_PECORINO)),
    (_ms(260), (
        N.ARBITRUM, N.ARBITRUM_TESTNET, N.ARBITRUM_GOERLI, N.ARBITRUM_SEPOLIA, N.ARBITRUM_NOVA,
        N.GRAVITY_ALPHA_MAINNET, N.GRAVITY_ALPHA_TESTNET_SEPOLIA, N.XAI, N.XAI_SEPOLIA,
        N.SYNDR, N.SYNDR_SEPOLIA, N.APECHAIN, N.CURTIS, N.SUPERPOSITION_TESTNET, N.SUPERPOSITION,
    )),
    (_ms(2_000), (
        N.OPTIMISM, N.OPTIMISM_GOERLI, N.OPTIMISM_SEPOLIA, N.BASE, N.BASE_GOERLI, N.BASE_SEPOLIA,
        N.BLAST, N.BLAST_SEPOLIA, N.FRAXTAL, N.FRAXTAL_TESTNET, N.ZORA, N.ZORA_SEPOLIA,
        N.MANTLE, N.MANTLE_SEPOLIA, N.MODE, N.MODE_SEPOLIA, N.PGN, N.PGN_SEPOLIA,
        N.HAPPYCHAIN_TESTNET, N.SONEIUM, N.SONEIUM_MINATO_TESTNET, N.BOB, N.BOB_SEPOLIA,
        N.VICTION, N.AVALANCHE, N.AVALANCHE_FUJI, N.IMMUTABLE, N.IMMUTABLE_TESTNET,
        N.WORLD, N.WORLD_SEPOLIA, N.BERACHAIN_BEPOLIA, N.BERACHAIN, N.HYPERLIQUID, N.LISK,
    )),
    (_ms(1_000), (
        N.INK, N.INK_SEPOLIA, N.ODYSSEY, N.PLASMA, N.CELO, N.CELO_SEPOLIA,
        N.OPBNB_MAINNET, N.OPBNB_TESTNET, N.AUTONOMYS_NOVA_TESTNET, N.KAIA,
        N.SONIC, N.SONIC_TESTNET, N.UNICHAIN, N.UNICHAIN_SEPOLIA,
        N.ABSTRACT, N.ABSTRACT_TESTNET, N.ZKSYNC, N.ZKSYNC_TESTNET, N.SOPHON, N.SOPHON_TESTNET,
        N.LENS, N.LENS_TESTNET, N.KATANA, N.FLUENT_TESTNET,
    )),
    (_ms(2_100), (N.POLYGON, N.POLYGON_AMOY)),
    (_ms(12_500), (N.ACALA, N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET, N.KARURA, N.KARURA_TESTNET)),
    (_ms(6_500), (N.MOONBEAM, N.MOONRIVER)),
    (_ms(750), (N.BINANCE_SMART_CHAIN, N.BINANCE_SMART_CHAIN_TESTNET)),
    (_ms(1_200), (N.FANTOM, N.FANTOM_TESTNET)),
    (_ms(5_700), (N.CRONOS, N.CRONOS_TESTNET, N.CANTO, N.CANTO_TESTNET)),
    (_ms(1_900), (N.EVMOS, N.EVMOS_TESTNET)),
    (_ms(1_100), (N.AURORA, N.AURORA_TESTNET)),
    (_ms(5_500), (N.OASIS,)),
    (_ms(6_000), (N.EMERALD, N.DARWINIA, N.CRAB, N.KOI, N.VANA, N.ZETA)),
    (_ms(200), (N.DEV, N.ANVIL_HARDHAT)),
    (_ms(30_000), (N.FILECOIN_CALIBRATION_TESTNET, N.FILECOIN_MAINNET)),
    (_ms(3_000), (
        N.SCROLL, N.SCROLL_SEPOLIA, N.RONIN, N.RONIN_TESTNET, N.CORE, N.MERLIN, N.BITLAYER,
        N.FLUENT_DEVNET,
    )),
    (_ms(5_000), (
        N.SHIMMER, N.GNOSIS, N.CHIADO, N.ELASTOS, N.ETHERLINK, N.ETHERLINK_TESTNET, N.IOTEX, N.FUSE,
    )),
    (_ms(600), (N.DEGEN,)),
    (_ms(500), (N.CFX, N.CFX_TESTNET, N.SEI, N.SEI_TESTNET, N.TELOS_EVM, N.TELOS_EVM_TESTNET)),
    (_ms(1_800), (N.FLARE,)),
    (_ms(2_500), (N.FLARE_COSTON2, N.STORY)),
    (_ms(10_000), (N.PULSECHAIN, N.SKALE_BASE, N.SKALE_BASE_TESTNET)),
    (_ms(10_101), (N.PULSECHAIN_TESTNET,)),
    (_ms(700), (N.STABLE_MAINNET, N.STABLE_TESTNET, N.INJECTIVE, N.INJECTIVE_TESTNET)),
    (_ms(400), (N.MONAD, N.MONAD_TESTNET)),
    (_ms(25_000), (N.RSK, N.RSK_TESTNET)),
    (_ms(7_000), (N.MEMECORE, N.FORMICARIUM, N.INSECTARIUM)),
    (None, (
        N.MORDEN, N.ROPSTEN, N.RINKEBY, N.GOERLI, N.KOVAN, N.SEPOLIA, N.HOLESKY, N.HOODI,
        N.MOONBASE, N.MOONBEAM_DEV, N.OPTIMISM_KOVAN, N.POA, N.SOKOL, N.EMERALD_TESTNET,
        N.BOBA, N.METIS, N.LINEA, N.LINEA_GOERLI, N.LINEA_SEPOLIA, N.TREASURE, N.TREASURE_TOPAZ,
        N.CORN, N.CORN_TESTNET, N.CANNON, N.POLKADOT_TESTNET,
    )),
])

_IS_LEGACY = _table("is_legacy", [
    # No EIP-1559 (type 2) transactions.
    (True, (
        N.ELASTOS, N.EMERALD, N.EMERALD_TESTNET, N.FANTOM, N.FANTOM_TESTNET, N.OPTIMISM_KOVAN,
        N.RONIN, N.RONIN_TESTNET, N.RSK, N.RSK_TESTNET, N.SHIMMER, N.TREASURE, N.TREASURE_TOPAZ,
        N.VICTION, N.SOPHON, N.SOPHON_TESTNET,
    )),
    # Known EIP-1559 chains.
    (False, (
        N.MAINNET, N.GOERLI, N.SEPOLIA, N.HOLESKY, N.HOODI, N.ODYSSEY, N.ACALA,
        N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET, N.ARBITRUM_TESTNET, N.BASE, N.BASE_GOERLI,
        N.BASE_SEPOLIA, N.BOBA, N.METIS, N.OASIS, N.BLAST, N.BLAST_SEPOLIA, N.CELO,
        N.CELO_SEPOLIA, N.FRAXTAL, N.FRAXTAL_TESTNET, N.OPTIMISM, N.OPTIMISM_GOERLI,
        N.OPTIMISM_SEPOLIA, N.BOB, N.BOB_SEPOLIA, N.POLYGON, N.POLYGON_AMOY, N.AVALANCHE,
        N.AVALANCHE_FUJI, N.ARBITRUM, N.ARBITRUM_GOERLI, N.ARBITRUM_SEPOLIA, N.ARBITRUM_NOVA,
        N.GRAVITY_ALPHA_MAINNET, N.GRAVITY_ALPHA_TESTNET_SEPOLIA, N.XAI, N.XAI_SEPOLIA,
        N.HAPPYCHAIN_TESTNET, N.SYNDR, N.SYNDR_SEPOLIA, N.FILECOIN_MAINNET, N.LINEA,
        N.LINEA_GOERLI, N.LINEA_SEPOLIA, N.FILECOIN_CALIBRATION_TESTNET, N.GNOSIS, N.CHIADO,
        N.ZORA, N.ZORA_SEPOLIA, N.INK, N.INK_SEPOLIA, N.MANTLE, N.MANTLE_SEPOLIA, N.MODE,
        N.MODE_SEPOLIA, N.PGN, N.PGN_SEPOLIA, N.ETHERLINK, N.ETHERLINK_TESTNET, N.DEGEN,
        N.OPBNB_MAINNET, N.OPBNB_TESTNET, N.TAIKO, N.TAIKO_HEKLA, N.AUTONOMYS_NOVA_TESTNET,
        N.FLARE, N.FLARE_COSTON2, N.SCROLL, N.SCROLL_SEPOLIA, N.DARWINIA, N.CFX, N.CFX_TESTNET,
        N.CRAB, N.PULSECHAIN, N.PULSECHAIN_TESTNET, N.KOI, N.IMMUTABLE, N.IMMUTABLE_TESTNET,
        N.SONEIUM, N.SONEIUM_MINATO_TESTNET, N.SONIC, N.SONIC_TESTNET, N.WORLD, N.WORLD_SEPOLIA,
        N.UNICHAIN, N.UNICHAIN_SEPOLIA, N.SIGNET_PECORINO, N.APECHAIN, N.BERACHAIN_BEPOLIA,
        N.BERACHAIN, N.CURTIS, N.SUPERPOSITION_TESTNET, N.SUPERPOSITION, N.MONAD,
        N.MONAD_TESTNET, N.HYPERLIQUID, N.CORN, N.CORN_TESTNET, N.ZKSYNC, N.ZKSYNC_TESTNET,
        N.ABSTRACT_TESTNET, N.ABSTRACT, N.LENS, N.LENS_TESTNET, N.BINANCE_SMART_CHAIN,
        N.BINANCE_SMART_CHAIN_TESTNET, N.KARURA, N.KARURA_TESTNET, N.TELOS_EVM,
        N.TELOS_EVM_TESTNET, N.FLUENT_DEVNET, N.FLUENT_TESTNET, N.PLASMA, N.MEMECORE,
        N.FORMICARIUM, N.INSECTARIUM,
    )),
    # Unclassified, assumed modern.
    (False, (
        N.DEV, N.ANVIL_HARDHAT, N.MORDEN, N.ROPSTEN, N.RINKEBY, N.CRONOS, N.CRONOS_TESTNET,
        N.KOVAN, N.SOKOL, N.POA, N.MOONBEAM, N.MOONBEAM_DEV, N.MOONRIVER, N.MOONBASE, N.EVMOS,
        N.EVMOS_TESTNET, N.AURORA, N.AURORA_TESTNET, N.CANTO, N.CANTO_TESTNET, N.IOTEX, N.CORE,
        N.MERLIN, N.BITLAYER, N.VANA, N.ZETA, N.KAIA, N.STORY, N.SEI, N.SEI_TESTNET,
        N.STABLE_MAINNET, N.STABLE_TESTNET, N.INJECTIVE, N.INJECTIVE_TESTNET, N.KATANA, N.LISK,
        N.FUSE, N.CANNON, N.SKALE_BASE, N.SKALE_BASE_TESTNET, N.POLKADOT_TESTNET,
    )),
])

_SUPPORTS_SHANGHAI = _table("supports_shanghai", [
    (True, (
        N.MAINNET, N.GOERLI, N.SEPOLIA, N.HOLESKY, N.HOODI, N.ANVIL_HARDHAT, N.OPTIMISM,
        N.OPTIMISM_GOERLI, N.OPTIMISM_SEPOLIA, N.BOB, N.BOB_SEPOLIA, N.ODYSSEY, N.BASE,
        N.BASE_GOERLI, N.BASE_SEPOLIA, N.BLAST, N.BLAST_SEPOLIA, N.CELO, N.CELO_SEPOLIA,
        N.FRAXTAL, N.FRAXTAL_TESTNET, N.INK, N.INK_SEPOLIA, N.GNOSIS, N.CHIADO, N.ZORA_SEPOLIA,
        N.MANTLE, N.MANTLE_SEPOLIA, N.MODE, N.MODE_SEPOLIA, N.POLYGON, N.ARBITRUM,
        N.ARBITRUM_NOVA, N.ARBITRUM_SEPOLIA, N.GRAVITY_ALPHA_MAINNET,
        N.GRAVITY_ALPHA_TESTNET_SEPOLIA, N.XAI, N.XAI_SEPOLIA, N.SYNDR, N.SYNDR_SEPOLIA,
        N.ETHERLINK, N.ETHERLINK_TESTNET, N.SCROLL, N.SCROLL_SEPOLIA, N.HAPPYCHAIN_TESTNET,
        N.SHIMMER, N.BINANCE_SMART_CHAIN, N.BINANCE_SMART_CHAIN_TESTNET, N.OPBNB_MAINNET,
        N.OPBNB_TESTNET, N.TAIKO, N.TAIKO_HEKLA, N.AVALANCHE, N.AVALANCHE_FUJI,
        N.AUTONOMYS_NOVA_TESTNET, N.ACALA, N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET, N.KARURA,
        N.KARURA_TESTNET, N.DARWINIA, N.CRAB, N.CFX, N.CFX_TESTNET, N.PULSECHAIN,
        N.PULSECHAIN_TESTNET, N.KOI, N.IMMUTABLE, N.IMMUTABLE_TESTNET, N.SONEIUM,
        N.SONEIUM_MINATO_TESTNET, N.WORLD, N.WORLD_SEPOLIA, N.IOTEX, N.UNICHAIN,
        N.UNICHAIN_SEPOLIA, N.SIGNET_PECORINO, N.STABLE_MAINNET, N.STABLE_TESTNET, N.APECHAIN,
        N.CURTIS, N.SUPERPOSITION_TESTNET, N.SUPERPOSITION, N.MONAD, N.MONAD_TESTNET, N.CORN,
        N.CORN_TESTNET, N.RSK, N.RSK_TESTNET, N.BERACHAIN, N.BERACHAIN_BEPOLIA, N.INJECTIVE,
        N.INJECTIVE_TESTNET, N.FLUENT_DEVNET, N.FLUENT_TESTNET, N.CANNON, N.MEMECORE,
        N.FORMICARIUM, N.INSECTARIUM,
    )),
    (False, (
        N.MORDEN, N.ROPSTEN, N.RINKEBY, N.KOVAN, N.OPTIMISM_KOVAN, N.ARBITRUM_TESTNET,
        N.ARBITRUM_GOERLI, N.CRONOS, N.CRONOS_TESTNET, N.TELOS_EVM, N.TELOS_EVM_TESTNET, N.POA,
        N.SOKOL, N.METIS, N.POLYGON_AMOY, N.FANTOM, N.FANTOM_TESTNET, N.MOONBEAM, N.MOONBEAM_DEV,
        N.MOONRIVER, N.MOONBASE, N.DEV, N.EVMOS, N.EVMOS_TESTNET, N.PLASMA, N.OASIS, N.EMERALD,
        N.EMERALD_TESTNET, N.FILECOIN_MAINNET, N.FILECOIN_CALIBRATION_TESTNET, N.AURORA,
        N.AURORA_TESTNET, N.CANTO, N.CANTO_TESTNET, N.BOBA, N.LINEA, N.LINEA_GOERLI,
        N.LINEA_SEPOLIA, N.ZKSYNC, N.ZKSYNC_TESTNET, N.VICTION, N.ZORA, N.PGN, N.PGN_SEPOLIA,
        N.ELASTOS, N.DEGEN, N.RONIN, N.RONIN_TESTNET, N.FLARE, N.FLARE_COSTON2, N.CORE,
        N.MERLIN, N.BITLAYER, N.VANA, N.ZETA, N.KAIA, N.STORY, N.SEI, N.SEI_TESTNET, N.SONIC,
        N.SONIC_TESTNET, N.TREASURE, N.TREASURE_TOPAZ, N.HYPERLIQUID, N.ABSTRACT,
        N.ABSTRACT_TESTNET, N.SOPHON, N.SOPHON_TESTNET, N.POLKADOT_TESTNET, N.LENS,
        N.LENS_TESTNET, N.KATANA, N.LISK, N.FUSE, N.SKALE_BASE, N.SKALE_BASE_TESTNET,
    )),
])

_TESTNET_KIND = _table("testnet_kind", [
    (TestnetKind.ETHEREUM_TESTNET, (
        N.GOERLI, N.HOLESKY, N.KOVAN, N.SEPOLIA, N.MORDEN, N.ROPSTEN, N.RINKEBY, N.HOODI,
    )),
    (TestnetKind.TESTNET, (
        N.ARBITRUM_GOERLI, N.ARBITRUM_SEPOLIA, N.ARBITRUM_TESTNET, N.SYNDR_SEPOLIA,
        N.AURORA_TESTNET, N.AVALANCHE_FUJI, N.ODYSSEY, N.BASE_GOERLI, N.BASE_SEPOLIA,
        N.BLAST_SEPOLIA, N.BINANCE_SMART_CHAIN_TESTNET, N.CANTO_TESTNET, N.CRONOS_TESTNET,
        N.CELO_SEPOLIA, N.EMERALD_TESTNET, N.EVMOS_TESTNET, N.FANTOM_TESTNET,
        N.FILECOIN_CALIBRATION_TESTNET, N.FRAXTAL_TESTNET, N.HAPPYCHAIN_TESTNET, N.LINEA_GOERLI,
        N.LINEA_SEPOLIA, N.INK_SEPOLIA, N.MANTLE_SEPOLIA, N.MOONBEAM_DEV, N.OPTIMISM_GOERLI,
        N.OPTIMISM_KOVAN, N.OPTIMISM_SEPOLIA, N.BOB_SEPOLIA, N.POLYGON_AMOY, N.SCROLL_SEPOLIA,
        N.SHIMMER, N.ZKSYNC_TESTNET, N.ZORA_SEPOLIA, N.MODE_SEPOLIA, N.PGN_SEPOLIA,
        N.ETHERLINK_TESTNET, N.OPBNB_TESTNET, N.RONIN_TESTNET, N.TAIKO_HEKLA,
        N.AUTONOMYS_NOVA_TESTNET, N.FLARE_COSTON2, N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET,
        N.KARURA_TESTNET, N.CFX_TESTNET, N.PULSECHAIN_TESTNET, N.GRAVITY_ALPHA_TESTNET_SEPOLIA,
        N.XAI_SEPOLIA, N.KOI, N.IMMUTABLE_TESTNET, N.SONEIUM_MINATO_TESTNET, N.WORLD_SEPOLIA,
        N.UNICHAIN_SEPOLIA, N.SIGNET_PECORINO, N.CURTIS, N.TREASURE_TOPAZ, N.SONIC_TESTNET,
        N.BERACHAIN_BEPOLIA, N.SUPERPOSITION_TESTNET, N.MONAD_TESTNET, N.RSK_TESTNET,
        N.TELOS_EVM_TESTNET, N.ABSTRACT_TESTNET, N.LENS_TESTNET, N.SOPHON_TESTNET,
        N.POLKADOT_TESTNET, N.INJECTIVE_TESTNET, N.FLUENT_DEVNET, N.FLUENT_TESTNET,
        N.SEI_TESTNET, N.STABLE_TESTNET, N.CORN_TESTNET, N.FORMICARIUM, N.INSECTARIUM,
        N.SKALE_BASE_TESTNET,
    )),
    (TestnetKind.DEV, (N.DEV, N.ANVIL_HARDHAT, N.CANNON)),
    (TestnetKind.MAINNET, (
        N.MAINNET, N.OPTIMISM, N.ARBITRUM, N.ARBITRUM_NOVA, N.BLAST, N.SYNDR, N.CRONOS, N.RSK,
        N.BINANCE_SMART_CHAIN, N.POA, N.SOKOL, N.SCROLL, N.METIS, N.GNOSIS, N.POLYGON, N.FANTOM,
        N.MOONBEAM, N.MOONRIVER, N.MOONBASE, N.EVMOS, N.CHIADO, N.OASIS, N.EMERALD, N.PLASMA,
        N.FILECOIN_MAINNET, N.AVALANCHE, N.CELO, N.AURORA, N.CANTO, N.BOBA, N.BASE, N.FRAXTAL,
        N.INK, N.LINEA, N.ZKSYNC, N.MANTLE, N.GRAVITY_ALPHA_MAINNET, N.XAI, N.ZORA, N.PGN,
        N.MODE, N.VICTION, N.ELASTOS, N.DEGEN, N.OPBNB_MAINNET, N.RONIN, N.TAIKO, N.FLARE,
        N.ACALA, N.KARURA, N.DARWINIA, N.CFX, N.CRAB, N.PULSECHAIN, N.ETHERLINK, N.IMMUTABLE,
        N.WORLD, N.IOTEX, N.CORE, N.MERLIN, N.BITLAYER, N.APECHAIN, N.VANA, N.ZETA, N.KAIA,
        N.TREASURE, N.BOB, N.SONEIUM, N.SONIC, N.SUPERPOSITION, N.BERACHAIN, N.MONAD,
        N.UNICHAIN, N.TELOS_EVM, N.STORY, N.SEI, N.STABLE_MAINNET, N.HYPERLIQUID, N.ABSTRACT,
        N.SOPHON, N.LENS, N.CORN, N.KATANA, N.LISK, N.FUSE, N.INJECTIVE, N.MEMECORE,
        N.SKALE_BASE,
    )),
])

_NATIVE_CURRENCY_SYMBOL = _table("native_currency_symbol", [
    ("ETH", (
        N.MAINNET, N.GOERLI, N.HOLESKY, N.KOVAN, N.SEPOLIA, N.MORDEN, N.ROPSTEN, N.RINKEBY,
        N.SCROLL, N.SCROLL_SEPOLIA, N.TAIKO, N.TAIKO_HEKLA, N.UNICHAIN, N.UNICHAIN_SEPOLIA,
        N.SUPERPOSITION_TESTNET, N.SUPERPOSITION, N.ABSTRACT, N.ZKSYNC, N.ZKSYNC_TESTNET,
        N.KATANA, N.LISK, N.BASE, N.BASE_GOERLI, N.BASE_SEPOLIA, N.OPTIMISM, N.OPTIMISM_SEPOLIA,
    )),
    ("MNT", (N.MANTLE, N.MANTLE_SEPOLIA)),
    ("G", (N.GRAVITY_ALPHA_MAINNET, N.GRAVITY_ALPHA_TESTNET_SEPOLIA)),
    ("CELO", (N.CELO, N.CELO_SEPOLIA)),
    ("XAI", (N.XAI, N.XAI_SEPOLIA)),
    ("HAPPY", (N.HAPPYCHAIN_TESTNET,)),
    ("BNB", (N.BINANCE_SMART_CHAIN, N.BINANCE_SMART_CHAIN_TESTNET, N.OPBNB_MAINNET, N.OPBNB_TESTNET)),
    ("XTZ", (N.ETHERLINK, N.ETHERLINK_TESTNET)),
    ("DEGEN", (N.DEGEN,)),
    ("RON", (N.RONIN, N.RONIN_TESTNET)),
    ("SMR", (N.SHIMMER,)),
    ("FLR", (N.FLARE,)),
    ("C2FLR", (N.FLARE_COSTON2,)),
    ("RING", (N.DARWINIA,)),
    ("CRAB", (N.CRAB,)),
    ("KRING", (N.KOI,)),
    ("CFX", (N.CFX, N.CFX_TESTNET)),
    ("PLS", (N.PULSECHAIN, N.PULSECHAIN_TESTNET)),
    ("IMX", (N.IMMUTABLE,)),
    ("tIMX", (N.IMMUTABLE_TESTNET,)),
    ("WRLD", (N.WORLD, N.WORLD_SEPOLIA)),
    ("IOTX", (N.IOTEX,)),
    ("CORE", (N.CORE,)),
    ("BTC", (N.MERLIN, N.BITLAYER)),
    ("VANA", (N.VANA,)),
    ("ZETA", (N.ZETA,)),
    ("KAIA", (N.KAIA,)),
    ("IP", (N.STORY,)),
    ("SEI", (N.SEI, N.SEI_TESTNET)),
    ("gUSDT", (N.STABLE_MAINNET, N.STABLE_TESTNET)),
    ("APE", (N.APECHAIN, N.CURTIS)),
    ("MAGIC", (N.TREASURE, N.TREASURE_TOPAZ)),
    ("BERA", (N.BERACHAIN_BEPOLIA, N.BERACHAIN)),
    ("MON", (N.MONAD, N.MONAD_TESTNET)),
    ("S", (N.SONIC, N.SONIC_TESTNET)),
    ("TLOS", (N.TELOS_EVM, N.TELOS_EVM_TESTNET)),
    ("HYPE", (N.HYPERLIQUID,)),
    ("USDS", (N.SIGNET_PECORINO,)),
    ("POL", (N.POLYGON, N.POLYGON_AMOY)),
    ("BTCN", (N.CORN, N.CORN_TESTNET)),
    ("SOPH", (N.SOPHON, N.SOPHON_TESTNET)),
    ("GRASS", (N.LENS_TESTNET,)),
    ("GHO", (N.LENS,)),
    ("RBTC", (N.RSK,)),
    ("tRBTC", (N.RSK_TESTNET,)),
    ("INJ", (N.INJECTIVE, N.INJECTIVE_TESTNET)),
    ("XPL", (N.PLASMA,)),
    ("M", (N.MEMECORE,)),
    ("tM", (N.FORMICARIUM, N.INSECTARIUM)),
    (None, (
        N.HOODI, N.ODYSSEY, N.OPTIMISM_KOVAN, N.OPTIMISM_GOERLI, N.BOB, N.BOB_SEPOLIA, N.ARBITRUM,
        N.ARBITRUM_TESTNET, N.ARBITRUM_GOERLI, N.ARBITRUM_SEPOLIA, N.ARBITRUM_NOVA, N.CRONOS,
        N.CRONOS_TESTNET, N.POA, N.SOKOL, N.METIS, N.GNOSIS, N.FANTOM, N.FANTOM_TESTNET,
        N.MOONBEAM, N.MOONBEAM_DEV, N.MOONRIVER, N.MOONBASE, N.DEV, N.ANVIL_HARDHAT, N.EVMOS,
        N.EVMOS_TESTNET, N.CHIADO, N.OASIS, N.EMERALD, N.EMERALD_TESTNET, N.FILECOIN_MAINNET,
        N.FILECOIN_CALIBRATION_TESTNET, N.AVALANCHE, N.AVALANCHE_FUJI, N.AURORA,
        N.AURORA_TESTNET, N.CANTO, N.CANTO_TESTNET, N.BOBA, N.SYNDR, N.SYNDR_SEPOLIA, N.INK,
        N.INK_SEPOLIA, N.FRAXTAL, N.FRAXTAL_TESTNET, N.BLAST, N.BLAST_SEPOLIA, N.LINEA,
        N.LINEA_GOERLI, N.LINEA_SEPOLIA, N.VICTION, N.ZORA, N.ZORA_SEPOLIA, N.PGN,
        N.PGN_SEPOLIA, N.MODE, N.MODE_SEPOLIA, N.ELASTOS, N.AUTONOMYS_NOVA_TESTNET, N.ACALA,
        N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET, N.KARURA, N.KARURA_TESTNET, N.CANNON,
        N.SONEIUM, N.SONEIUM_MINATO_TESTNET, N.ABSTRACT_TESTNET, N.POLKADOT_TESTNET,
        N.FLUENT_DEVNET, N.FLUENT_TESTNET, N.FUSE, N.SKALE_BASE, N.SKALE_BASE_TESTNET,
    )),
])


def _etherscan_v2(chain_id: int) -> str:
    return f"https://api.etherscan.io/v2/api?chainid={chain_id}"


# (api_url, browser_url); neither has a trailing "/".
_EXPLORER_URLS: dict[NamedChain, tuple[str, str] | None] = _table("explorer_urls", [
    ((_etherscan_v2(1), "https://etherscan.io"), (N.MAINNET,)),
    ((_etherscan_v2(11155111), "https://sepolia.etherscan.io"), (N.SEPOLIA,)),
    ((_etherscan_v2(17000), "https://holesky.etherscan.io"), (N.HOLESKY,)),
    ((_etherscan_v2(560048), "https://hoodi.etherscan.io"), (N.HOODI,)),
    ((_etherscan_v2(137), "https://polygonscan.com"), (N.POLYGON,)),
    ((_etherscan_v2(80002), "https://amoy.polygonscan.com"), (N.POLYGON_AMOY,)),
    ((_etherscan_v2(43114), "https://snowscan.xyz"), (N.AVALANCHE,)),
    ((_etherscan_v2(43113), "https://testnet.snowscan.xyz"), (N.AVALANCHE_FUJI,)),
    ((_etherscan_v2(10), "https://optimistic.etherscan.io"), (N.OPTIMISM,)),
    ((_etherscan_v2(11155420), "https://sepolia-optimism.etherscan.io"), (N.OPTIMISM_SEPOLIA,)),
    (("https://explorer.gobob.xyz/api", "https://explorer.gobob.xyz"), (N.BOB,)),
    (("https://bob-sepolia.explorer.gobob.xyz/api", "https://bob-sepolia.explorer.gobob.xyz"), (N.BOB_SEPOLIA,)),
    ((_etherscan_v2(56), "https://bscscan.com"), (N.BINANCE_SMART_CHAIN,)),
    ((_etherscan_v2(97), "https://testnet.bscscan.com"), (N.BINANCE_SMART_CHAIN_TESTNET,)),
    ((_etherscan_v2(204), "https://opbnb.bscscan.com"), (N.OPBNB_MAINNET,)),
    ((_etherscan_v2(5611), "https://opbnb-testnet.bscscan.com"), (N.OPBNB_TESTNET,)),
    ((_etherscan_v2(42161), "https://arbiscan.io"), (N.ARBITRUM,)),
    ((_etherscan_v2(421614), "https://sepolia.arbiscan.io"), (N.ARBITRUM_SEPOLIA,)),
    ((_etherscan_v2(42170), "https://nova.arbiscan.io"), (N.ARBITRUM_NOVA,)),
    (("https://explorer.gravity.xyz/api", "https://explorer.gravity.xyz"), (N.GRAVITY_ALPHA_MAINNET,)),
    (
        ("https://explorer-sepolia.gravity.xyz/api", "https://explorer-sepolia.gravity.xyz"),
        (N.GRAVITY_ALPHA_TESTNET_SEPOLIA,),
    ),
    (
        ("https://explorer.testnet.happy.tech/api", "https://explorer.testnet.happy.tech"),
        (N.HAPPYCHAIN_TESTNET,),
    ),
    ((_etherscan_v2(37714555429), "https://sepolia.xaiscan.io"), (N.XAI_SEPOLIA,)),
    ((_etherscan_v2(660279), "https://xaiscan.io"), (N.XAI,)),
    (("https://explorer.syndr.com/api", "https://explorer.syndr.com"), (N.SYNDR,)),
    (("https://sepolia-explorer.syndr.com/api", "https://sepolia-explorer.syndr.com"), (N.SYNDR_SEPOLIA,)),
    ((_etherscan_v2(25), "https://cronoscan.com"), (N.CRONOS,)),
    ((_etherscan_v2(1284), "https://moonbeam.moonscan.io"), (N.MOONBEAM,)),
    ((_etherscan_v2(1287), "https://moonbase.moonscan.io"), (N.MOONBASE,)),
    ((_etherscan_v2(1285), "https://moonriver.moonscan.io"), (N.MOONRIVER,)),
    ((_etherscan_v2(100), "https://gnosisscan.io"), (N.GNOSIS,)),
    ((_etherscan_v2(534352), "https://scrollscan.com"), (N.SCROLL,)),
    ((_etherscan_v2(534351), "https://sepolia.scrollscan.com"), (N.SCROLL_SEPOLIA,)),
    (("https://explorer.inkonchain.com/api/v2", "https://explorer.inkonchain.com"), (N.INK,)),
    (
        ("https://explorer-sepolia.inkonchain.com/api/v2", "https://explorer-sepolia.inkonchain.com"),
        (N.INK_SEPOLIA,),
    ),
    (("https://explorer.evm.shimmer.network/api", "https://explorer.evm.shimmer.network"), (N.SHIMMER,)),
    (
        ("https://api.routescan.io/v2/network/mainnet/evm/1088/etherscan", "https://explorer.metis.io"),
        (N.METIS,),
    ),
    (("https://gnosis-chiado.blockscout.com/api", "https://gnosis-chiado.blockscout.com"), (N.CHIADO,)),
    (
        ("https://api.routescan.io/v2/network/mainnet/evm/9745/etherscan/api", "https://plasmascan.to"),
        (N.PLASMA,),
    ),
    (
        ("https://api.calibration.node.glif.io/rpc/v1", "https://calibration.filfox.info/en"),
        (N.FILECOIN_CALIBRATION_TESTNET,),
    ),
    (("https://blockscout.com/rsk/mainnet/api", "https://blockscout.com/rsk/mainnet"), (N.RSK,)),
    (
        ("https://rootstock-testnet.blockscout.com/api", "https://rootstock-testnet.blockscout.com"),
        (N.RSK_TESTNET,),
    ),
    (("https://explorer.emerald.oasis.dev/api", "https://explorer.emerald.oasis.dev"), (N.EMERALD,)),
    (
        ("https://testnet.explorer.emerald.oasis.dev/api", "https://testnet.explorer.emerald.oasis.dev"),
        (N.EMERALD_TESTNET,),
    ),
    (("https://api.aurorascan.dev/api", "https://aurorascan.dev"), (N.AURORA,)),
    (("https://testnet.aurorascan.dev/api", "https://testnet.aurorascan.dev"), (N.AURORA_TESTNET,)),
    ((_etherscan_v2(42220), "https://celoscan.io"), (N.CELO,)),
    ((_etherscan_v2(11142220), "https://sepolia.celoscan.io"), (N.CELO_SEPOLIA,)),
    (("https://api.bobascan.com/api", "https://bobascan.com"), (N.BOBA,)),
    ((_etherscan_v2(8453), "https://basescan.org"), (N.BASE,)),
    ((_etherscan_v2(84532), "https://sepolia.basescan.org"), (N.BASE_SEPOLIA,)),
    ((_etherscan_v2(252), "https://fraxscan.com"), (N.FRAXTAL,)),
    ((_etherscan_v2(2522), "https://holesky.fraxscan.com"), (N.FRAXTAL_TESTNET,)),
    ((_etherscan_v2(81457), "https://blastscan.io"), (N.BLAST,)),
    ((_etherscan_v2(168587773), "https://sepolia.blastscan.io"), (N.BLAST_SEPOLIA,)),
    ((_etherscan_v2(324), "https://era.zksync.network"), (N.ZKSYNC,)),
    ((_etherscan_v2(300), "https://sepolia-era.zksync.network"), (N.ZKSYNC_TESTNET,)),
    ((_etherscan_v2(59144), "https://lineascan.build"), (N.LINEA,)),
    ((_etherscan_v2(59141), "https://sepolia.lineascan.build"), (N.LINEA_SEPOLIA,)),
    ((_etherscan_v2(5000), "https://mantlescan.xyz"), (N.MANTLE,)),
    ((_etherscan_v2(5003), "https://sepolia.mantlescan.xyz"), (N.MANTLE_SEPOLIA,)),
    (("https://www.vicscan.xyz/api", "https://www.vicscan.xyz"), (N.VICTION,)),
    (("https://explorer.zora.energy/api", "https://explorer.zora.energy"), (N.ZORA,)),
    (("https://sepolia.explorer.zora.energy/api", "https://sepolia.explorer.zora.energy"), (N.ZORA_SEPOLIA,)),
    (("https://explorer.mode.network/api", "https://explorer.mode.network"), (N.MODE,)),
    (
        ("https://sepolia.explorer.mode.network/api", "https://sepolia.explorer.mode.network"),
        (N.MODE_SEPOLIA,),
    ),
    (("https://esc.elastos.io/api", "https://esc.elastos.io"), (N.ELASTOS,)),
    (("https://explorer.etherlink.com/api", "https://explorer.etherlink.com"), (N.ETHERLINK,)),
    (
        ("https://testnet.explorer.etherlink.com/api", "https://testnet.explorer.etherlink.com"),
        (N.ETHERLINK_TESTNET,),
    ),
    (("https://explorer.degen.tips/api", "https://explorer.degen.tips"), (N.DEGEN,)),
    (("https://skynet-api.roninchain.com/ronin", "https://app.roninchain.com"), (N.RONIN,)),
    (
        ("https://api-gateway.skymavis.com/rpc/testnet", "https://saigon-app.roninchain.com"),
        (N.RONIN_TESTNET,),
    ),
    ((_etherscan_v2(167000), "https://taikoscan.io"), (N.TAIKO,)),
    ((_etherscan_v2(167009), "https://hekla.taikoscan.io"), (N.TAIKO_HEKLA,)),
    (("https://flare-explorer.flare.network/api", "https://flare-explorer.flare.network"), (N.FLARE,)),
    (
        ("https://coston2-explorer.flare.network/api", "https://coston2-explorer.flare.network"),
        (N.FLARE_COSTON2,),
    ),
    (("https://blockscout.acala.network/api", "https://blockscout.acala.network"), (N.ACALA,)),
    (
        ("https://blockscout.mandala.aca-staging.network/api", "https://blockscout.mandala.aca-staging.network"),
        (N.ACALA_MANDALA_TESTNET,),
    ),
    (("https://blockscout.karura.network/api", "https://blockscout.karura.network"), (N.KARURA,)),
    (("https://explorer.darwinia.network/api", "https://explorer.darwinia.network"), (N.DARWINIA,)),
    (("https://crab-scan.darwinia.network/api", "https://crab-scan.darwinia.network"), (N.CRAB,)),
    (("https://evmapi.confluxscan.net/api", "https://evm.confluxscan.io"), (N.CFX,)),
    (("https://evmapi-testnet.confluxscan.net/api", "https://evmtestnet.confluxscan.io"), (N.CFX_TESTNET,)),
    (("https://api.scan.pulsechain.com", "https://scan.pulsechain.com"), (N.PULSECHAIN,)),
    (
        ("https://api.scan.v4.testnet.pulsechain.com", "https://scan.v4.testnet.pulsechain.com"),
        (N.PULSECHAIN_TESTNET,),
    ),
    (("https://explorer.immutable.com/api", "https://explorer.immutable.com"), (N.IMMUTABLE,)),
    (
        ("https://explorer.testnet.immutable.com/api", "https://explorer.testnet.immutable.com"),
        (N.IMMUTABLE_TESTNET,),
    ),
    (("https://soneium.blockscout.com/api", "https://soneium.blockscout.com"), (N.SONEIUM,)),
    (
        ("https://soneium-minato.blockscout.com/api", "https://soneium-minato.blockscout.com"),
        (N.SONEIUM_MINATO_TESTNET,),
    ),
    (("https://odyssey-explorer.ithaca.xyz/api", "https://odyssey-explorer.ithaca.xyz"), (N.ODYSSEY,)),
    ((_etherscan_v2(480), "https://worldscan.org"), (N.WORLD,)),
    ((_etherscan_v2(4801), "https://sepolia.worldscan.org"), (N.WORLD_SEPOLIA,)),
    ((_etherscan_v2(130), "https://uniscan.xyz"), (N.UNICHAIN,)),
    ((_etherscan_v2(1301), "https://sepolia.uniscan.xyz"), (N.UNICHAIN_SEPOLIA,)),
    (
        ("https://explorer.pecorino.signet.sh/api", "https://explorer.pecorino.signet.sh"),
        (N.SIGNET_PECORINO,),
    ),
    (("https://openapi.coredao.org/api", "https://scan.coredao.org"), (N.CORE,)),
    (("https://scan.merlinchain.io/api", "https://scan.merlinchain.io"), (N.MERLIN,)),
    (("https://api.btrscan.com/scan/api", "https://www.btrscan.com"), (N.BITLAYER,)),
    (("https://api.vanascan.io/api", "https://vanascan.io"), (N.VANA,)),
    (("https://zetachain.blockscout.com/api", "https://zetachain.blockscout.com"), (N.ZETA,)),
    (("https://mainnet-oapi.kaiascan.io/api", "https://kaiascan.io"), (N.KAIA,)),
    (("https://www.storyscan.xyz/api/v2", "https://www.storyscan.xyz"), (N.STORY,)),
    ((_etherscan_v2(1329), "https://seiscan.io"), (N.SEI,)),
    ((_etherscan_v2(1328), "https://testnet.seiscan.io"), (N.SEI_TESTNET,)),
    ((_etherscan_v2(988), "https://stablescan.xyz"), (N.STABLE_MAINNET,)),
    ((_etherscan_v2(2201), "https://testnet.stablescan.xyz"), (N.STABLE_TESTNET,)),
    ((_etherscan_v2(33139), "https://apescan.io"), (N.APECHAIN,)),
    ((_etherscan_v2(33111), "https://curtis.apescan.io"), (N.CURTIS,)),
    ((_etherscan_v2(146), "https://sonicscan.org"), (N.SONIC,)),
    ((_etherscan_v2(14601), "https://testnet.sonicscan.org"), (N.SONIC_TESTNET,)),
    ((_etherscan_v2(80069), "https://testnet.berascan.com"), (N.BERACHAIN_BEPOLIA,)),
    ((_etherscan_v2(80094), "https://berascan.com"), (N.BERACHAIN,)),
    (
        ("https://testnet-explorer.superposition.so/api", "https://testnet-explorer.superposition.so"),
        (N.SUPERPOSITION_TESTNET,),
    ),
    (("https://explorer.superposition.so/api", "https://explorer.superposition.so"), (N.SUPERPOSITION,)),
    ((_etherscan_v2(143), "https://monadscan.com"), (N.MONAD,)),
    ((_etherscan_v2(10143), "https://testnet.monadscan.com"), (N.MONAD_TESTNET,)),
    (("https://api.teloscan.io/api", "https://teloscan.io"), (N.TELOS_EVM,)),
    (("https://api.testnet.teloscan.io/api", "https://testnet.teloscan.io"), (N.TELOS_EVM_TESTNET,)),
    ((_etherscan_v2(999), "https://hyperevmscan.io"), (N.HYPERLIQUID,)),
    ((_etherscan_v2(2741), "https://abscan.org"), (N.ABSTRACT,)),
    ((_etherscan_v2(11124), "https://sepolia.abscan.org"), (N.ABSTRACT_TESTNET,)),
    (
        ("https://api.routescan.io/v2/network/mainnet/evm/21000000/etherscan/api", "https://cornscan.io"),
        (N.CORN,),
    ),
    (
        ("https://api.routescan.io/v2/network/testnet/evm/21000001/etherscan/api", "https://testnet.cornscan.io"),
        (N.CORN_TESTNET,),
    ),
    ((_etherscan_v2(50104), "https://sophscan.xyz"), (N.SOPHON,)),
    ((_etherscan_v2(531050104), "https://testnet.sophscan.xyz"), (N.SOPHON_TESTNET,)),
    (("https://explorer-api.lens.xyz", "https://explorer.lens.xyz"), (N.LENS,)),
    (
        ("https://block-explorer-api.staging.lens.zksync.dev", "https://explorer.testnet.lens.xyz"),
        (N.LENS_TESTNET,),
    ),
    ((_etherscan_v2(747474), "https://katanascan.com"), (N.KATANA,)),
    (("https://blockscout.lisk.com/api", "https://blockscout.lisk.com"), (N.LISK,)),
    (("https://explorer.fuse.io/api", "https://explorer.fuse.io"), (N.FUSE,)),
    (
        ("https://blockscout-api.injective.network/api", "https://blockscout.injective.network"),
        (N.INJECTIVE,),
    ),
    (
        ("https://testnet.blockscout-api.injective.network/api", "https://testnet.blockscout.injective.network"),
        (N.INJECTIVE_TESTNET,),
    ),
    (("https://blockscout.dev.gblend.xyz/api", "https://blockscout.dev.gblend.xyz"), (N.FLUENT_DEVNET,)),
    (("https://testnet.fluentscan.xyz/api", "https://testnet.fluentscan.xyz"), (N.FLUENT_TESTNET,)),
    ((_etherscan_v2(4352), "https://memecorescan.io"), (N.MEMECORE,)),
    ((_etherscan_v2(43521), "https://formicarium.memecorescan.io"), (N.FORMICARIUM,)),
    (
        ("https://insectarium.blockscout.memecore.com/api", "https://insectarium.blockscout.memecore.com"),
        (N.INSECTARIUM,),
    ),
    (
        ("https://skale-base-explorer.skalenodes.com/api", "https://skale-base-explorer.skalenodes.com"),
        (N.SKALE_BASE,),
    ),
    (
        (
            "https://base-sepolia-testnet-explorer.skalenodes.com/api",
            "https://base-sepolia-testnet-explorer.skalenodes.com",
        ),
        (N.SKALE_BASE_TESTNET,),
    ),
    (None, (
        N.ACALA_TESTNET, N.ANVIL_HARDHAT, N.ARBITRUM_GOERLI, N.ARBITRUM_TESTNET,
        N.AUTONOMYS_NOVA_TESTNET, N.BASE_GOERLI, N.CANTO, N.CANTO_TESTNET, N.CRONOS_TESTNET,
        N.DEV, N.EVMOS, N.EVMOS_TESTNET, N.FANTOM, N.FANTOM_TESTNET, N.FILECOIN_MAINNET,
        N.GOERLI, N.IOTEX, N.KARURA_TESTNET, N.KOI, N.KOVAN, N.LINEA_GOERLI, N.MOONBEAM_DEV,
        N.MORDEN, N.OASIS, N.OPTIMISM_GOERLI, N.OPTIMISM_KOVAN, N.PGN, N.PGN_SEPOLIA, N.POA,
        N.RINKEBY, N.ROPSTEN, N.SOKOL, N.TREASURE, N.TREASURE_TOPAZ, N.CANNON,
        N.POLKADOT_TESTNET,
    )),
])

_EXPLORER_API_KEY_ENV_VAR = _table("explorer_api_key_env_var", [
    ("ETHERSCAN_API_KEY", (
        N.ABSTRACT, N.ABSTRACT_TESTNET, N.APECHAIN, N.ARBITRUM, N.ARBITRUM_GOERLI,
        N.ARBITRUM_NOVA, N.ARBITRUM_SEPOLIA, N.ARBITRUM_TESTNET, N.AURORA, N.AURORA_TESTNET,
        N.AVALANCHE, N.AVALANCHE_FUJI, N.BASE, N.BASE_GOERLI, N.BASE_SEPOLIA,
        N.BINANCE_SMART_CHAIN, N.BINANCE_SMART_CHAIN_TESTNET, N.BLAST, N.BLAST_SEPOLIA, N.CELO,
        N.CRONOS, N.CRONOS_TESTNET, N.FRAXTAL, N.FRAXTAL_TESTNET, N.GNOSIS, N.GOERLI,
        N.HOLESKY, N.HOODI, N.HYPERLIQUID, N.KATANA, N.KOVAN, N.LINEA, N.LINEA_SEPOLIA,
        N.MAINNET, N.MANTLE, N.MANTLE_SEPOLIA, N.MONAD, N.MONAD_TESTNET, N.MORDEN,
        N.OPBNB_MAINNET, N.OPBNB_TESTNET, N.OPTIMISM, N.OPTIMISM_GOERLI, N.OPTIMISM_KOVAN,
        N.OPTIMISM_SEPOLIA, N.POLYGON, N.POLYGON_AMOY, N.RINKEBY, N.ROPSTEN, N.SCROLL,
        N.SCROLL_SEPOLIA, N.SEI, N.SEI_TESTNET, N.STABLE_MAINNET, N.STABLE_TESTNET, N.SONIC,
        N.SONIC_TESTNET, N.SOPHON, N.SOPHON_TESTNET, N.SYNDR, N.SYNDR_SEPOLIA, N.TAIKO,
        N.TAIKO_HEKLA, N.UNICHAIN, N.UNICHAIN_SEPOLIA, N.XAI, N.XAI_SEPOLIA, N.ZKSYNC,
        N.ZKSYNC_TESTNET, N.MEMECORE, N.FORMICARIUM, N.SKALE_BASE, N.SKALE_BASE_TESTNET,
    )),
    ("FTMSCAN_API_KEY", (N.FANTOM, N.FANTOM_TESTNET)),
    ("MOONSCAN_API_KEY", (N.MOONBEAM, N.MOONBASE, N.MOONBEAM_DEV, N.MOONRIVER)),
    ("BLOCKSCOUT_API_KEY", (
        N.ACALA, N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET, N.CANTO, N.CANTO_TESTNET,
        N.CELO_SEPOLIA, N.ETHERLINK, N.ETHERLINK_TESTNET, N.FLARE, N.FLARE_COSTON2, N.KARURA,
        N.KARURA_TESTNET, N.MODE, N.MODE_SEPOLIA, N.PGN, N.PGN_SEPOLIA, N.SHIMMER, N.ZORA,
        N.ZORA_SEPOLIA, N.DARWINIA, N.CRAB, N.KOI, N.IMMUTABLE, N.IMMUTABLE_TESTNET,
        N.SONEIUM, N.SONEIUM_MINATO_TESTNET, N.WORLD, N.WORLD_SEPOLIA, N.CURTIS, N.INK,
        N.INK_SEPOLIA, N.SUPERPOSITION_TESTNET, N.SUPERPOSITION, N.VANA, N.STORY, N.LISK,
        N.FUSE, N.INJECTIVE, N.INJECTIVE_TESTNET, N.SIGNET_PECORINO,
    )),
    ("BOBASCAN_API_KEY", (N.BOBA,)),
    ("CORESCAN_API_KEY", (N.CORE,)),
    ("MERLINSCAN_API_KEY", (N.MERLIN,)),
    ("BITLAYERSCAN_API_KEY", (N.BITLAYER,)),
    ("ZETASCAN_API_KEY", (N.ZETA,)),
    ("KAIASCAN_API_KEY", (N.KAIA,)),
    ("BERASCAN_API_KEY", (N.BERACHAIN, N.BERACHAIN_BEPOLIA)),
    ("ROUTESCAN_API_KEY", (N.CORN, N.CORN_TESTNET, N.PLASMA)),
    (None, (
        N.METIS, N.CHIADO, N.ODYSSEY, N.SEPOLIA, N.RSK, N.RSK_TESTNET, N.SOKOL, N.POA, N.OASIS,
        N.EMERALD, N.EMERALD_TESTNET, N.EVMOS, N.EVMOS_TESTNET, N.ANVIL_HARDHAT, N.DEV,
        N.GRAVITY_ALPHA_MAINNET, N.GRAVITY_ALPHA_TESTNET_SEPOLIA, N.BOB, N.BOB_SEPOLIA,
        N.FILECOIN_MAINNET, N.LINEA_GOERLI, N.FILECOIN_CALIBRATION_TESTNET, N.VICTION,
        N.ELASTOS, N.DEGEN, N.RONIN, N.RONIN_TESTNET, N.CFX, N.CFX_TESTNET, N.PULSECHAIN,
        N.PULSECHAIN_TESTNET, N.AUTONOMYS_NOVA_TESTNET, N.IOTEX, N.HAPPYCHAIN_TESTNET,
        N.TREASURE, N.TREASURE_TOPAZ, N.TELOS_EVM, N.TELOS_EVM_TESTNET, N.LENS, N.LENS_TESTNET,
        N.FLUENT_DEVNET, N.FLUENT_TESTNET, N.CANNON, N.INSECTARIUM, N.POLKADOT_TESTNET,
    )),
])

# Explorer vendor families by API key variable; forks of Etherscan run their own key.
_VERIFIER_BY_API_KEY_ENV_VAR: dict[str, VerifierType] = {
    "ETHERSCAN_API_KEY": VerifierType.ETHERSCAN,
    "BLOCKSCOUT_API_KEY": VerifierType.BLOCKSCOUT,
    "ROUTESCAN_API_KEY": VerifierType.ROUTESCAN,
}

_WRAPPED_NATIVE_TOKEN = _table("wrapped_native_token", [
    ("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", (N.MAINNET,)),
    ("0x4200000000000000000000000000000000000006", (N.OPTIMISM, N.OPBNB_MAINNET, N.BASE)),
    ("0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c", (N.BINANCE_SMART_CHAIN,)),
    ("0x82af49447d8a07e3bd95bd0d56f35241523fbab1", (N.ARBITRUM,)),
    ("0xe5d7c2a44ffddf6b295a15c148167daaaf5cf34f", (N.LINEA,)),
    ("0xdeaddeaddeaddeaddeaddeaddeaddeaddead1111", (N.MANTLE,)),
    ("0x4300000000000000000000000000000000000004", (N.BLAST,)),
    ("0xe91d153e0b41518a2ce8dd3d7944fa863463a97d", (N.GNOSIS,)),
    ("0x5300000000000000000000000000000000000004", (N.SCROLL,)),
    ("0xa51894664a773981c6c112c43ce576f315d5b1b6", (N.TAIKO,)),
    ("0xb31f66aa3c1e785363f0875a1b74e27b85fd66c7", (N.AVALANCHE,)),
    ("0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270", (N.POLYGON,)),
    ("0x21be370d5312f44cb42ce377bc9b8a0cef1a4c83", (N.FANTOM,)),
    ("0xa00744882684c3e4747faefd68d283ea44099d03", (N.IOTEX,)),
    ("0x40375C92d9FAf44d2f9db9Bd9ba41a3317a2404f", (N.CORE,)),
    ("0xF6D226f9Dc15d9bB51182815b320D3fBE324e1bA", (N.MERLIN,)),
    ("0xff204e2681a6fa0e2c3fade68a1b28fb90e4fc5f", (N.BITLAYER,)),
    ("0x48b62137EdfA95a428D35C09E44256a739F6B557", (N.APECHAIN,)),
    ("0x00EDdD9621Fb08436d0331c149D1690909a5906d", (N.VANA,)),
    ("0x5F0b1a82749cb4E2278EC87F8BF6B618dC71a8bf", (N.ZETA,)),
    ("0x19aac5f612f524b754ca7e7c41cbfa2e981a4432", (N.KAIA,)),
    ("0x1514000000000000000000000000000000000000", (N.STORY,)),
    ("0x263d8f36bb8d0d9526255e205868c26690b04b88", (N.TREASURE,)),
    ("0x1fB719f10b56d7a85DCD32f27f897375fB21cfdd", (N.SUPERPOSITION,)),
    ("0x039e2fB66102314Ce7b64Ce5Ce3E5183bc94aD38", (N.SONIC,)),
    ("0x6969696969696969696969696969696969696969", (N.BERACHAIN,)),
    ("0x5555555555555555555555555555555555555555", (N.HYPERLIQUID,)),
    ("0x3439153EB7AF838Ad19d56E1571FBD09333C2809", (N.ABSTRACT,)),
    ("0xE30feDd158A2e3b13e9badaeABaFc5516e95e8C7", (N.SEI,)),
    ("0x5aea5775959fbc2557cc8789bc1bf90a239d9a91", (N.ZKSYNC,)),
    ("0xf1f9e08a0818594fde4713ae0db1e46672ca960e", (N.SOPHON,)),
    ("0x967f8799af07df1534d48a95a5c9febe92c53ae0", (N.RSK,)),
    ("0x653e645e3d81a72e71328Bc01A04002945E3ef7A", (N.MEMECORE, N.FORMICARIUM, N.INSECTARIUM)),
    (None, (
        N.MORDEN, N.ROPSTEN, N.RINKEBY, N.GOERLI, N.KOVAN, N.HOLESKY, N.HOODI, N.SEPOLIA,
        N.ODYSSEY, N.OPTIMISM_KOVAN, N.OPTIMISM_GOERLI, N.OPTIMISM_SEPOLIA, N.BOB,
        N.BOB_SEPOLIA, N.ARBITRUM_TESTNET, N.ARBITRUM_GOERLI, N.ARBITRUM_SEPOLIA,
        N.ARBITRUM_NOVA, N.CRONOS, N.CRONOS_TESTNET, N.RSK_TESTNET, N.TELOS_EVM,
        N.TELOS_EVM_TESTNET, N.CRAB, N.DARWINIA, N.KOI, N.BINANCE_SMART_CHAIN_TESTNET, N.POA,
        N.SOKOL, N.SCROLL_SEPOLIA, N.METIS, N.CFX_TESTNET, N.CFX, N.POLYGON_AMOY,
        N.FANTOM_TESTNET, N.MOONBEAM, N.MOONBEAM_DEV, N.MOONRIVER, N.MOONBASE, N.DEV,
        N.ANVIL_HARDHAT, N.GRAVITY_ALPHA_MAINNET, N.GRAVITY_ALPHA_TESTNET_SEPOLIA, N.EVMOS,
        N.EVMOS_TESTNET, N.PLASMA, N.CHIADO, N.OASIS, N.EMERALD, N.EMERALD_TESTNET,
        N.FILECOIN_MAINNET, N.FILECOIN_CALIBRATION_TESTNET, N.AVALANCHE_FUJI, N.CELO,
        N.CELO_SEPOLIA, N.AURORA, N.AURORA_TESTNET, N.CANTO, N.CANTO_TESTNET, N.BOBA,
        N.BASE_GOERLI, N.BASE_SEPOLIA, N.SYNDR, N.SYNDR_SEPOLIA, N.SHIMMER, N.INK,
        N.INK_SEPOLIA, N.FRAXTAL, N.FRAXTAL_TESTNET, N.BLAST_SEPOLIA, N.LINEA_GOERLI,
        N.LINEA_SEPOLIA, N.ZKSYNC_TESTNET, N.MANTLE_SEPOLIA, N.XAI, N.XAI_SEPOLIA,
        N.HAPPYCHAIN_TESTNET, N.VICTION, N.ZORA, N.ZORA_SEPOLIA, N.PGN, N.PGN_SEPOLIA, N.MODE,
        N.MODE_SEPOLIA, N.ELASTOS, N.ETHERLINK, N.ETHERLINK_TESTNET, N.DEGEN, N.OPBNB_TESTNET,
        N.RONIN, N.RONIN_TESTNET, N.TAIKO_HEKLA, N.AUTONOMYS_NOVA_TESTNET, N.FLARE,
        N.FLARE_COSTON2, N.ACALA, N.ACALA_MANDALA_TESTNET, N.ACALA_TESTNET, N.KARURA,
        N.KARURA_TESTNET, N.PULSECHAIN, N.PULSECHAIN_TESTNET, N.CANNON, N.IMMUTABLE,
        N.IMMUTABLE_TESTNET, N.SONEIUM, N.SONEIUM_MINATO_TESTNET, N.WORLD, N.WORLD_SEPOLIA,
        N.SEI_TESTNET, N.STABLE_MAINNET, N.STABLE_TESTNET, N.UNICHAIN, N.UNICHAIN_SEPOLIA,
        N.SIGNET_PECORINO, N.CURTIS, N.SONIC_TESTNET, N.TREASURE_TOPAZ, N.BERACHAIN_BEPOLIA,
        N.SUPERPOSITION_TESTNET, N.MONAD, N.MONAD_TESTNET, N.ABSTRACT_TESTNET, N.CORN,
        N.CORN_TESTNET, N.SOPHON_TESTNET, N.POLKADOT_TESTNET, N.LENS, N.LENS_TESTNET,
        N.INJECTIVE, N.INJECTIVE_TESTNET, N.KATANA, N.LISK, N.FUSE, N.FLUENT_DEVNET,
        N.FLUENT_TESTNET, N.SKALE_BASE, N.SKALE_BASE_TESTNET,
    )),
])

_WRAPPED_NATIVE_TOKEN_ADDRESSES: dict[NamedChain, ChecksumAddress | None] = {
    chain: to_checksum_address(address) if address is not None else None
    for chain, address in _WRAPPED_NATIVE_TOKEN.items()
}

_DNS_DISCOVERY_CHAINS = frozenset({
    N.MAINNET, N.GOERLI, N.SEPOLIA, N.ROPSTEN, N.RINKEBY, N.HOLESKY, N.HOODI,
})

# Chain families. These are plain membership sets, not exhaustive tables.
ETHEREUM_CHAINS = frozenset({
    N.MAINNET, N.MORDEN, N.ROPSTEN, N.RINKEBY, N.GOERLI, N.KOVAN, N.HOLESKY, N.SEPOLIA,
})
OPTIMISM_CHAINS = frozenset({
    N.OPTIMISM, N.OPTIMISM_GOERLI, N.OPTIMISM_KOVAN, N.OPTIMISM_SEPOLIA, N.BASE, N.BASE_GOERLI,
    N.BASE_SEPOLIA, N.FRAXTAL, N.FRAXTAL_TESTNET, N.INK, N.INK_SEPOLIA, N.MODE, N.MODE_SEPOLIA,
    N.PGN, N.PGN_SEPOLIA, N.ZORA, N.ZORA_SEPOLIA, N.BLAST_SEPOLIA, N.OPBNB_MAINNET,
    N.OPBNB_TESTNET, N.SONEIUM, N.SONEIUM_MINATO_TESTNET, N.ODYSSEY, N.WORLD, N.WORLD_SEPOLIA,
    N.UNICHAIN, N.UNICHAIN_SEPOLIA, N.HAPPYCHAIN_TESTNET, N.LISK, N.CELO, N.KATANA,
})
ARBITRUM_CHAINS = frozenset({
    N.ARBITRUM, N.ARBITRUM_TESTNET, N.ARBITRUM_GOERLI, N.ARBITRUM_SEPOLIA, N.ARBITRUM_NOVA,
})
POLYGON_CHAINS = frozenset({N.POLYGON, N.POLYGON_AMOY})
GNOSIS_CHAINS = frozenset({N.GNOSIS, N.CHIADO})
ELASTIC_CHAINS = frozenset({
    N.ZKSYNC, N.ZKSYNC_TESTNET, N.ABSTRACT, N.ABSTRACT_TESTNET, N.SOPHON, N.SOPHON_TESTNET,
    N.LENS, N.LENS_TESTNET,
})


def average_block_time(chain: NamedChain) -> timedelta | None:
    """Approximate average block interval, useful as a polling default."""
    return _AVERAGE_BLOCK_TIME[chain]


def is_legacy(chain: NamedChain) -> bool:
    """True when the chain does not support EIP-1559 (type 2) transactions.

    Chains that were never classified report False.
    """
    return _IS_LEGACY[chain]


def supports_shanghai(chain: NamedChain) -> bool:
    """True only for chains known to have activated the Shanghai hardfork (PUSH0)."""
    return _SUPPORTS_SHANGHAI[chain]


def testnet_kind(chain: NamedChain) -> TestnetKind:
    return _TESTNET_KIND[chain]


def is_testnet(chain: NamedChain) -> bool:
    return _TESTNET_KIND[chain] is not TestnetKind.MAINNET


def native_currency_symbol(chain: NamedChain) -> str | None:
    return _NATIVE_CURRENCY_SYMBOL[chain]


def explorer_urls(chain: NamedChain) -> tuple[str, str] | None:
    """Return ``(api_url, browser_url)`` of the chain's block explorer."""
    return _EXPLORER_URLS[chain]


def explorer_api_key_env_var(chain: NamedChain) -> str | None:
    """Name of the environment variable conventionally holding the explorer API key."""
    return _EXPLORER_API_KEY_ENV_VAR[chain]


def explorer_verifier(chain: NamedChain) -> VerifierType | None:
    env_var = _EXPLORER_API_KEY_ENV_VAR[chain]
    if env_var is None:
        return None
    return _VERIFIER_BY_API_KEY_ENV_VAR.get(env_var, VerifierType.CUSTOM)


def wrapped_native_token(chain: NamedChain) -> ChecksumAddress | None:
    """Checksummed address of the most used wrapped native token (e.g. WETH)."""
    return _WRAPPED_NATIVE_TOKEN_ADDRESSES[chain]


def dns_discovery_seed(chain: NamedChain) -> str | None:
    """EIP-1459 node list for the chain, e.g. ``enrtree://...@all.mainnet.ethdisco.net``."""
    if chain not in _DNS_DISCOVERY_CHAINS:
        return None
    return f"{DNS_PREFIX}all.{str(chain).lower()}.ethdisco.net"


def is_ethereum(chain: NamedChain) -> bool:
    return chain in ETHEREUM_CHAINS


def is_optimism(chain: NamedChain) -> bool:
    """OP Stack chains."""
    return chain in OPTIMISM_CHAINS


def is_arbitrum(chain: NamedChain) -> bool:
    return chain in ARBITRUM_CHAINS


def is_polygon(chain: NamedChain) -> bool:
    return chain in POLYGON_CHAINS


def is_gnosis(chain: NamedChain) -> bool:
    return chain in GNOSIS_CHAINS


def is_elastic(chain: NamedChain) -> bool:
    """ZKsync Elastic Network chains."""
    return chain in ELASTIC_CHAINS
