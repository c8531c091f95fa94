"""Closed set of well-known EIP-155 chains.

Values are the chain IDs. Canonical names are kebab-case and derived from the
member name unless listed in ``_CANONICAL_OVERRIDES``.

When adding a chain:
  1. add the member here (value = chain ID);
  2. add a canonical override and/or aliases below if needed;
  3. add it to every table in ``evmchains.metadata`` (import fails otherwise).
"""

from __future__ import annotations

from enum import IntEnum, unique
from typing import Any

from pydantic_core import core_schema

from evmchains.exceptions import ChainTableError, InvalidChainIdentifier


@unique
class NamedChain(IntEnum):
    """An Ethereum EIP-155 chain with a well-known name."""

    MAINNET = 1
    MORDEN = 2
    ROPSTEN = 3
    RINKEBY = 4
    GOERLI = 5
    KOVAN = 42
    HOLESKY = 17000
    HOODI = 560048
    SEPOLIA = 11155111

    ODYSSEY = 911867

    OPTIMISM = 10
    OPTIMISM_KOVAN = 69
    OPTIMISM_GOERLI = 420
    OPTIMISM_SEPOLIA = 11155420

    BOB = 60808
    BOB_SEPOLIA = 808813

    ARBITRUM = 42161
    ARBITRUM_TESTNET = 421611
    ARBITRUM_GOERLI = 421613
    ARBITRUM_SEPOLIA = 421614
    ARBITRUM_NOVA = 42170

    CRONOS = 25
    CRONOS_TESTNET = 338

    RSK = 30
    RSK_TESTNET = 31

    TELOS_EVM = 40
    TELOS_EVM_TESTNET = 41

    CRAB = 44
    DARWINIA = 46
    KOI = 701

    # Rebranded to BNB Smart Chain; the member name is kept for compatibility.
    BINANCE_SMART_CHAIN = 56
    BINANCE_SMART_CHAIN_TESTNET = 97

    POA = 99
    SOKOL = 77

    SCROLL = 534352
    SCROLL_SEPOLIA = 534351

    METIS = 1088

    CFX_TESTNET = 71
    CFX = 1030

    GNOSIS = 100

    POLYGON = 137
    POLYGON_AMOY = 80002

    FANTOM = 250
    FANTOM_TESTNET = 4002

    MOONBEAM = 1284
    MOONBEAM_DEV = 1281
    MOONRIVER = 1285
    MOONBASE = 1287

    DEV = 1337
    ANVIL_HARDHAT = 31337

    GRAVITY_ALPHA_MAINNET = 1625
    GRAVITY_ALPHA_TESTNET_SEPOLIA = 13505

    EVMOS = 9001
    EVMOS_TESTNET = 9000

    PLASMA = 9745

    CHIADO = 10200

    OASIS = 26863

    EMERALD = 42262
    EMERALD_TESTNET = 42261

    FILECOIN_MAINNET = 314
    FILECOIN_CALIBRATION_TESTNET = 314159

    AVALANCHE = 43114
    AVALANCHE_FUJI = 43113

    CELO = 42220
    CELO_SEPOLIA = 11142220

    AURORA = 1313161554
    AURORA_TESTNET = 1313161555

    CANTO = 7700
    CANTO_TESTNET = 740

    BOBA = 288

    BASE = 8453
    BASE_GOERLI = 84531
    BASE_SEPOLIA = 84532

    SYNDR = 404
    SYNDR_SEPOLIA = 444444

    SHIMMER = 148

    INK = 57073
    INK_SEPOLIA = 763373

    FRAXTAL = 252
    FRAXTAL_TESTNET = 2522

    BLAST = 81457
    BLAST_SEPOLIA = 168587773

    LINEA = 59144
    LINEA_GOERLI = 59140
    LINEA_SEPOLIA = 59141

    ZKSYNC = 324
    ZKSYNC_TESTNET = 300

    MANTLE = 5000
    MANTLE_SEPOLIA = 5003

    XAI = 660279
    XAI_SEPOLIA = 37714555429

    HAPPYCHAIN_TESTNET = 216

    VICTION = 88

    ZORA = 7777777
    ZORA_SEPOLIA = 999999999

    PGN = 424
    PGN_SEPOLIA = 58008

    MODE = 34443
    MODE_SEPOLIA = 919

    ELASTOS = 20

    ETHERLINK = 42793
    ETHERLINK_TESTNET = 128123

    DEGEN = 666666666

    OPBNB_MAINNET = 204
    OPBNB_TESTNET = 5611

    RONIN = 2020
    RONIN_TESTNET = 2021

    TAIKO = 167000
    TAIKO_HEKLA = 167009

    AUTONOMYS_NOVA_TESTNET = 490000

    FLARE = 14
    FLARE_COSTON2 = 114

    ACALA = 787
    ACALA_MANDALA_TESTNET = 595
    ACALA_TESTNET = 597

    KARURA = 686
    KARURA_TESTNET = 596

    PULSECHAIN = 369
    PULSECHAIN_TESTNET = 943

    CANNON = 13370

    IMMUTABLE = 13371
    IMMUTABLE_TESTNET = 13473

    SONEIUM = 1868
    SONEIUM_MINATO_TESTNET = 1946

    WORLD = 480
    WORLD_SEPOLIA = 4801

    IOTEX = 4689
    CORE = 1116
    MERLIN = 4200
    BITLAYER = 200901
    VANA = 1480
    ZETA = 7000
    KAIA = 8217
    STORY = 1514

    SEI = 1329
    SEI_TESTNET = 1328

    STABLE_MAINNET = 988
    STABLE_TESTNET = 2201

    UNICHAIN = 130
    UNICHAIN_SEPOLIA = 1301

    SIGNET_PECORINO = 14174

    APECHAIN = 33139
    CURTIS = 33111

    SONIC = 146
    SONIC_TESTNET = 14601

    TREASURE = 61166
    TREASURE_TOPAZ = 978658

    BERACHAIN_BEPOLIA = 80069
    BERACHAIN = 80094

    SUPERPOSITION_TESTNET = 98985
    SUPERPOSITION = 55244

    MONAD = 143
    MONAD_TESTNET = 10143

    HYPERLIQUID = 999

    ABSTRACT = 2741
    ABSTRACT_TESTNET = 11124

    CORN = 21000000
    CORN_TESTNET = 21000001

    SOPHON = 50104
    SOPHON_TESTNET = 531050104

    POLKADOT_TESTNET = 420420417

    LENS = 232
    LENS_TESTNET = 37111

    INJECTIVE = 1776
    INJECTIVE_TESTNET = 1439

    KATANA = 747474
    LISK = 1135
    FUSE = 122

    FLUENT_DEVNET = 20993
    FLUENT_TESTNET = 20994

    SKALE_BASE = 1562508942
    SKALE_BASE_TESTNET = 324705682

    MEMECORE = 4352
    FORMICARIUM = 43521
    INSECTARIUM = 43522

    def __str__(self) -> str:
        return _CANONICAL_NAMES[self]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @property
    def canonical_name(self) -> str:
        return _CANONICAL_NAMES[self]

    @property
    def aliases(self) -> tuple[str, ...]:
        """Extra names accepted by :meth:`parse`, canonical name excluded."""
        return _PARSE_ALIASES.get(self, ())

    @classmethod
    def default(cls) -> NamedChain:
        return cls.MAINNET

    @classmethod
    def try_from_id(cls, chain_id: int) -> NamedChain | None:
        return _BY_ID.get(chain_id)

    @classmethod
    def parse(cls, text: str) -> NamedChain:
        """Strict lookup: canonical name or declared alias, case-sensitive."""
        try:
            return _PARSE_LOOKUP[text]
        except (KeyError, TypeError):
            raise InvalidChainIdentifier(text) from None

    @classmethod
    def decode(cls, text: str) -> NamedChain:
        """Tolerant lookup used for deserialization.

        Accepts everything :meth:`parse` does plus member names and extra
        decode-only aliases, ignoring case and treating ``_`` and ``-`` alike.
        """
        if not isinstance(text, str):
            raise InvalidChainIdentifier(str(text))
        try:
            return _DECODE_LOOKUP[_normalize(text)]
        except KeyError:
            raise InvalidChainIdentifier(text) from None

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_named_chain,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def _validate_named_chain(value: Any) -> NamedChain:
    if isinstance(value, NamedChain):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        named = NamedChain.try_from_id(value)
        if named is None:
            raise InvalidChainIdentifier(str(value))
        return named
    return NamedChain.decode(value)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "-")


_CANONICAL_OVERRIDES: dict[NamedChain, str] = {
    NamedChain.TELOS_EVM: "telos",
    NamedChain.TELOS_EVM_TESTNET: "telos-testnet",
    NamedChain.BINANCE_SMART_CHAIN: "bsc",
    NamedChain.BINANCE_SMART_CHAIN_TESTNET: "bsc-testnet",
    NamedChain.GNOSIS: "xdai",
    NamedChain.POLYGON_AMOY: "amoy",
    NamedChain.AVALANCHE_FUJI: "fuji",
}

# Accepted by NamedChain.parse and Chain.from_name.
_PARSE_ALIASES: dict[NamedChain, tuple[str, ...]] = {
    NamedChain.MAINNET: ("ethlive",),
    NamedChain.BINANCE_SMART_CHAIN: ("binance-smart-chain", "bnb-smart-chain"),
    NamedChain.BINANCE_SMART_CHAIN_TESTNET: ("binance-smart-chain-testnet", "bnb-smart-chain-testnet"),
    NamedChain.GNOSIS: ("gnosis", "gnosis-chain"),
    NamedChain.POLYGON_AMOY: ("polygon-amoy",),
    NamedChain.AVALANCHE_FUJI: ("avalanche-fuji",),
    NamedChain.ANVIL_HARDHAT: ("anvil", "hardhat"),
    NamedChain.CURTIS: ("apechain-testnet",),
    NamedChain.TREASURE_TOPAZ: ("treasure-topaz-testnet",),
    NamedChain.BERACHAIN_BEPOLIA: ("berachain-bepolia-testnet",),
    NamedChain.FORMICARIUM: ("memecore-formicarium",),
    NamedChain.INSECTARIUM: ("memecore-insectarium",),
}

# Only accepted by NamedChain.decode (deserialization).
_DECODE_ALIASES: dict[NamedChain, tuple[str, ...]] = {
    NamedChain.ARBITRUM: ("arbitrum-one",),
    NamedChain.TELOS_EVM: ("telos-evm",),
    NamedChain.TELOS_EVM_TESTNET: ("telos-evm-testnet",),
    NamedChain.SCROLL_SEPOLIA: ("scroll-sepolia-testnet",),
    NamedChain.CFX: ("conflux-espace",),
    NamedChain.CFX_TESTNET: ("conflux-espace-testnet",),
    NamedChain.INK_SEPOLIA: ("ink-sepolia-testnet",),
    NamedChain.WORLD: ("worldchain",),
    NamedChain.WORLD_SEPOLIA: ("worldchain-sepolia",),
    NamedChain.OPBNB_MAINNET: ("op-bnb-mainnet",),
    NamedChain.OPBNB_TESTNET: ("op-bnb-testnet",),
    NamedChain.ZKSYNC: ("zk-sync",),
    NamedChain.ZKSYNC_TESTNET: ("zk-sync-testnet",),
    NamedChain.APECHAIN: ("ape-chain",),
    NamedChain.MEMECORE: ("meme-core",),
}


def _register(lookup: dict[str, NamedChain], name: str, chain: NamedChain) -> None:
    existing = lookup.setdefault(name, chain)
    if existing is not chain:
        raise ChainTableError(f"Name {name!r} is claimed by both {existing.name} and {chain.name}")


def _build_tables() -> tuple[dict[NamedChain, str], dict[str, NamedChain], dict[str, NamedChain]]:
    canonical = {
        chain: _CANONICAL_OVERRIDES.get(chain, chain.name.lower().replace("_", "-")) for chain in NamedChain
    }

    parse_lookup: dict[str, NamedChain] = {}
    for chain in NamedChain:
        _register(parse_lookup, canonical[chain], chain)
        for alias in _PARSE_ALIASES.get(chain, ()):
            _register(parse_lookup, alias, chain)

    decode_lookup: dict[str, NamedChain] = {}
    for name, chain in parse_lookup.items():
        _register(decode_lookup, _normalize(name), chain)
    for chain in NamedChain:
        _register(decode_lookup, _normalize(chain.name), chain)
        for alias in _DECODE_ALIASES.get(chain, ()):
            _register(decode_lookup, _normalize(alias), chain)

    return canonical, parse_lookup, decode_lookup


_CANONICAL_NAMES, _PARSE_LOOKUP, _DECODE_LOOKUP = _build_tables()
_BY_ID: dict[int, NamedChain] = {int(chain): chain for chain in NamedChain}
