from evmchains.chain import Chain
from evmchains.codec import decode_chain, decode_named_chain, encode_chain_id
from evmchains.domain.enums import NamedChain, TestnetKind, VerifierType
from evmchains.exceptions import (
    ChainDecodeError,
    ChainError,
    ChainIdOutOfRange,
    ChainTableError,
    InvalidChainIdentifier,
    ParseError,
)
from evmchains.registry import ChainRecord, ChainRegistry

__all__ = [
    "Chain",
    "ChainDecodeError",
    "ChainError",
    "ChainIdOutOfRange",
    "ChainRecord",
    "ChainRegistry",
    "ChainTableError",
    "InvalidChainIdentifier",
    "NamedChain",
    "ParseError",
    "TestnetKind",
    "VerifierType",
    "decode_chain",
    "decode_named_chain",
    "encode_chain_id",
]
