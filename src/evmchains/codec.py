"""RLP wire encoding of chain IDs. The ID alone is the wire representation."""

import logging

import rlp
from rlp.exceptions import DeserializationError, RLPException
from rlp.sedes import big_endian_int

from evmchains.chain import MAX_CHAIN_ID, Chain
from evmchains.domain.enums import NamedChain
from evmchains.exceptions import ChainDecodeError

logger = logging.getLogger(__name__)


def encode_chain_id(chain: Chain | NamedChain | int) -> bytes:
    return rlp.encode(int(chain), sedes=big_endian_int)


def _decode_id(data: bytes) -> int:
    try:
        raw = rlp.decode(data)
        if not isinstance(raw, bytes):
            raise DeserializationError("Chain ID must be an RLP string, not a list", raw)
        chain_id = big_endian_int.deserialize(raw)
    except RLPException as e:
        logger.debug("Failed to decode chain ID from %r: %s", data, e)
        raise ChainDecodeError(f"Invalid RLP chain ID: {e}") from e
    if chain_id > MAX_CHAIN_ID:
        raise ChainDecodeError(f"Chain ID overflows u64: {chain_id}")
    return chain_id


def decode_chain(data: bytes) -> Chain:
    return Chain.from_id(_decode_id(data))


def decode_named_chain(data: bytes) -> NamedChain:
    """Decode a chain ID that must belong to a known NamedChain."""
    chain_id = _decode_id(data)
    named = NamedChain.try_from_id(chain_id)
    if named is None:
        raise ChainDecodeError(f"Unknown chain ID: {chain_id}")
    return named
