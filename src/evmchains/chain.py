"""Chain identity: a well-known NamedChain or an arbitrary EIP-155 chain ID."""

from __future__ import annotations

import re
from datetime import timedelta
from functools import total_ordering
from typing import Any

from eth_typing import ChecksumAddress
from pydantic_core import core_schema

from evmchains import metadata
from evmchains.domain.enums import NamedChain
from evmchains.exceptions import ChainIdOutOfRange, InvalidChainIdentifier

MAX_CHAIN_ID = 2**64 - 1

_DECIMAL_ID = re.compile(r"\+?[0-9]+")


def _check_id(chain_id: int) -> int:
    if not isinstance(chain_id, int) or isinstance(chain_id, bool):
        raise ChainIdOutOfRange(chain_id)
    if not 0 <= chain_id <= MAX_CHAIN_ID:
        raise ChainIdOutOfRange(chain_id)
    return int(chain_id)


def _parse_decimal_id(text: str) -> int | None:
    if not _DECIMAL_ID.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_CHAIN_ID:
        return None
    return value


@total_ordering
class Chain:
    """An EIP-155 chain.

    Holds either a NamedChain or a plain integer ID. Two chains are equal
    (and hash alike) when their numeric IDs are equal, whichever form they
    were built from. ``Chain(id)`` and ``Chain.from_id`` promote known IDs to
    the named form; only ``Chain.from_id_unchecked`` skips that.
    """

    __slots__ = ("_kind",)

    def __init__(self, kind: NamedChain | int) -> None:
        if not isinstance(kind, NamedChain):
            chain_id = _check_id(kind)
            named = NamedChain.try_from_id(chain_id)
            kind = named if named is not None else chain_id
        object.__setattr__(self, "_kind", kind)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- construction --

    @classmethod
    def from_named(cls, named: NamedChain) -> Chain:
        return cls(named)

    @classmethod
    def from_id(cls, chain_id: int) -> Chain:
        """Build a chain from its numeric ID, using the named form when the ID is known."""
        return cls(chain_id)

    @classmethod
    def from_id_unchecked(cls, chain_id: int) -> Chain:
        return cls._from_kind(_check_id(chain_id))

    @classmethod
    def _from_kind(cls, kind: NamedChain | int) -> Chain:
        chain = object.__new__(cls)
        object.__setattr__(chain, "_kind", kind)
        return chain

    @classmethod
    def from_name(cls, text: str) -> Chain:
        """Parse a canonical chain name, a declared alias, or a base-10 chain ID.

        Names are matched case-sensitively. Raises InvalidChainIdentifier when
        nothing matches.
        """
        try:
            return cls(NamedChain.parse(text))
        except InvalidChainIdentifier:
            pass
        chain_id = _parse_decimal_id(text) if isinstance(text, str) else None
        if chain_id is None:
            raise InvalidChainIdentifier(text)
        return cls.from_id(chain_id)

    @classmethod
    def parse(cls, value: Chain | NamedChain | int | str) -> Chain:
        """Lenient conversion used for deserialization.

        Strings are matched ignoring case, with ``_`` and ``-`` interchangeable,
        and may also be member names or decode-only aliases.
        """
        if isinstance(value, Chain):
            return value
        if isinstance(value, NamedChain):
            return cls(value)
        if isinstance(value, bool):
            raise InvalidChainIdentifier(str(value))
        if isinstance(value, int):
            return cls.from_id(value)
        if isinstance(value, str):
            try:
                return cls(NamedChain.decode(value))
            except InvalidChainIdentifier:
                pass
            chain_id = _parse_decimal_id(value.strip())
            if chain_id is not None:
                return cls.from_id(chain_id)
        raise InvalidChainIdentifier(str(value))

    @classmethod
    def default(cls) -> Chain:
        return cls(NamedChain.default())

    @classmethod
    def mainnet(cls) -> Chain:
        return cls(NamedChain.MAINNET)

    @classmethod
    def sepolia(cls) -> Chain:
        return cls(NamedChain.SEPOLIA)

    @classmethod
    def holesky(cls) -> Chain:
        return cls(NamedChain.HOLESKY)

    @classmethod
    def dev(cls) -> Chain:
        return cls(NamedChain.DEV)

    # -- accessors --

    @property
    def id(self) -> int:
        return int(self._kind)

    @property
    def named(self) -> NamedChain | None:
        """The NamedChain for this ID, also for chains built with ``from_id_unchecked``."""
        if isinstance(self._kind, NamedChain):
            return self._kind
        return NamedChain.try_from_id(self._kind)

    def is_named(self) -> bool:
        return isinstance(self._kind, NamedChain)

    def __str__(self) -> str:
        named = self.named
        if named is not None:
            return str(named)
        return str(self._kind)

    def __repr__(self) -> str:
        return f"Chain({self})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Chain):
            return self.id == other.id
        if isinstance(other, NamedChain):
            return self.id == int(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Chain):
            return self.id < other.id
        if isinstance(other, NamedChain):
            return self.id < int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __int__(self) -> int:
        return self.id

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self)._from_kind, (self._kind,))

    # -- metadata; numeric chains have no curated facts --

    def average_block_time(self) -> timedelta | None:
        named = self.named
        return metadata.average_block_time(named) if named is not None else None

    def is_legacy(self) -> bool:
        named = self.named
        return named is not None and metadata.is_legacy(named)

    def supports_shanghai(self) -> bool:
        named = self.named
        return named is not None and metadata.supports_shanghai(named)

    def is_testnet(self) -> bool:
        named = self.named
        return named is not None and metadata.is_testnet(named)

    def native_currency_symbol(self) -> str | None:
        named = self.named
        return metadata.native_currency_symbol(named) if named is not None else None

    def explorer_urls(self) -> tuple[str, str] | None:
        named = self.named
        return metadata.explorer_urls(named) if named is not None else None

    def explorer_api_key_env_var(self) -> str | None:
        named = self.named
        return metadata.explorer_api_key_env_var(named) if named is not None else None

    def wrapped_native_token(self) -> ChecksumAddress | None:
        named = self.named
        return metadata.wrapped_native_token(named) if named is not None else None

    def dns_discovery_seed(self) -> str | None:
        named = self.named
        return metadata.dns_discovery_seed(named) if named is not None else None

    def is_ethereum(self) -> bool:
        named = self.named
        return named is not None and metadata.is_ethereum(named)

    def is_optimism(self) -> bool:
        named = self.named
        return named is not None and metadata.is_optimism(named)

    def is_arbitrum(self) -> bool:
        named = self.named
        return named is not None and metadata.is_arbitrum(named)

    def is_polygon(self) -> bool:
        named = self.named
        return named is not None and metadata.is_polygon(named)

    def is_gnosis(self) -> bool:
        named = self.named
        return named is not None and metadata.is_gnosis(named)

    def is_elastic(self) -> bool:
        named = self.named
        return named is not None and metadata.is_elastic(named)

    # -- pydantic --

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize_chain),
        )


def _serialize_chain(chain: Chain) -> str | int:
    """Named chains serialize to their canonical name, others to the bare ID."""
    named = chain.named
    if named is not None:
        return str(named)
    return chain.id
