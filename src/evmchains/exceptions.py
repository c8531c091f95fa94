class ChainError(Exception):
    """Base class for all evmchains errors."""


class ParseError(ChainError, ValueError):
    pass


class InvalidChainIdentifier(ParseError):
    """Text is neither a known chain name/alias nor a base-10 chain ID."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid chain identifier: {text!r}")


class ChainIdOutOfRange(ChainError, ValueError):
    """Chain IDs are unsigned 64-bit integers."""

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        super().__init__(f"Chain ID out of range: {chain_id}")


class ChainDecodeError(ChainError, ValueError):
    pass


class ChainTableError(ChainError):
    """A static chain table is incomplete or ambiguous. Raised at import time."""
