from evmchains.domain.enums.named_chain import NamedChain
from evmchains.domain.enums.testnet_kind import TestnetKind
from evmchains.domain.enums.verifier import VerifierType

__all__ = [
    "NamedChain",
    "TestnetKind",
    "VerifierType",
]
