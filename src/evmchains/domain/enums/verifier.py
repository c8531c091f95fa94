from enum import Enum


class VerifierType(str, Enum):
    """Contract verification service behind a chain's block explorer."""

    ETHERSCAN = "ETHERSCAN"
    BLOCKSCOUT = "BLOCKSCOUT"
    ROUTESCAN = "ROUTESCAN"
    SOURCIFY = "SOURCIFY"
    CUSTOM = "CUSTOM"
