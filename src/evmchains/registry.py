"""Runtime store of chain records for custom networks, keyed by chain ID."""

import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from evmchains.chain import Chain

logger = logging.getLogger(__name__)


class ChainRecord(BaseModel):
    """Caller-supplied description of a chain. Opaque to the registry apart from ``id``."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str


MAINNET = ChainRecord(id=1, name="Mainnet")
SEPOLIA = ChainRecord(id=11155111, name="Sepolia")


class ChainRegistry:
    """In-memory registry keyed by numeric chain ID.

    Seeded with Ethereum mainnet and Sepolia. Not thread-safe.
    """

    def __init__(self) -> None:
        self._chains: dict[int, ChainRecord] = {
            MAINNET.id: MAINNET,
            SEPOLIA.id: SEPOLIA,
        }

    @staticmethod
    def mainnet() -> ChainRecord:
        return MAINNET

    @staticmethod
    def sepolia() -> ChainRecord:
        return SEPOLIA

    def get(self, chain_id: int | Chain) -> ChainRecord | None:
        return self._chains.get(int(chain_id))

    def add(self, chain: Chain, record: ChainRecord) -> None:
        """Store ``record`` under ``chain``'s numeric ID, replacing any previous entry.

        Raises ValueError when ``record.id`` is not that ID.
        """
        chain_id = chain.id
        if record.id != chain_id:
            raise ValueError(f"Record id {record.id} does not match chain {chain_id}")
        previous = self._chains.get(chain_id)
        self._chains[chain_id] = record
        if previous is not None and previous != record:
            logger.info("Replaced chain %d in registry: %s -> %s", chain_id, previous.name, record.name)
        else:
            logger.debug("Registered chain %d (%s)", chain_id, record.name)

    def add_record(self, record: ChainRecord) -> None:
        self.add(Chain.from_id(record.id), record)

    def remove(self, chain_id: int | Chain) -> ChainRecord | None:
        record = self._chains.pop(int(chain_id), None)
        if record is not None:
            logger.debug("Removed chain %d (%s) from registry", record.id, record.name)
        return record

    def __contains__(self, chain_id: object) -> bool:
        if isinstance(chain_id, (int, Chain)):
            return int(chain_id) in self._chains
        return False

    def __iter__(self) -> Iterator[ChainRecord]:
        """Records in ascending chain ID order."""
        for chain_id in sorted(self._chains):
            yield self._chains[chain_id]

    def __len__(self) -> int:
        return len(self._chains)
