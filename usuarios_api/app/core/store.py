"""
In-memory storage for user records.

The ``UserStore`` keeps records in insertion order inside the process;
nothing is written to disk and everything is lost on restart.  One
store is created per application in ``create_app`` and attached to
``app.state``.  Routes reach it through the ``get_store`` dependency
rather than a module-level list.

No locking is done.  Handlers run on a single event loop and never
await between reading and mutating the store.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

SEED_NAMES = ("Erick", "Juan", "Pedro", "Carlos", "Luis")


@dataclass
class UserRecord:
    """A user as held in the store."""

    id: int
    nombre: str


class UserStore:
    """Ordered collection of ``UserRecord`` objects."""

    def __init__(self, records: Optional[Iterable[UserRecord]] = None) -> None:
        self._records: List[UserRecord] = list(records or [])

    @classmethod
    def seeded(cls) -> "UserStore":
        """Return a store holding the five initial users."""
        return cls(UserRecord(id=i, nombre=name) for i, name in enumerate(SEED_NAMES, start=1))

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[UserRecord]:
        return list(self._records)

    def find_by_id(self, user_id: Optional[int]) -> Optional[UserRecord]:
        """Return the record with ``user_id`` or ``None``.

        Linear scan over the records; ``None`` never matches.
        """
        if user_id is None:
            return None
        for record in self._records:
            if record.id == user_id:
                return record
        return None

    def add(self, nombre: str) -> UserRecord:
        """Append a new record.

        The id is the store size plus one, so ids are only unique while
        nothing has been removed.
        """
        record = UserRecord(id=len(self._records) + 1, nombre=nombre)
        self._records.append(record)
        logger.info("Added user %s (%s)", record.id, record.nombre)
        return record

    def remove(self, record: UserRecord) -> None:
        # Identity, not equality: two records may share id and name.
        for index, existing in enumerate(self._records):
            if existing is record:
                del self._records[index]
                logger.info("Removed user %s", record.id)
                return
        raise ValueError(f"User {record.id} is not in the store")


def get_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
