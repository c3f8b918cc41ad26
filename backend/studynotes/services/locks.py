"""
Per-username serialization for read-modify-write sequences.

Every mutation of a user's subject tree loads the aggregate, checks its
preconditions, and saves it back. Holding the username's lock across that
sequence stops two requests in the same process from both passing a
"name not taken" check. Separate worker processes do not share these locks.

Locks are created on first use and dropped when the last holder or waiter
leaves, so the table only holds usernames with in-flight requests.
"""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Dict


@dataclass
class _Slot:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    users: int = 0


class UsernameLocks:
    """Keyed asyncio locks, one per username with pending work."""

    def __init__(self) -> None:
        self._slots: Dict[str, _Slot] = {}

    @asynccontextmanager
    async def hold(self, username: str) -> AsyncIterator[None]:
        slot = self._slots.get(username)
        if slot is None:
            slot = self._slots[username] = _Slot()
        slot.users += 1
        try:
            async with slot.lock:
                yield
        finally:
            slot.users -= 1
            if slot.users == 0:
                del self._slots[username]

    def __len__(self) -> int:
        return len(self._slots)


# Shared by every service instance in this process
username_locks = UsernameLocks()
