"""
Base repository with transaction management.

Rows live in memory, keyed by id. A transaction context manager provides:
- Serialized access across request threads
- Commit on success (changes simply stay)
- Rollback on failure (the pre-transaction snapshot is restored)
"""

import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional

Row = Dict[str, Any]


class BaseRepository:
    """
    Base class for all repositories.

    Subclasses should use self.transaction() for writes and self.read() for
    reads, and hand out copies so callers never hold live rows.
    """

    def __init__(self):
        self._rows: Dict[str, Row] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Generator[Dict[str, Row], None, None]:
        """
        Context manager for write operations.

        Yields the live row table. If the block raises, every change made
        inside it is discarded and the exception propagates.

        Example:
            with self.transaction() as rows:
                rows[row_id] = {...}
        """
        with self._lock:
            snapshot = copy.deepcopy(self._rows)
            next_id = self._next_id
            try:
                yield self._rows
            except Exception:
                self._rows = snapshot
                self._next_id = next_id
                raise

    @contextmanager
    def read(self) -> Generator[Dict[str, Row], None, None]:
        """Same as transaction() without the snapshot, for read-only access."""
        with self._lock:
            yield self._rows

    def _allocate_id(self) -> str:
        row_id = str(self._next_id)
        self._next_id += 1
        return row_id

    def get(self, row_id: str) -> Optional[Row]:
        with self.read() as rows:
            row = rows.get(row_id)
            return copy.deepcopy(row) if row is not None else None

    def all(self) -> List[Row]:
        with self.read() as rows:
            return [copy.deepcopy(row) for row in rows.values()]

    def count(self) -> int:
        with self.read() as rows:
            return len(rows)

    def clear(self) -> None:
        with self.transaction() as rows:
            rows.clear()
            self._next_id = 1
