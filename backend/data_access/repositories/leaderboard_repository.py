"""
Leaderboard repository for submitted scores.
"""

from typing import List, Optional

from .base import BaseRepository, Row


class LeaderboardRepository(BaseRepository):
    """
    Repository for leaderboard entries: {id, username, score, mode, date}.
    """

    def insert_entry(self, username: str, score: int, mode: str, date: str) -> Row:
        with self.transaction() as rows:
            entry_id = self._allocate_id()
            rows[entry_id] = {
                "id": entry_id,
                "username": username,
                "score": score,
                "mode": mode,
                "date": date,
            }
            return dict(rows[entry_id])

    def get_top_entries(self, mode: Optional[str] = None, limit: int = 10) -> List[Row]:
        """
        Highest scores first, optionally restricted to one game mode.

        Equal scores keep insertion order.
        """
        with self.read() as rows:
            entries = [dict(row) for row in rows.values() if mode is None or row["mode"] == mode]
        entries.sort(key=lambda row: row["score"], reverse=True)
        return entries[:limit]
