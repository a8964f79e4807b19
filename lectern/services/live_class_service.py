from __future__ import annotations

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lectern.repos.live_class_repo import LiveClassRepo


class LiveClassDirectory(Protocol):
    """Answers whether a live class id names a real live class."""

    async def exists(self, live_class_id: str) -> bool: ...


class SqlLiveClassDirectory:
    """Directory backed by the live_classes table, one short session per lookup."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def exists(self, live_class_id: str) -> bool:
        async with self.session_factory() as db:
            live_class = await LiveClassRepo(db).get_live_class(live_class_id)
        return live_class is not None
