from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lectern.models import LiveClass


class LiveClassRepo:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_live_class(self, live_class_id: str) -> LiveClass | None:
        stmt = select(LiveClass).where(LiveClass.id == live_class_id)
        res = await self.db.execute(stmt)
        return res.scalar_one_or_none()

