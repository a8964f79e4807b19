from lectern.core.config import settings
from lectern.core.db import AsyncSessionLocal, engine, get_db

__all__ = ["settings", "AsyncSessionLocal", "engine", "get_db"]
