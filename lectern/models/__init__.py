from lectern.models.base import Base
from lectern.models.live_class import LiveClass

__all__ = [
    "Base",
    "LiveClass",
]
