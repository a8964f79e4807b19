from fastapi import APIRouter
from lectern.api.v1 import live_classes, ws_live

router = APIRouter()
router.include_router(live_classes.router, prefix="/live-classes", tags=["live-classes"])
router.include_router(ws_live.router, tags=["live-ws"])
