from fastapi import APIRouter, Depends

from ..dependencies import get_storage
from ..storage import MemStorage

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple service health check")
def healthcheck(storage: MemStorage = Depends(get_storage)) -> dict[str, object]:
    return {"status": "ok", "projects": len(storage.list_all())}
