from fastapi import APIRouter, Depends

from ..deps import get_service
from ..schemas.stats import Stats
from ..services.board import BoardService

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=Stats)
def get_stats(service: BoardService = Depends(get_service)):
    return service.stats()
