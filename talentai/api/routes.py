# talentai/api/routes.py
from fastapi import APIRouter

from talentai.core.clock import utcnow

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok", "timestamp": utcnow().isoformat()}
