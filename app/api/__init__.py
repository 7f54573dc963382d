"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates the endpoint routers into a single router
for inclusion in the FastAPI application.

Included routers:
    - songs: 곡 카탈로그 관리 (Song catalogue CRUD, mounted at /songs)
"""

from fastapi import APIRouter

from app.api.songs import router as songs_router

api_router: APIRouter = APIRouter()

api_router.include_router(songs_router, prefix="/songs", tags=["Songs"])
