"""곡 라우터 — 곡 CRUD 엔드포인트.

Song Router — CRUD endpoints for the song catalogue.
Business errors are raised by SongService as HTTP exceptions (404/422).
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.song import SongRequest, SongResponse
from app.services.song_service import song_service

router: APIRouter = APIRouter()

# OpenAPI 문서용 오류 응답 — Documented error responses
_NOT_FOUND = {404: {"description": "Song not found"}}
_INVALID = {422: {"description": "Business rule violation"}}


@router.get("", response_model=list[SongResponse], summary="Get all songs")
async def list_songs(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SongResponse]:
    """등록된 모든 곡을 조회합니다.

    List all registered songs.
    """
    return await song_service.find_all(db)


@router.get(
    "/{song_id}",
    response_model=SongResponse,
    summary="Get a song by ID",
    responses=_NOT_FOUND,
)
async def get_song(
    song_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SongResponse:
    """ID로 곡을 조회합니다."""
    return await song_service.find_by_id(db, song_id)


@router.post(
    "",
    response_model=SongResponse,
    status_code=201,
    summary="Create a new song",
    responses=_INVALID,
)
async def create_song(
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    data: Annotated[SongRequest | None, Body()] = None,
) -> SongResponse:
    """새 곡을 생성하고 Location 헤더에 곡 경로를 담아 반환합니다.

    Create a new song; the Location header points to /songs/{id}.
    """
    result: SongResponse = await song_service.create(db, data)
    await db.commit()
    response.headers["Location"] = str(
        request.app.url_path_for("get_song", song_id=str(result.id))
    )
    return result


@router.put(
    "/{song_id}",
    response_model=SongResponse,
    summary="Update a song",
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_song(
    song_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    data: Annotated[SongRequest | None, Body()] = None,
) -> SongResponse:
    """곡 정보를 수정합니다.

    Update an existing song by its ID.
    """
    result: SongResponse = await song_service.update(db, song_id, data)
    await db.commit()
    return result


@router.delete(
    "/{song_id}",
    status_code=204,
    summary="Delete a song",
    responses={**_NOT_FOUND, **_INVALID},
)
async def delete_song(
    song_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """곡을 삭제합니다."""
    await song_service.delete(db, song_id)
    await db.commit()
