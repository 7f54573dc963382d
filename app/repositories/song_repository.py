"""곡 레포지토리 — 곡 CRUD 쿼리.

Song Repository — CRUD queries for songs.
SongRepositoryProtocol is the capability set SongService depends on, so the
service can run against the SQLAlchemy implementation or an in-memory fake.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.song import Song
from app.repositories.base import BaseRepository

# BIGINT 컬럼 범위 — Signed 64-bit range of the songs.id column
MIN_SONG_ID: int = -(2**63)
MAX_SONG_ID: int = 2**63 - 1


class SongRepositoryProtocol(Protocol):
    """곡 저장소 인터페이스 — Persistence capabilities required by SongService."""

    async def find_all(self, db: AsyncSession) -> list[Song]: ...

    async def find_by_id(self, db: AsyncSession, song_id: int) -> Song | None: ...

    async def exists_by_title(self, db: AsyncSession, title: str) -> bool: ...

    async def save(self, db: AsyncSession, song: Song) -> Song: ...

    async def delete(self, db: AsyncSession, song: Song) -> None: ...


class SongRepository(BaseRepository[Song]):
    """songs 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the songs table.
    """

    def __init__(self) -> None:
        super().__init__(Song)

    async def find_all(self, db: AsyncSession) -> list[Song]:
        """모든 곡을 ID 순으로 조회합니다 (All songs in primary key order)."""
        return list(await self.get_all(db, order_by=Song.id))

    async def find_by_id(self, db: AsyncSession, song_id: int) -> Song | None:
        """ID로 곡을 조회합니다 — BIGINT 범위를 벗어난 ID는 없는 곡으로 취급.

        Ids outside the signed 64-bit column range cannot exist, so they are
        reported as missing instead of reaching the driver.
        """
        if not MIN_SONG_ID <= song_id <= MAX_SONG_ID:
            return None
        return await self.get_by_id(db, song_id)

    async def exists_by_title(self, db: AsyncSession, title: str) -> bool:
        """같은 제목의 곡이 존재하는지 확인합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            title: 확인할 곡 제목 (Title to look up, exact match)

        Returns:
            bool: 존재 여부 (Whether a song with this title exists)
        """
        return await self.exists(db, {"title": title})

    async def save(self, db: AsyncSession, song: Song) -> Song:
        """곡을 저장합니다 — 신규는 INSERT, 기존은 변경사항 flush.

        Insert a new song or flush changes of an attached one.
        The store assigns the id on insert.
        """
        return await self.add(db, song)

    async def delete(self, db: AsyncSession, song: Song) -> None:
        await self.remove(db, song)


# 싱글턴 인스턴스 — Singleton instance
song_repository: SongRepository = SongRepository()
