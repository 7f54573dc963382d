"""곡 서비스 — 곡 CRUD 비즈니스 로직.

Song Service — Business logic for song CRUD operations.
Enforces required fields, title uniqueness, update id consistency and the
protected song (id 1) that can never be created, updated or deleted.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.song import Song
from app.repositories.song_repository import SongRepositoryProtocol, song_repository
from app.schemas.song import SongRequest, SongResponse
from app.utils.exceptions import BusinessError, NotFoundError, ReservedSongError

# 보호된 시스템 곡 ID — Protected system record, immutable through the API
UNCHANGEABLE_SONG_ID: int = 1


class SongService:
    """곡 관련 비즈니스 로직을 처리하는 서비스.

    Service handling song business logic.

    Attributes:
        repository: 곡 저장소 (Persistence collaborator)
    """

    def __init__(self, repository: SongRepositoryProtocol) -> None:
        self.repository: SongRepositoryProtocol = repository

    def _to_response(self, song: Song) -> SongResponse:
        """곡 모델을 응답 스키마로 변환합니다.

        Convert a Song model instance to a SongResponse schema.
        """
        return SongResponse(
            id=song.id,
            title=song.title,
            artist=song.artist,
            duration=song.duration,
        )

    def _validate_changeable_id(self, song_id: int | None, operation: str) -> None:
        """보호된 곡 ID인지 확인합니다.

        Raises:
            ReservedSongError: song_id가 보호된 ID일 때 (song_id is the reserved id)
        """
        if song_id == UNCHANGEABLE_SONG_ID:
            raise ReservedSongError(UNCHANGEABLE_SONG_ID, operation)

    def _validate_required_fields(self, song: SongRequest) -> None:
        # 제목/아티스트 필수 — title and artist are NOT NULL
        if song.title is None:
            raise BusinessError("The song title must not be null.")
        if song.artist is None:
            raise BusinessError("The song artist must not be null.")

    async def _get_or_404(self, db: AsyncSession, song_id: int) -> Song:
        song: Song | None = await self.repository.find_by_id(db, song_id)
        if song is None:
            raise NotFoundError("Song not found")
        return song

    async def find_all(self, db: AsyncSession) -> list[SongResponse]:
        """모든 곡 목록을 조회합니다.

        List all songs in the store's natural order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[SongResponse]: 곡 목록 (List of song responses)
        """
        songs: list[Song] = await self.repository.find_all(db)
        return [self._to_response(s) for s in songs]

    async def find_by_id(self, db: AsyncSession, song_id: int) -> SongResponse:
        """ID로 곡을 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            song_id: 곡 ID (Song id)

        Returns:
            SongResponse: 곡 응답 (Song response)

        Raises:
            NotFoundError: 곡을 찾을 수 없을 때 (Song not found)
        """
        song: Song = await self._get_or_404(db, song_id)
        return self._to_response(song)

    async def create(self, db: AsyncSession, song: SongRequest | None) -> SongResponse:
        """새 곡을 생성합니다.

        Create a new song. The store assigns the id; a client-supplied id
        is only checked against the reserved id and otherwise ignored.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            song: 곡 생성 데이터 (Song creation data)

        Returns:
            SongResponse: 생성된 곡 응답 (Created song response, with id)

        Raises:
            BusinessError: 필수 필드 누락 또는 제목 중복
                           (Null song/title/artist, or duplicate title)
            ReservedSongError: 보호된 ID로 생성 시도 (Reserved id in payload)
        """
        if song is None:
            raise BusinessError("Song to create must not be null.")
        self._validate_required_fields(song)
        self._validate_changeable_id(song.id, "created")

        # 제목 중복 확인 — Check title uniqueness
        if await self.repository.exists_by_title(db, song.title):
            raise BusinessError("This song title already exists.")

        created: Song = await self.repository.save(
            db,
            Song(title=song.title, artist=song.artist, duration=song.duration),
        )
        return self._to_response(created)

    async def update(
        self,
        db: AsyncSession,
        song_id: int,
        song: SongRequest | None,
    ) -> SongResponse:
        """곡 정보를 수정합니다.

        Overwrite title, artist and duration of an existing song.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            song_id: 경로의 곡 ID (Song id from the path)
            song: 수정 데이터, id는 song_id와 같아야 함
                  (Update data; its id must equal song_id)

        Returns:
            SongResponse: 수정된 곡 응답 (Updated song response)

        Raises:
            ReservedSongError: 보호된 곡 수정 시도 (Reserved id)
            NotFoundError: 곡을 찾을 수 없을 때 (Song not found)
            BusinessError: ID 불일치, 필수 필드 누락, 제목 중복
                           (Id mismatch, null title/artist, duplicate title)
        """
        self._validate_changeable_id(song_id, "updated")
        db_song: Song = await self._get_or_404(db, song_id)

        if song is None or song.id != db_song.id:
            raise BusinessError("Update IDs must be the same.")
        self._validate_required_fields(song)

        # 제목 변경 시 중복 확인 — Check uniqueness only when the title changes
        if song.title != db_song.title and await self.repository.exists_by_title(db, song.title):
            raise BusinessError("This song title already exists.")

        db_song.title = song.title
        db_song.artist = song.artist
        db_song.duration = song.duration

        updated: Song = await self.repository.save(db, db_song)
        return self._to_response(updated)

    async def delete(self, db: AsyncSession, song_id: int) -> None:
        """곡을 삭제합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            song_id: 곡 ID (Song id)

        Raises:
            ReservedSongError: 보호된 곡 삭제 시도 (Reserved id)
            NotFoundError: 곡을 찾을 수 없을 때 (Song not found)
        """
        self._validate_changeable_id(song_id, "deleted")
        db_song: Song = await self._get_or_404(db, song_id)
        await self.repository.delete(db, db_song)


# 싱글턴 인스턴스 — Singleton instance
song_service: SongService = SongService(song_repository)
