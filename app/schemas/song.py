"""곡 관련 Pydantic 요청/응답 스키마 정의.

Song Pydantic request/response schema definitions.
Wire representation: {"id": int|null, "title": str, "artist": str, "duration": str}.
"""

from pydantic import BaseModel, ConfigDict


class SongRequest(BaseModel):
    """곡 생성/수정 요청 스키마.

    Song create/update request schema.
    Every field is nullable on the wire; required-field checks are business
    rules enforced by SongService so they surface as BusinessError.

    Attributes:
        id: 곡 ID (create에서는 무시, update에서는 경로 ID와 일치해야 함)
        title: 곡 제목 (Song title)
        artist: 아티스트 (Artist name)
        duration: 재생 시간 (Free-form duration)
    """

    id: int | None = None
    title: str | None = None
    artist: str | None = None
    duration: str | None = None


class SongResponse(BaseModel):
    """곡 응답 스키마.

    Song response schema returned from the API.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int  # 저장소가 할당한 ID (Store-assigned id)
    title: str
    artist: str
    duration: str | None = None
