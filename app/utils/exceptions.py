"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly; FastAPI renders them as {"detail": "..."}.

Usage:
    from app.utils.exceptions import NotFoundError, BusinessError
    raise NotFoundError("Song not found")
    raise BusinessError("This song title already exists.")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 곡을 찾을 수 없을 때 사용.

    Args:
        detail: 오류 메시지 (Error message, default: "Song not found")
    """

    def __init__(self, detail: str = "Song not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BusinessError(HTTPException):
    """422 Unprocessable Entity 예외 — 비즈니스 규칙 위반 시 사용.

    422 exception raised when a request violates a business rule
    (null required field, duplicate title, mismatched update ids).

    Args:
        detail: 위반된 규칙을 설명하는 메시지 (Human-readable rule violation)
    """

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=422, detail=detail)


class ReservedSongError(BusinessError):
    """보호된 곡 ID에 대한 변경 시도 — Attempt to mutate the protected song.

    Subclass of BusinessError so it still maps to 422, while callers can
    tell the reserved-id case apart from other rule violations.

    Args:
        song_id: 보호된 곡 ID (The reserved song id)
        operation: 시도한 작업 — "created" / "updated" / "deleted"
    """

    def __init__(self, song_id: int, operation: str) -> None:
        self.song_id: int = song_id
        self.operation: str = operation
        super().__init__(f"Song with ID {song_id} can not be {operation}.")
