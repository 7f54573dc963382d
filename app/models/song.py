"""곡 SQLAlchemy ORM 모델 정의.

Song SQLAlchemy ORM model definition.

Tables:
    - songs: 곡 카탈로그 (Song catalogue: title, artist, duration)
"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Song(Base):
    """곡 모델 — API가 관리하는 단일 레코드.

    Song model — The record managed by the songs API.
    The row with id 1 is a protected system record (see SongService).

    Attributes:
        id: 자동 증가 정수 식별자 (Autoincrement integer identifier)
        title: 곡 제목, 전체에서 고유 (Song title, globally unique)
        artist: 아티스트 (Artist name)
        duration: 재생 시간 문자열, 형식 미검증 (Free-form duration, e.g. "3:03")
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "songs"

    # 곡 식별자 — 저장소가 생성 시 할당, 64비트 (Assigned by the store on insert, 64-bit)
    # SQLite는 INTEGER PK만 rowid 자동 증가 (SQLite autoincrements INTEGER PKs only)
    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    # 곡 제목 — Unique constraint backs the service-level duplicate check
    title: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False)
    duration: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
