"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which Alembic and Base.metadata.create_all rely on.

Modules:
    song: 곡 (Song catalogue)
"""

from app.models.song import Song

__all__ = [
    "Song",
]
