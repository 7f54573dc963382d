"""초기 데이터 시드 스크립트 — 테이블 및 보호된 곡 생성.

Seed script — Creates the tables and the protected song (id 1).
Run this script once to bootstrap a database created without Alembic.

Usage:
    python -m app.seed

Idempotent: 보호된 곡이 이미 있으면 건너뜁니다 (Skips if the protected song exists).
"""

import asyncio

from sqlalchemy import text

from app.database import async_session, engine, Base
from app.models import Song
from app.repositories.song_repository import song_repository
from app.services.song_service import UNCHANGEABLE_SONG_ID

# 보호된 시스템 곡 — Protected system record
PROTECTED_SONG: dict[str, str] = {
    "title": "Bohemian Rhapsody",
    "artist": "Queen",
    "duration": "5:55",
}


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if they don't exist, then insert the protected song.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await song_repository.find_by_id(db, UNCHANGEABLE_SONG_ID) is not None:
            print("Already seeded. Skipping.")
            return

        await song_repository.save(db, Song(id=UNCHANGEABLE_SONG_ID, **PROTECTED_SONG))

        # 명시적 ID 삽입 후 시퀀스 보정 — Move the serial past the explicit id (PostgreSQL)
        if db.bind.dialect.name == "postgresql":
            await db.execute(text(
                "SELECT setval(pg_get_serial_sequence('songs', 'id'), (SELECT MAX(id) FROM songs))"
            ))

        await db.commit()
        print(f"Seeded: song id={UNCHANGEABLE_SONG_ID} ({PROTECTED_SONG['title']})")


if __name__ == "__main__":
    asyncio.run(seed())
