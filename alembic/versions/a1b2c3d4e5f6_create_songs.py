"""create_songs

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

곡(songs) 테이블 생성 및 보호된 곡(id 1) 삽입.
Create the songs table and insert the protected song (id 1).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    songs = op.create_table(
        'songs',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('artist', sa.String(length=255), nullable=False),
        sa.Column('duration', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title', name='uq_songs_title'),
    )

    # 보호된 시스템 곡 — Protected system record, immutable through the API
    op.bulk_insert(songs, [
        {'id': 1, 'title': 'Bohemian Rhapsody', 'artist': 'Queen', 'duration': '5:55'},
    ])
    # 명시적 ID 삽입 후 시퀀스 보정 — Move the serial past the explicit id
    if op.get_bind().dialect.name == 'postgresql':
        op.execute("SELECT setval(pg_get_serial_sequence('songs', 'id'), 1)")


def downgrade() -> None:
    op.drop_table('songs')
