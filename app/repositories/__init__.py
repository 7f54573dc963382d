"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
BaseRepository holds the generic queries; SongRepository adds the
song-specific capabilities used by SongService.
"""
