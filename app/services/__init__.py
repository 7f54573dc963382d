"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services enforce business rules and call repositories for DB operations.
"""
