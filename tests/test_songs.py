"""곡 CRUD API 테스트.

Song CRUD API tests — Create, Read, Update, Delete song endpoints.
Covers status codes, Location header, business rule errors and the
protected song (id 1).
"""

from httpx import AsyncClient

URL = "/songs"


class TestSongCreate:
    """곡 생성 테스트."""

    async def test_create_song(self, client: AsyncClient):
        """곡 생성 성공 — 201, ID 할당, Location 헤더."""
        res = await client.post(URL, json={
            "title": "Imagine",
            "artist": "Lennon",
            "duration": "3:03",
        })
        assert res.status_code == 201
        data = res.json()
        assert data["id"] is not None
        assert data["title"] == "Imagine"
        assert data["artist"] == "Lennon"
        assert data["duration"] == "3:03"
        assert res.headers["location"] == f"/songs/{data['id']}"

    async def test_created_song_is_readable(self, client: AsyncClient):
        """생성 후 Location 경로로 조회 가능."""
        res = await client.post(URL, json={"title": "Imagine", "artist": "Lennon"})
        assert res.status_code == 201

        res2 = await client.get(res.headers["location"])
        assert res2.status_code == 200
        assert res2.json()["title"] == "Imagine"
        assert res2.json()["duration"] is None

    async def test_create_duplicate_title(self, client: AsyncClient):
        """같은 제목으로 두 번째 생성 시 422."""
        payload = {"title": "Imagine", "artist": "Lennon", "duration": "3:03"}
        first = await client.post(URL, json=payload)
        assert first.status_code == 201

        res = await client.post(URL, json={**payload, "artist": "Someone Else"})
        assert res.status_code == 422
        assert res.json()["detail"] == "This song title already exists."

    async def test_create_without_title(self, client: AsyncClient):
        """제목 없이 생성 시 422."""
        res = await client.post(URL, json={"artist": "Lennon"})
        assert res.status_code == 422
        assert res.json()["detail"] == "The song title must not be null."

    async def test_create_without_artist(self, client: AsyncClient):
        """아티스트 없이 생성 시 422."""
        res = await client.post(URL, json={"title": "Imagine", "artist": None})
        assert res.status_code == 422
        assert res.json()["detail"] == "The song artist must not be null."

    async def test_create_without_body(self, client: AsyncClient):
        """body 없이 생성 시 422."""
        res = await client.post(URL)
        assert res.status_code == 422
        assert res.json()["detail"] == "Song to create must not be null."

    async def test_create_reserved_id(self, client: AsyncClient):
        """보호된 ID(1)로 생성 시 422."""
        res = await client.post(URL, json={
            "id": 1,
            "title": "Brand New",
            "artist": "Nobody",
        })
        assert res.status_code == 422
        assert res.json()["detail"] == "Song with ID 1 can not be created."

    async def test_create_ignores_client_id(self, client: AsyncClient, song):
        """클라이언트가 보낸 ID는 무시되고 저장소가 새 ID를 할당."""
        res = await client.post(URL, json={
            "id": song.id,
            "title": "Imagine",
            "artist": "Lennon",
        })
        assert res.status_code == 201
        assert res.json()["id"] != song.id


class TestSongRead:
    """곡 조회 테스트."""

    async def test_list_songs(self, client: AsyncClient, song):
        """곡 목록 조회 — 보호된 곡 포함, ID 순."""
        res = await client.get(URL)
        assert res.status_code == 200
        data = res.json()
        assert isinstance(data, list)
        assert [s["id"] for s in data] == [1, song.id]
        assert data[1] == {
            "id": song.id,
            "title": "Yesterday",
            "artist": "The Beatles",
            "duration": "2:05",
        }

    async def test_get_song(self, client: AsyncClient, song):
        """곡 단건 조회."""
        res = await client.get(f"{URL}/{song.id}")
        assert res.status_code == 200
        assert res.json()["title"] == "Yesterday"

    async def test_get_nonexistent_song(self, client: AsyncClient):
        """존재하지 않는 곡 조회 시 404."""
        res = await client.get(f"{URL}/999")
        assert res.status_code == 404

    async def test_get_out_of_range_id(self, client: AsyncClient):
        """BIGINT 범위를 넘는 ID 조회 시 404."""
        res = await client.get(f"{URL}/100000000000000000000")
        assert res.status_code == 404

    async def test_get_protected_song(self, client: AsyncClient):
        """보호된 곡도 조회는 가능."""
        res = await client.get(f"{URL}/1")
        assert res.status_code == 200
        assert res.json()["id"] == 1


class TestSongUpdate:
    """곡 수정 테스트."""

    async def test_update_song(self, client: AsyncClient, song):
        """곡 정보 수정 — title/artist/duration 덮어쓰기."""
        res = await client.put(f"{URL}/{song.id}", json={
            "id": song.id,
            "title": "Yesterday (Remastered)",
            "artist": "The Beatles",
            "duration": "2:07",
        })
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == song.id
        assert data["title"] == "Yesterday (Remastered)"
        assert data["duration"] == "2:07"

        res2 = await client.get(f"{URL}/{song.id}")
        assert res2.json()["title"] == "Yesterday (Remastered)"

    async def test_update_keeps_same_title(self, client: AsyncClient, song):
        """제목을 그대로 두고 다른 필드만 수정."""
        res = await client.put(f"{URL}/{song.id}", json={
            "id": song.id,
            "title": "Yesterday",
            "artist": "Paul McCartney",
            "duration": None,
        })
        assert res.status_code == 200
        assert res.json()["artist"] == "Paul McCartney"
        assert res.json()["duration"] is None

    async def test_update_protected_song(self, client: AsyncClient):
        """보호된 곡 수정 시 422."""
        res = await client.put(f"{URL}/1", json={
            "id": 1,
            "title": "Changed",
            "artist": "Changed",
        })
        assert res.status_code == 422
        assert res.json()["detail"] == "Song with ID 1 can not be updated."

    async def test_update_nonexistent_song(self, client: AsyncClient):
        """존재하지 않는 곡 수정 시 404."""
        res = await client.put(f"{URL}/999", json={
            "id": 999,
            "title": "Ghost",
            "artist": "Nobody",
        })
        assert res.status_code == 404

    async def test_update_id_mismatch(self, client: AsyncClient, song):
        """body ID와 경로 ID가 다르면 422."""
        res = await client.put(f"{URL}/{song.id}", json={
            "id": song.id + 100,
            "title": "Other",
            "artist": "Other",
        })
        assert res.status_code == 422
        assert res.json()["detail"] == "Update IDs must be the same."

    async def test_update_without_id(self, client: AsyncClient, song):
        """body ID 누락 시 422."""
        res = await client.put(f"{URL}/{song.id}", json={
            "title": "Other",
            "artist": "Other",
        })
        assert res.status_code == 422

    async def test_update_without_body(self, client: AsyncClient, song):
        """body 없이 수정 시 422."""
        res = await client.put(f"{URL}/{song.id}")
        assert res.status_code == 422
        assert res.json()["detail"] == "Update IDs must be the same."

    async def test_update_out_of_range_id(self, client: AsyncClient):
        """BIGINT 범위를 넘는 ID 수정 시 404."""
        huge_id = 100000000000000000000
        res = await client.put(f"{URL}/{huge_id}", json={
            "id": huge_id,
            "title": "Ghost",
            "artist": "Nobody",
        })
        assert res.status_code == 404

    async def test_update_to_existing_title(self, client: AsyncClient, song):
        """다른 곡의 제목으로 변경 시 422."""
        res = await client.put(f"{URL}/{song.id}", json={
            "id": song.id,
            "title": "Bohemian Rhapsody",
            "artist": "The Beatles",
        })
        assert res.status_code == 422
        assert res.json()["detail"] == "This song title already exists."


class TestSongDelete:
    """곡 삭제 테스트."""

    async def test_delete_song(self, client: AsyncClient, song):
        """곡 삭제 성공."""
        res = await client.delete(f"{URL}/{song.id}")
        assert res.status_code == 204
        assert res.content == b""

        # 삭제 후 조회 시 404
        res2 = await client.get(f"{URL}/{song.id}")
        assert res2.status_code == 404

    async def test_delete_nonexistent_song(self, client: AsyncClient):
        """존재하지 않는 곡 삭제 시 404."""
        res = await client.delete(f"{URL}/999")
        assert res.status_code == 404

    async def test_delete_out_of_range_id(self, client: AsyncClient):
        """BIGINT 범위를 넘는 ID 삭제 시 404."""
        res = await client.delete(f"{URL}/100000000000000000000")
        assert res.status_code == 404

    async def test_delete_protected_song(self, client: AsyncClient):
        """보호된 곡 삭제 시 422, 곡은 그대로 남음."""
        res = await client.delete(f"{URL}/1")
        assert res.status_code == 422
        assert res.json()["detail"] == "Song with ID 1 can not be deleted."

        res2 = await client.get(f"{URL}/1")
        assert res2.status_code == 200


class TestHealth:
    """헬스 체크 테스트."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
