"""
Resource API Integration Tests
/api/books, /api/movies, /api/painting 엔드포인트 통합 테스트
"""

import pytest
from httpx import AsyncClient
from unittest.mock import AsyncMock

from catalog.domain.models import Book, Movie, Painting
from catalog.features.books.repository import BookRepository

HELLO_BOOK = {
    "title": "Hello",
    "author": "me",
    "description": "nothing",
    "genre": "Action",
}

MONA_LISA = {
    "name": "Mona Lisa Painting",
    "artist": "Leonardo da Vinci",
    "year": 1517,
    "medium": "Oil",
    "period": "Renaissance",
}


class TestBookEndpoints:
    """도서 API 테스트"""

    @pytest.mark.asyncio
    async def test_get_book_as_user(self, client: AsyncClient, seed, user_headers):
        """user 역할은 단건 조회 가능"""
        await seed(Book(id=7, **HELLO_BOOK))

        response = await client.get("/api/books", params={"id": 7}, headers=user_headers)

        assert response.status_code == 200
        assert response.json() == {"id": 7, **HELLO_BOOK}

    @pytest.mark.asyncio
    async def test_get_book_as_anonymous(self, client: AsyncClient, seed):
        """토큰 없는 호출자는 본문 없는 403"""
        await seed(Book(id=7, **HELLO_BOOK))

        response = await client.get("/api/books", params={"id": 7})

        assert response.status_code == 403
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_list_books(self, client: AsyncClient, seed, admin_headers):
        await seed(
            Book(id=1, **HELLO_BOOK),
            Book(id=2, **{**HELLO_BOOK, "title": "World"}),
        )

        response = await client.get("/api/books/all", headers=admin_headers)

        assert response.status_code == 200
        assert [book["title"] for book in response.json()] == ["Hello", "World"]

    @pytest.mark.asyncio
    async def test_list_books_empty(self, client: AsyncClient, user_headers):
        response = await client.get("/api/books/all", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_book_assigns_id(self, client: AsyncClient, fetch, admin_headers):
        """생성 시 저장소가 id를 할당하고 응답에 포함"""
        response = await client.post(
            "/api/books/post", params=HELLO_BOOK, headers=admin_headers
        )

        assert response.status_code == 200
        created = response.json()
        assert isinstance(created["id"], int)
        assert {k: v for k, v in created.items() if k != "id"} == HELLO_BOOK

        stored = await fetch(Book, created["id"])
        assert stored.title == "Hello"

    @pytest.mark.asyncio
    async def test_create_book_as_user_forbidden(self, client: AsyncClient, user_headers):
        response = await client.post(
            "/api/books/post", params=HELLO_BOOK, headers=user_headers
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_update_book_keeps_id(self, client: AsyncClient, seed, fetch, admin_headers):
        await seed(Book(id=7, **HELLO_BOOK))
        incoming = {"title": "Goodbye", "author": "you", "description": "something", "genre": "Drama"}

        response = await client.put(
            "/api/books", params={"id": 7}, json=incoming, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {"id": 7, **incoming}
        assert (await fetch(Book, 7)).genre == "Drama"

    @pytest.mark.asyncio
    async def test_delete_book(self, client: AsyncClient, seed, fetch, admin_headers):
        await seed(Book(id=7, **HELLO_BOOK))

        response = await client.delete("/api/books", params={"id": 7}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Book with id 7 deleted"}
        assert await fetch(Book, 7) is None

    @pytest.mark.asyncio
    async def test_delete_book_as_user_keeps_record(
        self, client: AsyncClient, seed, fetch, user_headers
    ):
        await seed(Book(id=7, **HELLO_BOOK))

        response = await client.delete("/api/books", params={"id": 7}, headers=user_headers)

        assert response.status_code == 403
        assert await fetch(Book, 7) is not None

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, client: AsyncClient, user_headers):
        """숫자 키에 문자열 입력 시 422"""
        response = await client.get("/api/books", params={"id": "abc"}, headers=user_headers)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VAL_001"


class TestMovieEndpoints:
    """영화 API 테스트"""

    @pytest.mark.asyncio
    async def test_delete_missing_movie(self, client: AsyncClient, admin_headers):
        """없는 영화 삭제 시 404 고정 본문"""
        response = await client.delete(
            "/api/movies", params={"id": "0000000"}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json() == {
            "type": "EntityNotFoundException",
            "message": "Movie with id 0000000 not found",
        }

    @pytest.mark.asyncio
    async def test_create_movie_with_caller_id(self, client: AsyncClient, fetch, admin_headers):
        params = {
            "id": "tt1375666",
            "title": "Inception",
            "director": "Christopher Nolan",
            "release_year": 2010,
        }

        response = await client.post("/api/movies/post", params=params, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == params
        assert (await fetch(Movie, "tt1375666")).director == "Christopher Nolan"

    @pytest.mark.asyncio
    async def test_get_missing_movie(self, client: AsyncClient, user_headers):
        response = await client.get("/api/movies", params={"id": "tt0"}, headers=user_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Movie with id tt0 not found"

    @pytest.mark.asyncio
    async def test_update_missing_movie(self, client: AsyncClient, fetch, admin_headers):
        """없는 레코드 수정은 404이며 새 레코드를 만들지 않음"""
        response = await client.put(
            "/api/movies",
            params={"id": "tt0"},
            json={"title": "Ghost", "director": "Nobody", "release_year": 2000},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert await fetch(Movie, "tt0") is None


class TestPaintingEndpoints:
    """회화 API 테스트"""

    @pytest.mark.asyncio
    async def test_update_painting(self, client: AsyncClient, seed, fetch, admin_headers):
        """전체 교체 수정 후 code 유지"""
        await seed(
            Painting(
                code="mona-lisa",
                name="Mona Lisa",
                artist="Leonardo",
                year=1503,
                medium="Oil on poplar",
                period="High Renaissance",
            )
        )

        response = await client.put(
            "/api/painting", params={"code": "mona-lisa"}, json=MONA_LISA, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {"code": "mona-lisa", **MONA_LISA}

        stored = await fetch(Painting, "mona-lisa")
        assert stored.name == "Mona Lisa Painting"
        assert stored.code == "mona-lisa"

    @pytest.mark.asyncio
    async def test_get_painting_by_code(self, client: AsyncClient, seed, user_headers):
        await seed(Painting(code="mona-lisa", **MONA_LISA))

        response = await client.get(
            "/api/painting", params={"code": "mona-lisa"}, headers=user_headers
        )

        assert response.status_code == 200
        assert response.json()["artist"] == "Leonardo da Vinci"

    @pytest.mark.asyncio
    async def test_update_with_missing_field(self, client: AsyncClient, seed, admin_headers):
        await seed(Painting(code="mona-lisa", **MONA_LISA))

        response = await client.put(
            "/api/painting",
            params={"code": "mona-lisa"},
            json={"name": "Only a name"},
            headers=admin_headers,
        )

        assert response.status_code == 422


class TestAccessControl:
    """인증/권한 처리 순서 테스트"""

    @pytest.mark.asyncio
    async def test_forbidden_before_validation(self, client: AsyncClient):
        """권한 없는 호출자는 입력이 잘못되어도 403"""
        response = await client.post("/api/movies/post")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_user_put_with_bad_body_forbidden(self, client: AsyncClient, user_headers):
        response = await client.put(
            "/api/painting", params={"code": "x"}, json={}, headers=user_headers
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get(
            "/api/books/all", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_004"

    @pytest.mark.asyncio
    async def test_storage_failure(self, client: AsyncClient, user_headers, monkeypatch):
        """저장소 오류는 500 표준 에러 응답"""
        monkeypatch.setattr(
            BookRepository, "list", AsyncMock(side_effect=RuntimeError("storage unavailable"))
        )

        response = await client.get("/api/books/all", headers=user_headers)

        assert response.status_code == 500
        assert response.json()["error_code"] == "SYS_001"


class TestCreateThenGet:
    """생성 후 같은 키로 단건 조회하면 생성 결과와 동일"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, key_field, params",
        [
            ("books", "id", HELLO_BOOK),
            (
                "movies",
                "id",
                {
                    "id": "tt1375666",
                    "title": "Inception",
                    "director": "Christopher Nolan",
                    "release_year": 2010,
                },
            ),
            ("painting", "code", {"code": "mona-lisa", **MONA_LISA}),
        ],
    )
    async def test_get_returns_created_record(
        self, client: AsyncClient, admin_headers, user_headers, path, key_field, params
    ):
        created = await client.post(f"/api/{path}/post", params=params, headers=admin_headers)
        assert created.status_code == 200

        response = await client.get(
            f"/api/{path}",
            params={key_field: created.json()[key_field]},
            headers=user_headers,
        )

        assert response.status_code == 200
        assert response.json() == created.json()


class TestIntegerRanges:
    """정수 입력은 컬럼 범위를 벗어나면 422"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("book_id", [2**70, 2**63, -(2**63) - 1])
    async def test_book_id_out_of_range(self, client: AsyncClient, user_headers, book_id):
        response = await client.get("/api/books", params={"id": book_id}, headers=user_headers)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VAL_001"

    @pytest.mark.asyncio
    async def test_largest_book_id_is_looked_up(self, client: AsyncClient, user_headers):
        """범위 안의 최대 id는 저장소 조회 후 404"""
        response = await client.get(
            "/api/books", params={"id": 2**63 - 1}, headers=user_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == f"Book with id {2**63 - 1} not found"

    @pytest.mark.asyncio
    async def test_delete_book_id_out_of_range(self, client: AsyncClient, admin_headers):
        response = await client.delete(
            "/api/books", params={"id": 2**70}, headers=admin_headers
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_painting_year_out_of_range(self, client: AsyncClient, fetch, admin_headers):
        params = {"code": "mona-lisa", **MONA_LISA, "year": 2**31}

        response = await client.post("/api/painting/post", params=params, headers=admin_headers)

        assert response.status_code == 422
        assert await fetch(Painting, "mona-lisa") is None

    @pytest.mark.asyncio
    async def test_movie_release_year_out_of_range(
        self, client: AsyncClient, seed, fetch, admin_headers
    ):
        await seed(
            Movie(id="tt1375666", title="Inception", director="Nolan", release_year=2010)
        )

        response = await client.put(
            "/api/movies",
            params={"id": "tt1375666"},
            json={"title": "Inception", "director": "Nolan", "release_year": 2**64},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert (await fetch(Movie, "tt1375666")).release_year == 2010
