"""
PetClinic Backend - Owner Route Tests
=====================================

What:  HTTP-level tests for the owner pages.
How:   test_client (conftest) routes requests through the FastAPI app with
       mocked repositories behind the real OwnerService.

What we test:
    ✅ Status codes, redirect locations and rendered error messages
    ✅ Form-encoded POST bodies go through binding (id ignored)
    ✅ Unknown owner → 404 page; malformed id → 400 page
    ✅ Database and unexpected failures → generic 500 page, internals hidden
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from petclinic.exceptions import DatabaseError
from petclinic.models import Visit


@pytest.mark.asyncio
async def test_welcome_page(test_client):
    response = await test_client.get("/")

    assert response.status_code == 200
    assert "Find owners" in response.text


class TestCreationRoutes:

    @pytest.mark.asyncio
    async def test_get_new_owner_form(self, test_client):
        response = await test_client.get("/owners/new")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'action="/owners/new"' in response.text
        assert "Add Owner" in response.text

    @pytest.mark.asyncio
    async def test_post_valid_owner_redirects(self, test_client, owner_repository, owner_payload):
        async def assign_id(owner):
            owner.id = 11
            return owner

        owner_repository.save.side_effect = assign_id

        response = await test_client.post("/owners/new", data=owner_payload)

        assert response.status_code == 302
        assert response.headers["location"] == "/owners/11"

    @pytest.mark.asyncio
    async def test_post_invalid_owner_redisplays_form(
        self, test_client, owner_repository, owner_payload
    ):
        response = await test_client.post(
            "/owners/new", data={**owner_payload, "address": "", "telephone": "12ab"}
        )

        assert response.status_code == 200
        assert "must not be empty" in response.text
        assert "numeric value out of bounds" in response.text
        assert 'value="George"' in response.text
        owner_repository.save.assert_not_awaited()


class TestFindRoutes:

    @pytest.mark.asyncio
    async def test_get_find_form(self, test_client):
        response = await test_client.get("/owners/find")

        assert response.status_code == 200
        assert 'id="search-owner-form"' in response.text

    @pytest.mark.asyncio
    async def test_search_without_match_shows_not_found(self, test_client, owner_repository):
        owner_repository.find_by_first_name.return_value = []

        response = await test_client.get("/owners", params={"first_name": "Zed"})

        assert response.status_code == 200
        assert "not found" in response.text
        assert 'value="Zed"' in response.text

    @pytest.mark.asyncio
    async def test_search_with_one_match_redirects(self, test_client, owner_repository, make_owner):
        owner_repository.find_by_first_name.return_value = [make_owner(id=3)]

        response = await test_client.get("/owners", params={"first_name": "Geo"})

        assert response.status_code == 302
        assert response.headers["location"] == "/owners/3"

    @pytest.mark.asyncio
    async def test_search_with_many_matches_lists_them(
        self, test_client, owner_repository, make_owner
    ):
        owner_repository.find_by_first_name.return_value = [
            make_owner(id=1, last_name="Franklin", pets=[("Leo", "cat")]),
            make_owner(id=2, last_name="Davis"),
        ]

        response = await test_client.get("/owners")

        assert response.status_code == 200
        assert 'href="/owners/1"' in response.text
        assert 'href="/owners/2"' in response.text
        assert "Leo" in response.text
        owner_repository.find_by_first_name.assert_awaited_once_with("")


class TestEditRoutes:

    @pytest.mark.asyncio
    async def test_get_edit_form_prepopulated(self, test_client, owner_repository, make_owner):
        owner_repository.find_by_id.return_value = make_owner(id=4, first_name="Harold")

        response = await test_client.get("/owners/4/edit")

        assert response.status_code == 200
        assert 'value="Harold"' in response.text
        assert 'action="/owners/4/edit"' in response.text
        assert "Update Owner" in response.text

    @pytest.mark.asyncio
    async def test_post_edit_ignores_submitted_id(
        self, test_client, owner_repository, make_owner, owner_payload
    ):
        owner_repository.find_by_id.return_value = make_owner(id=4)

        response = await test_client.post("/owners/4/edit", data={**owner_payload, "id": "1"})

        assert response.status_code == 302
        assert response.headers["location"] == "/owners/4"
        assert owner_repository.save.await_args.args[0].id == 4

    @pytest.mark.asyncio
    async def test_post_invalid_edit_redisplays_form(
        self, test_client, owner_repository, owner_payload
    ):
        response = await test_client.post("/owners/4/edit", data={**owner_payload, "city": ""})

        assert response.status_code == 200
        assert "must not be empty" in response.text
        assert 'action="/owners/4/edit"' in response.text
        owner_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_edit_unknown_owner_is_404(self, test_client, owner_repository):
        owner_repository.find_by_id.return_value = None

        response = await test_client.get("/owners/999/edit")

        assert response.status_code == 404
        assert "Owner with ID &#39;999&#39; was not found" in response.text


class TestDetailRoute:

    @pytest.mark.asyncio
    async def test_owner_details_with_pets_and_visits(
        self, test_client, owner_repository, visit_repository, make_owner
    ):
        owner = make_owner(id=6, first_name="Jean", last_name="Coleman",
                           pets=[("Max", "cat"), ("Samantha", "cat")])
        max_, samantha = owner.pets
        owner_repository.find_by_id.return_value = owner

        async def find_visits(pet_id):
            if pet_id == max_.id:
                return [Visit(id=3, pet_id=pet_id, visit_date=date(2013, 1, 3), description="neutered")]
            return [Visit(id=1, pet_id=pet_id, visit_date=date(2013, 1, 1), description="rabies shot")]

        visit_repository.find_by_pet_id.side_effect = find_visits

        response = await test_client.get("/owners/6")

        assert response.status_code == 200
        assert "Jean Coleman" in response.text
        assert "2013-01-03" in response.text
        assert "neutered" in response.text
        assert "rabies shot" in response.text
        assert 'href="/owners/6/edit"' in response.text

    @pytest.mark.asyncio
    async def test_unknown_owner_is_404(self, test_client, owner_repository):
        owner_repository.find_by_id.return_value = None

        response = await test_client.get("/owners/999")

        assert response.status_code == 404
        assert "was not found" in response.text

    @pytest.mark.asyncio
    async def test_non_numeric_owner_id_is_400(self, test_client):
        response = await test_client.get("/owners/abc")

        assert response.status_code == 400


@pytest.mark.asyncio
async def test_response_carries_request_id(test_client):
    response = await test_client.get("/owners/find", headers={"X-Request-ID": "trace-123"})

    assert response.headers["X-Request-ID"] == "trace-123"


class TestErrorPages:

    @pytest.mark.asyncio
    async def test_database_error_renders_generic_500(self, test_client, owner_repository):
        owner_repository.find_by_first_name.side_effect = DatabaseError(
            context={"sql": "SELECT * FROM owners WHERE first_name LIKE :p"}
        )

        response = await test_client.get(
            "/owners", params={"first_name": "Geo"}, headers={"X-Request-ID": "db-err-1"}
        )

        assert response.status_code == 500
        assert "A database error occurred" in response.text
        assert "SELECT" not in response.text
        assert "db-err-1" in response.text

    @pytest.mark.asyncio
    async def test_unexpected_error_renders_generic_500(self, owner_service, owner_repository):
        from petclinic.main import GENERIC_ERROR_MESSAGE, app
        from petclinic.routes.owners import get_owner_service

        owner_repository.find_by_id.side_effect = RuntimeError("pool exhausted at 0x7f3a")
        app.dependency_overrides[get_owner_service] = lambda: owner_service
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/owners/1", headers={"X-Request-ID": "boom-42"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert GENERIC_ERROR_MESSAGE in response.text
        assert "pool exhausted" not in response.text
        assert response.headers["X-Request-ID"] == "boom-42"
