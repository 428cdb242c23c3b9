"""
Tests for saved-list API endpoints.
"""

import uuid

from shared.models import UserRole


class TestSavedList:
    def test_add_twice(self, client_for, database):
        item = database.add_item()
        user_client, _ = client_for(UserRole.STANDARD)

        first = user_client.post("/saved-list", json={"itemId": item.id})
        second = user_client.post("/saved-list", json={"itemId": item.id})

        assert first.status_code == 201
        assert first.json() == {"message": "Added to saved list"}
        assert second.status_code == 400
        assert second.json() == {"error": "Item already in saved list"}

        listing = user_client.get("/saved-list").json()
        assert [entry["id"] for entry in listing] == [item.id]

    def test_listing_includes_restricted_link(self, client_for, database):
        item = database.add_item(movie_link="https://stream.example.com/x")
        user_client, _ = client_for()
        user_client.post("/saved-list", json={"itemId": item.id})

        listing = user_client.get("/saved-list").json()

        assert listing[0]["movieLink"] == "https://stream.example.com/x"

    def test_add_requires_item_id(self, client_for):
        user_client, _ = client_for()

        response = user_client.post("/saved-list", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Item ID required"

    def test_add_unknown_item(self, client_for):
        user_client, _ = client_for()
        response = user_client.post("/saved-list", json={"itemId": str(uuid.uuid4())})
        assert response.status_code == 404

    def test_remove(self, client_for, database):
        item = database.add_item()
        user_client, _ = client_for()
        user_client.post("/saved-list", json={"itemId": item.id})

        response = user_client.delete(f"/saved-list/{item.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Removed from saved list"}
        assert user_client.get("/saved-list").json() == []

    def test_remove_absent(self, client_for, database):
        item = database.add_item()
        user_client, _ = client_for()

        response = user_client.delete(f"/saved-list/{item.id}")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found in saved list"}

    def test_requires_session(self, client, database):
        item = database.add_item()
        assert client.get("/saved-list").status_code == 401
        assert client.post("/saved-list", json={"itemId": item.id}).status_code == 401
        assert client.delete(f"/saved-list/{item.id}").status_code == 401

    def test_deleted_item_leaves_list(self, client_for, database):
        item = database.add_item()
        admin_client, _ = client_for(UserRole.PRIVILEGED)
        user_client, _ = client_for()
        user_client.post("/saved-list", json={"itemId": item.id})

        admin_client.delete(f"/catalog/{item.id}")

        assert user_client.get("/saved-list").json() == []
