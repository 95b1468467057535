"""
Route-level tests for tasks, vendors and search.
"""
from vaad.models.models import Task

from .conftest import MockQuery, MockTask, MockVendor


class TestTaskRoutes:
    def test_list(self, client, mock_db):
        mock_db.query.return_value = MockQuery([MockTask(1, "Order flowers")])

        response = client.get("/api/tasks", params={"status": "pending"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 1
        assert body["data"][0]["title"] == "Order flowers"

    def test_get_missing(self, client, mock_db):
        mock_db.query.return_value = MockQuery([])
        response = client.get("/api/tasks/42")
        assert response.status_code == 404

    def test_create_validates_body(self, admin_client, mock_db):
        response = admin_client.post(
            "/api/tasks",
            json={"title": "x", "owner_name": "Dana", "due_date": "2026-11-01T18:00:00"},
        )
        assert response.status_code == 422
        mock_db.add.assert_not_called()

    def test_delete(self, admin_client, mock_db):
        task = MockTask(3, "Collect payments")
        mock_db.query.return_value = MockQuery([task])

        response = admin_client.delete("/api/tasks/3")

        assert response.status_code == 200
        assert response.json()["success"] is True
        mock_db.delete.assert_called_once_with(task)


class TestVendorRoutes:
    def test_list(self, client, mock_db):
        mock_db.query.return_value = MockQuery([MockVendor(1, "Falafel HaKfar")])

        response = client.get("/api/vendors", params={"category": "catering"})

        assert response.status_code == 200
        assert response.json()["data"][0]["name"] == "Falafel HaKfar"

    def test_update(self, admin_client, mock_db):
        vendor = MockVendor(1, "Falafel HaKfar")
        mock_db.query.return_value = MockQuery([vendor])

        response = admin_client.put(
            "/api/vendors/1",
            json={"name": "Falafel HaKfar", "category": "catering", "email": "", "status": "inactive"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "inactive"
        assert vendor.email is None

    def test_update_missing(self, admin_client, mock_db):
        mock_db.query.return_value = MockQuery([])
        response = admin_client.put(
            "/api/vendors/9", json={"name": "Nobody", "category": "other"}
        )
        assert response.status_code == 404


class TestSearchRoutes:
    def test_search(self, client, mock_db):
        tasks = [MockTask(1, "Order flowers")]
        mock_db.query.side_effect = lambda model: MockQuery(tasks if model is Task else [])

        response = client.get("/api/search", params={"q": "flowers"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["results"][0]["url"] == "/tasks/1"
        assert body["results"][0]["highlight"] == "Order flowers"

    def test_suggestions(self, client, mock_db):
        tasks = [MockTask(1, "Flowers")]
        vendors = [MockVendor(2, "Flowers")]
        mock_db.query.side_effect = lambda model: MockQuery(tasks if model is Task else vendors)

        response = client.get("/api/search/suggestions", params={"q": "flo"})

        assert response.status_code == 200
        assert response.json() == {"suggestions": ["Flowers"]}
