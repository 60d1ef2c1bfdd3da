import unittest

from fastapi.testclient import TestClient

from ministry_backend.app import create_app
from ministry_backend.dependencies import get_document_store
from ministry_backend.store import InMemoryDocumentStore

USER_PAYLOAD = {
    "name": "João",
    "email": "joao@example.com",
    "ministeryID": "ministry-1",
    "pid": "joao-silva",
    "password": "secret1",
    "imgUrl": "https://example.com/joao.png",
}

EVENT_PAYLOAD = {
    "initialDate": "2025-03-01T19:00:00Z",
    "endDate": "2025-03-01T21:00:00Z",
    "maxMembers": 120,
    "tickets": [{"name": "Geral", "price": 0, "quantity": 120}],
    "address": {
        "street": "Rua das Flores",
        "number": "100",
        "city": "Campinas",
        "state": "SP",
        "zipCode": "13000-000",
    },
    "description": "Culto de jovens",
    "title": "Noite de louvor",
    "ownerId": "owner-7",
}


class BackendApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(create_app())
        store = get_document_store()
        if isinstance(store, InMemoryDocumentStore):
            store.reset()

    def _create_user(self, **overrides):
        response = self.client.post("/api/users", json={**USER_PAYLOAD, **overrides})
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_health(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_create_user_returns_envelope(self):
        payload = self._create_user()
        self.assertEqual(payload["message"], "success: create of users")
        self.assertEqual(payload["status"], 200)
        self.assertEqual(payload["data"]["name"], "João")
        self.assertTrue(payload["data"]["id"])

    def test_get_user_by_id_and_pid(self):
        created = self._create_user()
        doc_id = created["data"]["id"]

        by_id = self.client.get(f"/api/users/{doc_id}")
        self.assertEqual(by_id.status_code, 200)
        self.assertEqual(by_id.json()["id"], doc_id)
        self.assertEqual(by_id.json()["email"], "joao@example.com")

        by_pid = self.client.get("/api/users/pid/joao-silva")
        self.assertEqual(by_pid.status_code, 200)
        self.assertEqual(by_pid.json()["id"], doc_id)

    def test_missing_records_are_404(self):
        self.assertEqual(self.client.get("/api/users/nope").status_code, 404)
        self.assertEqual(self.client.get("/api/users/pid/nope").status_code, 404)

    def test_list_users(self):
        self._create_user()
        self._create_user(pid="maria", name="Maria")
        response = self.client.get("/api/users")
        self.assertEqual(response.status_code, 200)
        names = sorted(user["name"] for user in response.json())
        self.assertEqual(names, ["João", "Maria"])

    def test_patch_merges_only_sent_fields(self):
        doc_id = self._create_user()["data"]["id"]

        response = self.client.patch(f"/api/users/{doc_id}", json={"name": "Maria"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "message": "success: update of users",
                "status": 200,
                "data": {"name": "Maria", "id": doc_id},
            },
        )

        record = self.client.get(f"/api/users/{doc_id}").json()
        self.assertEqual(record["name"], "Maria")
        self.assertEqual(record["email"], "joao@example.com")

    def test_patch_missing_user(self):
        response = self.client.patch("/api/users/missing-id", json={"name": "X"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(),
            {
                "message": "error: update",
                "status": 500,
                "data": {"error": "Documento não encontrado"},
            },
        )

    def test_patch_ignores_explicit_nulls(self):
        doc_id = self._create_user()["data"]["id"]

        response = self.client.patch(
            f"/api/users/{doc_id}", json={"name": None, "email": None, "pid": "joao-2"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], {"pid": "joao-2", "id": doc_id})

        record = self.client.get(f"/api/users/{doc_id}").json()
        self.assertEqual(record["name"], "João")
        self.assertEqual(record["email"], "joao@example.com")
        self.assertEqual(record["pid"], "joao-2")

    def test_patch_missing_user_with_empty_body(self):
        response = self.client.patch("/api/users/missing-id", json={})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["data"], {"error": "Documento não encontrado"})

    def test_user_references_existing_ministry_id(self):
        ministry = self.client.post(
            "/api/ministerys",
            json={
                "name": "Ministério de Música",
                "principal": "João Silva",
                "imgUrl": "https://example.com/musica.jpg",
            },
        )
        ministry_id = ministry.json()["data"]["id"]

        created = self._create_user(ministeryID=ministry_id)
        record = self.client.get(f"/api/users/{created['data']['id']}").json()
        self.assertEqual(record["ministeryID"], ministry_id)

    def test_delete_then_delete_again(self):
        doc_id = self._create_user()["data"]["id"]

        first = self.client.delete(f"/api/users/{doc_id}")
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json()["data"], {"id": doc_id})
        self.assertEqual(first.json()["message"], "success: delete of users")

        self.assertEqual(self.client.get(f"/api/users/{doc_id}").status_code, 404)

        second = self.client.delete(f"/api/users/{doc_id}")
        self.assertEqual(second.status_code, 500)
        self.assertEqual(second.json()["message"], "error: delete")

    def test_invalid_user_payload_is_rejected(self):
        response = self.client.post(
            "/api/users", json={**USER_PAYLOAD, "password": "123"}
        )
        self.assertEqual(response.status_code, 422)

    def test_create_and_list_events(self):
        response = self.client.post("/api/events", json=EVENT_PAYLOAD)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "success: create of events")

        events = self.client.get("/api/events").json()
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0]["title"], "Noite de louvor")
        self.assertEqual(events[0]["address"]["city"], "Campinas")

    def test_event_cannot_end_before_it_starts(self):
        payload = {**EVENT_PAYLOAD, "endDate": "2025-03-01T18:00:00Z"}
        response = self.client.post("/api/events", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_scale_defaults_to_pending(self):
        response = self.client.post(
            "/api/scales",
            json={
                "date": "2025-03-02T09:00:00Z",
                "ministeryID": "ministry-3",
                "members": [{"id": "u1", "name": "João"}],
                "pid": "escala-marco",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["status"], "pending")

        record = self.client.get("/api/scales/pid/escala-marco").json()
        self.assertEqual(record["members"], [{"id": "u1", "name": "João"}])

    def test_ministry_routes_use_ministerys_collection(self):
        response = self.client.post(
            "/api/ministerys",
            json={
                "name": "Ministério de Música",
                "principal": "João Silva",
                "imgUrl": "https://example.com/musica.jpg",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "success: create of ministerys")

        store = get_document_store()
        if isinstance(store, InMemoryDocumentStore):
            self.assertEqual(len(store.collection("ministerys").documents), 1)


if __name__ == "__main__":
    unittest.main()
