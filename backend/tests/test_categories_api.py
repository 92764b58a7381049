from fastapi.testclient import TestClient
from gotogether.main import app
from tests.helpers import create_user


def test_category_crud(async_db):
    client = TestClient(app)
    user_id = create_user(client, display_name="Owner").json()['id']

    r = client.post(f"/api/contacts/{user_id}/categories", json={"name": "Work", "color": "#0000ff"})
    assert r.status_code == 201
    work = r.json()
    assert work['userId'] == user_id
    assert work['name'] == "Work"

    client.post(f"/api/contacts/{user_id}/categories", json={"name": "Climbing"})

    # Sorted by name
    r = client.get(f"/api/contacts/{user_id}/categories")
    assert r.status_code == 200
    assert [c['name'] for c in r.json()] == ["Climbing", "Work"]

    r = client.put(f"/api/contacts/{user_id}/categories/{work['id']}", json={"name": "Colleagues"})
    assert r.status_code == 200
    assert r.json()['name'] == "Colleagues"
    assert r.json()['color'] == "#0000ff"

    r = client.delete(f"/api/contacts/{user_id}/categories/{work['id']}")
    assert r.status_code == 204
    assert [c['name'] for c in client.get(f"/api/contacts/{user_id}/categories").json()] == ["Climbing"]


def test_category_errors(async_db):
    client = TestClient(app)
    owner = create_user(client).json()['id']
    other = create_user(client).json()['id']

    r = client.post(f"/api/contacts/{owner}/categories", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "name required"}

    r = client.post("/api/contacts/missing-user/categories", json={"name": "Work"})
    assert r.status_code == 404

    category_id = client.post(f"/api/contacts/{owner}/categories", json={"name": "Work"}).json()['id']

    # Only the owner can change or delete it
    assert client.put(f"/api/contacts/{other}/categories/{category_id}", json={"name": "X"}).status_code == 404
    assert client.delete(f"/api/contacts/{other}/categories/{category_id}").status_code == 404


def test_deleting_category_keeps_contact(async_db):
    client = TestClient(app)
    user_a = create_user(client, display_name="User A").json()['id']
    user_b = create_user(client, display_name="User B").json()['id']

    category_id = client.post(f"/api/contacts/{user_a}/categories", json={"name": "Work"}).json()['id']
    r = client.post(f"/api/contacts/{user_a}", json={"contactId": user_b, "categoryId": category_id})
    assert r.status_code == 201
    assert r.json()['category']['id'] == category_id

    client.delete(f"/api/contacts/{user_a}/categories/{category_id}")

    r = client.get(f"/api/contacts/{user_a}/{user_b}")
    assert r.status_code == 200
    assert r.json()['category'] is None


def test_update_category_rejects_null_name(async_db):
    client = TestClient(app)
    owner = create_user(client).json()['id']
    category_id = client.post(f"/api/contacts/{owner}/categories", json={"name": "Work"}).json()['id']

    r = client.put(f"/api/contacts/{owner}/categories/{category_id}", json={"name": None})
    assert r.status_code == 400
    assert "cannot be null" in r.json()['error']

    # Color is optional and can be cleared
    r = client.put(f"/api/contacts/{owner}/categories/{category_id}", json={"color": None})
    assert r.status_code == 200
    assert r.json()['name'] == "Work"
