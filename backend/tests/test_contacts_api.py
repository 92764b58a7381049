from fastapi.testclient import TestClient
from gotogether.main import app
from tests.helpers import create_user


## Use the test DB override from conftest.py (async_db fixture) to ensure isolation


def _users(client, *names):
    ids = []
    for name in names:
        r = create_user(client, display_name=name)
        assert r.status_code == 201
        ids.append(r.json()['id'])
    return ids


def test_contact_flow(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    # A sends a request to B
    r = client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    assert r.status_code == 201
    edge = r.json()
    assert edge['id'] == user_b
    assert edge['displayName'] == "User B"
    assert edge['status'] == "PENDING"
    assert edge['category'] is None

    # B sees one pending request showing A
    r = client.get(f"/api/contacts/{user_b}/requests/pending")
    assert r.status_code == 200
    pending = r.json()
    assert len(pending) == 1
    assert pending[0]['id'] == user_a
    assert pending[0]['displayName'] == "User A"

    # Pending requests are not contacts yet
    assert client.get(f"/api/contacts/{user_a}").json() == []

    # B accepts
    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")
    assert r.status_code == 200
    assert r.json()['message']

    # Both sides list each other
    contacts_a = client.get(f"/api/contacts/{user_a}").json()
    contacts_b = client.get(f"/api/contacts/{user_b}").json()
    assert [c['id'] for c in contacts_a] == [user_b]
    assert [c['id'] for c in contacts_b] == [user_a]
    assert contacts_a[0]['status'] == "ACCEPTED"
    assert client.get(f"/api/contacts/{user_b}/requests/pending").json() == []

    # A removes B: both directions disappear
    r = client.delete(f"/api/contacts/{user_a}/{user_b}")
    assert r.status_code == 204
    assert client.get(f"/api/contacts/{user_a}").json() == []
    assert client.get(f"/api/contacts/{user_b}").json() == []

    # Removing again is a no-op
    r = client.delete(f"/api/contacts/{user_a}/{user_b}")
    assert r.status_code == 204


def test_send_request_validation(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    r = client.post(f"/api/contacts/{user_a}", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "contactId required"}

    r = client.post(f"/api/contacts/{user_a}", json={"contactId": user_a})
    assert r.status_code == 400
    assert "yourself" in r.json()['error']

    r = client.post(f"/api/contacts/{user_a}", json={"contactId": "missing-user"})
    assert r.status_code == 404

    r = client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    assert r.status_code == 201

    # Second identical request is a duplicate, whatever the edge status
    r = client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    assert r.status_code == 409
    assert "error" in r.json()

    client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")
    r = client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    assert r.status_code == 409


def test_accept_errors(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    # Nothing to accept
    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")
    assert r.status_code == 404
    assert client.get(f"/api/contacts/{user_a}/{user_b}").status_code == 404
    assert client.get(f"/api/contacts/{user_b}/{user_a}").status_code == 404
    assert client.get(f"/api/contacts/{user_a}").json() == []
    assert client.get(f"/api/contacts/{user_b}").json() == []

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    assert client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept").status_code == 200

    # Accepting twice
    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")
    assert r.status_code == 400
    assert "already accepted" in r.json()['error']

    # The friendship is unchanged: one ACCEPTED edge each way
    assert client.get(f"/api/contacts/{user_a}/{user_b}").json()["status"] == "ACCEPTED"
    assert client.get(f"/api/contacts/{user_b}/{user_a}").json()["status"] == "ACCEPTED"
    assert [c["id"] for c in client.get(f"/api/contacts/{user_a}").json()] == [user_b]
    assert [c["id"] for c in client.get(f"/api/contacts/{user_b}").json()] == [user_a]


def test_accept_with_crossed_requests_rolls_back(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    # A -> B and B -> A are both pending
    assert client.post(f"/api/contacts/{user_a}", json={"contactId": user_b}).status_code == 201
    assert client.post(f"/api/contacts/{user_b}", json={"contactId": user_a}).status_code == 201

    # The reciprocal edge already exists, so the accept is refused as a whole
    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")
    assert r.status_code == 409

    # A -> B was not left ACCEPTED
    pending_b = client.get(f"/api/contacts/{user_b}/requests/pending").json()
    assert [p['id'] for p in pending_b] == [user_a]
    assert pending_b[0]['status'] == "PENDING"
    assert client.get(f"/api/contacts/{user_a}").json() == []
    assert client.get(f"/api/contacts/{user_b}").json() == []


def test_reject_request(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/reject")
    assert r.status_code == 204
    assert client.get(f"/api/contacts/{user_b}/requests/pending").json() == []

    # Rejected request is gone, so A may ask again
    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/reject")
    assert r.status_code == 404
    assert client.post(f"/api/contacts/{user_a}", json={"contactId": user_b}).status_code == 201


def test_reject_accepted_contact_is_not_found(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")

    r = client.post(f"/api/contacts/{user_b}/requests/{user_a}/reject")
    assert r.status_code == 404
    # The friendship is untouched
    assert len(client.get(f"/api/contacts/{user_a}").json()) == 1
    assert len(client.get(f"/api/contacts/{user_b}").json()) == 1


def test_update_category_is_per_direction(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    r = client.post(f"/api/contacts/{user_a}/categories", json={"name": "Climbing", "color": "#ff0000"})
    assert r.status_code == 201
    category_id = r.json()['id']

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")

    r = client.put(f"/api/contacts/{user_a}/{user_b}", json={"categoryId": category_id, "nickname": "Bee"})
    assert r.status_code == 200
    body = r.json()
    assert body['category'] == {"id": category_id, "name": "Climbing", "color": "#ff0000"}
    assert body['nickname'] == "Bee"

    # B's side keeps no category
    contacts_b = client.get(f"/api/contacts/{user_b}").json()
    assert contacts_b[0]['category'] is None

    # Clearing the category
    r = client.put(f"/api/contacts/{user_a}/{user_b}", json={"categoryId": None})
    assert r.status_code == 200
    assert r.json()['category'] is None
    assert r.json()['nickname'] == "Bee"


def test_update_category_errors(async_db):
    client = TestClient(app)
    user_a, user_b, user_c = _users(client, "User A", "User B", "User C")

    # B's category cannot be used on A's edge
    category_b = client.post(f"/api/contacts/{user_b}/categories", json={"name": "Work"}).json()['id']

    r = client.put(f"/api/contacts/{user_a}/{user_c}", json={"categoryId": None})
    assert r.status_code == 404

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_c})
    r = client.put(f"/api/contacts/{user_a}/{user_c}", json={"categoryId": category_b})
    assert r.status_code == 404
    assert r.json() == {"error": "Category not found"}


def test_get_contact(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    assert client.get(f"/api/contacts/{user_a}/{user_b}").status_code == 404

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_b, "nickname": "B"})
    r = client.get(f"/api/contacts/{user_a}/{user_b}")
    assert r.status_code == 200
    assert r.json()['id'] == user_b
    assert r.json()['nickname'] == "B"


def test_contacts_newest_first(async_db):
    client = TestClient(app)
    user_a, user_b, user_c = _users(client, "User A", "User B", "User C")

    for other in (user_b, user_c):
        client.post(f"/api/contacts/{other}", json={"contactId": user_a})

    pending = client.get(f"/api/contacts/{user_a}/requests/pending").json()
    assert [p['id'] for p in pending] == [user_c, user_b]

    for other in (user_b, user_c):
        client.post(f"/api/contacts/{user_a}/requests/{other}/accept")

    contacts = client.get(f"/api/contacts/{user_a}").json()
    assert [c['id'] for c in contacts] == [user_c, user_b]


def test_deleting_user_removes_edges(async_db):
    client = TestClient(app)
    user_a, user_b = _users(client, "User A", "User B")

    client.post(f"/api/contacts/{user_a}", json={"contactId": user_b})
    client.post(f"/api/contacts/{user_b}/requests/{user_a}/accept")

    assert client.delete(f"/api/users/{user_b}").status_code == 204
    assert client.get(f"/api/contacts/{user_a}").json() == []
