import pytest

from gotogether.models import ContactStatus, User
from gotogether.services.contact_service import ContactService
from gotogether.services.core.repositories import get_contact_repository
from gotogether.services.exceptions import (
    AlreadyAcceptedError,
    DuplicateKeyError,
    DuplicateRequestError,
    EdgeNotFoundError,
    NotFoundError,
    ValidationError,
)


async def _make_users(db, *names):
    users = [User(firebase_uid=f"uid-{name}", display_name=name) for name in names]
    db.add_all(users)
    await db.commit()
    return [user.id for user in users]


@pytest.fixture
def repo(db_session):
    return get_contact_repository(db_session)


@pytest.fixture
def contacts(repo):
    return ContactService(repo)


async def test_send_request_creates_single_pending_edge(db_session, repo, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")

    edge = await contacts.send_request(alice, bob)

    assert edge.status == ContactStatus.PENDING
    assert edge.contact.display_name == "bob"
    assert await repo.find_edge(bob, alice) is None


async def test_send_request_rejects_self_and_missing(db_session, contacts):
    alice, = await _make_users(db_session, "alice")

    with pytest.raises(ValidationError, match="yourself"):
        await contacts.send_request(alice, alice)
    with pytest.raises(ValidationError, match="contactId required"):
        await contacts.send_request(alice, "")
    with pytest.raises(NotFoundError):
        await contacts.send_request(alice, "nobody")


async def test_accept_creates_reciprocal_edge(db_session, repo, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")
    await contacts.send_request(alice, bob)

    await contacts.accept_request(bob, alice)

    forward = await repo.find_edge(alice, bob)
    backward = await repo.find_edge(bob, alice)
    assert forward.status == ContactStatus.ACCEPTED
    assert backward.status == ContactStatus.ACCEPTED

    with pytest.raises(AlreadyAcceptedError):
        await contacts.accept_request(bob, alice)

    assert (await repo.find_edge(alice, bob)).status == ContactStatus.ACCEPTED
    assert (await repo.find_edge(bob, alice)).status == ContactStatus.ACCEPTED
    assert len(await contacts.list_accepted(alice)) == 1
    assert len(await contacts.list_accepted(bob)) == 1


async def test_accept_without_request_changes_nothing(db_session, repo, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")

    with pytest.raises(NotFoundError):
        await contacts.accept_request(bob, alice)

    assert await repo.find_edge(alice, bob) is None
    assert await repo.find_edge(bob, alice) is None
    assert await contacts.list_accepted(alice) == []
    assert await contacts.list_accepted(bob) == []


async def test_accept_is_all_or_nothing(db_session, repo, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")
    await contacts.send_request(alice, bob)
    await contacts.send_request(bob, alice)

    with pytest.raises(DuplicateRequestError):
        await contacts.accept_request(bob, alice)

    assert (await repo.find_edge(alice, bob)).status == ContactStatus.PENDING
    assert (await repo.find_edge(bob, alice)).status == ContactStatus.PENDING


async def test_remove_contact_is_idempotent(db_session, repo, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")
    await contacts.send_request(alice, bob)
    await contacts.accept_request(bob, alice)

    assert await contacts.remove_contact(bob, alice) == 2
    assert await contacts.remove_contact(bob, alice) == 0
    assert await repo.find_edges(by_source=alice) == []
    assert await repo.find_edges(by_source=bob) == []


async def test_remove_pending_request(db_session, repo, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")
    await contacts.send_request(alice, bob)

    # Withdrawing a request goes through the same removal
    assert await contacts.remove_contact(alice, bob) == 1
    assert await contacts.list_pending_incoming(bob) == []


async def test_reject_only_pending(db_session, contacts):
    alice, bob = await _make_users(db_session, "alice", "bob")

    with pytest.raises(NotFoundError):
        await contacts.reject_request(bob, alice)

    await contacts.send_request(alice, bob)
    await contacts.accept_request(bob, alice)
    with pytest.raises(NotFoundError):
        await contacts.reject_request(bob, alice)


async def test_repository_duplicate_and_missing_edges(db_session, repo):
    alice, bob = await _make_users(db_session, "alice", "bob")

    async with repo.atomic():
        await repo.create_edge(alice, bob, ContactStatus.PENDING)

    with pytest.raises(DuplicateKeyError):
        async with repo.atomic():
            await repo.create_edge(alice, bob, ContactStatus.ACCEPTED)

    with pytest.raises(EdgeNotFoundError):
        await repo.update_edge(bob, alice, status=ContactStatus.ACCEPTED)

    assert await repo.delete_edge(bob, alice) == 0
    assert (await repo.find_edge(alice, bob)).status == ContactStatus.PENDING


async def test_update_category_touches_one_direction(db_session, repo, contacts):
    from gotogether.models import ContactCategory

    alice, bob = await _make_users(db_session, "alice", "bob")
    category = ContactCategory(user_id=alice, name="Family")
    db_session.add(category)
    await db_session.commit()

    await contacts.send_request(alice, bob)
    await contacts.accept_request(bob, alice)

    edge = await contacts.update_category(alice, bob, category.id)
    assert edge.category.name == "Family"
    assert (await repo.find_edge(bob, alice)).category is None

    # Bob cannot file Alice under Alice's category
    with pytest.raises(NotFoundError):
        await contacts.update_category(bob, alice, category.id)
