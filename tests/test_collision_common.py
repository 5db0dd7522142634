"""Unit tests for collision requests, contacts, and results."""

from hypothesis import given

from task_constructor_utils.collision_detection import CollisionRequest, CollisionResult, Contact

from .fixtures.scene_fixtures import make_contact
from .strategies.collision_strategies import contacts


@given(contacts())
def test_contact_pair_is_order_independent(contact: Contact) -> None:
    """Verify that swapping the bodies of a contact doesn't change its pair key."""
    # Arrange
    swapped = make_contact(0.0, contact.body_name_2, contact.body_name_1)

    # Act/Assert
    assert contact.pair == swapped.pair
    assert contact.pair == tuple(sorted((contact.body_name_1, contact.body_name_2)))


def test_add_contact_respects_per_pair_cap() -> None:
    """Verify that contacts beyond the per-pair cap are dropped while other pairs continue."""
    # Arrange
    request = CollisionRequest(contacts=True, max_contacts=10, max_contacts_per_pair=2)
    result = CollisionResult()

    # Act
    recorded = [result.add_contact(make_contact(0.1 * i), request) for i in range(3)]
    recorded.append(result.add_contact(make_contact(1.0, "table", "upper_arm"), request))

    # Assert
    assert recorded == [True, True, False, True]
    assert result.contact_count == 3
    assert [len(pair_contacts) for pair_contacts in result.contacts.values()] == [2, 1]


def test_add_contact_respects_total_cap() -> None:
    """Verify that contacts beyond the total cap are dropped."""
    # Arrange
    request = CollisionRequest(contacts=True, max_contacts=2, max_contacts_per_pair=5)
    result = CollisionResult()

    # Act
    result.add_contact(make_contact(0.0, "forearm", "table"), request)
    result.add_contact(make_contact(0.0, "forearm", "shelf"), request)
    recorded = result.add_contact(make_contact(0.0, "forearm", "wall"), request)

    # Assert
    assert not recorded
    assert result.contact_count == 2
    assert ("forearm", "wall") not in result.contacts


def test_add_contact_without_contact_request_only_sets_verdict() -> None:
    """Verify that a request without contacts yields a verdict but no contact points."""
    # Arrange
    result = CollisionResult()

    # Act
    recorded = result.add_contact(make_contact(0.0), CollisionRequest())

    # Assert
    assert not recorded
    assert result.collision
    assert result.contact_count == 0
    assert not result.contacts


def test_clear_resets_result() -> None:
    """Verify that a cleared result is collision-free."""
    # Arrange
    result = CollisionResult()
    result.add_contact(make_contact(0.0), CollisionRequest(contacts=True))

    # Act
    result.clear()

    # Assert
    assert result == CollisionResult()
