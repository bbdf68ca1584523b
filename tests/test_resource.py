from globalcoin.hashing import Hash
from globalcoin.resource import Resource, ResourceStatus, new_unspent_resource


def test_status_identifiers():
    resource = new_unspent_resource(Hash.empty(), 0, 1, 0)
    assert resource.status == 1
    resource.mark_spent()
    assert resource.status == 2
    assert ResourceStatus(2) is resource.status


def test_new_unspent_resource_fields():
    h = Hash.compute(b"tx")
    resource = new_unspent_resource(h, 3, 500, 7)
    assert resource.hash == h
    assert resource.index == 3
    assert resource.value == 500
    assert resource.key_index == 7
    assert resource.available is True
    assert resource.is_unspent() is True
    assert resource.status is ResourceStatus.UNSPENT


def test_mark_spent():
    resource = new_unspent_resource(Hash.empty(), 0, 1, 0)
    resource.mark_spent()
    assert resource.is_unspent() is False
    assert resource.status is ResourceStatus.SPENT
    resource.mark_spent()
    assert resource.status is ResourceStatus.SPENT


def test_spending_does_not_change_availability():
    resource = new_unspent_resource(Hash.empty(), 1, 2, 3)
    resource.available = False
    resource.mark_spent()
    assert resource.available is False
    assert resource.value == 2


def test_resources_compare_by_value():
    h = Hash.compute(b"same")
    assert new_unspent_resource(h, 1, 10, 0) == Resource(h, 1, 10, 0)
    spent = new_unspent_resource(h, 1, 10, 0)
    spent.mark_spent()
    assert spent != new_unspent_resource(h, 1, 10, 0)