"""Tests for the room membership table."""
from lectern.runtime.rooms import RoomMembershipTable


def test_join_creates_room_lazily():
    table = RoomMembershipTable()
    assert table.get("lc1") is None

    table.join("lc1", "c1", "Alice")

    assert table.room_ids() == ["lc1"]
    assert table.attendees("lc1") == ["Alice"]
    assert table.members("lc1") == ["c1"]


def test_duplicate_join_is_idempotent():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")
    table.join("lc1", "c1", "Alice")
    table.join("lc1", "c2", "Alice")

    assert table.attendees("lc1") == ["Alice"]
    assert sorted(table.members("lc1")) == ["c1", "c2"]


def test_attendees_are_joined_minus_left():
    table = RoomMembershipTable()
    for conn_id, name in [("c1", "Alice"), ("c2", "Bob"), ("c3", "Carol"), ("c2", "Bob")]:
        table.join("lc1", conn_id, name)
    table.leave("lc1", "c2", "Bob")
    table.leave("lc1", "c9", "Nobody")

    assert set(table.attendees("lc1")) == {"Alice", "Carol"}
    assert sorted(table.members("lc1")) == ["c1", "c3"]


def test_leave_unknown_room_is_noop():
    table = RoomMembershipTable()
    assert table.leave("ghost", "c1", "Alice") is None
    assert table.get("ghost") is None


def test_leave_removes_name_even_if_other_connection_joined_it():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")
    table.join("lc1", "c2", "Alice")

    table.leave("lc1", "c1", "Alice")

    assert table.attendees("lc1") == []
    assert table.members("lc1") == ["c2"]


def test_rooms_are_isolated():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")
    table.join("lc2", "c2", "Bob")

    assert table.attendees("lc1") == ["Alice"]
    assert table.attendees("lc2") == ["Bob"]
    assert table.rooms_of("c1") == ["lc1"]


def test_remove_connection_sweeps_joined_names_from_every_room():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")
    table.join("lc1", "c2", "Bob")
    table.join("lc2", "c1", "Alice")
    table.join("lc3", "c2", "Bob")

    affected = table.remove_connection("c1")

    assert sorted(affected) == ["lc1", "lc2"]
    assert table.attendees("lc1") == ["Bob"]
    assert table.attendees("lc2") == []
    assert table.attendees("lc3") == ["Bob"]
    assert table.rooms_of("c1") == []


def test_remove_connection_keeps_name_still_held_by_another_member():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")
    table.join("lc1", "c2", "Alice")

    table.remove_connection("c1")

    assert table.attendees("lc1") == ["Alice"]


def test_remove_connection_without_name_sweep_keys_by_connection_id():
    table = RoomMembershipTable(sweep_joined_names=False)
    table.join("lc1", "c1", "Alice")
    # a client that used its own socket id as display name
    table.join("lc1", "c2", "c2")

    affected = table.remove_connection("c1")
    assert affected == ["lc1"]
    assert table.attendees("lc1") == ["Alice", "c2"]

    table.remove_connection("c2")
    assert table.attendees("lc1") == ["Alice"]
    assert table.members("lc1") == []


def test_remove_connection_twice_is_noop():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")

    assert table.remove_connection("c1") == ["lc1"]
    assert table.remove_connection("c1") == []


def test_name_swept_after_leave_of_another_name():
    table = RoomMembershipTable()
    table.join("lc1", "c1", "Alice")
    table.join("lc1", "c1", "Ally")
    table.leave("lc1", "c1", "Alice")

    assert table.attendees("lc1") == ["Ally"]
    assert table.members("lc1") == []

    assert table.remove_connection("c1") == ["lc1"]
    assert table.attendees("lc1") == []


def test_set_sharing_last_writer_wins():
    table = RoomMembershipTable()
    table.set_sharing("lc1", "c1", True)
    screen = table.set_sharing("lc1", "c2", False)

    assert screen.presenter_id == "c2"
    assert screen.sharing is False
    assert table.get("lc1").screen is screen
