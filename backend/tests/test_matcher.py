"""
First-fit interest matching.
"""

from pairchat.realtime.matcher import Matcher, merge_interests
from pairchat.realtime.registry import ConnectionRegistry
from pairchat.realtime.rooms import RoomManager


def build() -> tuple[ConnectionRegistry, RoomManager, Matcher]:
    registry = ConnectionRegistry()
    rooms = RoomManager()
    return registry, rooms, Matcher(registry, rooms)


def test_shared_interest_pairs_both_sessions():
    registry, rooms, matcher = build()
    registry.register("a", ["music", "travel"])
    registry.register("b", ["travel", "sports"])

    result = matcher.pair("b")

    assert result is not None
    assert result.room.participants == ("b", "a")
    assert registry.get("a").matched and registry.get("b").matched
    assert rooms.find_by_participant("a") is result.room
    assert result.interests == ["travel", "sports", "music"]
    assert set(result.interests) == {"music", "travel", "sports"}
    assert result.shared_interests == ["travel"]
    assert result.chat_started_payload() == {"roomId": result.room.id, "interests": result.interests}


def test_first_fit_ignores_overlap_size():
    registry, _, matcher = build()
    registry.register("weak", ["chess"])
    registry.register("strong", ["chess", "go", "poker"])
    registry.register("me", ["chess", "go", "poker"])

    assert matcher.find_partner("me").id == "weak"


def test_skips_self_and_matched_sessions():
    registry, _, matcher = build()
    registry.register("taken", ["books"])
    registry.get("taken").matched = True
    registry.register("me", ["books"])

    assert matcher.find_partner("me") is None


def test_no_common_interest_is_not_an_error():
    registry, rooms, matcher = build()
    registry.register("a", ["cats"])
    registry.register("b", ["dogs"])

    assert matcher.pair("b") is None
    assert not registry.get("a").matched
    assert not registry.get("b").matched
    assert len(rooms) == 0


def test_unknown_requester_gets_no_match():
    registry, _, matcher = build()
    registry.register("a", ["cats"])
    assert matcher.pair("ghost") is None


def test_already_matched_requester_is_not_paired_again():
    registry, rooms, matcher = build()
    registry.register("a", ["x"])
    registry.register("b", ["x"])
    registry.register("c", ["x"])
    assert matcher.pair("b") is not None

    registry.get("b").matched = True
    assert matcher.pair("b") is None
    assert len(rooms) == 1


def test_merge_interests_keeps_first_occurrence():
    assert merge_interests(["a", "b"], ["b", "c", "a"]) == ["a", "b", "c"]
