from __future__ import annotations

from scopewire._internal.membership import MembershipTracker


def test_router_of_unknown_name_is_none() -> None:
    assert MembershipTracker().router_of("Cart") is None


def test_last_write_wins() -> None:
    tracker = MembershipTracker()
    tracker.record("Cart", "shop")
    tracker.record("Cart", "checkout")

    assert tracker.router_of("Cart") == "checkout"
    assert len(tracker) == 1


def test_nested_router_is_tracked_like_a_component() -> None:
    tracker = MembershipTracker()
    tracker.record("ShopRouter", "app")
    tracker.record("Cart", "shop")

    assert tracker.router_of("Cart") == "shop"
    assert tracker.router_of("ShopRouter") == "app"
    assert len(tracker) == 2
