from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class MembershipTracker:
    """Record which router selector owns each component or router name.

    A name listed by several routers belongs to the one that listed it last.
    Records are never removed. Because routers can be members of outer
    routers, the same table answers both "which router is this component
    in" and "which router is this router nested in".
    """

    def __init__(self) -> None:
        self._router_by_name: dict[str, str] = {}

    def record(self, name: str, router_selector: str) -> None:
        previous = self._router_by_name.get(name)
        self._router_by_name[name] = router_selector
        if previous is not None and previous != router_selector:
            logger.debug(
                "Membership of '%s' moved from router '%s' to '%s'",
                name,
                previous,
                router_selector,
            )

    def router_of(self, name: str) -> str | None:
        return self._router_by_name.get(name)

    def __len__(self) -> int:
        return len(self._router_by_name)


__all__ = ["MembershipTracker"]
