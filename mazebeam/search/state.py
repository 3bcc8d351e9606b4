"""State contract consumed by the search engines.

Engines treat states as opaque apart from the members below. Any game can be
searched by providing a class with this shape; the maze in
``mazebeam.game.maze`` is the reference implementation.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from mazebeam.search.errors import NoLegalActionError

ActionT = TypeVar("ActionT", bound=Hashable)

Score = float | int


@runtime_checkable
class SearchableState(Protocol[ActionT]):
    """Single-agent, deterministic, turn-based game state.

    Attributes:
        first_action: Action taken at depth 0 of the current search to reach
            this state. None on the search root. Set once by the engine and
            carried unchanged by every successor.

    Contract:
        - ``apply`` returns an independent successor; the receiver is left
          untouched and no mutable field is shared between the two.
        - ``legal_actions`` is non-empty whenever ``is_terminal`` is False.
        - ``legal_actions`` order is stable; it decides ties between equally
          scored children.
    """

    first_action: ActionT | None

    def legal_actions(self) -> Sequence[ActionT]:
        """All actions applicable from this state."""
        ...

    def apply(self, action: ActionT) -> SearchableState[ActionT]:
        """Return the successor reached by playing ``action``."""
        ...

    def evaluate(self) -> Score:
        """Compute, cache and return the ranking score of this state."""
        ...

    def is_terminal(self) -> bool:
        """True exactly when no further turns remain."""
        ...


def fallback_action(root: SearchableState[ActionT], best: SearchableState[ActionT]) -> ActionT:
    """Action to return when a search ends without a stamped best state.

    Prefers ``best.first_action`` when ``best`` is a descendant of the root;
    otherwise the root's first legal action. A tag left on the root itself by
    an earlier search is ignored.

    Raises:
        NoLegalActionError: Neither source yields an action.
    """
    if best is not root and best.first_action is not None:
        return best.first_action
    actions = root.legal_actions()
    if not actions:
        raise NoLegalActionError("search root has no legal actions")
    return actions[0]
