# domain/selection.py
from enum import Enum

MAX_SELECTED = 2


class SelectionPhase(Enum):
    EMPTY = "empty"
    ONE_SELECTED = "one_selected"
    TWO_SELECTED = "two_selected"


class Selection:
    """
    Ordered departure/arrival pair, filled one click at a time.

    Transitions:
      EMPTY --select(a)--> ONE_SELECTED
      ONE_SELECTED --select(b), b != a--> TWO_SELECTED
      TWO_SELECTED --select(*)--> TWO_SELECTED (no-op)
      any --clear()--> EMPTY

    `select` returns True only when the selection actually changed.
    """

    def __init__(self):
        self._ids: list[str] = []

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._ids

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._ids)

    @property
    def phase(self) -> SelectionPhase:
        return (SelectionPhase.EMPTY, SelectionPhase.ONE_SELECTED, SelectionPhase.TWO_SELECTED)[
            len(self._ids)
        ]

    @property
    def departure(self) -> str | None:
        return self._ids[0] if self._ids else None

    @property
    def arrival(self) -> str | None:
        return self._ids[1] if len(self._ids) > 1 else None

    @property
    def complete(self) -> bool:
        return len(self._ids) == MAX_SELECTED

    def select(self, point_id: str) -> bool:
        if len(self._ids) >= MAX_SELECTED:
            return False
        # one physical point can't be both departure and arrival
        if point_id in self._ids:
            return False
        self._ids.append(point_id)
        return True

    def clear(self) -> bool:
        changed = bool(self._ids)
        self._ids.clear()
        return changed
