"""Generic state holder for stateful components.

A component owns a StateContainer rather than inheriting from a shared
stateful base class. The container keeps a private snapshot of the initial
state so it can be restored with reset().

State records are dataclasses. Updates are explicit field assignments:

- set_state(**patch) assigns the given fields
- update_state(derive) assigns the fields returned by derive(state)

Thread Safety:
    Not thread-safe. A container belongs to exactly one component instance.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from marklex.errors import InvalidArgumentError
from marklex.utils.merge import merge

S = TypeVar("S")


class StateContainer(Generic[S]):
    """Holds a mutable dataclass state record plus its initial snapshot.

    Usage:
        >>> @dataclass
        ... class Counter:
        ...     hits: int = 0
        ...     seen: list[str] = field(default_factory=list)
        >>> box = StateContainer(Counter())
        >>> box.update_state(lambda s: {"hits": s.hits + 1})
        >>> box.state.hits
        1
        >>> box.reset()
        >>> box.state.hits
        0

    """

    __slots__ = ("_factory", "_field_names", "_snapshot", "_state")

    def __init__(self, initial: S) -> None:
        """Initialize container from an initial state record.

        Args:
            initial: Dataclass instance used as both the working state and
                the reset snapshot. Mutable fields are copied, so later
                changes to ``initial`` don't affect the snapshot.

        Raises:
            InvalidArgumentError: If ``initial`` is not a dataclass instance
        """
        if not dataclasses.is_dataclass(initial) or isinstance(initial, type):
            raise InvalidArgumentError(
                "initial",
                f"expected a dataclass instance, received {type(initial).__name__}",
                received=initial,
            )
        self._factory: Callable[..., S] = type(initial)
        self._field_names: frozenset[str] = frozenset(
            f.name for f in dataclasses.fields(initial)
        )
        self._snapshot: dict[str, Any] = {}
        merge(
            self._snapshot,
            {name: getattr(initial, name) for name in self._field_names},
            create_new_object=True,
        )
        self._state: S = self._restore()

    @property
    def state(self) -> S:
        """Current state record."""
        return self._state

    def set_state(self, **patch: Any) -> None:
        """Assign the given fields on the current state.

        Args:
            **patch: Field names and their new values

        Raises:
            InvalidArgumentError: If a name is not a field of the state record
        """
        unknown = patch.keys() - self._field_names
        if unknown:
            raise InvalidArgumentError(
                "patch",
                f"unknown state field(s): {', '.join(sorted(unknown))}",
                received=sorted(unknown),
            )
        for name, value in patch.items():
            setattr(self._state, name, value)

    def update_state(self, derive: Callable[[S], Mapping[str, Any]]) -> None:
        """Derive a patch from the current state and apply it.

        Args:
            derive: Called with the current state; returns a field patch
        """
        self.set_state(**derive(self._state))

    def reset(self) -> None:
        """Restore the initial state."""
        self._state = self._restore()

    def _restore(self) -> S:
        fresh: dict[str, Any] = {}
        merge(fresh, self._snapshot, create_new_object=True)
        return self._factory(**fresh)

    def __repr__(self) -> str:
        return f"StateContainer({self._state!r})"
