"""A stack of game states with deferred push, pop and replace."""

from __future__ import annotations

from sigmarpg.logger import Level, Logger
from sigmarpg.state import State


class StateMachine:
    """Holds the active states; changes take effect in process_state_changes."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._states: list[State] = []
        self._new_state: State | None = None
        self._is_removing = False
        self._is_adding = False
        self._is_replacing = False
        self._logger = logger

    def _debug(self, message: str) -> None:
        if self._logger is not None:
            self._logger.log(Level.DEBUG, message)

    def add_state(self, new_state: State, is_replacing: bool = False) -> None:
        """Schedule ``new_state`` to be pushed, optionally replacing the top."""
        self._is_adding = True
        self._is_replacing = is_replacing
        self._new_state = new_state

    def remove_state(self) -> None:
        """Schedule removal of the top state."""
        self._is_removing = True

    def process_state_changes(self) -> None:
        """Apply any scheduled removal, then any scheduled addition."""
        if self._is_removing and self._states:
            self._states.pop()
            self._debug("StateMachine: State removed")
            if self._states:
                self._states[-1].resume()
            self._is_removing = False

        if self._is_adding:
            if self._states:
                if self._is_replacing:
                    self._states.pop()
                    self._debug("StateMachine: State removed to be replaced")
                else:
                    self._states[-1].pause()
            new_state, self._new_state = self._new_state, None
            self._states.append(new_state)
            self._debug("StateMachine: State added")
            new_state.init()
            self._is_adding = False

    def active_state(self) -> State:
        """Return the state on top of the stack."""
        if not self._states:
            raise IndexError("no active state")
        return self._states[-1]

    def __len__(self) -> int:
        return len(self._states)