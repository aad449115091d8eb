"""Base class for game screens driven by the state machine."""

from abc import ABC, abstractmethod


class State(ABC):
    """A game screen: set up once, then fed input, updates and draws."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the state when it becomes active for the first time."""

    @abstractmethod
    def handle_input(self) -> None:
        """Process pending input events."""

    def pause(self) -> None:
        """Called when another state is pushed on top."""

    def resume(self) -> None:
        """Called when the state above is removed."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""

    @abstractmethod
    def render(self, dt: float) -> None:
        """Draw the state; ``dt`` is the interpolation factor."""