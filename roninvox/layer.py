"""Base class for the parts of an application that take part in the frame loop."""

from __future__ import annotations

from roninvox.timestep import Timestep


class Layer:
    """A named unit with hooks for attaching, detaching, updating and input handling."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name

    def on_attach(self) -> None:
        """Called once before the first frame."""

    def on_detach(self) -> None:
        """Called once after the last frame."""

    def on_update(self, timestep: Timestep) -> None:
        """Called once per frame with the time since the previous frame."""

    def on_event(self, timestep: Timestep) -> None:
        """Called to react to input for the current frame."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"