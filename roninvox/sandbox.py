"""The voxel sandbox layer: camera control, input handling and per-frame draw state."""

from __future__ import annotations

import enum
import logging
import math
import random
from collections.abc import Collection
from dataclasses import dataclass, field

import numpy as np

from roninvox.camera import Camera, CameraMovement, ortho, perspective
from roninvox.chunk import Chunk
from roninvox.layer import Layer
from roninvox.renderer import Mesh
from roninvox.timestep import Timestep

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1080
DEFAULT_HEIGHT = 720
DEFAULT_SIDE_COUNT = 25
LIGHT_COLOR = (1.0, 0.843, 0.130, 1.0)
CAMERA_START = (0.0, 0.0, 60.0)
NEAR_PLANE = 0.1
ATTACH_FAR_PLANE = 200.0
FAR_PLANE = 100.0
KEY_SPEED_FACTOR = 10.0


class Key(enum.Enum):
    """Keys the sandbox reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    O = "o"  # noqa: E741
    P = "p"
    ESCAPE = "escape"


_MOVEMENT_KEYS = (
    (Key.W, CameraMovement.FORWARD),
    (Key.A, CameraMovement.LEFT),
    (Key.D, CameraMovement.RIGHT),
    (Key.S, CameraMovement.BACKWARD),
)


@dataclass
class SandBoxState:
    """Viewport, camera, menu and mouse-tracking state shared by the sandbox."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    camera: Camera = field(default_factory=lambda: Camera(CAMERA_START))
    viewport_changed: bool = False
    on_menu: bool = False
    first_mouse: bool = True
    light_color: np.ndarray = field(default_factory=lambda: np.array(LIGHT_COLOR))
    last_x: float = field(default=-1.0)
    last_y: float = field(default=-1.0)

    def __post_init__(self) -> None:
        if self.last_x < 0:
            self.last_x = self.width / 2.0
        if self.last_y < 0:
            self.last_y = self.height / 2.0

    @property
    def aspect(self) -> float:
        """Width over height of the viewport."""
        if self.height == 0:
            raise ValueError("viewport height must not be zero")
        return self.width / self.height


class SandBox(Layer):
    """A hollow voxel sphere viewed through a fly-through camera."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        side_count: int = DEFAULT_SIDE_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.state = SandBoxState(width=width, height=height)
        self.side_count = side_count
        self._rng = rng
        self.chunk: Chunk | None = None
        self.mesh: Mesh | None = None
        self.model_matrix = np.identity(4)
        self.is_perspective = True
        self.wireframe = False
        self.line_mode = False
        self.cursor_captured = False
        self.input_enabled = False
        self.should_close = False
        self.pressed_keys: set[Key] = set()
        self.viewport = (0, 0, width, height)
        self.uniforms: dict[str, np.ndarray] = {}
        self._projection = np.identity(4)

    def on_attach(self) -> None:
        """Capture the cursor, build the chunk mesh and set up the projection."""
        logger.info("SandBox running")
        self.cursor_captured = True
        self.input_enabled = True

        self.chunk = Chunk(self.side_count, self._rng)
        self.chunk.generate()
        self.mesh = Mesh(self.chunk.vertex_data())
        logger.info("Renderer started")

        state = self.state
        if self.is_perspective:
            self._projection = perspective(
                math.radians(state.camera.zoom), state.aspect, NEAR_PLANE, ATTACH_FAR_PLANE
            )
        else:
            width, height = float(state.width), float(state.height)
            self._projection = ortho(-width, height, -width, height, -10.0, 10.0)

        logger.info("Voxels matrix:\n%s", self.chunk.describe())

    def on_detach(self) -> None:
        """Release the mesh."""
        self.mesh = None
        self.uniforms = {}

    def on_update(self, timestep: Timestep) -> None:
        """Refresh the projection, react to held keys and record the frame's draw uniforms."""
        if self.mesh is None:
            raise RuntimeError("sandbox is not attached")
        if self.state.viewport_changed:
            self._framebuffer_resized()
        self.line_mode = self.wireframe
        self._projection = self._perspective()

        self.on_event(timestep)

        camera = self.state.camera
        self.uniforms = {
            "projection": self._projection,
            "view": camera.view_matrix(),
            "model": self.model_matrix,
            "cameraPos": camera.position.copy(),
            "lightColor": self.state.light_color.copy(),
        }

    def on_event(self, timestep: Timestep) -> None:
        """React to the keys currently held."""
        self.handle_keys(self.pressed_keys, timestep)

    def handle_cursor(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor's movement since the last position."""
        if not self.input_enabled:
            return
        state = self.state
        if state.first_mouse:
            state.last_x, state.last_y = xpos, ypos
            state.first_mouse = False
        xoffset = xpos - state.last_x
        yoffset = state.last_y - ypos  # window y grows downwards
        state.last_x, state.last_y = xpos, ypos
        state.camera.process_mouse_movement(xoffset, yoffset)

    def handle_scroll(self, xoffset: float, yoffset: float) -> None:
        """Zoom the camera with the vertical scroll offset."""
        if not self.input_enabled:
            return
        self.state.camera.process_mouse_scroll(yoffset)

    def handle_resize(self, width: int, height: int) -> None:
        """Record a new framebuffer size; the projection follows on the next update."""
        self.state.width = width
        self.state.height = height
        self.state.viewport_changed = True
        self.viewport = (0, 0, width, height)

    def handle_keys(self, pressed: Collection[Key], timestep: Timestep) -> None:
        """Move the camera, switch line mode, toggle the menu or close, by the keys held."""
        delta = float(timestep) * KEY_SPEED_FACTOR
        camera = self.state.camera
        for key, movement in _MOVEMENT_KEYS:
            if key in pressed:
                camera.process_keyboard(movement, delta)

        if Key.O in pressed:
            self.line_mode = True

        if Key.P in pressed:
            self._toggle_menu()

        if Key.ESCAPE in pressed:
            self.should_close = True

    def projection_matrix(self) -> np.ndarray:
        """The projection used for the current frame."""
        return self._projection

    def _toggle_menu(self) -> None:
        state = self.state
        if state.on_menu:
            state.on_menu = False
            self.cursor_captured = True
            state.first_mouse = True
            self.input_enabled = True
        else:
            state.on_menu = True
            self.cursor_captured = False
            self.input_enabled = False

    def _perspective(self) -> np.ndarray:
        return perspective(
            math.radians(self.state.camera.zoom), self.state.aspect, NEAR_PLANE, FAR_PLANE
        )

    def _framebuffer_resized(self) -> None:
        self.state.viewport_changed = False
        self._projection = self._perspective()