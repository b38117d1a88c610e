"""A zoomable model of planets circling a sun, advancing frame by frame."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Optional

SCREEN_WIDTH = 3300
SCREEN_HEIGHT = 1800
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
ZOOM_STEP = 0.1
SUN_RADIUS = 80
MOON_ORBIT = 50


@dataclass
class Body:
    """A body circling its parent (the centre when None) at ``orbit``.

    ``angle`` is in degrees and grows by ``step`` every frame.
    """

    name: str
    orbit: float
    radius: float
    colour: str
    angle: float = 0.0
    step: float = 0.0
    parent: Optional[str] = None


def _default_bodies() -> list[Body]:
    mercury_orbit = 150.0
    jupiter_orbit = mercury_orbit + 400
    saturn_orbit = jupiter_orbit + 200
    uranus_orbit = saturn_orbit + 250
    return [
        Body("sun", 0.0, SUN_RADIUS, "yellow"),
        Body("mercury", mercury_orbit, 10, "brown", 37.0, 1.0),
        Body("venus", mercury_orbit + 100, 18, "orange", 47.0, 2.5),
        Body("earth", mercury_orbit + 200, 13, "green", 31.34, 1.5),
        Body("moon", MOON_ORBIT, 5, "black", 0.0, 1.0, parent="earth"),
        Body("mars", mercury_orbit + 300, 11, "red", 27.64, 4.0),
        Body("jupiter", jupiter_orbit, 25, "gray", 25.0, 3.0),
        Body("saturn", saturn_orbit, 25, "gray", 21.41, 2.0),
        Body("uranus", uranus_orbit, 25, "gray", 18.54, 1.0),
        Body("neptune", uranus_orbit + 300, 25, "gray", 16.26, 0.5),
    ]


class SolarSystem:
    """The bodies, zoom level and pause state of the model."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.zoom = 1.0
        self.bodies = _default_bodies()
        self.frames_counter = 0
        self.game_over = False
        self.paused = False
        self.reset()

    def reset(self) -> None:
        """Reset the frame counter and the pause and game-over flags."""
        self.frames_counter = 0
        self.game_over = False
        self.paused = False

    def toggle_pause(self) -> None:
        """Pause or resume counting frames, unless the game is over."""
        if not self.game_over:
            self.paused = not self.paused

    def apply_scroll(self, amount: float) -> float:
        """Zoom by ``amount`` wheel steps, within the allowed range; return the zoom."""
        self.zoom = min(MAX_ZOOM, max(MIN_ZOOM, self.zoom + amount * ZOOM_STEP))
        return self.zoom

    def update(self) -> None:
        """Count a frame unless paused or over."""
        if not self.game_over and not self.paused:
            self.frames_counter += 1

    def advance(self) -> None:
        """Turn every body by its step."""
        for body in self.bodies:
            body.angle += body.step

    def positions(self) -> dict[str, tuple[float, float]]:
        """Return each body's screen position at the current zoom."""
        local: dict[str, tuple[float, float, float]] = {}
        for body in self.bodies:
            x0, y0, turned = (0.0, 0.0, 0.0) if body.parent is None else local[body.parent]
            total = turned + body.angle
            radians = math.radians(total)
            local[body.name] = (
                x0 + body.orbit * math.cos(radians),
                y0 + body.orbit * math.sin(radians),
                total,
            )
        cx, cy = self.width / 2.0, self.height / 2.0
        return {
            name: (self.zoom * (cx + x), self.zoom * (cy + y))
            for name, (x, y, _) in local.items()
        }


def main(argv=None) -> int:
    """Advance the model a number of frames and print where each body is."""
    parser = argparse.ArgumentParser(description="Step a model of the solar system.")
    parser.add_argument("--frames", type=int, default=1)
    parser.add_argument("--zoom", type=float, default=0.0, help="wheel steps to zoom by")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("frames must not be negative")
    system = SolarSystem()
    system.apply_scroll(args.zoom)
    for _ in range(args.frames):
        system.update()
        system.advance()
    for name, (x, y) in system.positions().items():
        print(f"{name}: {x:.2f}, {y:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())