from dataclasses import dataclass
from typing import Callable


@dataclass
class SettleAnimation:
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    started_at: float
    duration: float
    on_complete: Callable[[], None]


@dataclass
class GestureState:
    press_x: float
    press_y: float


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    born: float
    ttl: float
    size: float
    color: str
