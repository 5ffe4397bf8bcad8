from dataclasses import dataclass


@dataclass(frozen=True)
class BallView:
    id: int
    color: str
    x: float
    y: float
    size: float


@dataclass(frozen=True)
class ZoneView:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class SceneViewModel:
    ball: BallView
    zone: ZoneView
    placement: str
    resolving: bool
    trashed_count: int


@dataclass(frozen=True)
class AnimationEvent:
    type: str
    payload: dict
