from dataclasses import dataclass

from ball.Geometry import Point, Rect

START_X = 75
START_BOTTOM_OFFSET = 50
GROUND_OFFSET = 50


class Placement:
    pass


@dataclass(frozen=True)
class Start(Placement):
    pass


@dataclass(frozen=True)
class Dragging(Placement):
    x: float
    y: float


@dataclass(frozen=True)
class Settled(Placement):
    pass


@dataclass(frozen=True)
class Falling(Placement):
    x: float


class PositionState:
    """
    Placement intent of one draggable object inside its parent.
    Only one placement is live at a time: every transition goes through
    resetAll() and then stores a single variant in `placement`.
    Anchors pin the object's center, relative to the parent's top-left.
    """

    def __init__(self, objectSize=(50, 50), parent: Rect = Rect(0, 0, 0, 0)):
        self.objectSize = objectSize
        self.parent = parent
        self.placement: Placement = None

    def start(self, objectSize, parentBounds: Rect):
        self.resetAll()
        self.objectSize = objectSize
        self.parent = parentBounds
        self.placement = Start()

    def resetAll(self):
        self.placement = None

    def updatePosition(self, x, y):
        self.resetAll()
        self.placement = Dragging(x, y)

    def freeFall(self, fromPoint: Point):
        self.resetAll()
        self.placement = Falling(fromPoint.x)

    def settle(self):
        self.resetAll()
        self.placement = Settled()

    def relayout(self, parentBounds: Rect):
        self.parent = parentBounds

    def isActive(self):
        return self.placement is not None

    def startAnchor(self):
        return Point(START_X, self.parent.height - START_BOTTOM_OFFSET)

    def anchor(self):
        placement = self.placement
        if isinstance(placement, (Start, Settled)):
            return self.startAnchor()
        if isinstance(placement, Dragging):
            return Point(placement.x, placement.y)
        if isinstance(placement, Falling):
            # pinned to the parent's bottom edge, so it follows resizes
            return Point(placement.x, self.parent.height - GROUND_OFFSET)
        return None

    def targetFrame(self):
        center = self.anchor()
        if center is None:
            return None
        width, height = self.objectSize
        return Rect.centeredAt(center, width, height)
