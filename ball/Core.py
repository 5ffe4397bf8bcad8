import logging
import random

from ball.Geometry import Point, Rect, inNearMissBand, inside
from ball.Position import PositionState

logger = logging.getLogger(__name__)

BALL_SIZE = 50
SETTLE_DURATION = 0.75
SETTLE_DAMPING = 1.1
SETTLE_VELOCITY = 1.0

ZONE_SIZE = 130
ZONE_MAX_SIZE = 280
ZONE_RATIO = 0.1
ZONE_RIGHT_MARGIN = 20
ZONE_BOTTOM_MARGIN = 10

IDLE = 1
DRAGGING = 2
RESOLVING = 3


def trashZone(parent: Rect):
    """
    The trash can sits in the bottom-right corner of the parent.
    inside() widens its near-edge margin with the zone's distance from the
    origin, so the can grows with the parent to leave room for a landed ball.
    The bottom rule rejects every landed ball once the can reaches 300 px.
    """
    size = min(ZONE_MAX_SIZE, max(parent.width, parent.height) * ZONE_RATIO)
    size = max(ZONE_SIZE, min(size, parent.width - ZONE_RIGHT_MARGIN))
    return Rect(
        parent.width - ZONE_RIGHT_MARGIN - size,
        parent.height - ZONE_BOTTOM_MARGIN - size,
        size,
        size,
    )


def randomColor(rng):
    r, g, b = (rng.randint(0, 255) for _ in range(3))
    return f"#{r:02x}{g:02x}{b:02x}"


class Ball:

    def __init__(self, ballId, color, size=BALL_SIZE):
        self.id = ballId
        self.color = color
        self.size = size
        # the frame currently shown on screen, moved by layout passes
        self.frame = Rect(0, 0, size, size)

    @property
    def center(self):
        return self.frame.center

    def __repr__(self):
        return f"Ball({self.id}, {self.color})"


class DropEvent:
    pass


class Spawned(DropEvent):
    def __init__(self, ball: Ball):
        self.ball = ball


class Moved(DropEvent):
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Released(DropEvent):
    def __init__(self, point: Point):
        self.point = point


class Trashed(DropEvent):
    def __init__(self, old: Ball, new: Ball):
        self.old = old
        self.new = new


class SnappedBack(DropEvent):
    def __init__(self, ball: Ball):
        self.ball = ball


class Fell(DropEvent):
    def __init__(self, ball: Ball):
        self.ball = ball


class DragController:
    """
    Owns the single ball on screen and turns drag gestures into placements.
    beginDrag / dragMoved / endDrag : called by the gesture source.
    resolveDrop : completion of the settle animation, called by the interface.
    """

    def __init__(self, parent: Rect, zone: Rect, rng=None):
        self.interface = None
        self.parent = parent
        self.zone = zone
        self.rng = rng or random.Random()

        self.ball: Ball = None
        self.position = PositionState((BALL_SIZE, BALL_SIZE), parent)
        self.phase = IDLE
        self.dragStart = Point(0, 0)
        self.spawnCount = 0
        self.trashedCount = 0

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def startGame(self):
        if self.interface is None:
            raise Exception("interface is null")
        self.phase = IDLE
        self.ball = self.spawnBall()
        self.placeBall()
        self.interface.onStart()

    def spawnBall(self):
        self.spawnCount += 1
        ball = Ball(self.spawnCount, randomColor(self.rng))
        logger.debug("spawned %r", ball)
        return ball

    def placeBall(self):
        self.position.start((self.ball.size, self.ball.size), self.parent)
        self.layoutIfNeeded()
        self.interface.onEvent(Spawned(self.ball))

    def layoutIfNeeded(self):
        target = self.position.targetFrame()
        if target is not None:
            self.ball.frame = target

    def ballAt(self, point: Point):
        return self.ball is not None and self.ball.frame.contains(point)

    def beginDrag(self):
        if self.phase != IDLE or self.ball is None:
            return False
        logger.debug("begin dragging %r", self.ball)
        self.dragStart = self.ball.center
        self.phase = DRAGGING
        return True

    def dragMoved(self, tx, ty):
        if self.phase != DRAGGING:
            return False
        current = self.dragStart.offset(tx, ty)
        self.position.updatePosition(current.x, current.y)
        self.layoutIfNeeded()
        self.interface.onEvent(Moved(current.x, current.y))
        return True

    def endDrag(self, tx, ty):
        if not self.dragMoved(tx, ty):
            return False
        logger.debug("dragging ended at %s", self.ball.center)
        released = self.ball.center
        self.position.freeFall(released)
        self.phase = RESOLVING
        self.interface.onEvent(Released(released))
        self.interface.animateLayout(SETTLE_DURATION, self.resolveDrop)
        return True

    def resolveDrop(self):
        if self.phase != RESOLVING:
            return
        self.layoutIfNeeded()
        ball = self.ball
        if inside(ball.frame, self.zone):
            self.trashedCount += 1
            logger.info("%r dropped into the trash can", ball)
            self.ball = self.spawnBall()
            self.position.start((self.ball.size, self.ball.size), self.parent)
            self.layoutIfNeeded()
            self.phase = IDLE
            self.interface.onEvent(Trashed(ball, self.ball))
        elif inNearMissBand(ball.center, self.zone):
            logger.info("%r touched the trash can, resetting", ball)
            self.position.settle()
            self.layoutIfNeeded()
            self.phase = IDLE
            self.interface.onEvent(SnappedBack(ball))
        else:
            logger.debug("%r fell to the ground", ball)
            self.phase = IDLE
            self.interface.onEvent(Fell(ball))

    def respawn(self):
        if self.phase == RESOLVING:
            return False
        self.phase = IDLE
        self.ball = self.spawnBall()
        self.placeBall()
        return True

    def relayout(self, parent: Rect, zone: Rect):
        self.parent = parent
        self.zone = zone
        self.position.relayout(parent)
        if self.ball is not None and self.phase != RESOLVING:
            self.layoutIfNeeded()
