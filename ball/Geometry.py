from dataclasses import dataclass

INSIDE_LOW = 1.05
INSIDE_HIGH = 0.95
NEAR_MISS_RATIO = 0.75


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, dx, dy):
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @staticmethod
    def centeredAt(center: Point, width, height):
        return Rect(center.x - width / 2, center.y - height / 2, width, height)

    @property
    def center(self):
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def right(self):
        return self.x + self.width

    def contains(self, point: Point):
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom


def inside(rect: Rect, frame: Rect):
    """
    Whether `rect` counts as dropped into `frame`.
    Not a plain containment test: the near edge gets a 5% margin scaled by the
    frame's absolute position, the far edge loses 5% of the frame's size.
    The second vertical condition compares `rect.y` with itself and only fails
    for a non-positive frame height.
    """
    if frame.x * INSIDE_LOW < rect.x \
            and frame.x + frame.width * INSIDE_HIGH > rect.x \
            and rect.x + rect.width < frame.x + frame.width * INSIDE_HIGH:
        if frame.y * INSIDE_LOW < rect.y \
                and rect.y + frame.height * INSIDE_HIGH > rect.y \
                and rect.y + rect.height < frame.y + frame.height * INSIDE_HIGH:
            return True
    return False


def nearMissBand(frame: Rect):
    half = frame.width * NEAR_MISS_RATIO
    cx = frame.center.x
    return cx - half, cx + half


def inNearMissBand(point: Point, frame: Rect):
    low, high = nearMissBand(frame)
    return low < point.x < high
