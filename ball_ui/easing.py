import math

from ball_ui.ui_config import SPRING_FREQUENCY


def spring_progress(t: float, damping: float, velocity: float, frequency: float = SPRING_FREQUENCY) -> float:
    """
    Position of a unit spring released at 0 towards 1, sampled at normalized
    time t in [0, 1]. `velocity` is the initial speed in distance per unit of t.
    The result is forced to exactly 1.0 at t >= 1 so the animation always ends
    on its target.
    """
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    w = frequency
    if damping > 1.0:
        root = math.sqrt(damping * damping - 1.0)
        r1 = w * (damping - root)
        r2 = w * (damping + root)
        a = (velocity - r2) / (r2 - r1)
        b = -1.0 - a
        return 1.0 + a * math.exp(-r1 * t) + b * math.exp(-r2 * t)
    if damping == 1.0:
        return 1.0 - (1.0 + (w - velocity) * t) * math.exp(-w * t)
    wd = w * math.sqrt(1.0 - damping * damping)
    decay = damping * w
    k = (decay - velocity) / wd
    return 1.0 - math.exp(-decay * t) * (math.cos(wd * t) + k * math.sin(wd * t))


def interpolate(start: float, end: float, progress: float) -> float:
    return start + (end - start) * progress
