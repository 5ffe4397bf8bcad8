from ball.Core import RESOLVING, DragController, DropEvent, Fell, Moved, Released, SnappedBack, Spawned, Trashed
from ball_ui.view_model import AnimationEvent, BallView, SceneViewModel, ZoneView


class CoreAdapter:
    """Bridges the drag controller state/events to a renderer-friendly model."""

    @staticmethod
    def snapshot(core: DragController) -> SceneViewModel:
        ball = core.ball
        frame = ball.frame
        zone = core.zone
        placement = core.position.placement
        return SceneViewModel(
            ball=BallView(id=ball.id, color=ball.color, x=frame.x, y=frame.y, size=ball.size),
            zone=ZoneView(x=zone.x, y=zone.y, width=zone.width, height=zone.height),
            placement=type(placement).__name__ if placement is not None else "None",
            resolving=core.phase == RESOLVING,
            trashed_count=core.trashedCount,
        )

    @staticmethod
    def event_to_animation(event: DropEvent) -> AnimationEvent:
        if isinstance(event, Spawned):
            return AnimationEvent(type="SPAWN", payload={"ball": event.ball.id})
        if isinstance(event, Moved):
            return AnimationEvent(type="MOVE", payload={"x": event.x, "y": event.y})
        if isinstance(event, Released):
            return AnimationEvent(type="SETTLE", payload={"x": event.point.x, "y": event.point.y})
        if isinstance(event, Trashed):
            return AnimationEvent(type="TRASH", payload={"old": event.old.id, "new": event.new.id})
        if isinstance(event, SnappedBack):
            return AnimationEvent(type="SNAP_BACK", payload={"ball": event.ball.id})
        if isinstance(event, Fell):
            return AnimationEvent(type="FALL", payload={"ball": event.ball.id})
        return AnimationEvent(type="UNKNOWN", payload={"event": type(event).__name__})
