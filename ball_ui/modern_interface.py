import argparse
import logging
import math
import random
import sys
import time
from tkinter import BOTH, Canvas, Tk

from PIL import ImageTk

from ball.Core import SETTLE_DAMPING, SETTLE_VELOCITY, DragController, trashZone
from ball.Geometry import INSIDE_HIGH, INSIDE_LOW, Point, Rect, nearMissBand
from ball.Interface import Interface
from ball_ui.adapter import CoreAdapter
from ball_ui.easing import interpolate, spring_progress
from ball_ui.entities import GestureState, Particle, SettleAnimation
from ball_ui.settings_store import load_settings, save_settings
from ball_ui.trash_icon import render_trash_icon
from ball_ui.ui_config import (
    BALL_BORDER_WIDTH,
    FPS_MS,
    MAX_WINDOW_HEIGHT,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
    PARTICLE_SPEED,
    PARTICLE_TTL,
    THEME_ORDER,
    THEMES,
    TRASH_BURST_COUNT,
)

logger = logging.getLogger(__name__)


class ModernTkInterface(Interface):
    MESSAGES = {
        "SPAWN": "Drag the ball into the trash can.",
        "SETTLE": "Dropping...",
        "TRASH": "Trashed! Here is a new one.",
        "SNAP_BACK": "Close! The ball bounced back to the start.",
        "FALL": "Missed. Drag it again.",
    }

    def __init__(self, width=None, height=None, rng=None):
        super().__init__()
        settings = load_settings()
        self.theme_name = settings["theme_name"]
        self.show_guides = settings["show_guides"] == "True"
        self.width = width or int(settings["window_width"])
        self.height = height or int(settings["window_height"])
        self.root = None
        self.canvas = None

        self.vm = None
        self.message = ""
        self.gesture = None
        self.settle = None
        self.particles = []
        self.fx_rng = random.Random()
        self.trash_image = None
        self.trash_image_key = None
        self.needs_redraw = True

        parent = Rect(0, 0, self.width, self.height)
        core = DragController(parent, trashZone(parent), rng)
        core.registerInterface(self)
        core.startGame()

    def run(self):
        self.root = Tk()
        self.root.title("Relative UI Dragging")
        self.root.resizable(True, True)
        self.root.minsize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
        self.root.maxsize(MAX_WINDOW_WIDTH, MAX_WINDOW_HEIGHT)
        self.canvas = Canvas(self.root, width=self.width, height=self.height, highlightthickness=0, bd=0)
        self.canvas.pack(expand=1, fill=BOTH)

        self.root.bind("<Configure>", self.on_resize)
        self.root.bind("<Button-1>", self.on_press)
        self.root.bind("<B1-Motion>", self.on_drag)
        self.root.bind("<ButtonRelease-1>", self.on_release)
        self.root.bind("<Key>", self.on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        self.tick()
        self.root.mainloop()

    @property
    def theme(self):
        return THEMES[self.theme_name]

    def persist_settings(self):
        save_settings(
            {
                "theme_name": self.theme_name,
                "window_width": str(self.width),
                "window_height": str(self.height),
                "show_guides": str(self.show_guides),
            }
        )

    def request_redraw(self):
        self.needs_redraw = True

    def on_close(self):
        self.persist_settings()
        self.root.destroy()

    def onStart(self):
        self.vm = CoreAdapter.snapshot(self.core)
        self.message = self.MESSAGES["SPAWN"]
        self.request_redraw()

    def onEvent(self, event):
        evt = CoreAdapter.event_to_animation(event)
        self.vm = CoreAdapter.snapshot(self.core)
        if evt.type in self.MESSAGES:
            self.message = self.MESSAGES[evt.type]
        if evt.type == "TRASH":
            center = self.core.zone.center
            self.spawn_trash_burst(center.x, center.y, TRASH_BURST_COUNT)
        self.request_redraw()

    def notifyRedraw(self):
        self.request_redraw()

    def animateLayout(self, duration, completion):
        target = self.core.position.targetFrame()
        frame = self.core.ball.frame
        self.settle = SettleAnimation(
            start_x=frame.x,
            start_y=frame.y,
            end_x=target.x,
            end_y=target.y,
            started_at=time.time(),
            duration=duration,
            on_complete=completion,
        )
        self.request_redraw()

    def on_resize(self, event):
        if event.widget != self.root:
            return
        if (event.width, event.height) == (self.width, self.height):
            return
        self.width = event.width
        self.height = event.height
        logger.debug("resized to %dx%d", self.width, self.height)
        parent = Rect(0, 0, self.width, self.height)
        self.core.relayout(parent, trashZone(parent))
        if self.settle is not None:
            # the ball keeps its current frame and heads for the moved anchor
            target = self.core.position.targetFrame()
            self.settle.end_x = target.x
            self.settle.end_y = target.y
        self.vm = CoreAdapter.snapshot(self.core)
        self.request_redraw()

    def on_key(self, event):
        key = event.keysym.lower()
        if key == "t":
            idx = THEME_ORDER.index(self.theme_name)
            self.theme_name = THEME_ORDER[(idx + 1) % len(THEME_ORDER)]
            self.persist_settings()
        elif key == "g":
            self.show_guides = not self.show_guides
            self.persist_settings()
        elif key == "r":
            self.gesture = None
            if not self.core.respawn():
                self.message = "Wait for the ball to land."
        elif key == "q":
            self.on_close()
            return
        self.request_redraw()

    def on_press(self, event):
        if self.settle is not None:
            return
        if not self.core.ballAt(Point(event.x, event.y)):
            return
        if self.core.beginDrag():
            self.gesture = GestureState(press_x=event.x, press_y=event.y)

    def on_drag(self, event):
        if self.gesture is None:
            return
        self.core.dragMoved(event.x - self.gesture.press_x, event.y - self.gesture.press_y)

    def on_release(self, event):
        if self.gesture is None:
            return
        gesture = self.gesture
        self.gesture = None
        self.core.endDrag(event.x - gesture.press_x, event.y - gesture.press_y)

    def step(self, now):
        """Advances the settle animation and effects to `now`."""
        anim = self.settle
        if anim is not None:
            t = (now - anim.started_at) / anim.duration if anim.duration > 0 else 1.0
            progress = spring_progress(t, SETTLE_DAMPING, SETTLE_VELOCITY)
            ball = self.core.ball
            ball.frame = Rect(
                interpolate(anim.start_x, anim.end_x, progress),
                interpolate(anim.start_y, anim.end_y, progress),
                ball.frame.width,
                ball.frame.height,
            )
            self.request_redraw()
            if t >= 1.0:
                self.settle = None
                anim.on_complete()
        self.update_effects(now)

    def tick(self):
        self.step(time.time())
        if self.needs_redraw or self.particles:
            self.draw()
            self.needs_redraw = False
        self.root.after(FPS_MS, self.tick)

    def update_effects(self, now):
        alive = []
        for p in self.particles:
            if now - p.born > p.ttl:
                continue
            p.x += p.vx
            p.y += p.vy
            p.vy += 0.06
            p.vx *= 0.985
            p.vy *= 0.985
            alive.append(p)
        self.particles = alive

    def spawn_trash_burst(self, x, y, count):
        now = time.time()
        colors = self.theme["particle"]
        for _ in range(count):
            angle = self.fx_rng.uniform(math.pi, math.tau)
            speed = self.fx_rng.uniform(*PARTICLE_SPEED)
            self.particles.append(
                Particle(
                    x=x + self.fx_rng.uniform(-8, 8),
                    y=y,
                    vx=math.cos(angle) * speed,
                    vy=math.sin(angle) * speed,
                    born=now,
                    ttl=self.fx_rng.uniform(*PARTICLE_TTL),
                    size=self.fx_rng.uniform(1.6, 3.6),
                    color=self.fx_rng.choice(colors),
                )
            )

    def trash_photo(self, zone: Rect):
        key = (int(zone.width), int(zone.height), self.theme_name)
        if self.trash_image_key != key:
            icon = render_trash_icon(zone.width, zone.height, self.theme)
            self.trash_image = ImageTk.PhotoImage(icon)
            self.trash_image_key = key
        return self.trash_image

    def draw(self):
        if self.canvas is None:
            return
        c = self.canvas
        c.delete("all")
        c.create_rectangle(0, 0, self.width, self.height, fill=self.theme["bg"], width=0)
        if self.show_guides:
            self.draw_guides(c)
        # the ball stays beneath the trash can
        self.draw_ball(c)
        zone = self.core.zone
        c.create_image(zone.x, zone.y, anchor="nw", image=self.trash_photo(zone))
        self.draw_particles(c)
        self.draw_hud(c)

    def draw_ball(self, c):
        ball = self.core.ball
        f = ball.frame
        c.create_oval(
            f.x,
            f.y,
            f.right,
            f.bottom,
            fill=ball.color,
            outline=self.theme["ball_border"],
            width=BALL_BORDER_WIDTH,
        )

    def draw_guides(self, c):
        zone = self.core.zone
        low, high = nearMissBand(zone)
        c.create_rectangle(low, 0, high, self.height, outline=self.theme["guide_band"], dash=(4, 4))
        c.create_rectangle(
            zone.x * INSIDE_LOW,
            zone.y * INSIDE_LOW,
            zone.x + zone.width * INSIDE_HIGH,
            zone.y + zone.height * INSIDE_HIGH,
            outline=self.theme["guide_inside"],
            dash=(2, 3),
        )

    def draw_particles(self, c):
        now = time.time()
        for p in self.particles:
            alpha = max(0.0, 1.0 - (now - p.born) / p.ttl)
            r = p.size * alpha
            c.create_oval(p.x - r, p.y - r, p.x + r, p.y + r, fill=p.color, width=0)

    def draw_hud(self, c):
        c.create_text(12, 12, anchor="nw", text=self.message, fill=self.theme["hud_text"], font="Helvetica 12 bold")
        if self.vm is not None:
            c.create_text(
                self.width - 12,
                12,
                anchor="ne",
                text=f"Trashed: {self.vm.trashed_count}",
                fill=self.theme["hud_text"],
                font="Helvetica 11",
            )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drag the ball into the trash can.")
    parser.add_argument("--width", type=int, default=None, help="Window width, overrides settings.ini.")
    parser.add_argument("--height", type=int, default=None, help="Window height, overrides settings.ini.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    ModernTkInterface(args.width, args.height).run()


if __name__ == "__main__":
    main()
