import argparse
import logging
import random
import sys

from ball.Core import DragController, Fell, Released, SnappedBack, Spawned, Trashed, trashZone
from ball.Geometry import Rect
from ball.Interface import Interface


class CommandLineInterface(Interface):

    def printAll(self):
        core = self.core
        ball = core.ball
        frame = ball.frame
        print(f"Ball #{ball.id} {ball.color}   trashed: {core.trashedCount}")
        print(f"  placement: {type(core.position.placement).__name__}")
        print(f"  frame: x={frame.x:.1f} y={frame.y:.1f} w={frame.width:g} h={frame.height:g}")
        zone = core.zone
        print(f"  trash can: x={zone.x:g} y={zone.y:g} w={zone.width:g} h={zone.height:g}")
        print()

    def onStart(self):
        print("Ball placed!")
        self.printAll()

    def onEvent(self, event):
        if isinstance(event, Released):
            print(f"Released at ({event.point.x:.1f}, {event.point.y:.1f})")
        elif isinstance(event, Trashed):
            print(f"Ball #{event.old.id} trashed, new ball #{event.new.id}")
        elif isinstance(event, SnappedBack):
            print("Touched the trash can, back to start")
        elif isinstance(event, Fell):
            print("Fell to the ground")
        elif isinstance(event, Spawned):
            print(f"New ball #{event.ball.id}")

    def notifyRedraw(self):
        pass


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drag the ball into the trash can, from the terminal.")
    parser.add_argument("--width", type=float, default=375, help="Screen width.")
    parser.add_argument("--height", type=float, default=667, help="Screen height.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball colors.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def execute(core: DragController, interface: CommandLineInterface, command: str):
    """Runs one command line. Returns False when the session should end."""
    parts = command.split()
    if not parts:
        return True
    name = parts[0]
    try:
        args = [float(p) for p in parts[1:]]
    except ValueError:
        print("Invalid number!")
        return True

    if name == "drag":
        if len(args) != 2:
            print("Usage: drag dx dy")
        elif not core.beginDrag() or not core.dragMoved(*args):
            print("Cannot drag now!")
    elif name == "move":
        if len(args) != 2 or not core.dragMoved(*args):
            print("Not dragging!")
    elif name == "drop":
        translation = args if len(args) == 2 else [0.0, 0.0]
        if not core.endDrag(*translation):
            print("Not dragging!")
        interface.printAll()
    elif name == "throw":
        if len(args) != 2:
            print("Usage: throw x y")
            return True
        start = core.ball.center
        if not core.beginDrag():
            print("Cannot drag now!")
            return True
        core.endDrag(args[0] - start.x, args[1] - start.y)
        interface.printAll()
    elif name == "respawn":
        core.respawn()
        interface.printAll()
    elif name == "where":
        interface.printAll()
    elif name in ("quit", "exit"):
        return False
    else:
        print("Invalid command!")
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    parent = Rect(0, 0, args.width, args.height)
    core = DragController(parent, trashZone(parent), random.Random(args.seed))
    interface = CommandLineInterface()
    core.registerInterface(interface)
    core.startGame()
    for line in sys.stdin:
        if not execute(core, interface, line.strip()):
            break


if __name__ == '__main__':
    main()
