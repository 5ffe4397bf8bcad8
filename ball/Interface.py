from ball.Core import DragController, DropEvent


class Interface:

    def __init__(self):
        self.core: DragController = None

    def onStart(self):
        pass

    def onEvent(self, event: DropEvent):
        """
        Invoked after the controller changed the ball or its placement.
        :param event:
        :return:
        """
        self.notifyRedraw()

    def animateLayout(self, duration, completion):
        """
        Moves the ball to its new target frame over `duration` seconds and calls
        `completion` once it is there. Headless interfaces have nothing to
        animate, so the layout is applied at once.
        """
        self.core.layoutIfNeeded()
        self.notifyRedraw()
        completion()

    def notifyRedraw(self):
        pass
