"""Boolean state helper."""


class Toggle:

    def __init__(self, initial: object = False):
        self.on = bool(initial)

    def toggle(self) -> bool:
        self.on = not self.on
        return self.on

    def set(self, value: object) -> bool:
        self.on = bool(value)
        return self.on

    def __bool__(self) -> bool:
        return self.on
