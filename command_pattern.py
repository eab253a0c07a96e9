from abc import ABC, abstractmethod
from typing import Dict, List


class Light:
    """Receiver: knows how to switch and dim itself"""

    def __init__(self, location: str):
        self.location = location
        self.is_on = False
        self.brightness = 0

    def on(self):
        self.is_on = True
        self.brightness = 100
        return f"{self.location} light is ON"

    def off(self):
        self.is_on = False
        self.brightness = 0
        return f"{self.location} light is OFF"

    def dim(self, level: int):
        self.brightness = max(0, min(100, level))
        self.is_on = self.brightness > 0
        return f"{self.location} light dimmed to {self.brightness}%"


class Command(ABC):
    @abstractmethod
    def execute(self):
        pass

    @abstractmethod
    def undo(self):
        pass


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light
        self._previous = 0

    def execute(self):
        self._previous = self._light.brightness
        return self._light.on()

    def undo(self):
        return self._light.dim(self._previous)


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light
        self._previous = 0

    def execute(self):
        self._previous = self._light.brightness
        return self._light.off()

    def undo(self):
        return self._light.dim(self._previous)


class DimCommand(Command):
    def __init__(self, light: Light, level: int):
        self._light = light
        self._level = level
        self._previous = 0

    def execute(self):
        self._previous = self._light.brightness
        return self._light.dim(self._level)

    def undo(self):
        return self._light.dim(self._previous)


class MacroCommand(Command):
    """Runs several commands as one; undo walks them backwards"""

    def __init__(self, commands: List[Command]):
        self._commands = list(commands)

    def execute(self):
        return [command.execute() for command in self._commands]

    def undo(self):
        return [command.undo() for command in reversed(self._commands)]


class RemoteControl:
    """Invoker: binds commands to slots and remembers what ran"""

    def __init__(self):
        self._slots: Dict[str, Command] = {}
        self._history: List[Command] = []

    def set_command(self, slot: str, command: Command):
        self._slots[slot] = command

    def press(self, slot: str):
        if slot not in self._slots:
            raise ValueError(f"No command bound to slot '{slot}'")
        command = self._slots[slot]
        result = command.execute()
        self._history.append(command)
        return result

    def undo(self):
        if not self._history:
            return False
        return self._history.pop().undo()

    @property
    def history_size(self) -> int:
        return len(self._history)


def main():
    print("=== Command Demo ===\n")

    living_room = Light("Living room")
    kitchen = Light("Kitchen")

    remote = RemoteControl()
    remote.set_command("living_on", LightOnCommand(living_room))
    remote.set_command("living_dim", DimCommand(living_room, 30))
    remote.set_command("kitchen_off", LightOffCommand(kitchen))
    remote.set_command("all_on", MacroCommand([LightOnCommand(living_room), LightOnCommand(kitchen)]))

    print(remote.press("living_on"))
    print(remote.press("living_dim"))
    print(f"Undo: {remote.undo()}")
    for line in remote.press("all_on"):
        print(line)
    print(remote.press("kitchen_off"))

    while remote.history_size:
        print(f"Undo: {remote.undo()}")
    print(f"Undo with empty history: {remote.undo()}")


if __name__ == "__main__":
    main()
