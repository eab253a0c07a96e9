from abc import ABC, abstractmethod


class Device(ABC):
    """Implementation side of the bridge"""

    def __init__(self):
        self._enabled = False
        self._volume = 30
        self._channel = 1

    @property
    @abstractmethod
    def name(self):
        pass

    def is_enabled(self):
        return self._enabled

    def enable(self):
        self._enabled = True

    def disable(self):
        self._enabled = False

    def get_volume(self):
        return self._volume

    def set_volume(self, volume):
        self._volume = max(0, min(100, volume))

    def get_channel(self):
        return self._channel

    def set_channel(self, channel):
        self._channel = channel

    def status(self):
        state = "on" if self._enabled else "off"
        return f"{self.name} is {state}, volume {self._volume}, channel {self._channel}"


class Tv(Device):
    @property
    def name(self):
        return "TV"


class Radio(Device):
    @property
    def name(self):
        return "Radio"


class RemoteControl:
    """Abstraction side: works with any Device"""

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self):
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_up(self):
        self.device.set_volume(self.device.get_volume() + 10)

    def volume_down(self):
        self.device.set_volume(self.device.get_volume() - 10)

    def channel_up(self):
        self.device.set_channel(self.device.get_channel() + 1)


class AdvancedRemote(RemoteControl):
    def mute(self):
        self.device.set_volume(0)


def main():
    print("=== Bridge Demo ===\n")

    tv_remote = RemoteControl(Tv())
    tv_remote.toggle_power()
    tv_remote.channel_up()
    tv_remote.volume_up()
    print(tv_remote.device.status())

    radio_remote = AdvancedRemote(Radio())
    radio_remote.toggle_power()
    radio_remote.mute()
    print(radio_remote.device.status())


if __name__ == "__main__":
    main()
