"""Bridge pattern: remotes and the devices they control vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "========================Bridge Pattern======================"


class EntertainmentDevice(ABC):
    """A device with a current setting (channel or chapter) and a volume."""

    def __init__(self, device_state: int, max_setting: int, volume_level: int = 0) -> None:
        self.device_state = device_state
        self.max_setting = max_setting
        self.volume_level = volume_level

    @abstractmethod
    def button_five_pressed(self) -> None:
        """Step the setting down."""

    @abstractmethod
    def button_six_pressed(self) -> None:
        """Step the setting up."""

    def button_seven_pressed(self) -> None:
        self.volume_level += 1
        print(f"Volume at: {self.volume_level}")

    def button_eight_pressed(self) -> None:
        self.volume_level -= 1
        print(f"Volume at: {self.volume_level}")

    def device_feedback(self) -> None:
        """Reset an out-of-range setting to 0 and report the setting."""
        if self.device_state > self.max_setting or self.device_state < 0:
            self.device_state = 0
        print(f"On Channel {self.device_state}")


class TVDevice(EntertainmentDevice):
    """A television; buttons five and six change channel."""

    def button_five_pressed(self) -> None:
        print("Channel down")
        self.device_state -= 1

    def button_six_pressed(self) -> None:
        print("Channel Up")
        self.device_state += 1


class DVDDevice(EntertainmentDevice):
    """A DVD player; buttons five and six change chapter."""

    def button_five_pressed(self) -> None:
        print("DVD skips to Chapter")
        self.device_state -= 1

    def button_six_pressed(self) -> None:
        print("DVD skips to Next Chapter")
        self.device_state += 1


class RemoteButton(ABC):
    """A remote that forwards the common buttons to its device."""

    def __init__(self, device: EntertainmentDevice) -> None:
        self.device = device

    def button_five_pressed(self) -> None:
        self.device.button_five_pressed()

    def button_six_pressed(self) -> None:
        self.device.button_six_pressed()

    @abstractmethod
    def button_nine_pressed(self) -> None:
        """The remote's own extra button."""

    def device_feedback(self) -> None:
        self.device.device_feedback()


class TVRemoteMute(RemoteButton):
    """A TV remote whose ninth button mutes."""

    def button_nine_pressed(self) -> None:
        print("TV was Muted")


class TVRemotePause(RemoteButton):
    """A TV remote whose ninth button pauses."""

    def button_nine_pressed(self) -> None:
        print("TV was Paused")


class DVDRemote(RemoteButton):
    """A DVD remote whose ninth button toggles play."""

    def __init__(self, device: EntertainmentDevice) -> None:
        super().__init__(device)
        self.play = True

    def button_nine_pressed(self) -> None:
        self.play = not self.play
        print(f"DVD is Plaing: {int(self.play)}")


def bridge_pattern() -> None:
    """Drive a TV through two remotes and a DVD player through its remote."""
    print(_RULE)
    print(_BANNER)
    tv_device = TVDevice(1, 200)
    the_tv = TVRemoteMute(tv_device)
    the_tv2 = TVRemotePause(tv_device)

    dvd_device = DVDDevice(1, 14)
    the_dvd = DVDRemote(dvd_device)

    print("Test TV with Mute")
    the_tv.button_five_pressed()
    the_tv.button_six_pressed()
    the_tv.button_nine_pressed()
    print()

    print("Test TV with Pause")
    the_tv2.button_five_pressed()
    the_tv2.button_six_pressed()
    the_tv2.button_nine_pressed()
    the_tv2.device_feedback()
    print()

    print("Test DVD")
    the_dvd.button_five_pressed()
    the_dvd.button_six_pressed()
    the_dvd.button_nine_pressed()
    the_dvd.button_nine_pressed()
    print()
    print(_BANNER)
    print(_RULE)