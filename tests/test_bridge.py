import pytest

from patternshowcase.bridge import (
    DVDDevice,
    DVDRemote,
    EntertainmentDevice,
    RemoteButton,
    TVDevice,
    TVRemoteMute,
    TVRemotePause,
    bridge_pattern,
)


def test_tv_buttons_change_channel(capsys):
    device = TVDevice(5, 200)
    device.button_five_pressed()
    assert device.device_state == 4
    device.button_six_pressed()
    device.button_six_pressed()
    assert device.device_state == 6
    out = capsys.readouterr().out.splitlines()
    assert out == ["Channel down", "Channel Up", "Channel Up"]


def test_dvd_buttons_change_chapter(capsys):
    device = DVDDevice(3, 14)
    device.button_five_pressed()
    device.button_six_pressed()
    assert device.device_state == 3
    out = capsys.readouterr().out.splitlines()
    assert out == ["DVD skips to Chapter", "DVD skips to Next Chapter"]


def test_remote_forwards_to_device():
    device = TVDevice(10, 200)
    remote = TVRemoteMute(device)
    remote.button_six_pressed()
    assert device.device_state == 11
    remote.button_five_pressed()
    assert device.device_state == 10


def test_two_remotes_share_one_device():
    device = TVDevice(10, 200)
    TVRemoteMute(device).button_six_pressed()
    TVRemotePause(device).button_six_pressed()
    assert device.device_state == 12


def test_volume_buttons():
    device = TVDevice(1, 200)
    start = device.volume_level
    device.button_seven_pressed()
    assert device.volume_level == start + 1
    device.button_eight_pressed()
    device.button_eight_pressed()
    assert device.volume_level == start - 1


@pytest.mark.parametrize("state", [-1, 201])
def test_feedback_resets_out_of_range(state, capsys):
    device = TVDevice(state, 200)
    device.device_feedback()
    assert device.device_state == 0
    assert capsys.readouterr().out == "On Channel 0\n"


def test_feedback_keeps_valid_state(capsys):
    device = DVDDevice(7, 14)
    DVDRemote(device).device_feedback()
    assert device.device_state == 7
    assert capsys.readouterr().out == "On Channel 7\n"


def test_mute_and_pause_messages(capsys):
    device = TVDevice(1, 200)
    TVRemoteMute(device).button_nine_pressed()
    TVRemotePause(device).button_nine_pressed()
    assert capsys.readouterr().out.splitlines() == ["TV was Muted", "TV was Paused"]


def test_dvd_remote_toggles_play(capsys):
    remote = DVDRemote(DVDDevice(1, 14))
    assert remote.play is True
    remote.button_nine_pressed()
    assert remote.play is False
    remote.button_nine_pressed()
    assert remote.play is True
    out = capsys.readouterr().out.splitlines()
    assert out == ["DVD is Plaing: 0", "DVD is Plaing: 1"]


def test_abstract_classes_cannot_be_made():
    with pytest.raises(TypeError):
        EntertainmentDevice(1, 2)
    with pytest.raises(TypeError):
        RemoteButton(TVDevice(1, 2))


def test_bridge_pattern_output(capsys):
    bridge_pattern()
    out = capsys.readouterr().out.splitlines()
    assert "Test TV with Mute" in out
    assert "TV was Muted" in out
    assert "TV was Paused" in out
    assert out.index("Test TV with Pause") < out.index("Test DVD")
    assert out.count("DVD is Plaing: 0") == 1
    assert out.count("DVD is Plaing: 1") == 1