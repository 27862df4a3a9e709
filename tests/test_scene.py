from unittest import mock

import pytest

from vkmark.scene import Scene, SceneOption
from vkmark.window_system import VulkanImage


def test_option_without_acceptable_values_accepts_everything():
    option = SceneOption("name", "val1", "description")
    assert option.accepts_value("val1")
    assert option.accepts_value("arbitrary_val")
    assert option.accepts_value("")


def test_option_with_acceptable_values_accepts_listed():
    option = SceneOption("name", "val1", "description", "val1,val3,val5")
    assert option.accepts_value("val1")
    assert option.accepts_value("val3")
    assert option.accepts_value("val5")


def test_option_with_acceptable_values_rejects_others():
    option = SceneOption("name", "val1", "description", "val1,val3,val5")
    assert not option.accepts_value("")
    assert not option.accepts_value("val2")
    assert not option.accepts_value("val4")


def test_option_default_matches_initial_value():
    option = SceneOption("name", "val1", "description", "val1,val3")
    assert option.default_value == "val1"
    assert option.acceptable_values == ["val1", "val3"]
    assert option.set is False


def test_scene_has_duration_option():
    scene = Scene("s")
    duration = scene.options()["duration"]
    assert duration.value == "10.0"
    assert duration.description == "The duration of each benchmark in seconds"
    with pytest.raises(KeyError):
        scene.options()["missing"]


def test_set_and_reset_option():
    scene = Scene("mode_scene")
    scene._add_option(SceneOption("mode", "a", "The mode", "a,b"))
    assert scene.set_option("mode", "b")
    assert scene.options()["mode"].value == "b"
    assert scene.options()["mode"].set
    scene.reset_options()
    assert scene.options()["mode"].value == "a"
    assert not scene.options()["mode"].set


def test_set_option_rejects_unknown_and_unacceptable():
    scene = Scene("mode_scene")
    scene._add_option(SceneOption("mode", "a", "The mode", "a,b"))
    assert not scene.set_option("unknown", "x")
    assert not scene.set_option("mode", "c")
    assert scene.options()["mode"].value == "a"


def test_set_option_default():
    scene = Scene("mode_scene")
    scene._add_option(SceneOption("mode", "a", "The mode", "a,b"))
    assert scene.set_option_default("mode", "b")
    assert not scene.set_option_default("mode", "z")
    assert not scene.set_option_default("unknown", "b")
    scene.reset_options()
    assert scene.options()["mode"].value == "b"


def test_added_options_are_copies():
    shared = SceneOption("opt", "v", "")
    first = Scene("one")
    second = Scene("two")
    first._add_option(shared)
    second._add_option(shared)
    first.set_option("opt", "changed")
    assert second.options()["opt"].value == "v"
    assert shared.value == "v"


def test_info_string():
    scene = Scene("s")
    assert scene.info_string(False) == "[s] <default>:"
    assert scene.info_string(True) == "[s] duration=10.0:"
    scene.set_option("duration", "5")
    assert scene.info_string(False) == "[s] duration=5:"


def test_draw_copies_image_without_semaphore():
    scene = Scene("s")
    image = VulkanImage(index=3, semaphore="sem")
    drawn = scene.draw(image)
    assert drawn.index == 3
    assert drawn.semaphore is None


def test_average_fps_before_any_frame_is_zero():
    scene = Scene("s")
    scene.setup(None, [])
    scene.start()
    assert scene.average_fps() == 0
    assert scene.is_running()


def test_update_counts_frames_and_stops_after_duration():
    scene = Scene("s")
    scene.setup(None, [])
    times_ns = [0, 500_000_000, 10_000_000_000]
    with mock.patch("vkmark.scene.time.monotonic_ns", side_effect=times_ns):
        scene.start()
        scene.update()
        assert scene.is_running()
        assert scene.average_fps() == 2
        scene.update()
    assert not scene.is_running()


def test_zero_duration_stops_after_first_update():
    scene = Scene("s")
    scene.set_option("duration", "0")
    scene.setup(None, [])
    scene.start()
    scene.update()
    assert not scene.is_running()


def test_setup_with_invalid_duration_raises():
    scene = Scene("s")
    scene.set_option("duration", "abc")
    with pytest.raises(ValueError):
        scene.setup(None, [])


def test_scene_name_and_validity():
    scene = Scene("named")
    assert scene.name() == "named"
    assert scene.is_valid() is True