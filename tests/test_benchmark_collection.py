import pytest

from vkmark.benchmark_collection import BenchmarkCollection, default_benchmarks
from vkmark.scene import Scene, SceneOption
from vkmark.scene_collection import SceneCollection

OPTION1 = SceneOption("option1", "value1", "")
OPTION2 = SceneOption("option2", "value2", "")


class FakeScene(Scene):
    def __init__(self, name, options=()):
        super().__init__(name)
        for option in options:
            self._add_option(option)


def scene_name(i):
    return f"test_scene_{i}"


def benchmark_string(name, value1="", value2="", extra=""):
    ret = name
    if value1:
        ret += f":{OPTION1.name}={value1}"
    if value2:
        ret += f":{OPTION2.name}={value2}"
    return ret + extra


@pytest.fixture
def collection():
    sc = SceneCollection()
    sc.register_scene(FakeScene(""))
    sc.register_scene(FakeScene(scene_name(1), [OPTION1, OPTION2]))
    sc.register_scene(FakeScene(scene_name(2)))
    sc.register_scene(FakeScene(scene_name(3), [OPTION1, OPTION2]))
    return BenchmarkCollection(sc)


def test_unregistered_scene_gives_invalid_benchmark(collection):
    collection.add(["unregistered"])
    benchmarks = collection.benchmarks()
    assert len(benchmarks) == 1
    assert not benchmarks[0].prepare_scene().is_valid()


def test_registered_scene(collection):
    collection.add([scene_name(1)])
    benchmarks = collection.benchmarks()
    assert len(benchmarks) == 1
    assert benchmarks[0].prepare_scene().name() == scene_name(1)


def test_registered_scene_with_options(collection):
    collection.add([benchmark_string(scene_name(1), "1", "2")])
    benchmarks = collection.benchmarks()
    scene = benchmarks[0].prepare_scene()
    assert len(benchmarks) == 1
    assert scene.name() == scene_name(1)
    assert scene.options()[OPTION1.name].value == "1"
    assert scene.options()[OPTION2.name].value == "2"


def test_invalid_options_are_ignored(collection):
    collection.add(
        [benchmark_string(scene_name(1), "", "2", ":testoptinvalid=1:testoptinvalid1=bla")]
    )
    benchmarks = collection.benchmarks()
    scene = benchmarks[0].prepare_scene()
    assert len(benchmarks) == 1
    assert scene.name() == scene_name(1)
    assert scene.options()[OPTION1.name].value == OPTION1.value
    assert scene.options()[OPTION2.name].value == "2"


def test_malformed_option_string_is_ignored(collection, capsys):
    collection.add([scene_name(1) + ":nonsense:option1=5"])
    scene = collection.benchmarks()[0].prepare_scene()
    assert scene.options()[OPTION1.name].value == "5"
    assert "ignoring invalid option string 'nonsense'" in capsys.readouterr().out


def test_many_benchmarks(collection):
    collection.add(
        [
            benchmark_string(scene_name(1), "1", "2"),
            benchmark_string(scene_name(2)),
            benchmark_string(scene_name(1), "3", "4"),
        ]
    )
    benchmarks = collection.benchmarks()
    assert len(benchmarks) == 3

    scene1 = benchmarks[0].prepare_scene()
    assert scene1.name() == scene_name(1)
    assert scene1.options()[OPTION1.name].value == "1"
    assert scene1.options()[OPTION2.name].value == "2"

    scene2 = benchmarks[1].prepare_scene()
    assert scene2.name() == scene_name(2)
    with pytest.raises(KeyError):
        scene2.options()[OPTION1.name]
    with pytest.raises(KeyError):
        scene2.options()[OPTION2.name]

    scene3 = benchmarks[2].prepare_scene()
    assert scene3.name() == scene_name(1)
    assert scene3.options()[OPTION1.name].value == "3"
    assert scene3.options()[OPTION2.name].value == "4"


def test_option_setting_scene(collection):
    collection.add([benchmark_string("")])
    benchmarks = collection.benchmarks()
    assert len(benchmarks) == 1
    assert benchmarks[0].prepare_scene().name() == ""


@pytest.fixture
def small_collection():
    sc = SceneCollection()
    sc.register_scene(FakeScene(scene_name(1)))
    sc.register_scene(FakeScene(""))
    return BenchmarkCollection(sc)


def test_empty_contains_no_normal_scenes(small_collection):
    assert small_collection.contains_normal_scenes() is False


def test_only_option_setting_scenes(small_collection):
    small_collection.add([":duration=1", ":bla=2"])
    assert small_collection.contains_normal_scenes() is False


def test_at_least_one_normal_scene(small_collection):
    small_collection.add([":duration=1", scene_name(1)])
    assert small_collection.contains_normal_scenes() is True


def test_benchmarks_returns_copy(small_collection):
    small_collection.add([scene_name(1)])
    small_collection.benchmarks().clear()
    assert len(small_collection.benchmarks()) == 1


def test_default_benchmarks():
    defaults = default_benchmarks()
    assert len(defaults) == 13
    assert defaults[0] == "vertex:device-local=true"
    assert defaults[-3:] == ["desktop", "cube", "clear"]
    assert "shading:shading=blinn-phong-inf" in defaults