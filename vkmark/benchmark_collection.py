"""Benchmarks built from textual descriptions such as 'scene:opt=val'."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from vkmark import log
from vkmark.benchmark import Benchmark, OptionPair
from vkmark.scene_collection import SceneCollection

_DEFAULT_BENCHMARKS = (
    "vertex:device-local=true",
    "vertex:device-local=false",
    "texture:anisotropy=0",
    "texture:anisotropy=16",
    "shading:shading=gouraud",
    "shading:shading=blinn-phong-inf",
    "shading:shading=phong",
    "shading:shading=cel",
    "effect2d:kernel=edge",
    "effect2d:kernel=blur",
    "desktop",
    "cube",
    "clear",
)


def default_benchmarks() -> List[str]:
    """Return the descriptions of the benchmarks run when none are given."""
    return list(_DEFAULT_BENCHMARKS)


def _split(text: str, delimiter: str) -> List[str]:
    return text.split(delimiter) if text else []


def _parse_description(description: str) -> Tuple[str, List[OptionPair]]:
    elements = _split(description, ":")
    if not elements:
        return "", []

    name, *option_strings = elements
    options: List[OptionPair] = []
    for option_string in option_strings:
        parts = _split(option_string, "=")
        if len(parts) == 2:
            options.append((parts[0], parts[1]))
        else:
            log.info(
                "Warning: ignoring invalid option string '%s' "
                "in benchmark description\n",
                option_string,
            )
    return name, options


class BenchmarkCollection:
    """An ordered list of benchmarks over the scenes of a scene collection."""

    def __init__(self, scene_collection: SceneCollection) -> None:
        self._scene_collection = scene_collection
        self._benchmarks: List[Benchmark] = []
        self._contains_normal_scenes = False

    def add(self, benchmark_strings: Iterable[str]) -> None:
        """Add a benchmark for each description 'scene(:opt=val)*'."""
        for description in benchmark_strings:
            name, options = _parse_description(description)
            scene = self._scene_collection.get_scene_by_name(name)
            if scene.name():
                self._contains_normal_scenes = True
            self._benchmarks.append(Benchmark(scene, options))

    def benchmarks(self) -> List[Benchmark]:
        """Return the benchmarks in the order they were added."""
        return list(self._benchmarks)

    def contains_normal_scenes(self) -> bool:
        """Tell whether any benchmark uses a scene other than option-setting ones."""
        return self._contains_normal_scenes