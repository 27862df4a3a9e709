"""A scene together with the option values to run it with."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from vkmark import log
from vkmark.scene import Scene

OptionPair = Tuple[str, str]


class Benchmark:
    """A scene and the options applied to it before each run."""

    def __init__(self, scene: Scene, options: Iterable[OptionPair] = ()) -> None:
        self.scene = scene
        self.options: List[OptionPair] = list(options)

    def prepare_scene(self) -> Scene:
        """Reset the scene's options, apply this benchmark's, and return the scene."""
        self.scene.reset_options()
        self._load_options()
        return self.scene

    def _load_options(self) -> None:
        for name, value in self.options:
            if self.scene.set_option(name, value):
                continue
            if name not in self.scene.options():
                log.warning(
                    "Scene '%s' doesn't accept option '%s'\n",
                    self.scene.name(),
                    name,
                )
            else:
                log.warning(
                    "Scene '%s' doesn't accept value '%s' for option '%s'\n",
                    self.scene.name(),
                    value,
                    name,
                )

    def __repr__(self) -> str:
        return f"Benchmark({self.scene.name()!r}, {self.options!r})"