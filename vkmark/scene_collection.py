"""A registry of benchmark scenes looked up by name."""

from __future__ import annotations

from typing import Dict, Iterator

from vkmark import log
from vkmark.scene import Scene


class _InvalidScene(Scene):
    """Stands in for a scene name that no registered scene has."""

    def is_valid(self) -> bool:
        return False


class SceneCollection:
    """Holds the scenes available for benchmarking, keyed by name."""

    def __init__(self) -> None:
        self._scenes: Dict[str, Scene] = {}

    def __iter__(self) -> Iterator[Scene]:
        return iter(self._scenes.values())

    def __len__(self) -> int:
        return len(self._scenes)

    def register_scene(self, scene: Scene) -> None:
        """Add a scene, replacing any scene already registered under its name."""
        self._scenes[scene.name()] = scene

    def get_scene_by_name(self, name: str) -> Scene:
        """Return the scene with this name, or an invalid placeholder scene."""
        scene = self._scenes.get(name)
        if scene is None:
            scene = _InvalidScene(name)
            self._scenes[name] = scene
        return scene

    def set_option_default(self, name: str, value: str) -> None:
        """Change the default of an option in every scene that has it."""
        for scene in self._scenes.values():
            # Warn only when the scene has the option but rejects the value.
            if not scene.set_option_default(name, value) and name in scene.options():
                log.warning(
                    "Scene '%s' doesn't accept default value '%s' for option '%s'\n",
                    scene.name(),
                    value,
                    name,
                )

    def log_scene_info(self) -> None:
        """Log every named scene together with its options."""
        for scene in self._scenes.values():
            if not scene.name():
                continue

            log.info("[Scene] %s\n", scene.name())

            for option in scene.options().values():
                log.info(
                    "  [Option] %s\n"
                    "    Description  : %s\n"
                    "    Default Value: %s\n",
                    option.name,
                    option.description,
                    option.default_value,
                )

                if option.acceptable_values:
                    log.info("    Acceptable Values: ")
                    last = len(option.acceptable_values) - 1
                    for i, value in enumerate(option.acceptable_values):
                        ending = "\n" if i == last else ","
                        log.info(log.CONTINUATION_PREFIX + "%s" + ending, value)