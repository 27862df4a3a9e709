"""Benchmark scenes and their configurable options."""

from __future__ import annotations

import copy
import time
from dataclasses import InitVar, dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Sequence

from vkmark.window_system import VulkanImage


def _split(text: str, delimiter: str) -> List[str]:
    return text.split(delimiter) if text else []


def _timestamp_us() -> int:
    return time.monotonic_ns() // 1000


@dataclass
class SceneOption:
    """A named scene option with a value, a default and optional allowed values."""

    name: str = ""
    value: str = ""
    description: str = ""
    values: InitVar[str] = ""
    default_value: str = field(init=False, default="")
    acceptable_values: List[str] = field(init=False, default_factory=list)
    set: bool = field(init=False, default=False)

    def __post_init__(self, values: str) -> None:
        self.default_value = self.value
        self.acceptable_values = _split(values, ",")

    def accepts_value(self, value: str) -> bool:
        """Tell whether value is allowed; anything is allowed if no list was given."""
        return not self.acceptable_values or value in self.acceptable_values


class Scene:
    """A benchmark scene: renders frames for a while and measures the frame rate."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._options: dict[str, SceneOption] = {}
        self._start_time = 0
        self._last_update_time = 0
        self._current_frame = 0
        self._running = False
        self._duration = 0
        self._add_option(
            SceneOption("duration", "10.0", "The duration of each benchmark in seconds")
        )

    def _add_option(self, option: SceneOption) -> None:
        self._options[option.name] = copy.deepcopy(option)

    def is_valid(self) -> bool:
        """Tell whether the scene can be run."""
        return True

    def setup(self, vulkan: Any, images: Sequence[VulkanImage]) -> None:
        """Prepare the scene for a run using the current option values."""
        self._duration = int(1_000_000.0 * float(self._options["duration"].value))

    def teardown(self) -> None:
        """Release what setup created."""

    def start(self) -> None:
        """Begin a run."""
        self._current_frame = 0
        self._running = True
        self._start_time = _timestamp_us()
        self._last_update_time = self._start_time

    def draw(self, image: VulkanImage) -> VulkanImage:
        """Render into image and return it, ready to present."""
        return image.copy_with_semaphore(None)

    def update(self) -> None:
        """Account for a rendered frame and stop once the duration has passed."""
        current_time = _timestamp_us()
        elapsed_time = current_time - self._start_time
        self._current_frame += 1
        self._last_update_time = current_time
        if elapsed_time >= self._duration:
            self._running = False

    def name(self) -> str:
        """Return the scene name."""
        return self._name

    def info_string(self, show_all_options: bool) -> str:
        """Describe the scene and its explicitly set (or all) option values."""
        shown = [
            f"{key}={option.value}:"
            for key, option in self._options.items()
            if show_all_options or option.set
        ]
        return f"[{self._name}] " + ("".join(shown) if shown else "<default>:")

    def average_fps(self) -> int:
        """Return the average frames per second of the last run."""
        elapsed = self._last_update_time - self._start_time
        if elapsed <= 0:
            return 0
        return self._current_frame * 1_000_000 // elapsed

    def is_running(self) -> bool:
        """Tell whether the current run is still going."""
        return self._running

    def set_option(self, name: str, value: str) -> bool:
        """Set an option's value; return False if unknown or not acceptable."""
        option = self._options.get(name)
        if option is None or not option.accepts_value(value):
            return False
        option.value = value
        option.set = True
        return True

    def reset_options(self) -> None:
        """Return every option to its default value and mark it unset."""
        for option in self._options.values():
            option.value = option.default_value
            option.set = False

    def set_option_default(self, name: str, value: str) -> bool:
        """Change an option's default; return False if unknown or not acceptable."""
        option = self._options.get(name)
        if option is None or not option.accepts_value(value):
            return False
        option.default_value = value
        return True

    def options(self) -> Mapping[str, SceneOption]:
        """Return a read-only view of the scene options by name."""
        return MappingProxyType(self._options)