"""Interfaces between the benchmark and the window system presenting frames."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Sequence

PROBE_GOOD = 200
PROBE_OK = 100
PROBE_BAD = 0

HEADLESS_WINDOW_SYSTEM_PRIORITY = -1
XCB_WINDOW_SYSTEM_PRIORITY = 0
WAYLAND_WINDOW_SYSTEM_PRIORITY = 1
DISPLAY_WINDOW_SYSTEM_PRIORITY = 2
KMS_WINDOW_SYSTEM_PRIORITY = 3


@dataclass(frozen=True)
class VulkanImage:
    """A presentable image together with its synchronisation objects."""

    index: int = 0
    image: Any = None
    format: Any = None
    extent: Any = None
    semaphore: Any = None
    submit_fence: Any = None

    def copy_with_semaphore(self, semaphore: Any) -> VulkanImage:
        """Return a copy of this image that waits on the given semaphore."""
        return dataclasses.replace(self, semaphore=semaphore)


@dataclass
class Extensions:
    """Instance and device extensions a window system needs."""

    instance: List[str] = field(default_factory=list)
    device: List[str] = field(default_factory=list)


class VulkanWSI(ABC):
    """The window-system side of Vulkan device selection."""

    @abstractmethod
    def required_extensions(self) -> Extensions:
        """Return the extensions the window system requires."""

    @abstractmethod
    def is_physical_device_supported(self, physical_device: Any) -> bool:
        """Tell whether the window system can present with this device."""

    @abstractmethod
    def physical_device_queue_family_indices(self, physical_device: Any) -> List[int]:
        """Return the queue family indices the window system uses on this device."""


class WindowSystem(ABC):
    """Something that hands out images to render into and presents them."""

    @abstractmethod
    def vulkan_wsi(self) -> VulkanWSI:
        """Return the Vulkan integration of this window system."""

    @abstractmethod
    def init_vulkan(self, vulkan: Any) -> None:
        """Create the window system's Vulkan resources."""

    @abstractmethod
    def deinit_vulkan(self) -> None:
        """Release the window system's Vulkan resources."""

    @abstractmethod
    def next_vulkan_image(self) -> VulkanImage:
        """Return the next image to render into."""

    @abstractmethod
    def present_vulkan_image(self, image: VulkanImage) -> None:
        """Present a rendered image."""

    @abstractmethod
    def vulkan_images(self) -> Sequence[VulkanImage]:
        """Return all images the window system renders into."""

    @abstractmethod
    def should_quit(self) -> bool:
        """Tell whether the user asked to quit."""