"""Command line options of the benchmark."""

from __future__ import annotations

import getopt
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

from vkmark.device_uuid import DeviceUUID
from vkmark.mesh import Format

DEFAULT_WINDOW_SYSTEM_DIR = "/usr/local/lib/vkmark"
DEFAULT_DATA_DIR = "/usr/local/share/vkmark"

_SHORT_OPTIONS = "b:s:p:ldhD:L"
_LONG_OPTIONS = [
    "benchmark=",
    "size=",
    "use-device=",
    "fullscreen",
    "present-mode=",
    "pixel-format=",
    "list-scenes",
    "show-all-options",
    "winsys-dir=",
    "data-dir=",
    "winsys=",
    "winsys-options=",
    "list-devices",
    "run-forever",
    "debug",
    "help",
]

_HELP = (
    "A benchmark for Vulkan\n"
    "\n"
    "Options:\n"
    "  -b, --benchmark BENCH       A benchmark to run: 'scene(:opt1=val1)*'\n"
    "                              (the option can be used multiple times)\n"
    "  -s, --size WxH              Size of the output window (default: 800x600)\n"
    "      --fullscreen            Run fullscreen (equivalent to --size -1x-1)\n"
    "  -p, --present-mode PM       Vulkan present mode (default: mailbox)\n"
    "                              [immediate, mailbox, fifo, fiforelaxed]\n"
    "      --pixel-format PF       Vulkan pixel format (default: choose best)\n"
    "  -l, --list-scenes           Display information about the available scenes\n"
    "                              and their options\n"
    "      --show-all-options      Show all scene option values used for benchmarks\n"
    "                              (only explicitly set options are shown by default)\n"
    "      --winsys-dir DIR        Directory to search in for window system plugins\n"
    "      --data-dir DIR          Directory to search in for scene data files\n"
    "      --winsys WS             Window system plugin to use (default: choose best)\n"
    "                              [xcb, wayland, kms]\n"
    "      --winsys-options OPTS   Window system options as 'opt1=val1(:opt2=val2)*'\n"
    "      --run-forever           Run indefinitely, looping from the last benchmark\n"
    "                              back to the first\n"
    "  -d, --debug                 Display debug messages\n"
    "  -D  --use-device            Use Vulkan device with specified UUID\n"
    "  -L  --list-devices          List Vulkan devices\n"
    "  -h, --help                  Display help\n"
)


class OptionsError(ValueError):
    """Raised when the command line cannot be parsed."""


class PresentMode(IntEnum):
    """Vulkan presentation modes, with their Vulkan enumeration values."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


_PRESENT_MODES = {
    "immediate": PresentMode.IMMEDIATE,
    "mailbox": PresentMode.MAILBOX,
    "fifo": PresentMode.FIFO,
    "fiforelaxed": PresentMode.FIFO_RELAXED,
}

_PIXEL_FORMATS: Dict[str, Format] = {f.name.replace("_", ""): f for f in Format}


@dataclass
class WindowSystemOption:
    """A name=value option passed to the window system."""

    name: str
    value: str


def _split(text: str, delimiter: str) -> List[str]:
    return text.split(delimiter) if text else []


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise OptionsError(f"Invalid number '{text}'") from None


def _parse_size(text: str) -> Tuple[int, int]:
    dimensions = _split(text, "x")
    if not dimensions:
        raise OptionsError("Invalid size ''")
    width = _parse_int(dimensions[0])
    height = _parse_int(dimensions[1]) if len(dimensions) > 1 else width
    return width, height


def _parse_present_mode(text: str) -> PresentMode:
    return _PRESENT_MODES.get(text, PresentMode.MAILBOX)


def _parse_pixel_format(text: str) -> Format:
    normalized = text.replace("_", "").upper()
    return _PIXEL_FORMATS.get(normalized, Format.UNDEFINED)


def _parse_window_system_options(text: str) -> List[WindowSystemOption]:
    options = []
    for opt in _split(text, ":"):
        kv = _split(opt, "=")
        if len(kv) != 2:
            raise OptionsError(f"Invalid window system option '{opt}'")
        options.append(WindowSystemOption(kv[0], kv[1]))
    return options


def _parse_uuid(text: str) -> DeviceUUID:
    try:
        return DeviceUUID.from_representation(text)
    except ValueError as exc:
        raise OptionsError(str(exc)) from None


@dataclass
class Options:
    """Settings chosen on the command line, with their defaults."""

    benchmarks: List[str] = field(default_factory=list)
    size: Tuple[int, int] = (800, 600)
    present_mode: PresentMode = PresentMode.MAILBOX
    pixel_format: Format = Format.UNDEFINED
    list_scenes: bool = False
    show_all_options: bool = False
    window_system_dir: str = DEFAULT_WINDOW_SYSTEM_DIR
    data_dir: str = DEFAULT_DATA_DIR
    window_system: str = ""
    window_system_options: List[WindowSystemOption] = field(default_factory=list)
    run_forever: bool = False
    show_debug: bool = False
    show_help: bool = False
    list_devices: bool = False
    use_device_with_uuid: Optional[DeviceUUID] = None
    _window_system_help: List[str] = field(default_factory=list, init=False, repr=False)

    def parse_args(self, argv: Sequence[str]) -> None:
        """Apply the given arguments (without the program name) to these options."""
        try:
            parsed, _ = getopt.gnu_getopt(list(argv), _SHORT_OPTIONS, _LONG_OPTIONS)
        except getopt.GetoptError as exc:
            raise OptionsError(str(exc)) from None

        for name, value in parsed:
            if name in ("-b", "--benchmark"):
                self.benchmarks.append(value)
            elif name in ("-s", "--size"):
                self.size = _parse_size(value)
            elif name == "--fullscreen":
                self.size = (-1, -1)
            elif name in ("-p", "--present-mode"):
                self.present_mode = _parse_present_mode(value)
            elif name == "--pixel-format":
                self.pixel_format = _parse_pixel_format(value)
            elif name in ("-l", "--list-scenes"):
                self.list_scenes = True
            elif name == "--show-all-options":
                self.show_all_options = True
            elif name == "--winsys-dir":
                self.window_system_dir = value
            elif name == "--data-dir":
                self.data_dir = value
            elif name == "--winsys":
                self.window_system = value
            elif name == "--winsys-options":
                self.window_system_options = _parse_window_system_options(value)
            elif name == "--run-forever":
                self.run_forever = True
            elif name in ("-d", "--debug"):
                self.show_debug = True
            elif name in ("-h", "--help"):
                self.show_help = True
            elif name in ("-L", "--list-devices"):
                self.list_devices = True
            elif name in ("-D", "--use-device"):
                self.use_device_with_uuid = _parse_uuid(value)

    def help_string(self) -> str:
        """Return the usage text, followed by any window system help."""
        return _HELP + "".join(self._window_system_help)

    def add_window_system_help(self, help_text: str) -> None:
        """Append window-system specific text to the usage text."""
        self._window_system_help.append(help_text)