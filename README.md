# vkmark

The core of a graphics benchmark: named scenes with tunable options,
benchmark descriptions that select a scene and set its options, and a main
loop that runs each benchmark for a set duration, measures frames per second
and reports an overall score.

## What this package does not do

It has no renderer, no window systems and no Vulkan device handling, and it
installs no command. A window system is anything you write that implements
`vkmark.window_system.WindowSystem`, and a scene is a subclass of
`vkmark.scene.Scene`; the base `Scene.draw` only hands the image back, so a
scene that actually renders must do so itself. The `vulkan` object passed to
`MainLoop` and to `Scene.setup` is passed through untouched.

## Concepts

**Scenes and options.** Every scene has a name and a set of `SceneOption`s.
Each option has a current value, a default value, a description and an
optional list of acceptable values (`SceneOption.accepts_value` allows any
value when the list is empty). Every scene has a `duration` option (seconds,
default `10.0`). `Scene.set_option` and `Scene.set_option_default` return
`False` for an unknown option or an unacceptable value.

**Scene collections.** `vkmark.scene_collection.SceneCollection` holds scenes
by name. Asking for a name that was never registered with
`get_scene_by_name` gives an invalid scene (`is_valid()` is `False`) that the
main loop skips with a warning. `set_option_default` changes an option's
default in every scene that has it; `log_scene_info` lists the named scenes
and their options.

**Benchmark descriptions.** A benchmark is written as
`scene(:option=value)*`, for example `shading:shading=phong` or
`texture:anisotropy=16`. Option strings not of the form `name=value` are
ignored with a notice; options a scene does not know, or values it does not
accept, produce a warning when the scene is prepared.

A description with an empty scene name, such as `:duration=5`, names the
option-setting scene (a scene registered under the name `""`): it is set up
but not measured, and it does not count as a normal benchmark.
`BenchmarkCollection.contains_normal_scenes()` tells whether any other scene
was added; `default_benchmarks()` returns the list of descriptions to fall
back on.

**Scoring.** For each measured benchmark the main loop logs the average FPS
and frame time; `MainLoop.score()` is the integer mean of the FPS values of
all measured benchmarks, or 0 when none ran. With `run_forever` set, the loop
starts again from the first benchmark after the last one. It ends when the
window system's `should_quit()` returns `True` or `MainLoop.stop()` is
called; `stop()` is safe to call from a signal handler or another thread.
An exception raised while running one benchmark is logged and the loop goes
on with the next.

## Usage

```python
from vkmark import log
from vkmark.benchmark_collection import BenchmarkCollection, default_benchmarks
from vkmark.main_loop import MainLoop
from vkmark.options import Options
from vkmark.scene import Scene
from vkmark.scene_collection import SceneCollection
from vkmark.window_system import Extensions, VulkanImage, VulkanWSI, WindowSystem


class NullWindowSystem(WindowSystem, VulkanWSI):
    def vulkan_wsi(self):
        return self

    def init_vulkan(self, vulkan):
        pass

    def deinit_vulkan(self):
        pass

    def next_vulkan_image(self):
        return VulkanImage()

    def present_vulkan_image(self, image):
        pass

    def vulkan_images(self):
        return []

    def should_quit(self):
        return False

    def required_extensions(self):
        return Extensions()

    def is_physical_device_supported(self, physical_device):
        return True

    def physical_device_queue_family_indices(self, physical_device):
        return []


class MyScene(Scene):
    def __init__(self):
        super().__init__("myscene")


options = Options()
options.parse_args(["-b", "myscene:duration=2", "-s", "1024x768"])
log.init("vkmark", options.show_debug)

scenes = SceneCollection()
scenes.register_scene(MyScene())

benchmarks = BenchmarkCollection(scenes)
benchmarks.add(options.benchmarks)
if not benchmarks.contains_normal_scenes():
    benchmarks.add(default_benchmarks())

loop = MainLoop(None, NullWindowSystem(), benchmarks, options)
loop.run()
print("Score:", loop.score())
```

## Options

`Options.parse_args` takes the arguments without the program name. An
unknown option, a missing argument, a malformed size, a malformed
`--winsys-options` entry or a malformed device UUID raises `OptionsError`.
An unknown present mode falls back to `mailbox`, and an unknown pixel format
to `Format.UNDEFINED`. `Options.help_string()` returns the help text followed
by any text added with `add_window_system_help`.

| Option | Meaning |
| --- | --- |
| `-b`, `--benchmark BENCH` | Benchmark to run (repeatable) |
| `-s`, `--size WxH` | Window size (default `800x600`; a single number sets both) |
| `--fullscreen` | Same as `--size -1x-1` |
| `-p`, `--present-mode PM` | `immediate`, `mailbox` (default), `fifo`, `fiforelaxed` |
| `--pixel-format PF` | A `vkmark.mesh.Format` name, case and underscores ignored |
| `-l`, `--list-scenes` | Sets `list_scenes` |
| `--show-all-options` | Show every option value in scene info, not only those set |
| `--winsys-dir DIR` | Sets `window_system_dir` |
| `--data-dir DIR` | Sets `data_dir` |
| `--winsys WS` | Sets `window_system` |
| `--winsys-options OPTS` | `opt1=val1(:opt2=val2)*`, stored as `WindowSystemOption`s |
| `--run-forever` | Loop from the last benchmark back to the first |
| `-d`, `--debug` | Sets `show_debug` |
| `-D`, `--use-device UUID` | A 32-digit lower-case hex UUID, stored as a `DeviceUUID` |
| `-L`, `--list-devices` | Sets `list_devices` |
| `-h`, `--help` | Sets `show_help` |

## Other pieces

- `vkmark.device_uuid.DeviceUUID` — a 16-byte device identifier with a
  lower-case hexadecimal representation; `DeviceUUID.from_representation`
  parses one and raises `ValueError` for a wrong length or a character that
  is not a lower-case hex digit.
- `vkmark.mesh.Mesh` — vertex data built attribute by attribute from
  32-bit float formats (`R32_SFLOAT` up to `R32G32B32A32_SFLOAT`; others
  raise `ValueError`). Set `interleave` to choose between one interleaved
  block and one block per attribute; `vertex_data()`,
  `binding_descriptions()`, `attribute_descriptions()` and
  `vertex_data_binding_offsets()` follow that choice.
- `vkmark.managed_resource.ManagedResource` — a value paired with the
  function that releases it. `close()` releases it once, `steal()` takes it
  without releasing, `transfer()` and `assign()` move ownership, and it
  works as a context manager.
- `vkmark.log` — `info`, `debug`, `warning` and `error` take `%`-style
  format strings. Warnings and errors go to standard error with a
  `Warning:`/`Error:` prefix; info goes to standard output, prefixed only
  when debugging is enabled with `log.init`; prefixes are coloured on
  terminals. Lines starting with `log.CONTINUATION_PREFIX` are written
  without a prefix.