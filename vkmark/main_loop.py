"""Runs the benchmarks one after another and computes the score."""

from __future__ import annotations

import itertools
import threading
from typing import Any

from vkmark import log
from vkmark.benchmark import Benchmark
from vkmark.benchmark_collection import BenchmarkCollection
from vkmark.options import Options
from vkmark.scene import Scene
from vkmark.window_system import WindowSystem


def _log_scene_info(scene: Scene, show_all_options: bool) -> None:
    log.info("%s", scene.info_string(show_all_options))
    log.flush()


def _log_scene_invalid(scene: Scene) -> None:
    log.warning("Skipping benchmark with invalid scene name '%s'\n", scene.name())
    log.flush()


def _log_scene_exception(what: str) -> None:
    log.info(log.CONTINUATION_PREFIX + " Failed with exception: %s\n", what)
    log.flush()


def _log_scene_fps(fps: int) -> None:
    frame_time = 1000.0 / fps if fps else float("inf")
    log.info(log.CONTINUATION_PREFIX + " FPS: %u FrameTime: %.3f ms\n", fps, frame_time)
    log.flush()


class MainLoop:
    """Drives each benchmark's scene, presenting frames until it finishes."""

    def __init__(
        self,
        vulkan: Any,
        ws: WindowSystem,
        bc: BenchmarkCollection,
        options: Options,
    ) -> None:
        self._vulkan = vulkan
        self._ws = ws
        self._bc = bc
        self._options = options
        self._stop = threading.Event()
        self._total_fps = 0
        self._total_benchmarks = 0

    def run(self) -> None:
        """Run the benchmarks, looping forever if the options say so."""
        benchmarks = self._bc.benchmarks()
        sequence = itertools.cycle(benchmarks) if self._options.run_forever else benchmarks
        for benchmark in sequence:
            try:
                if self._run_benchmark(benchmark):
                    break
            except Exception as exc:
                _log_scene_exception(str(exc))

    def _run_benchmark(self, benchmark: Benchmark) -> bool:
        """Run one benchmark; return True if the whole loop should end."""
        scene = benchmark.prepare_scene()

        if not scene.is_valid():
            _log_scene_invalid(scene)
            return False

        # Scenes with empty names only set options.
        if not scene.name():
            scene.setup(self._vulkan, self._ws.vulkan_images())
            return False

        _log_scene_info(scene, self._options.show_all_options)

        try:
            scene.setup(self._vulkan, self._ws.vulkan_images())
            should_quit = False
            scene.start()

            while scene.is_running():
                should_quit = self._ws.should_quit()
                if should_quit or self._stop.is_set():
                    break
                self._ws.present_vulkan_image(scene.draw(self._ws.next_vulkan_image()))
                scene.update()

            scene_fps = scene.average_fps()
            _log_scene_fps(scene_fps)

            self._total_fps += scene_fps
            self._total_benchmarks += 1

            return should_quit or self._stop.is_set()
        finally:
            scene.teardown()

    def stop(self) -> None:
        """Ask the loop to end; safe to call from another thread or a signal handler."""
        self._stop.set()

    def score(self) -> int:
        """Return the average FPS over the benchmarks that ran."""
        if self._total_benchmarks == 0:
            return 0
        return self._total_fps // self._total_benchmarks