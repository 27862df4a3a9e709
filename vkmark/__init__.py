"""Benchmark core: scenes and their options, benchmark collections, meshes, options parsing and the scoring main loop."""

__version__ = "2017.8.0"