"""Operating-systems lab tools: CPU schedulers, two small shells, a word counter and a heap allocator model."""

__version__ = "0.1.0"