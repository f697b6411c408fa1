"""Software rasteriser with vector, matrix and bounding-volume helpers, ANSI escape codes and a telnet console."""

__version__ = "0.1.0"