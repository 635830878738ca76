"""
Configuration layer for matrixgraph.

Configuration is explicit: a MatrixGraphConfig is built once, either
directly or from the environment through load_settings(), and passed to
the builder.
"""

from matrixgraph.config.settings import GraphSettings, MatrixGraphConfig
from matrixgraph.config.loader import load_settings

__all__ = [
    "GraphSettings",
    "MatrixGraphConfig",
    "load_settings",
]
