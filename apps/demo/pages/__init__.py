"""Register NiceGUI pages by importing submodules."""

from . import posts  # noqa: F401

__all__ = ["posts"]
