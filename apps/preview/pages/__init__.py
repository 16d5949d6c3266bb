"""Register NiceGUI pages by importing submodules."""

from . import home, preview, tree  # noqa: F401

__all__ = ["home", "preview", "tree"]
