"""
ModCounter-CLI - counts CurseForge mods per Minecraft version and mod loader.
"""

from .__version__ import __author__, __version__

__all__ = ["__version__", "__author__"]
