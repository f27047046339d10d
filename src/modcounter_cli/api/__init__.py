"""
api package - Describes the CurseForge search endpoint.
"""

from .curseforge import API_BASE, API_KEY_HEADER, GAME_ID, CurseForgeAPIConfig

__all__ = ["CurseForgeAPIConfig", "API_BASE", "API_KEY_HEADER", "GAME_ID"]
