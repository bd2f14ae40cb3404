"""Shoper API package root exports with lazy imports to keep import time light."""

from __future__ import annotations

from typing import Any

__all__ = ["ShoperClient", "Settings", "get_settings"]


def __getattr__(name: str) -> Any:
    if name == "ShoperClient":
        from shoper_api.clients.shoper_client import ShoperClient

        return ShoperClient
    if name == "Settings":
        from shoper_api.settings import Settings

        return Settings
    if name == "get_settings":
        from shoper_api.settings import get_settings

        return get_settings
    raise AttributeError(f"module 'shoper_api' has no attribute '{name}'")
