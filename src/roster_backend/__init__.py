"""Roster backend package wiring and entrypoints."""

from roster_backend.main import run_dev, run_prod
from roster_backend.settings import BackendSettings, get_settings, settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
    "settings",
]
