"""Contribution composition and output formatting."""

from __future__ import annotations

from scaffoldkit.composer.composer import CompositionResult, ModuleComposer, compose
from scaffoldkit.composer.formatting import (
    ROUTER_IMPORT_PATH,
    format_pubspec_dependencies,
    generate_app_providers_barrel,
)
from scaffoldkit.composer.versions import parse_version, pick_newer_version

__all__ = [
    "ROUTER_IMPORT_PATH",
    "CompositionResult",
    "ModuleComposer",
    "compose",
    "format_pubspec_dependencies",
    "generate_app_providers_barrel",
    "parse_version",
    "pick_newer_version",
]
