"""Module registry and definition discovery.

Usage::

    from scaffoldkit.registry import Registry

    registry = Registry(definitions_dir="./modules")
    registry.register_builtins()
    registry.get("core")
"""

from __future__ import annotations

from scaffoldkit.registry.loader import DiscoveredDefinition, load_definition, scan_definitions
from scaffoldkit.registry.registry import DEFAULT_DEFINITIONS_DIR, Registry
from scaffoldkit.registry.validation import coerce_manifest, validate_external_manifest

__all__ = [
    "DEFAULT_DEFINITIONS_DIR",
    "DiscoveredDefinition",
    "Registry",
    "coerce_manifest",
    "load_definition",
    "scan_definitions",
    "validate_external_manifest",
]
