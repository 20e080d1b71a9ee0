"""Directory discovery and dynamic loading of module definitions."""

from __future__ import annotations

import importlib.util
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Collection

import yaml

from scaffoldkit.manifest import ModuleManifest
from scaffoldkit.registry.validation import coerce_manifest

logger = logging.getLogger(__name__)

__all__ = [
    "DiscoveredDefinition",
    "load_definition",
    "scan_definitions",
    "PYTHON_ENTRY_POINT",
    "YAML_ENTRY_POINT",
]

PYTHON_ENTRY_POINT = "module.py"
YAML_ENTRY_POINT = "module.yaml"

_UNSAFE_NAME_CHARS = re.compile(r"\W")


@dataclass
class DiscoveredDefinition:
    """A candidate module directory and its entry point file."""

    name: str
    entry_path: Path


def scan_definitions(root: Path, allow: Collection[str] | None = None) -> list[DiscoveredDefinition]:
    """List candidate module directories directly under ``root``.

    A missing root yields an empty list. Entries that are not directories,
    hidden or private names, names outside ``allow``, and directories without
    an entry point are skipped.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Definitions directory %s does not exist", root)
        return []

    try:
        entries = sorted(os.scandir(root), key=lambda e: e.name)
    except OSError as e:
        logger.error("OS error scanning %s: %s", root, e)
        return []

    results: list[DiscoveredDefinition] = []
    for entry in entries:
        name = entry.name
        if name.startswith(".") or name.startswith("_"):
            continue
        if allow is not None and name not in allow:
            logger.debug("Definition '%s' is not allow-listed, skipping", name)
            continue
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            logger.error("OS error accessing %s: %s", entry.path, e)
            continue
        if not is_dir:
            continue

        entry_dir = Path(entry.path)
        for entry_point in (PYTHON_ENTRY_POINT, YAML_ENTRY_POINT):
            candidate = entry_dir / entry_point
            try:
                is_file = candidate.is_file()
            except OSError as e:
                logger.error("OS error accessing %s: %s", candidate, e)
                continue
            if is_file:
                results.append(DiscoveredDefinition(name=name, entry_path=candidate))
                break
        else:
            logger.debug("Definition '%s' has no entry point, skipping", name)

    return results


def load_definition(definition: DiscoveredDefinition) -> ModuleManifest | None:
    """Load the manifest exported by a discovered definition, or None."""
    if definition.entry_path.suffix == ".py":
        loaded = _import_definition_file(definition)
        if loaded is None:
            return None
        if not hasattr(loaded, "manifest"):
            logger.warning("Definition '%s' exports no 'manifest', skipping", definition.name)
            return None
        value = loaded.manifest
    else:
        value = _read_yaml_definition(definition)
        if value is None:
            return None
    return coerce_manifest(value, str(definition.entry_path))


def _import_definition_file(definition: DiscoveredDefinition) -> Any:
    """Dynamically import a definition's module.py; None if it cannot be imported."""
    module_name = f"scaffoldkit_def_{_UNSAFE_NAME_CHARS.sub('_', definition.name)}"
    spec = importlib.util.spec_from_file_location(module_name, str(definition.entry_path))
    if spec is None or spec.loader is None:
        logger.warning("Cannot create import spec for %s", definition.entry_path)
        return None

    mod = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(mod)
    except Exception as e:
        logger.warning("Failed to import definition '%s': %s", definition.name, e)
        return None
    return mod


def _read_yaml_definition(definition: DiscoveredDefinition) -> Any:
    try:
        content = definition.entry_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", definition.entry_path, e)
        return None
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s: %s", definition.entry_path, e)
        return None
