"""Manifest validation for discovered and external modules."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from scaffoldkit.errors import ExternalModuleError
from scaffoldkit.manifest import ModuleManifest

logger = logging.getLogger(__name__)

__all__ = ["coerce_manifest", "validate_external_manifest"]


def coerce_manifest(value: Any, source: str) -> ModuleManifest | None:
    """Best-effort conversion of a discovered ``manifest`` value.

    Returns None (after logging) for anything that is not a ModuleManifest or a
    mapping that validates into one, including a non-string ``id``.
    """
    if isinstance(value, ModuleManifest):
        return value
    if not isinstance(value, dict):
        logger.warning("Manifest in %s is not a mapping, skipping", source)
        return None
    if not isinstance(value.get("id"), str):
        logger.warning("Manifest in %s has no string 'id', skipping", source)
        return None
    try:
        return ModuleManifest.model_validate(value)
    except ValidationError as e:
        logger.warning("Manifest in %s failed validation: %s", source, e)
        return None


def validate_external_manifest(value: Any, package_name: str) -> ModuleManifest:
    """Strictly validate a manifest exported by an external package.

    Raises:
        ExternalModuleError: If any required field is missing or has the wrong type.
    """
    if isinstance(value, ModuleManifest):
        data: dict[str, Any] = value.model_dump(by_alias=False)
    elif isinstance(value, dict):
        data = value
    else:
        raise ExternalModuleError(package_name, "manifest must be a mapping or ModuleManifest")

    for key in ("id", "name"):
        if not isinstance(data.get(key), str) or not data[key]:
            raise ExternalModuleError(package_name, f"'{key}' must be a non-empty string")

    if not isinstance(data.get("description"), str):
        raise ExternalModuleError(package_name, "'description' must be a string")

    if not isinstance(data.get("requires"), (list, tuple)):
        raise ExternalModuleError(package_name, "'requires' must be a list")

    template_dir = _lookup(data, "template_dir", "templateDir")
    if not isinstance(template_dir, str) or not template_dir:
        raise ExternalModuleError(package_name, "'template_dir' must be a non-empty string")

    phase = data.get("phase")
    if isinstance(phase, bool) or phase not in (1, 2, 3, 4):
        raise ExternalModuleError(package_name, "'phase' must be 1, 2, 3, or 4")

    contributions = data.get("contributions")
    if not isinstance(contributions, dict):
        raise ExternalModuleError(package_name, "'contributions' must be a mapping")

    if isinstance(value, ModuleManifest):
        return value
    try:
        return ModuleManifest.model_validate(data)
    except ValidationError as e:
        raise ExternalModuleError(package_name, str(e), cause=e) from e


def _lookup(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None
