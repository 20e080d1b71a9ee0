"""Error hierarchy for module resolution and composition."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ModuleError",
    "ConfigError",
    "NotFoundError",
    "ModuleNotFoundError",
    "MissingDependencyError",
    "CircularDependencyError",
    "ModuleConflictError",
    "ExternalModuleError",
    "ErrorCodes",
]


class ModuleError(Exception):
    """Base error for all scaffoldkit errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return self.message


class ConfigError(ModuleError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class NotFoundError(ModuleError):
    """Raised by ``Registry.get`` for an unregistered id."""

    def __init__(self, module_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_FOUND",
            message=f"Module '{module_id}' not found in registry",
            details={"module_id": module_id},
            **kwargs,
        )

    @property
    def module_id(self) -> str:
        """The id that was looked up."""
        return self.details["module_id"]


class ModuleNotFoundError(ModuleError):
    """Raised when a selected or always-included id is absent during resolution."""

    def __init__(self, module_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_NOT_FOUND",
            message=f"Module '{module_id}' not found in registry",
            details={"module_id": module_id},
            **kwargs,
        )

    @property
    def module_id(self) -> str:
        """The id that could not be resolved."""
        return self.details["module_id"]


class MissingDependencyError(ModuleError):
    """Raised when a manifest requires an id the registry does not know."""

    def __init__(self, module_id: str, dependency_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_DEPENDENCY",
            message=(
                f"Module '{module_id}' requires '{dependency_id}', "
                f"but '{dependency_id}' was not found in registry"
            ),
            details={"module_id": module_id, "dependency_id": dependency_id},
            **kwargs,
        )

    @property
    def module_id(self) -> str:
        """The dependent module."""
        return self.details["module_id"]

    @property
    def dependency_id(self) -> str:
        """The missing dependency."""
        return self.details["dependency_id"]


class CircularDependencyError(ModuleError):
    """Raised when the requires graph contains a cycle."""

    def __init__(self, cycle_path: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CIRCULAR_DEPENDENCY",
            message=f"Circular dependency detected: {' -> '.join(cycle_path)}",
            details={"cycle_path": cycle_path},
            **kwargs,
        )

    @property
    def cycle_path(self) -> list[str]:
        """Ids on the cycle, first id repeated at the end."""
        return self.details["cycle_path"]


class ModuleConflictError(ModuleError):
    """Raised when an active module declares a conflict with another active module."""

    def __init__(self, module_id: str, conflict_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_CONFLICT",
            message=f"Module '{module_id}' conflicts with '{conflict_id}'",
            details={"module_id": module_id, "conflict_id": conflict_id},
            **kwargs,
        )

    @property
    def module_id(self) -> str:
        """The module declaring the conflict."""
        return self.details["module_id"]

    @property
    def conflict_id(self) -> str:
        """The module it conflicts with."""
        return self.details["conflict_id"]


class ExternalModuleError(ModuleError):
    """Raised when an explicitly requested external module package cannot be registered."""

    def __init__(self, package_name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="EXTERNAL_MODULE_INVALID",
            message=f"External module from '{package_name}' has invalid manifest: {reason}",
            details={"package_name": package_name, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.MODULE_CONFLICT:
            handle_conflict()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    NOT_FOUND = "NOT_FOUND"
    MODULE_NOT_FOUND = "MODULE_NOT_FOUND"
    MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"
    MODULE_CONFLICT = "MODULE_CONFLICT"
    EXTERNAL_MODULE_INVALID = "EXTERNAL_MODULE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
