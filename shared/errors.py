"""
Shared error handling for the Permission Rules Service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class PermissionsException(Exception):
    """Base exception for the permission rules packages."""
    
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
    
    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id_var.get(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class ValidationError(PermissionsException):
    """Validation-related errors."""
    
    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class MalformedRuleError(PermissionsException):
    """A rule lacks a computable key or a boolean allow flag."""
    
    def __init__(self, message: str = "Malformed rule", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_RULE", message, details)


class PermissionResolutionError(PermissionsException):
    """A target could not be resolved into a permission."""
    
    def __init__(self, message: str = "Target could not be resolved", details: Optional[Dict[str, Any]] = None):
        super().__init__("RESOLUTION_ERROR", message, details)


class DuplicatePermissionKindError(PermissionsException):
    """A permission kind was registered twice."""
    
    def __init__(self, kind: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            "DUPLICATE_PERMISSION_KIND",
            f"another permission class has already been registered for kind '{kind}'",
            details
        )


class RegistryFrozenError(PermissionsException):
    """Registration attempted after the registry was frozen."""
    
    def __init__(self, message: str = "Permission registry is frozen", details: Optional[Dict[str, Any]] = None):
        super().__init__("REGISTRY_FROZEN", message, details)


class UnavailableActionError(PermissionsException):
    """An action was checked that the permission kind does not offer."""
    
    def __init__(self, action: str, kind: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            "UNAVAILABLE_ACTION",
            f"action '{action}' not available for permission of kind '{kind}'",
            details
        )


class DependencyCycleError(PermissionsException):
    """Permission dependencies refer back to a permission already being expanded."""
    
    def __init__(self, message: str = "Permission dependency cycle", details: Optional[Dict[str, Any]] = None):
        super().__init__("DEPENDENCY_CYCLE", message, details)


class HolderNotConfiguredError(PermissionsException):
    """A permission check was made on an object without a rule base."""
    
    def __init__(self, message: str = "Object not set up as permission holder", details: Optional[Dict[str, Any]] = None):
        super().__init__("HOLDER_NOT_CONFIGURED", message, details)
