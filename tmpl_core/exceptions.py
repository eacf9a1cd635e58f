"""
tmpl-specific exception types for better error handling
"""

from pathlib import Path
from typing import Optional


class TmplError(Exception):
    """Base exception for all tmpl errors"""
    pass


class TemplateExistsError(TmplError):
    """A template with this name is already saved"""
    def __init__(self, name: str):
        super().__init__(f"Template '{name}' already exists")
        self.name = name


class TemplateNotFoundError(TmplError):
    """No template with this name in the store"""
    def __init__(self, name: str):
        super().__init__(f"Template '{name}' does not exist")
        self.name = name


class InvalidTemplateNameError(TmplError):
    """Template name cannot be used as a store entry"""
    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid template name '{name}': {reason}")
        self.name = name
        self.reason = reason


class SourceNotFoundError(TmplError):
    """Source directory for save does not exist"""
    def __init__(self, path: Path):
        super().__init__(f"Source directory does not exist: {path}")
        self.path = path


class InvalidSourceError(TmplError):
    """Source directory cannot be saved (e.g. it contains the store)"""
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot save {path}: {reason}")
        self.path = path
        self.reason = reason


class DestinationExistsError(TmplError):
    """Destination for make already exists"""
    def __init__(self, path: Path):
        super().__init__(f"Destination already exists: {path}")
        self.path = path


class InvalidDestinationError(TmplError):
    """Destination for make cannot be used (e.g. it is inside the store)"""
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot create {path}: {reason}")
        self.path = path
        self.reason = reason


class StoreEmptyError(TmplError):
    """Store root was never created"""
    def __init__(self, root: Path):
        super().__init__(f"No templates found in: {root}")
        self.root = root


class StorageIOError(TmplError):
    """Underlying filesystem operation failed"""
    def __init__(self, message: str, cause: Optional[OSError] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause
