"""
Configuration objects for the template store
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from tmpl_core.constants import STORE_DIRNAME, STORE_DIR_ENVVAR


def default_store_root() -> Path:
    """Default store location: ~/.templates"""
    return Path.home() / STORE_DIRNAME


@dataclass
class StoreConfig:
    """
    Where templates live on disk.
    """
    root: Path = field(default_factory=default_store_root)

    def __post_init__(self):
        self.root = Path(os.path.expanduser(str(self.root)))

    @classmethod
    def resolve(cls, root: Optional[str] = None) -> "StoreConfig":
        """
        Pick the store root, first match wins:
        explicit value, TMPL_STORE_DIR, ~/.templates.
        """
        if root:
            return cls(root=Path(root))

        env_root = os.environ.get(STORE_DIR_ENVVAR)
        if env_root:
            return cls(root=Path(env_root))

        return cls()
