"""
Template Store

Owns the on-disk collection of templates. Every immediate subdirectory of
the store root with a valid template name is one template; its tags live
in a sidecar metadata file that is never copied as content.

    <root>/
      <template-name>/
        .tmpl.yaml
        <content files and subdirectories>
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

from tmpl_core.constants import RESERVED_NAMES
from tmpl_core.copier import copy_tree, is_reserved
from tmpl_core.exceptions import (
    DestinationExistsError,
    InvalidDestinationError,
    InvalidSourceError,
    InvalidTemplateNameError,
    SourceNotFoundError,
    StorageIOError,
    StoreEmptyError,
    TemplateExistsError,
    TemplateNotFoundError,
)
from tmpl_core.metadata import decode_tags, encode_tags, normalize_tags

logger = logging.getLogger(__name__)


@dataclass
class TemplateInfo:
    """A saved template as seen by callers."""
    name: str
    path: Path
    tags: Set[str] = field(default_factory=set)

    def sorted_tags(self) -> List[str]:
        return sorted(self.tags)


def validate_template_name(name: str) -> None:
    """
    Check that a name can be used as a template directory.

    Raises:
        InvalidTemplateNameError: If the name is empty, a path, hidden or reserved
    """
    if not name or not name.strip():
        raise InvalidTemplateNameError(name, "name cannot be empty")

    if name in (".", ".."):
        raise InvalidTemplateNameError(name, "name cannot be a relative path marker")

    if "/" in name or "\\" in name or (os.altsep and os.altsep in name):
        raise InvalidTemplateNameError(name, "name cannot contain path separators")

    if is_reserved(name):
        raise InvalidTemplateNameError(name, "name is reserved for template metadata")

    if name.startswith("."):
        raise InvalidTemplateNameError(name, "name cannot start with '.'")


def is_valid_template_name(name: str) -> bool:
    """Return True if ``validate_template_name`` accepts the name."""
    try:
        validate_template_name(name)
    except InvalidTemplateNameError:
        return False
    return True


def _is_within(path: Path, parent: Path) -> bool:
    """True if ``path`` is ``parent`` or lies underneath it."""
    return path == parent or parent in path.parents


class TemplateStore:
    """
    Manages templates saved under a single root directory.

    The root is created lazily by the first save, so a store that was never
    written to has no directory on disk.
    """

    def __init__(self, root: Path):
        """
        Initialize TemplateStore.

        Args:
            root: Store root directory (e.g. ~/.templates)
        """
        self.root = Path(root)

    def template_path(self, name: str) -> Path:
        """Get the directory of a template, validating the name."""
        validate_template_name(name)
        return self.root / name

    def exists(self, name: str) -> bool:
        """Return True if a template with this name is saved."""
        if not is_valid_template_name(name):
            return False
        return (self.root / name).is_dir()

    def is_empty(self) -> bool:
        """Return True if the store root is missing or holds no templates."""
        if not self.root.is_dir():
            return True
        return not any(self._is_template_dir(entry) for entry in self._entries())

    def get(self, name: str) -> TemplateInfo:
        """
        Look up a template by name.

        Raises:
            TemplateNotFoundError: If no such template exists
        """
        path = self._require(name)
        return TemplateInfo(name=name, path=path, tags=decode_tags(path))

    # ------------------------------------------------------------------
    # save / make
    # ------------------------------------------------------------------

    def save(self, name: str, source_dir: Path, tags: Iterable[str] = ()) -> TemplateInfo:
        """
        Snapshot a directory as a new template.

        Args:
            name: Template name
            source_dir: Directory whose tree becomes the template content
            tags: Optional initial tags

        Returns:
            The saved template

        Raises:
            TemplateExistsError: If the name is already taken
            SourceNotFoundError: If source_dir is not an existing directory
            InvalidSourceError: If source_dir contains the store itself
            StorageIOError: If the copy fails
        """
        template_path = self.template_path(name)
        source = Path(source_dir).expanduser()

        if template_path.exists():
            raise TemplateExistsError(name)

        if not source.is_dir():
            raise SourceNotFoundError(source)

        resolved_source = source.resolve()
        if _is_within(self.root.resolve(), resolved_source):
            raise InvalidSourceError(source, "it contains the template store")

        tag_list = normalize_tags(tags)

        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Failed to create store at {self.root}", cause=e) from e

        try:
            template_path.mkdir()
        except FileExistsError:
            # Another process saved the same name since the check above
            raise TemplateExistsError(name) from None
        except OSError as e:
            raise StorageIOError(f"Failed to save template '{name}'", cause=e) from e

        try:
            count = copy_tree(resolved_source, template_path, exclude=RESERVED_NAMES)
            encode_tags(template_path, tag_list)
        except OSError as e:
            shutil.rmtree(template_path, ignore_errors=True)
            raise StorageIOError(f"Failed to save template '{name}'", cause=e) from e

        logger.info("Saved template %s from %s (%d files)", name, resolved_source, count)
        return TemplateInfo(name=name, path=template_path, tags=set(tag_list))

    def make(self, name: str, dest_dir: Path) -> Path:
        """
        Materialize a template into a new directory.

        Relative destinations are resolved against the current working
        directory.

        Args:
            name: Template name
            dest_dir: Directory to create

        Returns:
            Absolute path of the created directory

        Raises:
            StoreEmptyError: If the store root does not exist
            TemplateNotFoundError: If no such template exists
            DestinationExistsError: If dest_dir already exists
            InvalidDestinationError: If dest_dir lies inside the store
            StorageIOError: If the copy fails
        """
        if not self.root.is_dir():
            raise StoreEmptyError(self.root)

        template_path = self._require(name)
        destination = Path(dest_dir).expanduser().absolute()

        if destination.exists() or destination.is_symlink():
            raise DestinationExistsError(destination)

        if _is_within(destination.resolve(), self.root.resolve()):
            raise InvalidDestinationError(destination, "it is inside the template store")

        try:
            count = copy_tree(template_path, destination, exclude=RESERVED_NAMES)
        except OSError as e:
            shutil.rmtree(destination, ignore_errors=True)
            raise StorageIOError(f"Failed to create project from '{name}'", cause=e) from e

        logger.info("Created %s from template %s (%d files)", destination, name, count)
        return destination

    # ------------------------------------------------------------------
    # list / delete
    # ------------------------------------------------------------------

    def list_templates(self, filter_tags: Optional[Iterable[str]] = None) -> Iterator[TemplateInfo]:
        """
        Iterate over saved templates sorted by name.

        Args:
            filter_tags: If given, only templates carrying any of these tags

        Yields:
            TemplateInfo for each matching template
        """
        if not self.root.is_dir():
            return

        wanted = set(normalize_tags(filter_tags or ()))

        for entry in self._entries():
            if not self._is_template_dir(entry):
                continue

            tags = decode_tags(entry)
            if wanted and not (tags & wanted):
                continue

            yield TemplateInfo(name=entry.name, path=entry, tags=tags)

    def delete(self, name: str) -> None:
        """
        Remove a template and everything beneath it.

        Raises:
            TemplateNotFoundError: If no such template exists
            StorageIOError: If removal fails
        """
        path = self._require(name)

        try:
            shutil.rmtree(path)
        except OSError as e:
            raise StorageIOError(f"Failed to delete template '{name}'", cause=e) from e

        logger.info("Deleted template %s", name)

    # ------------------------------------------------------------------
    # tags
    # ------------------------------------------------------------------

    def add_tags(self, name: str, tags: Iterable[str]) -> Set[str]:
        """
        Add tags to a template.

        Returns:
            The template's tag set after the change
        """
        path = self._require(name)
        current = decode_tags(path)
        updated = current | set(normalize_tags(tags))
        self._write_tags(name, path, updated)
        logger.info("Tagged %s: %s", name, ", ".join(sorted(updated)))
        return updated

    def remove_tags(self, name: str, tags: Iterable[str]) -> Set[str]:
        """
        Remove tags from a template. Tags it does not carry are ignored.

        Returns:
            The template's tag set after the change
        """
        path = self._require(name)
        current = decode_tags(path)
        updated = current - set(normalize_tags(tags))
        self._write_tags(name, path, updated)
        logger.info("Untagged %s: %s", name, ", ".join(sorted(updated)) or "(no tags)")
        return updated

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _entries(self) -> List[Path]:
        """Immediate children of the store root, sorted by name."""
        try:
            return sorted(self.root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise StorageIOError(f"Failed to read store at {self.root}", cause=e) from e

    @staticmethod
    def _is_template_dir(entry: Path) -> bool:
        """Hidden and reserved directories (e.g. .git) are not templates."""
        return entry.is_dir() and is_valid_template_name(entry.name)

    def _require(self, name: str) -> Path:
        """Get the path of an existing template or raise TemplateNotFoundError."""
        if not self.exists(name):
            raise TemplateNotFoundError(name)
        return self.root / name

    def _write_tags(self, name: str, path: Path, tags: Set[str]) -> None:
        try:
            encode_tags(path, tags)
        except OSError as e:
            raise StorageIOError(f"Failed to update tags for '{name}'", cause=e) from e
