"""
Template metadata codec

Reads and writes the tag sidecar (.tmpl.yaml) stored at the root of every
template directory. Decoding never fails the caller: a missing, unreadable
or unrecognised file simply means "no tags".
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Set

import yaml

from tmpl_core.constants import METADATA_FILENAME, TAG_SEPARATOR

logger = logging.getLogger(__name__)


def normalize_tags(tags: Iterable[str]) -> List[str]:
    """
    Strip whitespace, drop empty tags and remove duplicates.

    Args:
        tags: Raw tag strings

    Returns:
        Tags in first-seen order
    """
    seen: List[str] = []
    for tag in tags:
        tag = str(tag).strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def parse_tag_list(value: str) -> List[str]:
    """Parse a comma-separated tag list such as ``"web, cli"``."""
    if not value:
        return []
    return normalize_tags(value.split(TAG_SEPARATOR))


def metadata_path(template_dir: Path) -> Path:
    """Get the path of the metadata file for a template directory."""
    return Path(template_dir) / METADATA_FILENAME


def _extract_tags(data: Any) -> List[str]:
    """Pull the tag list out of whatever the YAML loader produced."""
    if isinstance(data, list):
        return normalize_tags(data)

    if isinstance(data, dict):
        for key, value in data.items():
            if str(key).lower() != "tags":
                continue
            if isinstance(value, list):
                return normalize_tags(value)
            if isinstance(value, str):
                # Legacy "Tags: a, b" line
                return parse_tag_list(value)
            return []

    return []


def decode_tags(template_dir: Path) -> Set[str]:
    """
    Read the tag set of a template.

    Args:
        template_dir: Template directory

    Returns:
        Set of tags, empty if the metadata file is absent or malformed
    """
    path = metadata_path(template_dir)

    if not path.is_file():
        return set()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable metadata %s: %s", path, e)
        return set()

    return set(_extract_tags(data))


def encode_tags(template_dir: Path, tags: Iterable[str]) -> None:
    """
    Write the tag set of a template, replacing any previous metadata.

    Tags are written sorted. An empty set removes the metadata file.

    Args:
        template_dir: Template directory
        tags: Tags to persist
    """
    path = metadata_path(template_dir)
    ordered = sorted(normalize_tags(tags))

    if not ordered:
        if path.exists():
            path.unlink()
            logger.debug("Removed empty metadata %s", path)
        return

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"tags": ordered}, f, default_flow_style=False, allow_unicode=True)

    logger.debug("Wrote %d tag(s) to %s", len(ordered), path)
