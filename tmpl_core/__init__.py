"""
tmpl core - save directory trees as named, tagged templates

Templates live under a single store root (~/.templates by default), one
directory per template, with tags kept in a sidecar file that is never
copied into generated projects.
"""

from tmpl_core.config import StoreConfig, default_store_root
from tmpl_core.copier import copy_tree, is_reserved
from tmpl_core.metadata import decode_tags, encode_tags, parse_tag_list
from tmpl_core.store import TemplateInfo, TemplateStore, validate_template_name

__version__ = "0.1.0"

__all__ = [
    "TemplateStore",
    "TemplateInfo",
    "StoreConfig",
    "default_store_root",
    "validate_template_name",
    "copy_tree",
    "is_reserved",
    "decode_tags",
    "encode_tags",
    "parse_tag_list",
]
