"""
tmpl CLI - command line interface for the template store
"""

from tmpl_core import __version__

__all__ = ["__version__"]
