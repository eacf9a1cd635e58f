"""
Tag commands - Add or remove template tags
"""

import click

from tmpl_core.metadata import normalize_tags, parse_tag_list
from tmpl_cli.utils.config import store_from_context
from tmpl_cli.utils.errors import CLIError, handle_store_errors
from tmpl_cli.utils.output import print_success, format_tags


def _collect_tags(values) -> list:
    """Accept both 'a,b' and 'a b' forms on the command line."""
    tags = []
    for value in values:
        tags.extend(parse_tag_list(value))
    tags = normalize_tags(tags)
    if not tags:
        raise CLIError("No tags given", exit_code=2)
    return tags


@click.group()
def tag():
    """
    Manage template tags.

    \b
    Examples:
      tmpl tag add flask-app web,python
      tmpl tag remove flask-app python
    """
    pass


@tag.command()
@click.argument('name')
@click.argument('tags', nargs=-1, required=True)
@click.pass_context
@handle_store_errors
def add(ctx, name: str, tags: tuple):
    """Add tags to a template."""
    store = store_from_context(ctx)
    updated = store.add_tags(name, _collect_tags(tags))
    print_success(f"Tags for '{name}': {format_tags(updated)}")


@tag.command()
@click.argument('name')
@click.argument('tags', nargs=-1, required=True)
@click.pass_context
@handle_store_errors
def remove(ctx, name: str, tags: tuple):
    """Remove tags from a template. Tags it does not have are ignored."""
    store = store_from_context(ctx)
    updated = store.remove_tags(name, _collect_tags(tags))
    print_success(f"Tags for '{name}': {format_tags(updated)}")
