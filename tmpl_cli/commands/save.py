"""
Save command - Snapshot a directory as a named template
"""

import click
from pathlib import Path

from tmpl_core.metadata import parse_tag_list
from tmpl_cli.utils.config import store_from_context
from tmpl_cli.utils.errors import handle_store_errors
from tmpl_cli.utils.output import print_success, print_info, format_tags


@click.command()
@click.argument('name')
@click.argument('source_dir', type=click.Path(path_type=Path))
@click.option(
    '--tags', '-t',
    default='',
    help='Comma-separated tags for the template (e.g. web,python)'
)
@click.pass_context
@handle_store_errors
def save(ctx, name: str, source_dir: Path, tags: str):
    """
    Save the contents of a directory as a template.

    \b
    The directory tree is copied into the template store; later changes
    to SOURCE_DIR do not affect the saved template.

    \b
    Examples:
      tmpl save flask-app ./my-flask-app
      tmpl save cli-tool ~/code/skeleton --tags python,cli
    """
    store = store_from_context(ctx)
    info = store.save(name, source_dir, parse_tag_list(tags))

    print_success(f"Template '{info.name}' saved successfully!")
    if info.tags:
        print_info(f"Tags: {format_tags(info.tags)}")
