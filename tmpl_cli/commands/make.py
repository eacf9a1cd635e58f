"""
Make command - Create a new project from a saved template
"""

import click
from pathlib import Path

from tmpl_cli.utils.config import store_from_context
from tmpl_cli.utils.errors import handle_store_errors
from tmpl_cli.utils.output import print_success, print_info


@click.command()
@click.argument('name')
@click.argument('dest_dir', type=click.Path(path_type=Path))
@click.pass_context
@handle_store_errors
def make(ctx, name: str, dest_dir: Path):
    """
    Create a new project directory from a template.

    \b
    DEST_DIR must not exist yet; relative paths are created under the
    current directory.

    \b
    Examples:
      tmpl make flask-app my-new-service
      tmpl make cli-tool ~/code/another-tool
    """
    store = store_from_context(ctx)
    project_path = store.make(name, dest_dir)

    print_success(f"Template '{name}' created successfully!")
    print_info(f"Location: {project_path}")
