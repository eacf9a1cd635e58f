"""
Delete command - Remove a saved template
"""

import click

from tmpl_core.exceptions import TemplateNotFoundError
from tmpl_cli.utils.config import store_from_context
from tmpl_cli.utils.errors import handle_store_errors
from tmpl_cli.utils.output import print_success


@click.command()
@click.argument('name')
@click.option('--interactive', '-i', is_flag=True, help='Ask for confirmation before deleting')
@click.pass_context
@handle_store_errors
def delete(ctx, name: str, interactive: bool):
    """
    Delete a template and all of its files.

    \b
    This cannot be undone.

    \b
    Examples:
      tmpl delete old-template
      tmpl delete old-template --interactive
    """
    store = store_from_context(ctx)

    if not store.exists(name):
        raise TemplateNotFoundError(name)

    if interactive:
        click.confirm(f"Delete template '{name}'?", abort=True)

    store.delete(name)
    print_success(f"Template '{name}' deleted successfully!")
