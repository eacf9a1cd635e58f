"""
List command - Show saved templates, optionally filtered by tag
"""

import click

from tmpl_core.metadata import parse_tag_list
from tmpl_cli.utils.config import store_from_context
from tmpl_cli.utils.errors import handle_store_errors
from tmpl_cli.utils.output import print_header, print_info, print_table, format_tags


@click.command('list')
@click.option(
    '--tags', '-t',
    default='',
    help='Only show templates with any of these comma-separated tags'
)
@click.option(
    '--format', 'output_format',
    type=click.Choice(['table', 'plain'], case_sensitive=False),
    default=None,
    help='Output format (default: table, or list.format from config)'
)
@click.pass_context
@handle_store_errors
def list_cmd(ctx, tags: str, output_format: str):
    """
    List saved templates.

    \b
    With --tags, a template is shown if it has ANY of the given tags.

    \b
    Examples:
      tmpl list
      tmpl list --tags web
      tmpl list --tags web,cli --format plain
    """
    store = store_from_context(ctx)

    if store.is_empty():
        print_info(f"No templates found in {store.root}")
        return

    filter_tags = parse_tag_list(tags)
    templates = list(store.list_templates(filter_tags))

    if not templates:
        print_info(f"No templates tagged with: {format_tags(filter_tags)}")
        return

    if output_format is None:
        config = (ctx.find_object(dict) or {}).get('config')
        output_format = config.get('list', 'format', 'table') if config else 'table'

    if output_format.lower() == 'plain':
        for info in templates:
            line = f"- {info.name}"
            if info.tags:
                line += f" [{format_tags(info.tags)}]"
            click.echo(line)
        return

    print_header(f"Available templates in {store.root}")
    print_table(
        [{"Name": info.name, "Tags": format_tags(info.tags)} for info in templates],
        headers=["Name", "Tags"],
    )
