"""
tmpl CLI - Main entry point
"""

import logging

import click

from tmpl_core.config import StoreConfig
from tmpl_core.constants import STORE_DIR_ENVVAR
from tmpl_core.store import TemplateStore
from tmpl_cli import __version__
from tmpl_cli.utils.config import load_cli_config
from tmpl_cli.utils.errors import CLIError, handle_cli_error


def configure_logging(verbose: bool):
    """Send library logs to stderr; debug level with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__, prog_name="tmpl")
@click.option(
    '--store-dir',
    envvar=STORE_DIR_ENVVAR,
    type=click.Path(file_okay=False, dir_okay=True),
    help=f'Template store location (default: ~/.templates, or set {STORE_DIR_ENVVAR})'
)
@click.option(
    '--config', 'config_file',
    type=click.Path(dir_okay=False),
    help='Read settings from this YAML file instead of ~/.tmplrc.yaml'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Verbose output'
)
@click.pass_context
def cli(ctx, store_dir, config_file, verbose):
    """
    tmpl - Save directories as templates and create projects from them

    \b
    Common Commands:
      save      - Save a directory as a template
      make      - Create a new project from a template
      list      - List saved templates
      delete    - Delete a template
      tag       - Add or remove template tags

    \b
    Examples:
      tmpl save webapp ./my-webapp --tags web,python
      tmpl make webapp new-site
      tmpl list --tags web
      tmpl tag add webapp flask
      tmpl delete webapp

    For more help on a specific command, use:
      tmpl COMMAND --help
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    config = load_cli_config(config_file)
    store_config = StoreConfig.resolve(store_dir or config.get('store', 'root'))

    ctx.obj['verbose'] = verbose
    ctx.obj['config'] = config
    ctx.obj['store'] = TemplateStore(store_config.root)


@click.command('help')
@click.argument('command_name', required=False)
@click.pass_context
def help_cmd(ctx, command_name):
    """Show help for tmpl or for one command."""
    parent = ctx.parent
    group = parent.command

    if not command_name:
        click.echo(group.get_help(parent))
        return

    command = group.get_command(parent, command_name)
    if command is None:
        handle_cli_error(CLIError(f"Unknown command '{command_name}'", exit_code=2))

    with click.Context(command, info_name=command_name, parent=parent) as sub_ctx:
        click.echo(command.get_help(sub_ctx))


@click.command('version')
def version_cmd():
    """Show the tmpl version."""
    click.echo(f"tmpl, version {__version__}")


# Import and register commands
from tmpl_cli.commands.save import save
from tmpl_cli.commands.make import make
from tmpl_cli.commands.list import list_cmd
from tmpl_cli.commands.delete import delete
from tmpl_cli.commands.tag import tag

cli.add_command(save)
cli.add_command(make)
cli.add_command(list_cmd)
cli.add_command(delete)
cli.add_command(tag)
cli.add_command(help_cmd)
cli.add_command(version_cmd)


def main():
    """Main entry point with error handling"""
    try:
        cli(obj={})

    except Exception as exc:
        handle_cli_error(exc, verbose=False)


if __name__ == "__main__":
    main()
