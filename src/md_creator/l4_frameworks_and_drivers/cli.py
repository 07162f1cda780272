"""CLI entry point for md-creator."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from md_creator import __author__, __version__
from md_creator.l1_entities.errors import FileError, MdCreatorError, ValidationError

log = logging.getLogger('mdc.cli')

_VERSION_MESSAGE = f'Markdown File Creator v%(version)s\nAuthor: {__author__}'


def _fail(err: Exception) -> NoReturn:
    if isinstance(err, ValidationError):
        click.echo(f'Validation error: {err}', err=True)
    elif isinstance(err, FileError):
        click.echo(f'File operation error: {err}', err=True)
    else:
        click.echo(f'An error occurred: {err}', err=True)
    log.debug('Aborting: %r', err)
    sys.exit(1)


def _bootstrap(ctx: click.Context):
    """Load config, wire the container and make sure the templates directory exists."""
    from md_creator.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
        write_default_config,
    )
    from md_creator.l4_frameworks_and_drivers.config import build_app_config  # noqa: PLC0415 -- deferred: not needed for --help
    from md_creator.l4_frameworks_and_drivers.container import DependencyContainer  # noqa: PLC0415 -- deferred: not needed for --help

    config_path = ctx.obj.get('config_path')
    loader = YamlConfigLoader()
    try:
        if config_path is None and loader.find_config() is None:
            created = write_default_config(Path.cwd())
            click.echo(f'Created default configuration file: {created.name}')
        raw = loader.load_raw(config_path)
        config = build_app_config(raw)
        container = DependencyContainer(config)
        if container.template_store.ensure_directory():
            click.echo('Created templates directory.')
            click.echo('Created default template file.')
    except (FileNotFoundError, MdCreatorError) as e:
        _fail(e)
    return container


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write debug logs to this file.',
)
@click.version_option(__version__, '-v', '--version', message=_VERSION_MESSAGE)
@click.pass_context
def cli(ctx: click.Context, config_path, log_file):
    """Markdown File Creator -- create markdown notes from YAML templates."""
    if log_file:
        from md_creator.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only when logging requested
            setup_file_logging,
        )

        setup_file_logging(Path(log_file))
    ctx.obj = {'config_path': config_path}


@cli.group()
def template():
    """Create and list note templates."""


@template.command('create')
@click.argument('name')
@click.pass_context
def template_create(ctx: click.Context, name):
    """Create a new template NAME from the default template."""

    container = _bootstrap(ctx)
    try:
        path = container.template_store.create(name)
    except MdCreatorError as e:
        _fail(e)
    click.echo(f"Template file '{path.name}' created successfully.")


@template.command('list')
@click.pass_context
def template_list(ctx: click.Context):
    """Show all available templates."""

    container = _bootstrap(ctx)
    try:
        names = container.template_store.list_names()
    except MdCreatorError as e:
        _fail(e)
    if not names:
        click.echo('No templates found.')
        return
    click.echo('Available template files:')
    for name in names:
        click.echo(f'- {name}')


@cli.command()
@click.option('-t', '--title', default='', help='Title of the markdown document.')
@click.option('-n', '--name', default=None, help='File name without extension (defaults to the title).')
@click.option('-m', '--template', 'template_name', default='default', show_default=True, help='Template to render.')
@click.option('--tags', default=None, help='Comma-separated tags, e.g. "work,ideas".')
@click.pass_context
def note(ctx: click.Context, title, name, template_name, tags):
    """Create a new markdown note from a template."""
    from md_creator.l2_use_cases.utils.tag_scanner import parse_tag_option  # noqa: PLC0415 -- deferred: not needed for --help

    container = _bootstrap(ctx)
    try:
        _note, path = container.create_note.execute(
            title,
            name=name,
            template_name=template_name,
            tags=parse_tag_option(tags),
        )
    except MdCreatorError as e:
        _fail(e)
    click.echo(f"Markdown note '{path.name}' created successfully.")


@cli.command('list')
@click.pass_context
def list_notes(ctx: click.Context):
    """List notes in the notes directory with their tags."""

    container = _bootstrap(ctx)
    try:
        summaries = container.list_notes.execute()
    except MdCreatorError as e:
        _fail(e)
    if not summaries:
        click.echo('No notes found.')
        return
    click.echo('Notes:')
    for summary in summaries:
        tags = [t for t in summary.tags if t]
        if tags:
            click.echo(f'- {summary.name} (tags: {", ".join(tags)})')
        else:
            click.echo(f'- {summary.name}')
