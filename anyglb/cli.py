"""
anyglb CLI - Command-line interface for converting 3D models to GLB
"""

import logging
import sys

import click

from anyglb import __version__
from anyglb.exceptions import ArgumentError
from anyglb.formats import supported_extensions
from anyglb.pipeline import run_conversion

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])
NOTICE_LEVEL_FLAGS = ('1', '2', '3', '4')


def _render_notices(result) -> str:
    lines = []
    for notice in result.notices:
        lines.append(f"\n  {notice}")
        if notice.detail:
            lines.append(f"\n      {notice.detail}")
    return "".join(lines)


@click.command(
    context_settings=CONTEXT_SETTINGS,
    epilog=f"Supported input formats: {', '.join(supported_extensions())}",
)
@click.argument('input_path', required=False)
@click.argument('output_path', required=False)
@click.option(
    '-n', '--notice-level', default=None, envvar='ANYGLB_NOTICE_LEVEL', metavar='[1|2|3|4]',
    help='1 debug, 2 info (default), 3 warnings and errors, 4 errors only. E.g. -n1',
)
@click.option('--log-level', default='WARNING', hidden=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False))
@click.version_option(__version__, '-v', '--version', prog_name='anyglb', message='%(prog)s version %(version)s')
@click.pass_context
def cli(ctx, input_path, output_path, notice_level, log_level):
    """
    Convert a 3D model file to GLB format.

    Examples:
        anyglb cube.obj cube.glb
        anyglb teapot.dae teapot.glb -n1
        anyglb cow.fbx cow.glb -n4
    """
    logging.basicConfig(level=log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    for name, value in (('input_path', input_path), ('output_path', output_path)):
        if not value:
            click.secho(f"Missing {name} argument", fg='red', err=True)
            click.echo(f"\n{ctx.get_help()}", err=True)
            sys.exit(1)

    options = {}
    if notice_level is not None:
        if notice_level not in NOTICE_LEVEL_FLAGS:
            click.secho(f"Invalid notice level '{notice_level}', should be 1, 2, 3, or 4", fg='red', err=True)
            sys.exit(1)
        options['notice_level'] = int(notice_level)

    try:
        result = run_conversion(input_path, output_path, options)
    except ArgumentError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)

    notices = _render_notices(result)
    if result.did_succeed:
        click.secho(f"✓ Conversion succeeded{notices}", fg='green')
        sys.exit(0)
    else:
        click.secho(f"✗ Conversion failed:{notices}", fg='red', err=True)
        sys.exit(1)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
