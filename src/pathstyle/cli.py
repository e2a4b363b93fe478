"""Command-line interface for pathstyle."""
import sys
import logging
from dataclasses import dataclass
from typing import Any

import click
from tqdm import tqdm

from .core.models import Config, StyleKind
from .core.operations import PathOperations
from .utils.console_base import ConsoleBase, THEMES

# Operations taking exactly one path, usable with the batch command
SINGLE_PATH_OPERATIONS = ['isabs', 'split', 'basename', 'dirname', 'splitext', 'getext', 'norm']


@dataclass
class CliState:
    """Objects shared by all subcommands."""
    config: Config
    operations: PathOperations
    console: ConsoleBase


def setup_logging(debug: bool, level: str = 'WARNING') -> None:
    """Configure logging based on debug flag."""
    if debug:
        level = 'DEBUG'
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)

    logging.basicConfig(
        level=numeric_level,
        format='[%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    # basicConfig is a no-op once root has handlers
    logging.getLogger('pathstyle').setLevel(numeric_level)


def format_result(result: Any) -> str:
    """Render an operation result as a single output line."""
    if isinstance(result, bool):
        return 'true' if result else 'false'
    if isinstance(result, tuple):
        return '\t'.join(result)
    return result


@click.group()
@click.option('--style', '-s', type=click.Choice(['unix', 'windows', 'native']),
              help='Path convention (default: PATHSTYLE_STYLE or native)')
@click.option('--sep', help='Separator used when building paths')
@click.option('--theme', '-t', type=click.Choice(list(THEMES)), default='manhattan',
              help='Terminal color theme for status messages')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='pathstyle')
@click.pass_context
def main(ctx: click.Context, style: str, sep: str, theme: str, debug: bool) -> None:
    """
    Manipulate path strings without touching the filesystem.

    Examples:

        pathstyle norm a/./b/../c

        pathstyle --style windows split 'C:\\temp\\file.txt'

        pathstyle join usr local bin

        pathstyle batch norm paths.txt
    """
    console = ConsoleBase(theme=theme)

    try:
        config = Config()
        setup_logging(debug, config.log_level)
        if style:
            config.style = StyleKind.parse(style)
        if sep:
            config.sep = sep
        operations = PathOperations.from_config(config)
    except ValueError as e:
        console.print_error(str(e))
        ctx.exit(1)

    ctx.obj = CliState(config=config, operations=operations, console=console)


@main.command('isabs')
@click.argument('path')
@click.pass_obj
def isabs_command(state: CliState, path: str) -> None:
    """Print true if PATH is absolute, false otherwise."""
    click.echo(format_result(state.operations.isabs(path)))


@main.command('join')
@click.argument('fragments', nargs=-1)
@click.pass_obj
def join_command(state: CliState, fragments: tuple) -> None:
    """Join FRAGMENTS into a single path."""
    click.echo(state.operations.join(*fragments))


@main.command('split')
@click.argument('path')
@click.pass_obj
def split_command(state: CliState, path: str) -> None:
    """Print the head and tail of PATH separated by a tab."""
    click.echo(format_result(state.operations.split(path)))


@main.command('basename')
@click.argument('path')
@click.pass_obj
def basename_command(state: CliState, path: str) -> None:
    """Print the last element of PATH."""
    click.echo(state.operations.basename(path))


@main.command('dirname')
@click.argument('path')
@click.pass_obj
def dirname_command(state: CliState, path: str) -> None:
    """Print everything in PATH except its last element."""
    click.echo(state.operations.dirname(path))


@main.command('splitext')
@click.argument('path')
@click.pass_obj
def splitext_command(state: CliState, path: str) -> None:
    """Print the root and extension of PATH separated by a tab."""
    click.echo(format_result(state.operations.splitext(path)))


@main.command('getext')
@click.argument('path')
@click.pass_obj
def getext_command(state: CliState, path: str) -> None:
    """Print the extension of PATH."""
    click.echo(state.operations.getext(path))


@main.command('norm')
@click.argument('path')
@click.pass_obj
def norm_command(state: CliState, path: str) -> None:
    """Print PATH with redundant separators and up-level references collapsed."""
    click.echo(state.operations.norm(path))


@main.command('batch')
@click.argument('operation', type=click.Choice(SINGLE_PATH_OPERATIONS))
@click.argument('source', type=click.File('r'), default='-')
@click.option('--quiet', '-q', is_flag=True, help='Hide progress and summary output')
@click.pass_obj
def batch_command(state: CliState, operation: str, source, quiet: bool) -> None:
    """
    Apply OPERATION to every line of SOURCE (a file, or - for stdin).

    One result is printed per input line.
    """
    paths = [line.rstrip('\r\n') for line in source]
    function = getattr(state.operations, operation)

    for path in tqdm(paths, desc=operation, unit='path', disable=quiet, file=sys.stderr):
        click.echo(format_result(function(path)))

    if quiet:
        return
    if paths:
        state.console.print_success(f"Processed {len(paths)} paths")
    else:
        state.console.print_warning(f"No paths to process in {source.name}")


if __name__ == '__main__':
    main()
