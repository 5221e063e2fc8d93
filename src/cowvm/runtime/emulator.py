import sys
from pathlib import Path
import logging as lg
import traceback

import click

import cowvm.common.ops as ops
import cowvm.loader.loader as loader
import cowvm.runtime.cpu as cpu
import cowvm.runtime.debugger as debugger
from cowvm.common.errors import ParseError
from cowvm.runtime.console import Console


EXIT_HALT = 0
EXIT_PARSE_ERROR = 1
EXIT_ABORT = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def execute(
    program: ops.Program,
    console: Console | None = None,
    debug: bool = False,
    step: bool = False
) -> cpu.RunResult:
    ctx = cpu.Context.create(program, console)

    if debug and step:
        return cpu.run(ctx, before_step=debugger.step_hook, after_step=debugger.print_state)

    if debug:
        return cpu.run(ctx, before_step=debugger.trace_hook, after_step=debugger.print_state)

    return cpu.run(ctx)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-d', '--debug', is_flag=True, help='Prints machine state after every command')
@click.option('-s', '--step', is_flag=True, help='With --debug, waits for [return] before every command')
@click.argument('source', type=Path)
def run(verbose: bool, debug: bool, step: bool, source: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('COW')

    try:
        program = loader.load_file(source)
        result = execute(program, debug=debug, step=step)

    except ParseError as e:
        lg.error(f'Cannot load {source}: {e}')
        sys.exit(EXIT_PARSE_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)

    if isinstance(result, cpu.Aborted):
        click.echo(f'Aborted: {result.reason}', err=True)
        sys.exit(EXIT_ABORT)

    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    run()
