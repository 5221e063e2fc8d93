''' Trace and step hooks for cpu.run '''

import click

import cowvm.common.ops as ops
from cowvm.runtime.cpu import Context


def format_memory(cells: tuple[int, ...]) -> list[str]:
    # Two cells per line
    lines = []

    for i in range(0, len(cells), 2):
        if i + 1 < len(cells):
            lines.append(f'{i}:  {cells[i]}\t{i + 1}:  {cells[i + 1]}')
        else:
            lines.append(f'{i}:  {cells[i]}')

    return lines


def format_state(ctx: Context) -> list[str]:
    lines = ['MEM===============']
    lines.extend(format_memory(ctx.tape.cells))
    lines.append('==================')
    lines.append(f'Register: {ctx.register.state}')
    lines.append(f'Current memory value: {ctx.tape.read()}')
    lines.append(f'Program pointer: {ctx.pc}')
    lines.append(f'Memory pointer: {ctx.tape.cursor}')

    if ctx.pc > 0:
        lines.append(f'Last instruction: {ops.name(ctx.program[ctx.pc - 1])}')

    lines.append(f'Next instruction: {ops.name(ctx.current())}')
    lines.extend(['', ''])
    return lines


def print_state(ctx: Context):
    for line in format_state(ctx):
        click.echo(line)


def trace_hook(ctx: Context):
    click.echo(f'Executing: {ops.name(ctx.current())}')


def step_hook(ctx: Context):
    message = f'Press [return] to execute command at pointer {ctx.pc} ({ops.name(ctx.current())})...'
    click.prompt(message, default='', show_default=False, prompt_suffix='')
