import logging as lg
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TypeAlias

import cowvm.common.ops as ops
import cowvm.runtime.resolver as resolver
from cowvm.common.errors import Abort, SelfReferentialHalt
from cowvm.runtime.console import Console
from cowvm.runtime.register import Register
from cowvm.runtime.tape import Tape


class StepOutcome(Enum):
    RUNNING = 'running'
    HALTED = 'halted'


@dataclass(frozen=True)
class Halted:
    pass


@dataclass(frozen=True)
class Aborted:
    reason: Abort


RunResult: TypeAlias = Halted | Aborted


@dataclass
class Context:
    ''' State of a single execution '''
    program: ops.Program
    console: Console
    tape: Tape = field(default_factory=Tape)
    register: Register = field(default_factory=Register)
    pc: int = 0
    halted: bool = False

    @classmethod
    def create(cls, program: ops.Program, console: Console | None = None) -> 'Context':
        if console is None:
            console = Console()

        return cls(program, console)

    def current(self) -> int:
        return self.program[self.pc]

    def advance(self):
        self.pc += 1

    def debug_dump(self):
        state = [f'{k}:{v}' for k, v in {
            'PC': self.pc,
            'OP': ops.name(self.current()),
            'MP': self.tape.cursor,
            'M': self.tape.read(),
            'R': self.register.state
        }.items()]

        lg.debug(' '.join(state))


Handler: TypeAlias = Callable[[Context], None]


# - Memory - #

def move_back(ctx: Context):
    ctx.tape.move_backward()
    ctx.advance()


def move_forward(ctx: Context):
    ctx.tape.move_forward()
    ctx.advance()


def decrement(ctx: Context):
    ctx.tape.decrement()
    ctx.advance()


def increment(ctx: Context):
    ctx.tape.increment()
    ctx.advance()


def zero(ctx: Context):
    ctx.tape.zero()
    ctx.advance()


def register_toggle(ctx: Context):
    ctx.register.toggle(ctx.tape)
    ctx.advance()


# - I/O - #

def io_char(ctx: Context):
    value = ctx.tape.read()

    if value == 0:
        ctx.tape.write(ctx.console.read_char())
    else:
        ctx.console.write_char(value)

    ctx.advance()


def print_int(ctx: Context):
    ctx.console.write_int(ctx.tape.read())
    ctx.advance()


def read_int(ctx: Context):
    ctx.tape.write(ctx.console.read_int())
    ctx.advance()


# - Control - #

def loop_start(ctx: Context):
    if ctx.tape.read() != 0:
        ctx.advance()
        return

    target = resolver.find_loop_exit(ctx.program, ctx.pc)

    if target is None:
        ctx.advance()
    else:
        ctx.pc = target + 1


def loop_return(ctx: Context):
    target = resolver.find_loop_start(ctx.program, ctx.pc)

    if target is None:
        ctx.advance()
    else:
        # Land on MOO itself so the test is re-evaluated
        ctx.pc = target


def indirect_exec(ctx: Context):
    code = ctx.tape.read()

    if code not in ops.DELEGATABLE:
        lg.debug(f'Invalid command code {code}, halting')
        ctx.halted = True
        return

    if code == ops.INDIRECT_EXEC:
        raise SelfReferentialHalt()

    # The delegate moves pc
    dispatch(ctx, code)


def end_of_program(ctx: Context):
    ctx.halted = True


HANDLERS: dict[int, Handler] = {
    ops.LOOP_RETURN: loop_return,
    ops.MOVE_BACK: move_back,
    ops.MOVE_FORWARD: move_forward,
    ops.INDIRECT_EXEC: indirect_exec,
    ops.IO_CHAR: io_char,
    ops.DECREMENT: decrement,
    ops.INCREMENT: increment,
    ops.LOOP_START: loop_start,
    ops.ZERO: zero,
    ops.REGISTER_TOGGLE: register_toggle,
    ops.PRINT_INT: print_int,
    ops.READ_INT: read_int,

    ops.END_OF_PROGRAM: end_of_program
}


# -- Implementation -- #

def dispatch(ctx: Context, op: int):
    handler = HANDLERS[op]
    handler(ctx)


def step(ctx: Context) -> StepOutcome:
    if not ctx.halted:
        dispatch(ctx, ctx.current())

    return StepOutcome.HALTED if ctx.halted else StepOutcome.RUNNING


def run(
    ctx: Context,
    before_step: Handler | None = None,
    after_step: Handler | None = None
) -> RunResult:
    try:
        while not ctx.halted:
            if before_step is not None:
                before_step(ctx)

            step(ctx)

            if after_step is not None:
                after_step(ctx)

    except Abort as e:
        lg.info(f'Execution aborted: {e}')
        ctx.debug_dump()
        return Aborted(e)

    lg.info('Execution halted gracefully')
    return Halted()
