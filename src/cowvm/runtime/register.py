from dataclasses import dataclass
from typing import TypeAlias

from cowvm.runtime.tape import Tape


@dataclass(frozen=True)
class Empty:
    def __str__(self) -> str:
        return ''


@dataclass(frozen=True)
class Holding:
    value: int

    def __str__(self) -> str:
        return str(self.value)


RegisterState: TypeAlias = Empty | Holding


class Register:
    ''' Single-slot copy/paste buffer '''
    state: RegisterState

    def __init__(self):
        self.state = Empty()

    def capture(self, tape: Tape):
        # Snapshot only, the cell keeps its value
        if isinstance(self.state, Empty):
            self.state = Holding(tape.read())

    def paste(self, tape: Tape):
        if isinstance(self.state, Holding):
            tape.write(self.state.value)
            self.state = Empty()

    def toggle(self, tape: Tape):
        if isinstance(self.state, Empty):
            self.capture(tape)
        else:
            self.paste(tape)
