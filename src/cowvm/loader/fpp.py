''' First pass processor '''

import logging as lg
from typing import NoReturn

import cowvm.common.ops as ops
from cowvm.common.errors import ParseError

# (text, line, column)
Token = tuple[str, int, int]


class ProgramBuilder:
    opcodes: list[int]

    def __init__(self):
        self.opcodes = list()

    def issue_op(self, op: int):
        lg.debug(f'Issuing command {ops.name(op)} @ {len(self.opcodes)}')
        self.opcodes.append(op)

    def on_mnemonic(self, token: Token):
        (text, _, _) = token
        op = ops.MNEMONICS.get(text)

        if op is None:
            self.on_fail(token)

        self.issue_op(op)

    def on_fail(self, token: Token) -> NoReturn:
        (text, line, column) = token
        raise ParseError(text, line, column)

    def program(self) -> ops.Program:
        return tuple(self.opcodes) + (ops.END_OF_PROGRAM,)
