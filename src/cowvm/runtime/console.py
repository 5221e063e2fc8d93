import sys
from typing import TextIO

import cowvm.common.conf as cf
from cowvm.common.errors import InputError


class Console:
    ''' Text streams behind Moo / OOM / oom '''
    stdin: TextIO
    stdout: TextIO

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_char(self) -> int:
        c = self.stdin.read(1)

        if c == '':
            return cf.END_OF_INPUT

        return ord(c)

    def read_int(self) -> int:
        c = self.stdin.read(1)

        while c != '' and c in cf.WHITESPACE:
            c = self.stdin.read(1)

        # The delimiter after the token is consumed too
        token = ''
        while c != '' and c not in cf.WHITESPACE:
            token += c
            c = self.stdin.read(1)

        if token == '':
            raise InputError('Expected an integer, got end of input')

        try:
            return int(token)
        except ValueError:
            raise InputError(f'Expected an integer, got {token!r}')

    def write_line(self, text: str):
        self.stdout.write(text + '\n')
        self.stdout.flush()

    def write_char(self, code: int):
        self.write_line(chr(code & cf.CHAR_MASK))

    def write_int(self, value: int):
        self.write_line(str(value))
