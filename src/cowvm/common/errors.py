class CowError(Exception):
    pass


class ParseError(CowError):
    line: int
    column: int
    token: str

    def __init__(self, token: str, line: int, column: int):
        super().__init__(f'Unknown command {token!r} at {line}:{column}')
        self.token = token
        self.line = line
        self.column = column


class Abort(CowError):
    ''' Fatal runtime condition, terminates the run '''
    pass


class TapeUnderflow(Abort):
    def __init__(self):
        super().__init__('Memory pointer moved below zero')


class SelfReferentialHalt(Abort):
    def __init__(self):
        super().__init__('Halting to prevent infinite loop')


class InputError(Abort):
    pass
