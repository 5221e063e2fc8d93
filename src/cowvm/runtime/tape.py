from cowvm.common.errors import TapeUnderflow


class Tape:
    ''' Growable memory, starts as a single zero cell '''
    _cells: list[int]
    _cursor: int

    def __init__(self):
        self._cells = [0]
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cells(self) -> tuple[int, ...]:
        return tuple(self._cells)

    def read(self) -> int:
        return self._cells[self._cursor]

    def write(self, value: int):
        self._cells[self._cursor] = value

    def move_forward(self):
        self._cursor += 1

        if self._cursor == len(self._cells):
            self._cells.append(0)

    def move_backward(self):
        if self._cursor == 0:
            raise TapeUnderflow()

        self._cursor -= 1

    def increment(self):
        self._cells[self._cursor] += 1

    def decrement(self):
        self._cells[self._cursor] -= 1

    def zero(self):
        self.write(0)

    def __len__(self) -> int:
        return len(self._cells)
