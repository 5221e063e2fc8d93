''' Marker scans for MOO / moo

Both scans skip the instruction adjacent to the marker, so
`OOO MOO moo moo` pairs MOO with the second moo.
'''

import cowvm.common.ops as ops


def find_loop_exit(program: ops.Program, index: int) -> int | None:
    ''' Nearest moo after MOO at index, not counting index + 1 '''
    for i in range(index + 2, len(program)):
        if program[i] == ops.LOOP_RETURN:
            return i

    return None


def find_loop_start(program: ops.Program, index: int) -> int | None:
    ''' Matching MOO before moo at index, not counting index - 1 '''
    level = 0

    for i in range(index - 2, -1, -1):
        op = program[i]

        if op == ops.LOOP_RETURN:
            level += 1

        elif op == ops.LOOP_START:
            if level == 0:
                return i

            level -= 1

    return None
