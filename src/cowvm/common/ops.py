from typing import TypeAlias

# Loop / memory
LOOP_RETURN = 0x00      # moo: back to the matching MOO
MOVE_BACK = 0x01        # mOo: cursor - 1
MOVE_FORWARD = 0x02     # moO: cursor + 1
INDIRECT_EXEC = 0x03    # mOO: execute M[cursor] as an opcode
IO_CHAR = 0x04          # Moo: M == 0 ? read char : print char
DECREMENT = 0x05        # MOo: M - 1
INCREMENT = 0x06        # MoO: M + 1
LOOP_START = 0x07       # MOO: M == 0 ? skip past matching moo
ZERO = 0x08             # OOO: 0 -> M
REGISTER_TOGGLE = 0x09  # MMM: M -> R or R -> M
PRINT_INT = 0x0A        # OOM: print M as integer
READ_INT = 0x0B         # oom: read integer -> M

# Synthetic
END_OF_PROGRAM = 0xFF   # appended by the loader

MNEMONICS = {
    'moo': LOOP_RETURN,
    'mOo': MOVE_BACK,
    'moO': MOVE_FORWARD,
    'mOO': INDIRECT_EXEC,
    'Moo': IO_CHAR,
    'MOo': DECREMENT,
    'MoO': INCREMENT,
    'MOO': LOOP_START,
    'OOO': ZERO,
    'MMM': REGISTER_TOGGLE,
    'OOM': PRINT_INT,
    'oom': READ_INT
}

NAMES = {code: mnemonic for mnemonic, code in MNEMONICS.items()}
NAMES[END_OF_PROGRAM] = 'EOF'

# Codes reachable through mOO
DELEGATABLE = range(LOOP_RETURN, READ_INT + 1)


def name(code: int) -> str:
    return NAMES.get(code, f'0x{code:X}')


Program: TypeAlias = tuple[int, ...]
