from pathlib import Path
import logging as lg

import cowvm.common.ops as ops
import cowvm.common.conf as cf
import cowvm.loader.grammar as grammar
from cowvm.loader.fpp import ProgramBuilder


def load(text: str) -> ops.Program:
    builder = ProgramBuilder()
    actions = grammar.program.parse_string(text)

    for (func, arg) in actions:
        func(builder, arg)

    program = builder.program()
    lg.debug(f'Loaded {len(program) - 1} instructions')
    return program


def load_file(filepath: str | Path) -> ops.Program:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading file {filepath}')
    # Undecodable bytes become U+FFFD, discarded in comments and rejected elsewhere
    return load(filepath.read_text(encoding=cf.SOURCE_ENCODING, errors='replace'))
