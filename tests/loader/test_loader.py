import pytest

import cowvm.common.ops as ops
import cowvm.loader.loader as loader
from cowvm.common.errors import ParseError


ALL_MNEMONICS = 'moo mOo moO mOO Moo MOo MoO MOO OOO MMM OOM oom'


def test_all_mnemonics():
    program = loader.load(ALL_MNEMONICS)
    assert program == tuple(range(12)) + (ops.END_OF_PROGRAM,)


def test_sentinel_once_and_last():
    program = loader.load('MoO\n\tMOo  \r\nOOM\n')
    assert program.count(ops.END_OF_PROGRAM) == 1
    assert program[-1] == ops.END_OF_PROGRAM
    assert program[:-1] == (ops.INCREMENT, ops.DECREMENT, ops.PRINT_INT)


def test_empty_source():
    assert loader.load('') == (ops.END_OF_PROGRAM,)
    assert loader.load(' \n\t\f\v\r\n') == (ops.END_OF_PROGRAM,)


def test_comments():
    source = '; increments then prints MoO MoO\nMoO // trailing\n/ slash\nOOM ;last'
    assert loader.load(source) == (ops.INCREMENT, ops.PRINT_INT, ops.END_OF_PROGRAM)


def test_comment_only_source():
    assert loader.load('; nothing here') == (ops.END_OF_PROGRAM,)


def test_tokens_without_whitespace():
    program = loader.load('MoOMoOOOM')
    assert program == (ops.INCREMENT, ops.INCREMENT, ops.PRINT_INT, ops.END_OF_PROGRAM)


def test_case_sensitive():
    assert loader.load('MOo')[0] == ops.DECREMENT
    assert loader.load('moO')[0] == ops.MOVE_FORWARD
    assert loader.load('MOO')[0] == ops.LOOP_START
    assert loader.load('moo')[0] == ops.LOOP_RETURN


def test_unknown_mnemonic():
    with pytest.raises(ParseError) as e:
        loader.load('MoO\n  abc')

    assert e.value.token == 'abc'
    assert e.value.line == 2
    assert e.value.column == 3


def test_wrong_case_mnemonic():
    with pytest.raises(ParseError) as e:
        loader.load('MOM')

    assert e.value.token == 'MOM'


def test_short_token():
    with pytest.raises(ParseError) as e:
        loader.load('MoO Mo')

    assert e.value.token == 'Mo'


def test_comment_inside_token():
    with pytest.raises(ParseError) as e:
        loader.load('Mo;o')

    assert e.value.token == 'Mo;'


def test_load_file(tmp_path):
    path = tmp_path / 'prog.cow'
    path.write_text('OOO MOO moo moo\n')
    program = loader.load_file(str(path))
    assert program == (
        ops.ZERO, ops.LOOP_START, ops.LOOP_RETURN, ops.LOOP_RETURN, ops.END_OF_PROGRAM
    )


def test_load_file_non_ascii_comment(tmp_path):
    path = tmp_path / 'prog.cow'
    path.write_bytes('; café counter\nMoO OOM\n'.encode('utf-8'))
    assert loader.load_file(path) == (ops.INCREMENT, ops.PRINT_INT, ops.END_OF_PROGRAM)


def test_load_file_non_ascii_command(tmp_path):
    path = tmp_path / 'prog.cow'
    path.write_bytes('MoO\n Mé OOM\n'.encode('utf-8'))

    with pytest.raises(ParseError) as e:
        loader.load_file(path)

    assert e.value.line == 2
    assert e.value.column == 2
    assert e.value.token.startswith('M')
