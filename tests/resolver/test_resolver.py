import cowvm.loader.loader as loader
import cowvm.runtime.resolver as resolver


def test_exit_skips_adjacent():
    program = loader.load('OOO MOO moo moo')
    assert resolver.find_loop_exit(program, 1) == 3


def test_exit_nearest():
    program = loader.load('MOO OOM OOM moo OOM moo')
    assert resolver.find_loop_exit(program, 0) == 3


def test_exit_ignores_nesting():
    program = loader.load('MOO OOM MOO OOM moo moo')
    assert resolver.find_loop_exit(program, 0) == 4


def test_exit_not_found():
    assert resolver.find_loop_exit(loader.load('MOO moo'), 0) is None
    assert resolver.find_loop_exit(loader.load('MOO OOM OOM'), 0) is None


def test_start_skips_adjacent():
    program = loader.load('MOO MOO moo')
    assert resolver.find_loop_start(program, 2) == 0


def test_start_simple():
    program = loader.load('MOO MoO MOo moo')
    assert resolver.find_loop_start(program, 3) == 0


def test_start_nested():
    #                       0   1   2   3   4   5   6   7
    program = loader.load('MOO moO MOO MoO moo mOo MOo moo')
    assert resolver.find_loop_start(program, 4) == 2
    assert resolver.find_loop_start(program, 7) == 0


def test_start_not_found():
    assert resolver.find_loop_start(loader.load('moo'), 0) is None
    assert resolver.find_loop_start(loader.load('MOO moo'), 1) is None
    assert resolver.find_loop_start(loader.load('OOM OOM moo'), 2) is None
