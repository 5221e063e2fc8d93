# type: ignore
''' Source grammar '''

import pyparsing as pp

import cowvm.common.conf as cf
from cowvm.loader.fpp import ProgramBuilder


def g_ws(expr):
    return expr.set_whitespace_chars(cf.WHITESPACE)


def g_located(func):
    def action(s, loc, toks):
        return (func, (toks[0], pp.lineno(loc, s), pp.col(loc, s)))

    return action


# Only where a token would begin, runs to the end of the line
comment = g_ws(pp.Suppress(pp.Regex(f'[{cf.COMMENT_CHARS}][^\\r\\n]*')))

# Short tokens are matched too so that they fail as unknown commands
mnemonic = g_ws(pp.Regex(f'[^{cf.WHITESPACE}]{{1,{cf.MNEMONIC_SIZE}}}')) \
    .set_parse_action(g_located(ProgramBuilder.on_mnemonic))

statement = comment | mnemonic
end = g_ws(pp.StringEnd())

program = (pp.ZeroOrMore(statement) + end).parse_with_tabs()
