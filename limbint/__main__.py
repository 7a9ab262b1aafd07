"""limbint usage:

limbint <engine options> A
limbint <engine options> OP A        (OP is one of - + ~)
limbint <engine options> A OP B      (OP is one of + - * / % & | ^ << >>
                                      == != < > <= >=)

A and B are decimal integers.  Engine options take the --name=value form
and must come first.

run with --help for more information
"""
import optparse
import sys

from limbint.bigint import bigint, set_config, division_stats
from limbint.config.bigintoption import get_bigint_config
from limbint.config.config import to_optparse
from limbint.error import BigintError
from limbint.tool.ansi_print import AnsiLogger

log = AnsiLogger("limbint")

BINARY_OPS = {
    '+': 'add', '-': 'sub', '*': 'mul', '/': 'div', '%': 'mod',
    '&': 'and_', '|': 'or_', '^': 'xor', '<<': 'lshift', '>>': 'rshift',
    '==': 'eq', '!=': 'ne', '<': 'lt', '>': 'gt', '<=': 'le', '>=': 'ge',
}

UNARY_OPS = {'-': 'neg', '+': 'pos', '~': 'invert'}


class UsageError(Exception):
    pass


def split_args(argv):
    """Split argv into the leading '--' options and the expression, so
    that negative numbers are not mistaken for options."""
    i = 0
    while i < len(argv) and argv[i].startswith('--'):
        if argv[i] == '--':
            return argv[:i], argv[i+1:]
        i += 1
    return argv[:i], argv[i:]

def evaluate(args):
    if len(args) == 1:
        return bigint.fromdecimalstr(args[0])
    if len(args) == 2:
        op, a = args
        if op not in UNARY_OPS:
            raise UsageError("unknown operator %s" % (op,))
        return getattr(bigint.fromdecimalstr(a), UNARY_OPS[op])()
    if len(args) == 3:
        a, op, b = args
        if op not in BINARY_OPS:
            raise UsageError("unknown operator %s" % (op,))
        a = bigint.fromdecimalstr(a)
        b = bigint.fromdecimalstr(b)
        return getattr(a, BINARY_OPS[op])(b)
    raise UsageError("expected 1 to 3 arguments, got %d" % (len(args),))

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    config = get_bigint_config()
    parser = to_optparse(config, parser=optparse.OptionParser(usage=__doc__))
    options, expression = split_args(argv)
    _, extra = parser.parse_args(options)
    expression = extra + expression
    if not expression:
        parser.error("missing expression")

    old = set_config(config)
    try:
        division_stats.reset()
        try:
            result = evaluate(expression)
        except UsageError as e:
            parser.error(str(e))
        except (BigintError, ValueError) as e:
            log.ERROR(str(e))
            return 1
    finally:
        set_config(old)
    if config.division.trace and division_stats.digits:
        log.info("%d quotient digit(s), %d correction(s), at most %d per digit"
                 % (division_stats.digits, division_stats.corrections,
                    division_stats.max_corrections))
    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
