"""
A simple color logger.
"""

import sys
from py.io import ansi_print


def isatty():
    return getattr(sys.stderr, 'isatty', lambda: False)()


class AnsiLogger(object):

    def __init__(self, name, file=None):
        self.name = name
        self.file = file

    def _make_method(subname, colors):
        #
        def logger_method(self, text):
            text = "[%s%s] %s" % (self.name, subname, text)
            if isatty():
                col = colors
            else:
                col = ()
            ansi_print(text, col, file=self.file or sys.stderr)
        #
        return logger_method

    ERROR    = _make_method(':ERROR', (1, 31))
    info     = _make_method(':info', (35,))
    debug    = _make_method(':debug', (34,))
