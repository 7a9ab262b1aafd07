"""
Option trees.

An OptionDescription names a group of options and nested groups.  A Config
built from it holds one value per option, reachable as attributes along the
tree (config.mul.karatsuba), and remembers who set each value: 'default',
'user' or 'cmdline'.
"""
import optparse


class Config(object):

    def __init__(self, descr, **overrides):
        self._descr = descr
        self._owners = {}
        for child in descr._children:
            if isinstance(child, OptionDescription):
                self.__dict__[child._name] = Config(child)
            else:
                self.__dict__[child._name] = child.default
                self._owners[child._name] = 'default'
        for path, value in overrides.items():
            subconfig, name = self._get_by_path(path)
            setattr(subconfig, name, value)

    def __setattr__(self, name, value):
        if name.startswith('_'):
            self.__dict__[name] = value
        else:
            self.setoption(name, value, 'user')

    def setoption(self, name, value, who):
        option = getattr(self._descr, name, None)
        if not isinstance(option, Option):
            raise ValueError('%s is not an option of %s' %
                             (name, self._descr._name))
        self.__dict__[name] = option.convert(value)
        self._owners[name] = who

    def _get_by_path(self, path):
        """returns tuple (config, name)"""
        steps = path.split('.')
        for step in steps[:-1]:
            self = getattr(self, step)
        return self, steps[-1]

    def getpaths(self):
        """Return the dotted paths of all the options, recursively."""
        paths = []
        for child in self._descr._children:
            if isinstance(child, OptionDescription):
                subpaths = getattr(self, child._name).getpaths()
                paths += ['%s.%s' % (child._name, p) for p in subpaths]
            else:
                paths.append(child._name)
        return paths

    def __str__(self):
        # only the values that differ from their default are shown
        lines = ["[%s]" % (self._descr._name,)]
        for child in self._descr._children:
            if isinstance(child, OptionDescription):
                substr = str(getattr(self, child._name))
                lines += ["    " + line for line in substr.splitlines()]
            elif self._owners[child._name] != 'default':
                lines.append("    %s = %s" % (child._name,
                                              getattr(self, child._name)))
        return "\n".join(lines) + "\n"


class Option(object):
    def __init__(self, name, doc, default):
        self._name = name
        self.doc = doc
        self.default = default

    def convert(self, value):
        """Return the value to store, or raise ValueError."""
        raise NotImplementedError('abstract base class')

    def add_optparse_option(self, argname, parser, config):
        raise NotImplementedError('abstract base class')

    def _invalid(self, value):
        return ValueError('invalid value %r for option %s' %
                          (value, self._name))

class BoolOption(Option):
    def __init__(self, name, doc, default=False):
        super(BoolOption, self).__init__(name, doc, default)

    def convert(self, value):
        # 1 == True, but an int is not a valid boolean setting
        if not isinstance(value, bool):
            raise self._invalid(value)
        return value

    def add_optparse_option(self, argname, parser, config):
        def _callback(option, opt_str, value, parser):
            config.setoption(self._name, True, who='cmdline')
        parser.add_option(argname, help=self.doc, action='callback',
                          callback=_callback)

class IntOption(Option):
    def __init__(self, name, doc, default=0, lower=None):
        super(IntOption, self).__init__(name, doc, default)
        self.lower = lower

    def convert(self, value):
        if isinstance(value, bool):
            raise self._invalid(value)
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise self._invalid(value)
        if self.lower is not None and value < self.lower:
            raise ValueError('option %s must be at least %d, got %d' %
                             (self._name, self.lower, value))
        return value

    def add_optparse_option(self, argname, parser, config):
        def _callback(option, opt_str, value, parser):
            try:
                config.setoption(self._name, value, who='cmdline')
            except ValueError as e:
                raise optparse.OptionValueError(e.args[0])
        parser.add_option(argname, help=self.doc, action='callback',
                          type='int', callback=_callback)

class OptionDescription(object):
    def __init__(self, name, doc, children):
        self._name = name
        self.doc = doc
        self._children = children
        for child in children:
            setattr(self, child._name, child)


def to_optparse(config, parser=None):
    """Add a --group-name command line option for every option of 'config',
    one optparse group per option group."""
    if parser is None:
        parser = optparse.OptionParser()
    groups = {}
    for path in config.getpaths():
        subconfig, name = config._get_by_path(path)
        option = getattr(subconfig._descr, name)
        if '.' in path:
            grpname = path.rsplit('.', 1)[0]
            if grpname not in groups:
                groups[grpname] = parser.add_option_group(
                    subconfig._descr.doc)
            container = groups[grpname]
        else:
            container = parser
        option.add_optparse_option('--' + path.replace('.', '-'),
                                   container, subconfig)
    return parser
