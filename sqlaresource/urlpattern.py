"""

    sqlaresource.urlpattern -- matching URL against pattern
    =======================================================

    Patterns are plain URL paths with ``{label}`` or ``{label:type}``
    placeholders, e.g. ``/projects/{id:int}/edit``. Supported types are
    ``str`` (default), ``int``, ``path`` and ``any(a, b, ...)``.

    ``path`` accepts ``exclude=<segment>`` argument, such paths don't match if
    their first segment is ``<segment>``, e.g. ``{id:path(exclude=new)}``.

"""

import re
from urllib.parse import quote, unquote

from sqlaresource.utils import cached_property
from sqlaresource.exc import (
    InvalidURLPattern, LinkReversalError, NoURLPatternMatched)

__all__ = ('URLPattern',)

def parse_args(line):
    args = []
    kwargs = {}
    if not line:
        return args, kwargs
    for item in (a.strip() for a in line.split(',') if a.strip()):
        if '=' in item:
            k, v = item.split('=', 1)
            kwargs[k.strip()] = v.strip()
        else:
            args.append(item)
    return args, kwargs

def handle_str(args):
    args, kwargs = parse_args(args)
    regex = kwargs.pop('re', None)
    if kwargs or args:
        raise InvalidURLPattern("invalid args for 'str' type")
    return (regex or '[^/]+', None)

def handle_path(args):
    args, kwargs = parse_args(args)
    exclude = kwargs.pop('exclude', None)
    if kwargs or args:
        raise InvalidURLPattern("'path' type accepts only 'exclude' arg")
    if exclude is None:
        return ('.+', None)

    def convert(value):
        if value.split('/', 1)[0] == exclude:
            raise ValueError(value)
        return value

    return ('.+', convert)

def handle_int(args):
    if args:
        raise InvalidURLPattern("'int' type doesn't accept args")
    return ('[0-9]+', int)

def handle_any(args):
    args, kwargs = parse_args(args)
    if not args:
        raise InvalidURLPattern("'any' type requires positional args")
    if kwargs:
        raise InvalidURLPattern("'any' doesn't accept keyword args")
    return ('|'.join(re.escape(x) for x in args), None)

class URLPattern(object):
    """ URL pattern which matches the whole path

    :param pattern:
        pattern string, should start with ``/``
    """

    _type_re = re.compile(r"""
        {
        (?P<label>[a-zA-Z_][a-zA-Z0-9_]*)   # label
        (:(?P<type>[a-zA-Z][a-zA-Z0-9]*))?  # optional type identifier
        (\(                                 # optional args
            (?P<args>[a-zA-Z= ,_\[\]\+\-0-9]*)
        \))?
        }""", re.VERBOSE)

    typemap = {
        None:       handle_str,
        'str':      handle_str,
        'string':   handle_str,
        'path':     handle_path,
        'int':      handle_int,
        'any':      handle_any,
    }

    def __init__(self, pattern):
        if not pattern.startswith('/'):
            pattern = '/' + pattern
        self.pattern = pattern
        self._compiled, self._names = self.compile()

    @cached_property
    def is_exact(self):
        return self._type_re.search(self.pattern) is None

    @property
    def labels(self):
        return [label for (_, _, label) in self._names]

    def compile(self):
        names = []
        compiled = ''
        last = 0
        for n, m in enumerate(self._type_re.finditer(self.pattern)):
            compiled += re.escape(self.pattern[last:m.start()])
            typ, label, args = (
                m.group('type'), m.group('label'), m.group('args'))
            if not typ in self.typemap:
                raise InvalidURLPattern(
                    "unknown type '%s' in pattern '%s'" % (typ, self.pattern))
            r, c = self.typemap[typ](args)
            name = '_gpt%d' % n
            names.append((name, c, label))
            compiled += '(?P<%s>%s)' % (name, r)
            last = m.end()
        compiled += re.escape(self.pattern[last:])
        return re.compile(compiled + "$"), names

    def reverse(self, *args):
        """ Substitute URL quoted ``args`` for pattern placeholders in order

        :raises sqlaresource.exc.LinkReversalError:
            if number of ``args`` doesn't match number of placeholders or
            resulting URL doesn't match pattern back
        """
        if len(args) != len(self._names):
            raise LinkReversalError(
                "pattern '%s' requires %d params for reversal,"
                " %r was supplied" % (self.pattern, len(self._names), args))
        if self.is_exact:
            return self.pattern
        values = iter(args)

        def substitute(m):
            safe = '/' if m.group('type') == 'path' else ''
            return quote(str(next(values)), safe=safe)

        url = self._type_re.sub(substitute, self.pattern)
        # WSGI servers unquote PATH_INFO before it is matched
        try:
            self.match(unquote(url))
        except NoURLPatternMatched:
            raise LinkReversalError(
                "params %r don't fit pattern '%s'" % (args, self.pattern))
        return url

    def match(self, path_info):
        """ Match ``path_info`` against pattern and return matched params

        :raises sqlaresource.exc.NoURLPatternMatched:
            if ``path_info`` doesn't match
        """
        m = self._compiled.match(path_info)
        if not m:
            raise NoURLPatternMatched("no match for '%s' against '%s'" % (
                path_info, self.pattern))
        groups = m.groupdict()
        try:
            return tuple(
                c(groups[n]) if c else groups[n]
                for (n, c, l) in self._names)
        except ValueError:
            raise NoURLPatternMatched(path_info)

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.pattern)
