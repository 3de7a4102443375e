"""

    sqlaresource.utils -- utility code
    ==================================

"""

from importlib import import_module

__all__ = ('import_string', 'cached_property', 'ImportStringError')

class cached_property(object):
    """ Just like ``property`` but computed only once"""

    def __init__(self, func):
        self.func = func
        self.__name__ = func.__name__
        self.__doc__ = func.__doc__

    def __get__(self, obj, cls):
        if obj is None:
            return self
        val = self.func(obj)
        obj.__dict__[self.__name__] = val
        return val

def import_string(import_name):
    """ Import an object based on a string

    An import path can be specified either in dotted notation
    (``myapp.resources.projects``) or with a colon as object delimiter
    (``myapp.resources:projects``).

    :raises ImportStringError:
        if module or object cannot be found
    """
    try:
        if ':' in import_name:
            module, obj = import_name.split(':', 1)
        elif '.' in import_name:
            module, obj = import_name.rsplit('.', 1)
        else:
            return import_module(import_name)
        try:
            return getattr(import_module(module), obj)
        except AttributeError:
            # submodule not yet imported by its package
            return import_module(module + '.' + obj)
    except ImportError as e:
        raise ImportStringError(import_name, e) from e

class ImportStringError(ImportError):
    """ Provides information about a failed :func:`import_string` attempt"""

    #: String in dotted notation that failed to be imported.
    import_name = None
    #: Wrapped exception.
    exception = None

    def __init__(self, import_name, exception):
        self.import_name = import_name
        self.exception = exception
        ImportError.__init__(self, 'import_string() failed for %r: %s: %s' % (
            import_name, exception.__class__.__name__, exception))

    def __repr__(self):
        return '<%s(%r, %r)>' % (self.__class__.__name__, self.import_name,
                                 self.exception)
