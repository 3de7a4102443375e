"""

    sqlaresource.exc -- exceptions
    ==============================

"""

from webob import exc

__all__ = (
    'http_error', 'NoMatchFound', 'NoURLPatternMatched', 'MethodNotAllowed',
    'ResourceConfigurationError', 'InvalidURLPattern', 'LinkReversalError')

def http_error(code, message=None):
    """ Construct HTTP error for status ``code``

    Returns instance of corresponding :mod:`webob.exc` class, so it can be
    raised from resource methods and served as a response at the same time.

    :param code:
        HTTP status code, e.g. ``404``
    :param message:
        optional detail message
    """
    if not code in exc.status_map:
        raise ValueError("unknown HTTP status code %r" % code)
    return exc.status_map[code](detail=message)

class NoMatchFound(Exception):
    """ Raised when request wasn't matched against any resource route

    :attr response:
        :class:`webob.Response` object to return to client
    """

    response = NotImplemented

class NoURLPatternMatched(NoMatchFound):
    """ Raised when request wasn't matched against any URL pattern"""

    response = exc.HTTPNotFound()

class MethodNotAllowed(NoMatchFound):
    """ Raised when request was matched but request method isn't allowed"""

    response = exc.HTTPMethodNotAllowed()

class ResourceConfigurationError(Exception):
    """ Resources were configured improperly

    Errors of such type can be only raised during initial configuration and not
    during runtime.
    """

class InvalidURLPattern(ResourceConfigurationError):
    """ Resource configured with invalid URL pattern"""

class LinkReversalError(Exception):
    """ Cannot compute link"""
