"""

    sqlaresource.resource -- Exposing data model as container-resource
    ==================================================================

    :class:`Resource` is a base class for resources, it knows how to map its
    verbs to URLs and back and provides links for the adapters built on top of
    it.

"""

from collections import OrderedDict

from sqlaresource.urlpattern import URLPattern
from sqlaresource.exc import (
    http_error, NoURLPatternMatched, MethodNotAllowed, LinkReversalError)

__all__ = ('Resource', 'VERBS')

VERBS = ('list', 'new', 'create', 'show', 'edit', 'update')

class Resource(object):
    """ Base class for resources

    Subclasses implement some of the :data:`VERBS`, only implemented verbs are
    exposed by :meth:`match`.

    :param name:
        name of the resource, used for URL prefix and view templates
    :param view_engine:
        view engine to render resource results with
    :param prefix:
        URL prefix, defaults to ``/<name>``
    """

    #: Function to construct HTTP errors with, ``HTTPError(404, 'Not Found')``
    HTTPError = staticmethod(http_error)

    #: Mapping from verb to HTTP method and URL pattern relative to prefix,
    #: order matters as patterns are tried in order
    #:
    #: Ids may contain ``/``, ids starting with ``new`` segment are reserved
    routes = OrderedDict([
        ('list',    ('GET',  '')),
        ('create',  ('POST', '')),
        ('new',     ('GET',  '/new')),
        ('edit',    ('GET',  '/{id:path(exclude=new)}/edit')),
        ('show',    ('GET',  '/{id:path(exclude=new)}')),
        ('update',  ('PUT',  '/{id:path(exclude=new)}')),
    ])

    def __init__(self, name, view_engine, prefix=None):
        self.name = name
        self.view_engine = view_engine
        self.prefix = (prefix or '/' + name).rstrip('/')
        self.patterns = OrderedDict(
            (verb, (method, URLPattern(self.prefix + pattern)))
            for verb, (method, pattern) in self.routes.items())

    @property
    def verbs(self):
        """ Verbs implemented by resource"""
        return [v for v in self.patterns
            if getattr(type(self), v, None) is not getattr(Resource, v, None)]

    def link(self, verb, *args):
        """ Compute URL for ``verb`` using ``args`` as pattern params

        :raises sqlaresource.exc.LinkReversalError:
            if verb is unknown or params don't fit its pattern
        """
        if not verb in self.patterns:
            raise LinkReversalError("no route for verb '%s'" % verb)
        _, pattern = self.patterns[verb]
        return pattern.reverse(*args)

    def list_link(self):
        return self.link('list')

    def new_link(self):
        return self.link('new')

    def show_link(self, id):
        return self.link('show', id)

    def edit_link(self, id):
        return self.link('edit', id)

    def add_links(self, entity):
        """ Merge ``edit`` and ``show`` links into ``entity.links``

        Links already present on entity are kept unless overwritten.
        """
        links = dict(getattr(entity, 'links', None) or {})
        links.update({
            'edit': self.edit_link(entity.id),
            'show': self.show_link(entity.id),
        })
        entity.links = links
        return entity

    def match(self, method, path_info):
        """ Match request ``method`` and ``path_info`` against resource routes

        :return:
            pair of matched verb and tuple of params
        :raises sqlaresource.exc.NoURLPatternMatched:
            if no route matched ``path_info``
        :raises sqlaresource.exc.MethodNotAllowed:
            if some route matched ``path_info`` but not ``method``
        """
        guarded = False
        verbs = self.verbs
        for verb, (verb_method, pattern) in self.patterns.items():
            if not verb in verbs:
                continue
            try:
                args = pattern.match(path_info)
            except NoURLPatternMatched:
                continue
            if verb_method != method:
                guarded = True
                continue
            return verb, args
        if guarded:
            raise MethodNotAllowed(method)
        raise NoURLPatternMatched(path_info)

    def list(self, limit, offset):
        raise NotImplementedError()

    def new(self):
        raise NotImplementedError()

    def create(self, params):
        raise NotImplementedError()

    def show(self, id):
        raise NotImplementedError()

    def update(self, id, params):
        raise NotImplementedError()

    def edit(self, id):
        raise NotImplementedError()

    def __repr__(self):
        return '%s(name=%r, prefix=%r)' % (
            self.__class__.__name__, self.name, self.prefix)
