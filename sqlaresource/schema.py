"""

    sqlaresource.schema -- validate request params
    ==============================================

"""

import colander
from webob import exc

__all__ = ('RequestParams', 'QueryParams', 'Optional', 'pagination')

_none = object()

class Optional(object):
    """ Marker for params which can be omitted

    :param typ:
        colander type or schema node
    :param default:
        value to use if param is missing, param is dropped if not provided
    """

    none = _none

    def __init__(self, typ, default=_none):
        if isinstance(typ, type):
            typ = typ()
        self.typ = typ
        self.default = default

class RequestParams(object):
    """ Validator for request params

    Raises :class:`webob.exc.HTTPBadRequest` if params aren't valid.

    :param kwargs:
        mapping with validators for params, colander types, schema nodes or
        :class:`Optional` wrapping them
    """

    def __init__(self, **kwargs):
        self.schema = colander.SchemaNode(colander.Mapping())
        for name, typ in kwargs.items():
            optional = isinstance(typ, Optional)
            missing = typ.default if optional else colander.required
            if optional:
                typ = typ.typ
            if isinstance(typ, colander.SchemaNode):
                typ = typ.clone()
                typ.name = name
                if optional:
                    typ.missing = missing
                self.schema.add(typ)
            else:
                if isinstance(typ, type):
                    typ = typ()
                self.schema.add(
                    colander.SchemaNode(typ, name=name, missing=missing))

    def params(self, request):
        raise NotImplementedError()

    def __call__(self, request):
        """ Validate params of ``request`` and return them as dict"""
        try:
            kwargs = self.schema.deserialize(dict(self.params(request)))
        except colander.Invalid as e:
            raise exc.HTTPBadRequest('; '.join(
                '%s: %s' % (k, v) for k, v in sorted(e.asdict().items())))
        return dict((k, v) for k, v in kwargs.items() if v is not Optional.none)

class QueryParams(RequestParams):

    def params(self, request):
        return request.GET

def pagination(default_limit=20, max_limit=100):
    """ Construct validator for ``limit`` and ``offset`` query params"""
    return QueryParams(
        limit=Optional(colander.SchemaNode(
            colander.Int(),
            validator=colander.Range(min=1, max=max_limit)),
            default=default_limit),
        offset=Optional(colander.SchemaNode(
            colander.Int(),
            validator=colander.Range(min=0)),
            default=0))
