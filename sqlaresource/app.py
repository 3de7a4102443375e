"""

    sqlaresource.app -- serving resources over WSGI
    ===============================================

"""

import structlog
from webob import Request, Response
from webob.exc import (
    HTTPException, HTTPBadRequest, HTTPNotFound, HTTPSeeOther)

from sqlaresource.schema import pagination
from sqlaresource.exc import NoMatchFound, NoURLPatternMatched, MethodNotAllowed

__all__ = ('ResourceApp',)

logger = structlog.get_logger('sqlaresource.app')

class ResourceApp(object):
    """ WSGI application which dispatches requests to resources

    Results of ``list``, ``new``, ``show`` and ``edit`` are rendered with
    resource's view engine using ``<resource name>/<verb>.html`` template,
    ``create`` and ``update`` redirect to the created or updated entity.

    :param resources:
        resources to serve, tried in order
    :param default_limit:
        page size used when ``limit`` isn't in query string
    :param max_limit:
        maximum page size client can ask for
    """

    #: Form field which overrides ``POST`` method
    method_override = '_method'

    def __init__(self, *resources, **options):
        self.resources = list(resources)
        self.pagination = pagination(
            default_limit=options.pop('default_limit', 20),
            max_limit=options.pop('max_limit', 100))
        if options:
            raise TypeError("unexpected options: %s" % ', '.join(options))

    def __call__(self, environ, start_response):
        response = self.handle(Request(environ))
        return response(environ, start_response)

    def handle(self, request):
        """ Handle ``request`` and return response"""
        method = self.request_method(request)
        try:
            resource, verb, args = self.match(method, request.path_info)
        except NoMatchFound as e:
            logger.debug('no match', method=method, path=request.path_info,
                reason=e.__class__.__name__)
            return e.response
        logger.debug('dispatch', resource=resource.name, verb=verb, args=args)
        try:
            return getattr(self, verb)(resource, request, *args)
        except HTTPException as e:
            return e

    def match(self, method, path_info):
        """ Find resource and its verb matching ``method`` and ``path_info``

        :raises sqlaresource.exc.NoMatchFound:
            if none of resources matched
        """
        guarded = None
        for resource in self.resources:
            try:
                verb, args = resource.match(method, path_info)
            except NoURLPatternMatched:
                continue
            except MethodNotAllowed as e:
                guarded = e
                continue
            return resource, verb, args
        if guarded is not None:
            raise guarded
        raise NoURLPatternMatched(path_info)

    def request_method(self, request):
        if request.method == 'HEAD':
            return 'GET'
        if request.method == 'POST' and self.method_override in request.POST:
            return request.POST[self.method_override].upper()
        return request.method

    def request_params(self, request):
        if request.content_type == 'application/json':
            try:
                params = request.json_body
            except ValueError as e:
                raise HTTPBadRequest('invalid JSON body: %s' % e)
            if not isinstance(params, dict):
                raise HTTPBadRequest('JSON body should be an object')
            return params
        params = dict(request.POST)
        params.pop(self.method_override, None)
        return params

    def render(self, resource, verb, **context):
        view_engine = resource.view_engine
        body = view_engine.render(
            '%s/%s.html' % (resource.name, verb), resource=resource, **context)
        return Response(text=body, content_type=view_engine.content_type,
            charset='utf-8')

    def list(self, resource, request):
        try:
            params = self.pagination(request)
        except HTTPException:
            logger.warning('invalid pagination', resource=resource.name,
                query=request.query_string)
            raise
        result = resource.list(params['limit'], params['offset'])
        return self.render(resource, 'list', result=result)

    def new(self, resource, request):
        return self.render(resource, 'new', result=resource.new())

    def edit(self, resource, request, id):
        return self.render(resource, 'edit', id=id, result=resource.edit(id))

    def show(self, resource, request, id):
        result = resource.show(id)
        if result is None:
            raise HTTPNotFound()
        return self.render(resource, 'show', id=id,
            result=resource.add_links(result))

    def create(self, resource, request):
        id = resource.create(self.request_params(request))
        return HTTPSeeOther(location=resource.show_link(id))

    def update(self, resource, request, id):
        resource.update(id, self.request_params(request))
        return HTTPSeeOther(location=resource.show_link(id))
