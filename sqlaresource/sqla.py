"""

    sqlaresource.sqla -- Exposing SQLAlchemy model as REST resource
    ================================================================

"""

import structlog

from sqlaresource.resource import Resource
from sqlaresource.registry import Registration

__all__ = ('SQLAResource',)

logger = structlog.get_logger('sqlaresource.sqla')

class SQLAResource(Resource):
    """ Resource which maps its verbs onto model operations

    :param model:
        model access object, see :class:`sqlaresource.model.Model` for
        required interface
    :param name:
        name of the resource
    :param view_engine:
        view engine to render results with
    """

    def __init__(self, model, name, view_engine, **options):
        super(SQLAResource, self).__init__(name, view_engine, **options)
        self.model = model

    def list(self, limit, offset):
        result = dict(self.model.find_and_count_all(limit=limit, offset=offset))
        result.update({'limit': limit, 'offset': offset})
        for row in result['rows']:
            self.add_links(row)
        logger.debug('listed', resource=self.name, limit=limit, offset=offset,
            rows=len(result['rows']))
        return result

    def new(self):
        return self.model.build()

    def edit(self, id):
        # found entity isn't returned, edit form is rendered by view
        if self.model.find(id) is None:
            logger.warning('not found', resource=self.name, id=id)
            raise self.HTTPError(404, 'Not Found')

    def create(self, params):
        entity = self.model.create(params)
        logger.info('created', resource=self.name, id=entity.id)
        return entity.id

    def update(self, id, params):
        entity = self.model.find(id)
        result = entity.update_attributes(params)
        logger.info('updated', resource=self.name, id=id)
        return result

    def show(self, id):
        return self.model.find(id)

    @classmethod
    def registration(cls, name, model_name=None):
        """ Describe how to construct resource with ``name``

        Resource requires model registered under ``model_name`` (defaults to
        capitalized ``name``) and a ``view_engine``.

        :rtype:
            :class:`sqlaresource.registry.Registration`
        """
        if model_name is None:
            model_name = name.capitalize()

        def factory(model, view_engine):
            return cls(model, name, view_engine)

        return Registration(name, (model_name, 'view_engine'), factory)
