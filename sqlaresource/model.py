"""

    sqlaresource.model -- model access on top of SQLAlchemy
    =======================================================

    :class:`Model` wraps SQLAlchemy mapped class and session into an object
    which provides operations needed by :class:`sqlaresource.sqla.SQLAResource`.
    Mapped classes should also mix in :class:`UpdateAttributesMixin` so their
    instances can be updated in place.

"""

import structlog
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import object_session

__all__ = ('Model', 'UpdateAttributesMixin', 'as_dict')

logger = structlog.get_logger('sqlaresource.model')

def _commit(session):
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

class Model(object):
    """ Model access object

    :param cls:
        SQLAlchemy mapped class
    :param session:
        :class:`sqlalchemy.orm.Session` to query and persist instances with
    """

    def __init__(self, cls, session):
        self.cls = cls
        self.session = session
        self.mapper = inspect(cls)

    @property
    def name(self):
        return self.cls.__name__

    def find_and_count_all(self, limit=None, offset=None):
        """ Fetch a page of instances along with total number of them

        Instances are ordered by primary key so pages are stable.

        :return:
            dict with ``rows`` and ``count`` keys
        """
        count = self.session.scalar(
            select(func.count()).select_from(self.cls))
        query = select(self.cls).order_by(*self.mapper.primary_key)
        if limit is not None:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        rows = list(self.session.scalars(query))
        logger.debug('fetched rows', model=self.name, count=count,
            fetched=len(rows), limit=limit, offset=offset)
        return {'rows': rows, 'count': count}

    def find(self, id):
        """ Find instance by primary key ``id``, ``None`` if there's no such

        String ids (as they come from URLs) are converted to primary key type,
        ids which can't be converted cannot exist and so aren't found.
        """
        try:
            id = self._coerce_id(id)
        except ValueError:
            return None
        return self.session.get(self.cls, id)

    def build(self, params=None):
        """ Construct new instance without persisting it"""
        return self.cls(**(params or {}))

    def create(self, params):
        """ Construct new instance from ``params`` and persist it"""
        instance = self.build(params)
        self.session.add(instance)
        _commit(self.session)
        logger.info('created instance', model=self.name,
            id=inspect(instance).identity)
        return instance

    def _coerce_id(self, id):
        if not isinstance(id, str) or len(self.mapper.primary_key) != 1:
            return id
        try:
            python_type = self.mapper.primary_key[0].type.python_type
        except NotImplementedError:
            return id
        if python_type is str:
            return id
        return python_type(id)

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.name)

class UpdateAttributesMixin(object):
    """ Mixin for mapped classes which provides in place updates"""

    def update_attributes(self, params):
        """ Set attributes from ``params`` and persist instance

        :raises TypeError:
            if ``params`` contain names which aren't mapped attributes
        """
        mapper = inspect(type(self))
        for k in params:
            if not k in mapper.attrs:
                raise TypeError("%r is an invalid keyword argument for %s" % (
                    k, type(self).__name__))
        for k, v in params.items():
            setattr(self, k, v)
        session = object_session(self)
        if session is not None:
            _commit(session)
        logger.info('updated instance', model=type(self).__name__,
            attributes=sorted(params))
        return self

def as_dict(instance):
    """ Represent mapped ``instance`` as dict of its column attributes

    ``links`` are included if instance was decorated with them.
    """
    result = dict(
        (attr.key, getattr(instance, attr.key))
        for attr in inspect(type(instance)).column_attrs)
    links = getattr(instance, 'links', None)
    if links is not None:
        result['links'] = links
    return result
