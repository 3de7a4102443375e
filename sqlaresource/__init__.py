"""

    sqlaresource -- SQLAlchemy models as REST resources
    ===================================================

    This package exposes SQLAlchemy models as resources with ``list``,
    ``new``, ``edit``, ``create``, ``update`` and ``show`` verbs and serves
    them as WSGI applications based on WebOb::

        from sqlaresource import (
            Model, SQLAResource, ResourceApp, JSONViewEngine)

        projects = SQLAResource(Model(Project, session), 'project',
                                JSONViewEngine())
        app = ResourceApp(projects)

"""

from sqlaresource.exc import (
    http_error, NoMatchFound, ResourceConfigurationError, LinkReversalError)
from sqlaresource.resource import Resource
from sqlaresource.sqla import SQLAResource
from sqlaresource.model import Model, UpdateAttributesMixin
from sqlaresource.registry import Registration, Registry
from sqlaresource.views import TemplateViewEngine, JSONViewEngine
from sqlaresource.app import ResourceApp

__all__ = (
    'Resource', 'SQLAResource', 'Model', 'UpdateAttributesMixin',
    'Registration', 'Registry', 'ResourceApp',
    'TemplateViewEngine', 'JSONViewEngine',
    'http_error', 'NoMatchFound', 'ResourceConfigurationError',
    'LinkReversalError')
