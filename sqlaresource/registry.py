"""

    sqlaresource.registry -- composing resources from registrations
    ================================================================

    Resources declare what they need with :class:`Registration` and
    :class:`Registry` resolves these needs from values provided by
    application::

        registry = Registry(Project=Model(Project, session),
                            view_engine=TemplateViewEngine(directory='views'))
        registry.resolve(SQLAResource.registration('project'))
        app = registry.app()

"""

from collections import namedtuple
from importlib.metadata import entry_points

import structlog

from sqlaresource.utils import import_string
from sqlaresource.exc import ResourceConfigurationError

__all__ = ('Registration', 'Registry')

logger = structlog.get_logger('sqlaresource.registry')

class Registration(namedtuple('Registration', ['name', 'requires', 'factory'])):
    """ Description of how to construct resource

    :attr name:
        name under which constructed resource is registered
    :attr requires:
        keys of values ``factory`` should be called with, in order
    :attr factory:
        callable which constructs resource
    """

    __slots__ = ()

class Registry(object):
    """ Registry of provided values and resolved resources

    :param providers:
        values available for resource factories, by key
    """

    def __init__(self, **providers):
        self.providers = dict(providers)
        self.resources = {}

    def provide(self, key, value):
        """ Make ``value`` available to resource factories under ``key``"""
        self.providers[key] = value

    def resolve(self, registration):
        """ Construct resource described by ``registration`` and register it

        :raises sqlaresource.exc.ResourceConfigurationError:
            if some of required values aren't provided or resource with the
            same name is already registered
        """
        if not isinstance(registration, Registration):
            raise ResourceConfigurationError(
                "%r isn't a registration" % (registration,))
        if registration.name in self.resources:
            raise ResourceConfigurationError(
                "resource '%s' is already registered" % registration.name)
        missing = [k for k in registration.requires if not k in self.providers]
        if missing:
            raise ResourceConfigurationError(
                "resource '%s' requires %s which aren't provided" % (
                    registration.name, ', '.join(repr(k) for k in missing)))
        resource = registration.factory(
            *[self.providers[k] for k in registration.requires])
        self.resources[registration.name] = resource
        logger.debug('resolved', resource=registration.name,
            requires=list(registration.requires))
        return resource

    def get(self, name):
        return self.resources[name]

    def include(self, spec):
        """ Resolve registration found by import ``spec``

        :param spec:
            dotted path to :class:`Registration`, ``package.module:name``
        """
        registration = import_string(spec)
        if not isinstance(registration, Registration):
            raise ResourceConfigurationError(
                "object included by '%s' isn't a registration" % spec)
        return self.resolve(registration)

    def plug(self, name, group='sqlaresource'):
        """ Resolve registrations advertised by entry points named ``name``

        :param group:
            entry point group to query
        """
        resources = []
        for ep in entry_points(group=group, name=name):
            registration = ep.load()
            if not isinstance(registration, Registration):
                raise ResourceConfigurationError(
                    "entry point '%s' doesn't point at registration" % ep.name)
            resources.append(self.resolve(registration))
        return resources

    def app(self, **options):
        """ Construct WSGI application serving all resolved resources

        :param options:
            passed to :class:`sqlaresource.app.ResourceApp`
        """
        from sqlaresource.app import ResourceApp
        return ResourceApp(*self.resources.values(), **options)
