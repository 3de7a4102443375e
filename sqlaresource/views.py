"""

    sqlaresource.views -- rendering resource results
    ================================================

    View engines render results of resource verbs. Every view engine has
    ``content_type`` attribute and ``render(template, **context)`` method which
    returns response body as string.

"""

import datetime
import decimal
import json

import jinja2
from sqlalchemy import inspect

from sqlaresource.model import as_dict

__all__ = ('TemplateViewEngine', 'JSONViewEngine')

class TemplateViewEngine(object):
    """ View engine which renders Jinja2 templates

    Templates are looked up by name ``<resource name>/<verb>.html``.

    :param loader:
        Jinja2 loader to use
    :param directory:
        directory to load templates from, if no ``loader`` is given
    :param env_options:
        passed to :class:`jinja2.Environment`
    """

    content_type = 'text/html'

    def __init__(self, loader=None, directory=None, **env_options):
        if loader is None:
            if directory is None:
                raise ValueError("either loader or directory should be given")
            loader = jinja2.FileSystemLoader(directory)
        env_options.setdefault('autoescape', jinja2.select_autoescape())
        self.env = jinja2.Environment(loader=loader, **env_options)

    def render(self, template, **context):
        return self.env.get_template(template).render(**context)

class JSONViewEngine(object):
    """ View engine which serializes ``result`` from context as JSON"""

    content_type = 'application/json'

    def __init__(self, **dumps_options):
        self.dumps_options = dumps_options

    def render(self, template, **context):
        return json.dumps(
            context.get('result'), default=self.default, **self.dumps_options)

    def default(self, o):
        if isinstance(o, (datetime.date, datetime.time)):
            return o.isoformat()
        if isinstance(o, decimal.Decimal):
            return str(o)
        if inspect(type(o), raiseerr=False) is None:
            raise TypeError("%r is not JSON serializable" % (o,))
        return as_dict(o)
