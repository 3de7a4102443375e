"""

    sqlaresource.tests -- test suite
    ================================

"""

import json
from types import SimpleNamespace
from unittest import TestCase, mock

import jinja2
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Session
from webob import Request
from webob.exc import HTTPBadRequest, HTTPNotFound

from sqlaresource import (
    Resource, SQLAResource, Model, UpdateAttributesMixin, Registration,
    Registry, ResourceApp, TemplateViewEngine, JSONViewEngine)
from sqlaresource.exc import (
    http_error, NoURLPatternMatched, MethodNotAllowed, InvalidURLPattern,
    LinkReversalError, ResourceConfigurationError)
from sqlaresource.schema import pagination
from sqlaresource.urlpattern import URLPattern
from sqlaresource.utils import import_string, ImportStringError

__all__ = ()

class Base(DeclarativeBase):
    pass

class Project(UpdateAttributesMixin, Base):
    __tablename__ = 'projects'

    id = Column(Integer, primary_key=True)
    title = Column(String(100), nullable=False)

class Tag(UpdateAttributesMixin, Base):
    __tablename__ = 'tags'

    id = Column(String(50), primary_key=True)
    label = Column(String(100))

project_registration = SQLAResource.registration('project')

class DatabaseTestCase(TestCase):

    def setUp(self):
        self.engine = create_engine('sqlite://')
        Base.metadata.create_all(self.engine)
        self.session = Session(self.engine)
        self.session.add_all([
            Project(title='alpha'),
            Project(title='beta'),
            Project(title='gamma')])
        self.session.commit()

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

class TestSQLAResource(TestCase):

    def make_resource(self, model=None):
        return SQLAResource(model or mock.Mock(), 'model', mock.Mock())

    def test_is_resource(self):
        resource = self.make_resource()
        self.assertIsInstance(resource, Resource)
        self.assertEqual(resource.name, 'model')
        self.assertEqual(
            sorted(resource.verbs),
            ['create', 'edit', 'list', 'new', 'show', 'update'])

    def test_list(self):
        model = mock.Mock()
        find_result = {'rows': [SimpleNamespace(id=123)], 'count': 1}
        model.find_and_count_all.return_value = find_result
        resource = self.make_resource(model)

        result = resource.list(5, 10)

        model.find_and_count_all.assert_called_once_with(limit=5, offset=10)
        self.assertEqual(result['limit'], 5)
        self.assertEqual(result['offset'], 10)
        self.assertEqual(result['count'], 1)
        self.assertEqual(result['rows'][0].links['edit'],
            resource.edit_link(123))
        self.assertEqual(result['rows'][0].links['show'],
            resource.show_link(123))
        self.assertNotIn('limit', find_result)

    def test_list_preserves_links(self):
        model = mock.Mock()
        row = SimpleNamespace(id=1, links={'self': '/x', 'edit': '/old'})
        model.find_and_count_all.return_value = {'rows': [row], 'count': 1}
        resource = self.make_resource(model)

        result = resource.list(20, 0)

        self.assertEqual(result['rows'][0].links, {
            'self': '/x',
            'edit': '/model/1/edit',
            'show': '/model/1'})

    def test_list_propagates_failure(self):
        model = mock.Mock()
        model.find_and_count_all.side_effect = RuntimeError('db is down')
        self.assertRaises(RuntimeError, self.make_resource(model).list, 1, 0)

    def test_new(self):
        model = mock.Mock()
        resource = self.make_resource(model)
        self.assertIs(resource.new(), model.build.return_value)
        model.build.assert_called_once_with()
        self.assertFalse(model.find.called)
        self.assertFalse(model.create.called)

    def test_edit_existing(self):
        model = mock.Mock()
        model.find.return_value = {'foo': 'bar'}
        resource = self.make_resource(model)
        self.assertIsNone(resource.edit(876))
        model.find.assert_called_once_with(876)

    def test_edit_missing(self):
        model = mock.Mock()
        model.find.return_value = None
        resource = self.make_resource(model)
        with self.assertRaises(HTTPNotFound) as ctx:
            resource.edit(777)
        self.assertEqual(ctx.exception.code, 404)
        self.assertEqual(ctx.exception.detail, 'Not Found')
        model.find.assert_called_once_with(777)

    def test_create(self):
        model = mock.Mock()
        model.create.return_value = SimpleNamespace(id=555)
        params = {'foo': 'bar', 'bar': 'baz'}
        result = self.make_resource(model).create(params)
        model.create.assert_called_once_with(params)
        self.assertEqual(result, 555)

    def test_update(self):
        model = mock.Mock()
        entity = mock.Mock()
        entity.update_attributes.return_value = {'id': 222}
        model.find.return_value = entity
        params = {'foo': 'bar'}

        result = self.make_resource(model).update(222, params)

        model.find.assert_called_once_with(222)
        entity.update_attributes.assert_called_once_with(params)
        self.assertIs(result, entity.update_attributes.return_value)

    def test_update_missing(self):
        model = mock.Mock()
        model.find.return_value = None
        resource = self.make_resource(model)
        self.assertRaises(AttributeError, resource.update, 1, {'foo': 'bar'})

    def test_show(self):
        model = mock.Mock()
        entity = {'foo': 'bar'}
        model.find.return_value = entity
        self.assertIs(self.make_resource(model).show(999), entity)
        model.find.assert_called_once_with(999)

class TestRegistration(TestCase):

    def test_default_model_name(self):
        registration = SQLAResource.registration('project')
        self.assertEqual(registration.name, 'project')
        self.assertEqual(registration.requires, ('Project', 'view_engine'))

    def test_explicit_model_name(self):
        registration = SQLAResource.registration('task', 'TodoItem')
        self.assertEqual(registration.requires, ('TodoItem', 'view_engine'))

    def test_factory(self):
        model, view_engine = mock.Mock(), mock.Mock()
        resource = SQLAResource.registration('project').factory(
            model, view_engine)
        self.assertIsInstance(resource, SQLAResource)
        self.assertIs(resource.model, model)
        self.assertIs(resource.view_engine, view_engine)
        self.assertEqual(resource.name, 'project')

class TestResource(TestCase):

    def test_links(self):
        r = Resource('project', None)
        self.assertEqual(r.list_link(), '/project')
        self.assertEqual(r.new_link(), '/project/new')
        self.assertEqual(r.show_link(42), '/project/42')
        self.assertEqual(r.edit_link(42), '/project/42/edit')
        self.assertEqual(r.edit_link(42), r.edit_link(42))

    def test_prefix(self):
        r = Resource('project', None, prefix='/api/projects/')
        self.assertEqual(r.list_link(), '/api/projects')
        self.assertEqual(r.edit_link(5), '/api/projects/5/edit')

    def test_link_errors(self):
        r = Resource('project', None)
        self.assertRaises(LinkReversalError, r.link, 'destroy', 1)
        self.assertRaises(LinkReversalError, r.link, 'show')

    def test_http_error(self):
        e = Resource.HTTPError(404, 'Not Found')
        self.assertIsInstance(e, HTTPNotFound)
        self.assertEqual(e.detail, 'Not Found')
        self.assertRaises(ValueError, http_error, 999)

    def test_match(self):
        r = SQLAResource(mock.Mock(), 'project', None)
        self.assertEqual(r.match('GET', '/project'), ('list', ()))
        self.assertEqual(r.match('POST', '/project'), ('create', ()))
        self.assertEqual(r.match('GET', '/project/new'), ('new', ()))
        self.assertEqual(r.match('GET', '/project/1'), ('show', ('1',)))
        self.assertEqual(r.match('PUT', '/project/1'), ('update', ('1',)))
        self.assertEqual(r.match('GET', '/project/1/edit'), ('edit', ('1',)))
        self.assertRaises(MethodNotAllowed, r.match, 'DELETE', '/project/1')
        self.assertRaises(NoURLPatternMatched, r.match, 'GET', '/projects')
        self.assertEqual(r.match('GET', '/project/a/b'), ('show', ('a/b',)))
        self.assertEqual(
            r.match('GET', '/project/a/b/edit'), ('edit', ('a/b',)))

    def test_match_new_is_reserved(self):
        r = SQLAResource(mock.Mock(), 'project', None)
        self.assertRaises(MethodNotAllowed, r.match, 'PUT', '/project/new')
        self.assertRaises(
            NoURLPatternMatched, r.match, 'GET', '/project/new/edit')
        self.assertEqual(
            r.match('GET', '/project/newer'), ('show', ('newer',)))

    def test_links_quoted(self):
        r = Resource('project', None)
        self.assertEqual(r.show_link('c d'), '/project/c%20d')
        self.assertEqual(r.show_link('a/b'), '/project/a/b')
        self.assertEqual(r.edit_link('a/b'), '/project/a/b/edit')
        self.assertEqual(r.show_link('50%'), '/project/50%25')
        self.assertRaises(LinkReversalError, r.show_link, 'new')
        self.assertRaises(LinkReversalError, r.edit_link, 'new/x')

    def test_add_links(self):
        r = Resource('project', None)
        entity = SimpleNamespace(id=7, links={'self': '/x', 'show': '/old'})
        self.assertIs(r.add_links(entity), entity)
        self.assertEqual(entity.links, {
            'self': '/x',
            'edit': '/project/7/edit',
            'show': '/project/7'})

    def test_match_implemented_verbs_only(self):
        class ReadOnly(Resource):
            def show(self, id):
                return id
        r = ReadOnly('project', None)
        self.assertEqual(r.verbs, ['show'])
        self.assertEqual(r.match('GET', '/project/1'), ('show', ('1',)))
        self.assertRaises(NoURLPatternMatched, r.match, 'GET', '/project')
        self.assertRaises(MethodNotAllowed, r.match, 'PUT', '/project/1')

    def test_verbs_not_implemented(self):
        r = Resource('project', None)
        self.assertEqual(r.verbs, [])
        self.assertRaises(NotImplementedError, r.list, 1, 0)
        self.assertRaises(NotImplementedError, r.show, 1)

class TestURLPattern(TestCase):

    def test_exact(self):
        p = URLPattern('/a/b')
        self.assertTrue(p.is_exact)
        self.assertEqual(p.match('/a/b'), ())
        self.assertEqual(p.reverse(), '/a/b')
        self.assertRaises(NoURLPatternMatched, p.match, '/a/b/c')

    def test_str(self):
        p = URLPattern('/a/{id}/b')
        self.assertFalse(p.is_exact)
        self.assertEqual(p.labels, ['id'])
        self.assertEqual(p.match('/a/42/b'), ('42',))
        self.assertRaises(NoURLPatternMatched, p.match, '/a/4/2/b')

    def test_int(self):
        p = URLPattern('/a/{id:int}')
        self.assertEqual(p.match('/a/42'), (42,))
        self.assertRaises(NoURLPatternMatched, p.match, '/a/b')

    def test_path(self):
        p = URLPattern('/a/{p:path}')
        self.assertEqual(p.match('/a/42/43'), ('42/43',))

    def test_any(self):
        p = URLPattern('/a/{kind:any(aaa, bbb)}')
        self.assertEqual(p.match('/a/aaa'), ('aaa',))
        self.assertEqual(p.match('/a/bbb'), ('bbb',))
        self.assertRaises(NoURLPatternMatched, p.match, '/a/ccc')

    def test_reverse(self):
        p = URLPattern('news/{id:int}/comments/{cid}')
        self.assertEqual(p.reverse(42, 'x'), '/news/42/comments/x')
        self.assertRaises(LinkReversalError, p.reverse, 42)

    def test_reverse_quotes(self):
        self.assertEqual(URLPattern('/t/{id}').reverse('c d'), '/t/c%20d')
        self.assertEqual(URLPattern('/t/{id}').reverse('a?b'), '/t/a%3Fb')
        self.assertEqual(
            URLPattern('/t/{p:path}').reverse('a b/c'), '/t/a%20b/c')

    def test_reverse_unmatchable(self):
        self.assertRaises(LinkReversalError, URLPattern('/t/{id}').reverse, 'a/b')
        self.assertRaises(
            LinkReversalError, URLPattern('/t/{id:int}').reverse, 'abc')

    def test_path_exclude(self):
        p = URLPattern('/t/{id:path(exclude=new)}')
        self.assertEqual(p.match('/t/newer'), ('newer',))
        self.assertEqual(p.match('/t/a/new'), ('a/new',))
        self.assertRaises(NoURLPatternMatched, p.match, '/t/new')
        self.assertRaises(NoURLPatternMatched, p.match, '/t/new/x')
        self.assertRaises(LinkReversalError, p.reverse, 'new')

    def test_invalid(self):
        self.assertRaises(InvalidURLPattern, URLPattern, '/a/{p:path(x)}')
        self.assertRaises(InvalidURLPattern, URLPattern, '/a/{id:float}')
        self.assertRaises(InvalidURLPattern, URLPattern, '/a/{id:int(1)}')
        self.assertRaises(InvalidURLPattern, URLPattern, '/a/{id:any()}')

class TestPagination(TestCase):

    def test_defaults(self):
        params = pagination()(Request.blank('/'))
        self.assertEqual(params, {'limit': 20, 'offset': 0})

    def test_values(self):
        params = pagination()(Request.blank('/?limit=5&offset=10'))
        self.assertEqual(params, {'limit': 5, 'offset': 10})

    def test_invalid(self):
        guard = pagination(max_limit=50)
        for qs in ('limit=0', 'limit=51', 'limit=abc', 'offset=-1'):
            self.assertRaises(HTTPBadRequest, guard, Request.blank('/?' + qs))

class TestModel(DatabaseTestCase):

    def setUp(self):
        super(TestModel, self).setUp()
        self.model = Model(Project, self.session)

    def test_find_and_count_all(self):
        result = self.model.find_and_count_all(limit=2, offset=1)
        self.assertEqual(result['count'], 3)
        self.assertEqual([r.title for r in result['rows']], ['beta', 'gamma'])

    def test_find_and_count_all_unpaged(self):
        result = self.model.find_and_count_all()
        self.assertEqual(len(result['rows']), 3)

    def test_find(self):
        self.assertEqual(self.model.find(1).title, 'alpha')
        self.assertEqual(self.model.find('2').title, 'beta')
        self.assertIsNone(self.model.find(99))
        self.assertIsNone(self.model.find('abc'))

    def test_build(self):
        project = self.model.build()
        self.assertIsInstance(project, Project)
        self.assertIsNone(project.id)
        self.assertNotIn(project, self.session)

    def test_create(self):
        project = self.model.create({'title': 'delta'})
        self.assertEqual(project.id, 4)
        self.assertEqual(self.model.find_and_count_all()['count'], 4)

    def test_create_invalid(self):
        self.assertRaises(TypeError, self.model.create, {'nope': 1})

    def test_update_attributes(self):
        project = self.model.find(1)
        self.assertIs(project.update_attributes({'title': 'omega'}), project)
        self.session.expire_all()
        self.assertEqual(self.model.find(1).title, 'omega')

    def test_update_attributes_invalid(self):
        project = self.model.find(1)
        self.assertRaises(TypeError, project.update_attributes, {'nope': 1})
        self.assertEqual(project.title, 'alpha')

class TestResourceApp(DatabaseTestCase):

    def setUp(self):
        super(TestResourceApp, self).setUp()
        self.resource = SQLAResource(
            Model(Project, self.session), 'projects', JSONViewEngine())
        self.app = ResourceApp(self.resource)

    def get(self, url, **kw):
        return Request.blank(url, **kw).get_response(self.app)

    def test_list(self):
        res = self.get('/projects?limit=2&offset=1')
        self.assertEqual(res.status_int, 200)
        self.assertEqual(res.content_type, 'application/json')
        self.assertEqual(res.json, {
            'rows': [
                {'id': 2, 'title': 'beta', 'links': {
                    'edit': '/projects/2/edit', 'show': '/projects/2'}},
                {'id': 3, 'title': 'gamma', 'links': {
                    'edit': '/projects/3/edit', 'show': '/projects/3'}},
            ],
            'count': 3,
            'limit': 2,
            'offset': 1})

    def test_list_invalid_pagination(self):
        self.assertEqual(self.get('/projects?offset=-1').status_int, 400)
        self.assertEqual(self.get('/projects?limit=1000').status_int, 400)

    def test_new(self):
        res = self.get('/projects/new')
        self.assertEqual(res.status_int, 200)
        self.assertEqual(res.json, {'id': None, 'title': None})

    def test_show(self):
        res = self.get('/projects/1')
        self.assertEqual(res.status_int, 200)
        self.assertEqual(res.json['title'], 'alpha')

    def test_show_missing(self):
        self.assertEqual(self.get('/projects/99').status_int, 404)
        self.assertEqual(self.get('/projects/abc').status_int, 404)

    def test_edit(self):
        self.assertEqual(self.get('/projects/1/edit').status_int, 200)
        self.assertEqual(self.get('/projects/99/edit').status_int, 404)

    def test_create_form(self):
        res = self.get('/projects', POST={'title': 'delta'})
        self.assertEqual(res.status_int, 303)
        self.assertTrue(res.location.endswith('/projects/4'))
        self.assertEqual(self.session.get(Project, 4).title, 'delta')

    def test_create_json(self):
        res = self.get('/projects', method='POST',
            content_type='application/json',
            body=json.dumps({'title': 'epsilon'}).encode('utf-8'))
        self.assertEqual(res.status_int, 303)
        self.assertEqual(self.session.get(Project, 4).title, 'epsilon')

    def test_update_method_override(self):
        res = self.get('/projects/1', POST={'_method': 'PUT', 'title': 'omega'})
        self.assertEqual(res.status_int, 303)
        self.assertTrue(res.location.endswith('/projects/1'))
        self.session.expire_all()
        self.assertEqual(self.session.get(Project, 1).title, 'omega')

    def test_update_json(self):
        res = self.get('/projects/2', method='PUT',
            content_type='application/json',
            body=json.dumps({'title': 'zeta'}).encode('utf-8'))
        self.assertEqual(res.status_int, 303)
        self.session.expire_all()
        self.assertEqual(self.session.get(Project, 2).title, 'zeta')

    def test_invalid_json(self):
        for body in (b'{not json', b'[1, 2]', b'"title"', b'\xff'):
            res = self.get('/projects', method='POST',
                content_type='application/json', body=body)
            self.assertEqual(res.status_int, 400)
        res = self.get('/projects/1', method='PUT',
            content_type='application/json', body=b'{not json')
        self.assertEqual(res.status_int, 400)
        self.assertEqual(self.session.get(Project, 1).title, 'alpha')
        self.assertEqual(Model(Project, self.session).find_and_count_all(
            )['count'], 3)

    def test_show_links(self):
        links = {'edit': '/projects/1/edit', 'show': '/projects/1'}
        self.assertEqual(self.get('/projects/1').json['links'], links)
        self.get('/projects')
        self.assertEqual(self.get('/projects/1').json['links'], links)

    def test_head(self):
        res = self.get('/projects/1', method='HEAD')
        self.assertEqual(res.status_int, 200)
        self.assertEqual(res.body, b'')
        self.assertEqual(self.get('/projects', method='HEAD').status_int, 200)
        self.assertEqual(
            self.get('/projects/99', method='HEAD').status_int, 404)

    def test_no_match(self):
        self.assertEqual(self.get('/tasks').status_int, 404)
        self.assertEqual(
            self.get('/projects/1', method='DELETE').status_int, 405)
        self.assertEqual(
            self.get('/projects/new', method='PUT').status_int, 405)
        self.assertEqual(self.get('/projects/new/edit').status_int, 404)

    def test_string_ids(self):
        self.session.add_all([
            Tag(id='a/b', label='slash'),
            Tag(id='c d', label='space')])
        self.session.commit()
        app = ResourceApp(SQLAResource(
            Model(Tag, self.session), 'tags', JSONViewEngine()))

        rows = Request.blank('/tags').get_response(app).json['rows']
        self.assertEqual(
            [row['links']['show'] for row in rows],
            ['/tags/a/b', '/tags/c%20d'])
        for row in rows:
            res = Request.blank(row['links']['show']).get_response(app)
            self.assertEqual(res.status_int, 200)
            self.assertEqual(res.json['id'], row['id'])
            res = Request.blank(row['links']['edit']).get_response(app)
            self.assertEqual(res.status_int, 200)

    def test_several_resources(self):
        other = SQLAResource(mock.Mock(), 'tasks', JSONViewEngine())
        other.model.find_and_count_all.return_value = {'rows': [], 'count': 0}
        app = ResourceApp(self.resource, other)
        res = Request.blank('/tasks').get_response(app)
        self.assertEqual(res.json,
            {'rows': [], 'count': 0, 'limit': 20, 'offset': 0})

    def test_unknown_option(self):
        self.assertRaises(TypeError, ResourceApp, self.resource, page_size=5)

class TestTemplateViewEngine(DatabaseTestCase):

    templates = {
        'project/list.html':
            '{% for row in result.rows %}'
            '<a href="{{ row.links.show }}">{{ row.title }}</a>'
            '{% endfor %}',
        'project/new.html': '<form action="{{ resource.list_link() }}">',
        'project/edit.html': 'edit {{ resource.show(id).title }}',
        'project/show.html': '<h1>{{ result.title }}</h1>',
    }

    def setUp(self):
        super(TestTemplateViewEngine, self).setUp()
        view_engine = TemplateViewEngine(
            loader=jinja2.DictLoader(self.templates))
        self.app = ResourceApp(SQLAResource(
            Model(Project, self.session), 'project', view_engine))

    def get(self, url):
        return Request.blank(url).get_response(self.app)

    def test_list(self):
        res = self.get('/project?limit=1')
        self.assertEqual(res.content_type, 'text/html')
        self.assertEqual(res.text, '<a href="/project/1">alpha</a>')

    def test_new(self):
        self.assertEqual(self.get('/project/new').text,
            '<form action="/project">')

    def test_edit(self):
        self.assertEqual(self.get('/project/2/edit').text, 'edit beta')

    def test_show_escapes(self):
        self.session.add(Project(title='<b>'))
        self.session.commit()
        self.assertEqual(self.get('/project/4').text, '<h1>&lt;b&gt;</h1>')

    def test_requires_loader(self):
        self.assertRaises(ValueError, TemplateViewEngine)

class TestJSONViewEngine(TestCase):

    def test_render(self):
        engine = JSONViewEngine(sort_keys=True)
        self.assertEqual(
            engine.render('x.html', result={'b': 1, 'a': [1, 2]}),
            '{"a": [1, 2], "b": 1}')

    def test_mapped_instance(self):
        project = Project(id=1, title='alpha')
        self.assertEqual(
            json.loads(JSONViewEngine().render('x.html', result=project)),
            {'id': 1, 'title': 'alpha'})

    def test_not_serializable(self):
        self.assertRaises(
            TypeError, JSONViewEngine().render, 'x.html', result=object())

class TestRegistry(TestCase):

    def test_resolve(self):
        model, view_engine = mock.Mock(), mock.Mock()
        registry = Registry(Project=model, view_engine=view_engine)
        resource = registry.resolve(project_registration)
        self.assertIs(resource.model, model)
        self.assertIs(resource.view_engine, view_engine)
        self.assertIs(registry.get('project'), resource)

    def test_resolve_order(self):
        factory = mock.Mock()
        registry = Registry(a=1, b=2)
        registry.resolve(Registration('r', ('b', 'a'), factory))
        factory.assert_called_once_with(2, 1)

    def test_resolve_missing(self):
        registry = Registry(view_engine=mock.Mock())
        self.assertRaises(
            ResourceConfigurationError, registry.resolve, project_registration)

    def test_resolve_twice(self):
        registry = Registry(Project=mock.Mock(), view_engine=mock.Mock())
        registry.resolve(project_registration)
        self.assertRaises(
            ResourceConfigurationError, registry.resolve, project_registration)

    def test_provide(self):
        registry = Registry()
        registry.provide('Project', mock.Mock())
        registry.provide('view_engine', mock.Mock())
        self.assertIsInstance(
            registry.resolve(project_registration), SQLAResource)

    def test_include(self):
        registry = Registry(Project=mock.Mock(), view_engine=mock.Mock())
        resource = registry.include('sqlaresource.tests:project_registration')
        self.assertEqual(resource.name, 'project')
        self.assertRaises(ResourceConfigurationError,
            registry.include, 'sqlaresource.tests:Project')

    def test_plug(self):
        ep = SimpleNamespace(name='projects', load=lambda: project_registration)
        registry = Registry(Project=mock.Mock(), view_engine=mock.Mock())
        with mock.patch('sqlaresource.registry.entry_points',
                return_value=[ep]) as entry_points:
            resources = registry.plug('projects')
        entry_points.assert_called_once_with(
            group='sqlaresource', name='projects')
        self.assertEqual([r.name for r in resources], ['project'])

    def test_plug_not_registration(self):
        ep = SimpleNamespace(name='projects', load=lambda: object())
        with mock.patch('sqlaresource.registry.entry_points',
                return_value=[ep]):
            self.assertRaises(
                ResourceConfigurationError, Registry().plug, 'projects')

    def test_app(self):
        registry = Registry(Project=mock.Mock(), view_engine=mock.Mock())
        resource = registry.resolve(project_registration)
        app = registry.app(default_limit=5)
        self.assertIsInstance(app, ResourceApp)
        self.assertEqual(app.resources, [resource])

class TestImportString(TestCase):

    def test_import(self):
        self.assertIs(import_string('sqlaresource.tests:Project'), Project)
        self.assertIs(import_string('sqlaresource.tests.Project'), Project)

    def test_import_error(self):
        self.assertRaises(
            ImportStringError, import_string, 'sqlaresource.nonexistent:x')
