# examples.py

from wsgiref.simple_server import make_server

from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Session

from sqlaresource import (
    Model, SQLAResource, UpdateAttributesMixin, Registry, JSONViewEngine)

class Base(DeclarativeBase):
    pass

class Project(UpdateAttributesMixin, Base):
    """ project"""
    __tablename__ = 'projects'

    id = Column(Integer, primary_key=True)
    title = Column(String(100), nullable=False)

engine = create_engine('sqlite://')
Base.metadata.create_all(engine)
session = Session(engine)

registry = Registry(
    Project=Model(Project, session),
    view_engine=JSONViewEngine(indent=2))
registry.resolve(SQLAResource.registration('project'))

app = registry.app()

if __name__ == '__main__':
    make_server('localhost', 8000, app).serve_forever()
