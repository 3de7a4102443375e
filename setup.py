from setuptools import find_packages, setup


version = '0.1.0'


setup(
    name='sqlaresource',
    version=version,
    description='SQLAlchemy models as REST resources',
    long_description=open('README').read() + '\n\n' + open('CHANGES').read(),
    license='BSD',
    packages=find_packages(exclude=['ez_setup', 'examples', 'tests']),
    install_requires=[
        'WebOb >= 1.8',
        'colander >= 1.8',
        'SQLAlchemy >= 2.0',
        'Jinja2 >= 3.0',
        'structlog >= 21.1',
    ],
    include_package_data=True,
    test_suite='sqlaresource.tests',
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
        'Topic :: Database',
    ],
    keywords='sqlalchemy rest resource webob wsgi')
