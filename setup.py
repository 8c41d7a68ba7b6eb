from setuptools import setup, find_packages
import simplepas


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='simplepas',
    description="An interpreter for a small Pascal-like language implemented in pure Python",
    long_description=long_description,
    version=simplepas.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    package_data={'': ["*.rst"]},
    entry_points={
        'console_scripts': [
            'simplepas-run = simplepas.cli.run:run',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Pascal',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
    ]
)
