from setuptools import setup

setup(
    name='yamlsplit',
    version='1.0.0',
    packages=['yamlsplit'],
    license='Mozilla Public License Version 2.0',
    description='Split a stream of YAML documents into one numbered file per document',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.6',
    install_requires=['psutil', 'ipython'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": ["yamlsplit=yamlsplit.__main__:main"]
    }
)
