from setuptools import setup, find_packages

setup(
    name='bash-bundler',
    version='0.1.0',
    description='Bundles bash scripts and their imports into a single file',
    py_modules=['bash_bundler', 'resolver'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.11',
    install_requires=[
        'lark',
        'pydantic>=2',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'bash-bundler = bash_bundler:main',
        ],
    },
)
