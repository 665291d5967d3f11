# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup
from Cython.Build import cythonize

modules = [\
    "b32alphabet",
    "b32consts",
    "b32decoder",
    "b32encoder",
    "b32error",
    "mutil"\
]

setup(
    name = 'b32codec',
    version = '0.1.0',
    description = 'RFC 4648 base32 codec with pluggable alphabets.',
    license = 'GPL v2',
    python_requires = '>=3.8',
    py_modules = modules + ["base32", "b32tool", "llog"],
    ext_modules = cythonize(\
        [x + ".py" for x in modules],
        compiler_directives = {"language_level": 3}),
    extras_require = {"test": ["pytest"]},
    entry_points = {"console_scripts": ["b32tool = b32tool:main"]}
)
