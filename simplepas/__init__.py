""" A front end and tree walking interpreter for a small Pascal-like
language, implemented in pure Python.

Example usage:

>>> import io
>>> from simplepas.api import run_pascal
>>> out = io.StringIO()
>>> run_pascal(io.StringIO("program p; begin writeln('hi') end."), stdout=out)
>>> out.getvalue()
'hi\\n'

"""

import sys

# Define version here. Used in the command line tools and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))


# Assert python version:
assert sys.version_info.major == 3, "Needs to be run in python version 3.x"
