# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import create
from . import commit
from . import checkout
from . import delete
from . import status
from . import log
from . import show
from . import config
from . import unsupported
