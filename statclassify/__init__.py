"""SVM and neural-network classification models with a statistics-toolbox style API."""

import logging

from statclassify.api import *  # noqa: F401,F403
from statclassify.api import __all__  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
