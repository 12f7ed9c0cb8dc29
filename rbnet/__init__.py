from rbnet.errors import *
from rbnet.utils import *
from rbnet.boolean_function import *
from rbnet.wiring_diagram import *
from rbnet.boolean_network import *
from rbnet.generate import *

try:
    from rbnet._version import __version__
except ImportError:
    __version__ = 'unknown'
