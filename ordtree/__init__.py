from .version import __version__
from .tree import OrderedTree
