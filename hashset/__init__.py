from .version import __version__
from .hash_set import HashSet, SupportsLessThan, sorted_items
