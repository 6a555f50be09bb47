# flake8: noqa
from .set import Set
from .hash_set import HashSet
from importlib.metadata import metadata

meta = metadata("pyset")
__version__ = meta["Version"]
__author__ = meta.get("Author", "")
__license__ = meta.get("License", "")
__email__ = meta.get("Author-email", "")
__program_name__ = meta["Name"]


__all__ = [
    "Set",
    "HashSet",
]
