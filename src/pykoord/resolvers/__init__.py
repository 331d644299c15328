"""Name resolvers: CRS names to raw PROJ.4 parameter strings."""

from pykoord.resolvers.base import NameResolver, split_name
from pykoord.resolvers.chain import ChainResolver, default_resolver
from pykoord.resolvers.database import PyprojResolver
from pykoord.resolvers.initfile import InitFileResolver, read_init_file
from pykoord.resolvers.mapping import MappingResolver

__all__ = [
    "NameResolver",
    "ChainResolver",
    "InitFileResolver",
    "MappingResolver",
    "PyprojResolver",
    "default_resolver",
    "read_init_file",
    "split_name",
]
