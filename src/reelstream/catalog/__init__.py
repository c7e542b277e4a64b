from reelstream.catalog.engine import DEFAULT_DATABASE_URL, get_engine
from reelstream.catalog.memory import InMemoryMediaCatalog
from reelstream.catalog.sqlite import SqliteMediaCatalog

__all__ = [
    "DEFAULT_DATABASE_URL",
    "InMemoryMediaCatalog",
    "SqliteMediaCatalog",
    "get_engine",
]
