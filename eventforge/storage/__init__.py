"""
Storage Package

Picks the repository backend for an application and hands it to request
handlers. Routes call ``get_storage()`` instead of importing a concrete store.
"""

from flask import current_app

from eventforge.storage.base import Storage
from eventforge.storage.errors import ConflictError, StoreError, StoreUnavailableError

EXTENSION_KEY = 'eventforge.storage'


def build_storage(backend):
    """Create the ``Storage`` bundle for ``backend`` ('sql' or 'memory')."""
    if backend == 'sql':
        from eventforge.storage.sql import SqlStorage
        return SqlStorage()
    if backend == 'memory':
        from eventforge.storage.memory import MemoryStorage
        return MemoryStorage()
    raise ValueError(f'Unknown STORAGE_BACKEND {backend!r}; expected sql or memory')


def init_storage(app, storage=None):
    """Attach a storage bundle to ``app``, building one from config if needed."""
    if storage is None:
        storage = build_storage(app.config['STORAGE_BACKEND'])
    app.extensions[EXTENSION_KEY] = storage
    return storage


def get_storage():
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'Storage',
    'StoreError',
    'ConflictError',
    'StoreUnavailableError',
    'build_storage',
    'init_storage',
    'get_storage',
]
