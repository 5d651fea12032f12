"""
In-Memory Storage Backend

Dict-backed repositories with the same contract as the SQL backend. Used
for local demos (STORAGE_BACKEND=memory) and for contract tests. Rows are
deep-copied in and out so callers never share mutable state with the store.
"""

import copy
import threading

from eventforge.storage.base import (
    ContactRepository,
    PortfolioRepository,
    Repository,
    SessionStore,
    Storage,
    TestimonialRepository,
    UserRepository,
)
from eventforge.storage.errors import ConflictError
from eventforge.utils import utcnow


class MemoryRepository(Repository):

    def __init__(self):
        self._rows = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def server_defaults(self):
        """Values the store assigns on create, after the payload."""
        return {}

    def check_unique(self, row, exclude_id=None):
        pass

    def list(self):
        with self._lock:
            return [copy.deepcopy(self._rows[key]) for key in sorted(self._rows)]

    def get(self, entity_id):
        with self._lock:
            row = self._rows.get(entity_id)
            return copy.deepcopy(row) if row is not None else None

    def create(self, payload):
        with self._lock:
            row = {field: None for field in self.fields}
            row.update(copy.deepcopy(self.defaults))
            row.update(copy.deepcopy(self.writable(payload)))
            row.update(self.server_defaults())
            self.check_unique(row)
            row['id'] = self._next_id
            self._next_id += 1
            self._rows[row['id']] = row
            return copy.deepcopy(row)

    def update(self, entity_id, changes):
        with self._lock:
            row = self._rows.get(entity_id)
            if row is None:
                return None
            updated = dict(row)
            updated.update(copy.deepcopy(self.writable(changes)))
            self.check_unique(updated, exclude_id=entity_id)
            self._rows[entity_id] = updated
            return copy.deepcopy(updated)

    def delete(self, entity_id):
        with self._lock:
            self._rows.pop(entity_id, None)
        return True


class MemoryUserRepository(MemoryRepository, UserRepository):

    def check_unique(self, row, exclude_id=None):
        for other in self._rows.values():
            if other['id'] != exclude_id and other['username'] == row['username']:
                raise ConflictError('Username already exists', field='username')

    def get_by_username(self, username):
        with self._lock:
            for row in self._rows.values():
                if row['username'] == username:
                    return copy.deepcopy(row)
        return None

    def update(self, entity_id, changes):
        return UserRepository.update(self, entity_id, changes)

    def delete(self, entity_id):
        with self._lock:
            return self._rows.pop(entity_id, None) is not None


class MemoryPortfolioRepository(MemoryRepository, PortfolioRepository):
    pass


class MemoryTestimonialRepository(MemoryRepository, TestimonialRepository):
    pass


class MemoryContactRepository(MemoryRepository, ContactRepository):

    def server_defaults(self):
        return {'created_at': utcnow(), 'read': False}

    def mark_read(self, entity_id):
        with self._lock:
            row = self._rows.get(entity_id)
            if row is None:
                return None
            row['read'] = True
            return copy.deepcopy(row)


class MemorySessionStore(SessionStore):

    def __init__(self):
        self._sessions = {}
        self._lock = threading.Lock()

    def load(self, sid):
        with self._lock:
            entry = self._sessions.get(sid)
            if entry is None:
                return None
            data, expires_at = entry
            if expires_at <= utcnow():
                del self._sessions[sid]
                return None
            return copy.deepcopy(data)

    def save(self, sid, data, expires_at):
        with self._lock:
            self._sessions[sid] = (copy.deepcopy(dict(data)), expires_at)

    def delete(self, sid):
        with self._lock:
            self._sessions.pop(sid, None)

    def purge_expired(self):
        now = utcnow()
        with self._lock:
            expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at <= now]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)


class MemoryStorage(Storage):
    backend = 'memory'

    def __init__(self):
        super().__init__(
            users=MemoryUserRepository(),
            portfolio=MemoryPortfolioRepository(),
            testimonials=MemoryTestimonialRepository(),
            contacts=MemoryContactRepository(),
            sessions=MemorySessionStore(),
        )
