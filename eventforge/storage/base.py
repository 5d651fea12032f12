"""
Repository Contracts

Every backend implements the same per-entity CRUD contract so routes and
tests never depend on the concrete store. Rows travel as plain dicts keyed
by snake_case field name.

Shared semantics:

- ``list()`` returns every row ordered by id, ``[]`` when empty.
- ``get(id)`` returns the row or ``None``.
- ``create(payload)`` assigns the id and server defaults and returns the row.
- ``update(id, partial)`` changes only the supplied fields; ``None`` if absent.
- ``delete(id)`` is idempotent and reports ``True`` even when nothing was
  there. ``UserRepository.delete`` is the exception: it returns ``False``
  for a missing row so the admin route can answer 404.

Backends raise ``ConflictError``, ``StoreUnavailableError`` or
``StoreError`` from ``eventforge.storage.errors``.
"""

from abc import ABC, abstractmethod

from eventforge.storage.errors import StoreError


class Repository(ABC):
    entity = 'resource'
    fields = ('id',)
    # Assigned by the store; never taken from a payload
    protected_fields = ('id',)
    defaults = {}

    def writable(self, payload):
        """Keep only the payload keys a client is allowed to set."""
        return {
            key: value for key, value in payload.items()
            if key in self.fields and key not in self.protected_fields
        }

    @abstractmethod
    def list(self):
        raise NotImplementedError

    @abstractmethod
    def get(self, entity_id):
        raise NotImplementedError

    @abstractmethod
    def create(self, payload):
        raise NotImplementedError

    @abstractmethod
    def update(self, entity_id, changes):
        raise NotImplementedError

    @abstractmethod
    def delete(self, entity_id):
        raise NotImplementedError


class UserRepository(Repository):
    entity = 'user'
    fields = ('id', 'username', 'password_hash')

    @abstractmethod
    def get_by_username(self, username):
        raise NotImplementedError

    def update(self, entity_id, changes):
        """Accounts are immutable; only create and delete exist."""
        raise StoreError('Users cannot be updated')


class PortfolioRepository(Repository):
    entity = 'portfolio item'
    fields = (
        'id', 'title', 'category', 'venue', 'image_url', 'description',
        'overview', 'role', 'results', 'tags', 'featured',
    )
    defaults = {'venue': None, 'featured': False}


class TestimonialRepository(Repository):
    entity = 'testimonial'
    fields = ('id', 'rating', 'content', 'author', 'position', 'avatar_initials')


class ContactRepository(Repository):
    entity = 'contact submission'
    fields = ('id', 'name', 'email', 'phone', 'event_type', 'message', 'created_at', 'read')
    protected_fields = ('id', 'created_at', 'read')
    defaults = {'phone': None, 'event_type': None}

    @abstractmethod
    def mark_read(self, entity_id):
        raise NotImplementedError


class SessionStore(ABC):
    """Persistence for server-side session payloads keyed by session id."""

    @abstractmethod
    def load(self, sid):
        """Return the session data, or ``None`` when missing or expired."""
        raise NotImplementedError

    @abstractmethod
    def save(self, sid, data, expires_at):
        raise NotImplementedError

    @abstractmethod
    def delete(self, sid):
        raise NotImplementedError

    @abstractmethod
    def purge_expired(self):
        """Delete expired sessions and return how many were removed."""
        raise NotImplementedError


class Storage:
    """Bundle of repositories for one backend, attached to the app."""

    backend = None

    def __init__(self, users, portfolio, testimonials, contacts, sessions):
        self.users = users
        self.portfolio = portfolio
        self.testimonials = testimonials
        self.contacts = contacts
        self.sessions = sessions

    def ping(self):
        """Return True when the backing store answers."""
        return True
