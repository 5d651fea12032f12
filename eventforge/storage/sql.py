"""
SQL Storage Backend

Repositories over Flask-SQLAlchemy. SQLAlchemy exceptions are translated
into the storage error types by class so the route layer can tell a
duplicate (409) from an outage (503) from anything else (500).
"""

import logging
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)

from eventforge.extensions import db
from eventforge.models import AuthSession, ContactSubmission, PortfolioItem, Testimonial, User
from eventforge.storage.base import (
    ContactRepository,
    PortfolioRepository,
    Repository,
    SessionStore,
    Storage,
    TestimonialRepository,
    UserRepository,
)
from eventforge.storage.errors import ConflictError, StoreError, StoreUnavailableError
from eventforge.utils import as_utc, utcnow

logger = logging.getLogger(__name__)

_UNAVAILABLE = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)

# Largest value a BIGINT primary key can hold
MAX_ID = 2 ** 63 - 1


def _storable_id(entity_id):
    return -MAX_ID - 1 <= entity_id <= MAX_ID


def _rollback():
    try:
        db.session.rollback()
    except SQLAlchemyError as exc:
        logger.warning('Rollback failed: %s', exc.__class__.__name__)


@contextmanager
def translate_errors(action, conflict_message='Resource already exists'):
    """Re-raise SQLAlchemy failures inside the block as storage errors."""
    try:
        yield
    except IntegrityError as exc:
        _rollback()
        logger.info('Integrity violation while trying to %s', action)
        raise ConflictError(conflict_message) from exc
    except _UNAVAILABLE as exc:
        _rollback()
        logger.error('Database unavailable while trying to %s: %s', action, exc.__class__.__name__)
        raise StoreUnavailableError() from exc
    except SQLAlchemyError as exc:
        _rollback()
        logger.error('Database error while trying to %s: %s', action, exc.__class__.__name__)
        raise StoreError(f'Failed to {action}') from exc


class SqlRepository(Repository):
    """Generic CRUD over one mapped model."""

    model = None
    conflict_message = 'Resource already exists'

    def _guard(self, action):
        return translate_errors(f'{action} {self.entity}', self.conflict_message)

    def list(self):
        with self._guard('list'):
            rows = db.session.execute(
                db.select(self.model).order_by(self.model.id)
            ).scalars().all()
            return [row.to_dict() for row in rows]

    def get(self, entity_id):
        if not _storable_id(entity_id):
            return None
        with self._guard('fetch'):
            row = db.session.get(self.model, entity_id)
            return row.to_dict() if row is not None else None

    def create(self, payload):
        with self._guard('create'):
            values = dict(self.defaults)
            values.update(self.writable(payload))
            row = self.model(**values)
            db.session.add(row)
            db.session.commit()
            return row.to_dict()

    def update(self, entity_id, changes):
        if not _storable_id(entity_id):
            return None
        with self._guard('update'):
            row = db.session.get(self.model, entity_id)
            if row is None:
                return None
            for key, value in self.writable(changes).items():
                setattr(row, key, value)
            db.session.commit()
            return row.to_dict()

    def _delete_rows(self, entity_id):
        if not _storable_id(entity_id):
            return 0
        with self._guard('delete'):
            result = db.session.execute(
                db.delete(self.model).where(self.model.id == entity_id)
            )
            db.session.commit()
            return result.rowcount

    def delete(self, entity_id):
        self._delete_rows(entity_id)
        return True


class SqlUserRepository(SqlRepository, UserRepository):
    model = User
    conflict_message = 'Username already exists'

    def get_by_username(self, username):
        with self._guard('fetch'):
            row = db.session.execute(
                db.select(User).filter_by(username=username)
            ).scalar_one_or_none()
            return row.to_dict() if row is not None else None

    def update(self, entity_id, changes):
        return UserRepository.update(self, entity_id, changes)

    def delete(self, entity_id):
        return self._delete_rows(entity_id) > 0


class SqlPortfolioRepository(SqlRepository, PortfolioRepository):
    model = PortfolioItem


class SqlTestimonialRepository(SqlRepository, TestimonialRepository):
    model = Testimonial


class SqlContactRepository(SqlRepository, ContactRepository):
    model = ContactSubmission

    def mark_read(self, entity_id):
        if not _storable_id(entity_id):
            return None
        with self._guard('update'):
            row = db.session.get(ContactSubmission, entity_id)
            if row is None:
                return None
            if not row.read:
                row.read = True
                db.session.commit()
            return row.to_dict()


class SqlSessionStore(SessionStore):
    """Session payloads in the ``auth_sessions`` table."""

    def load(self, sid):
        with translate_errors('load session'):
            row = db.session.get(AuthSession, sid)
            if row is None:
                return None
            if as_utc(row.expires_at) <= utcnow():
                db.session.delete(row)
                db.session.commit()
                return None
            return dict(row.data or {})

    def save(self, sid, data, expires_at):
        with translate_errors('save session'):
            row = db.session.get(AuthSession, sid)
            if row is None:
                row = AuthSession(sid=sid)
                db.session.add(row)
            row.data = dict(data)
            row.expires_at = expires_at
            db.session.commit()

    def delete(self, sid):
        with translate_errors('delete session'):
            db.session.execute(db.delete(AuthSession).where(AuthSession.sid == sid))
            db.session.commit()

    def purge_expired(self):
        with translate_errors('purge sessions'):
            result = db.session.execute(
                db.delete(AuthSession).where(AuthSession.expires_at <= utcnow())
            )
            db.session.commit()
            return result.rowcount


class SqlStorage(Storage):
    backend = 'sql'

    def __init__(self):
        super().__init__(
            users=SqlUserRepository(),
            portfolio=SqlPortfolioRepository(),
            testimonials=SqlTestimonialRepository(),
            contacts=SqlContactRepository(),
            sessions=SqlSessionStore(),
        )

    def ping(self):
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as exc:
            _rollback()
            logger.warning('Database ping failed: %s', exc.__class__.__name__)
            return False
