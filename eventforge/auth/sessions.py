"""
Server-Side Sessions

A Flask ``SessionInterface`` that keeps session data in a ``SessionStore``
and puts only a signed session id in the cookie. Installed by the factory
when AUTH_STRATEGY is 'session' or 'hybrid'.
"""

import logging
import secrets
from datetime import timedelta

from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

from eventforge.storage.errors import StoreError
from eventforge.utils import utcnow

logger = logging.getLogger(__name__)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict that remembers its id and whether it changed."""

    def __init__(self, initial=None, sid=None, new=False):
        def on_update(session):
            session.modified = True

        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False
        # Set when the store could not be read for this request
        self.store_unavailable = False


class ServerSideSessionInterface(SessionInterface):

    salt = 'eventforge-session-id'

    def __init__(self, store):
        self.store = store

    def _signer(self, app):
        return Signer(app.secret_key, salt=self.salt)

    def _new_session(self):
        return ServerSideSession(sid=secrets.token_urlsafe(32), new=True)

    def _lifetime(self, app):
        lifetime = app.permanent_session_lifetime
        if isinstance(lifetime, timedelta):
            return lifetime
        return timedelta(seconds=int(lifetime))

    def open_session(self, app, request):
        cookie = request.cookies.get(self.get_cookie_name(app))
        if not cookie:
            return self._new_session()

        try:
            sid = self._signer(app).unsign(cookie).decode('utf-8')
        except BadSignature:
            logger.info('Ignoring session cookie with a bad signature')
            return self._new_session()

        try:
            data = self.store.load(sid)
        except StoreError as exc:
            logger.warning('Session store unavailable: %s', exc.message)
            session = ServerSideSession(sid=sid)
            session.store_unavailable = True
            return session

        if data is None:
            return self._new_session()
        return ServerSideSession(data, sid=sid)

    def save_session(self, app, session, response):
        if session.store_unavailable:
            return

        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            if session.modified and not session.new:
                try:
                    self.store.delete(session.sid)
                except StoreError as exc:
                    logger.warning('Could not delete session: %s', exc.message)
                response.delete_cookie(name, domain=domain, path=path)
            return

        if not self.should_set_cookie(app, session):
            return

        try:
            self.store.save(session.sid, dict(session), utcnow() + self._lifetime(app))
        except StoreError as exc:
            logger.error('Could not persist session: %s', exc.message)
            return

        response.set_cookie(
            name,
            self._signer(app).sign(session.sid).decode('utf-8'),
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )


def rotate_session_id(session, interface):
    """Give ``session`` a fresh id, dropping the stored copy under the old one."""
    if not isinstance(session, ServerSideSession):
        return
    old_sid = session.sid
    session.sid = secrets.token_urlsafe(32)
    session.modified = True
    if not session.new:
        interface.store.delete(old_sid)
