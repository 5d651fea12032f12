"""
EventForge API - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
import secrets
import time
from datetime import timedelta

from flask import Flask, g, jsonify, request
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from eventforge.config import config_for_env
from eventforge.errors import register_error_handlers
from eventforge.extensions import db, login_manager
from eventforge.storage import get_storage, init_storage
from eventforge.storage.errors import StoreError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def create_app(config_class=None, storage=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: picked from APP_ENV)
        storage: Pre-built ``Storage`` bundle; built from STORAGE_BACKEND if omitted

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class or config_for_env())

    logging.basicConfig(level=app.config['LOG_LEVEL'], format=LOG_FORMAT)
    _ensure_secrets(app)
    _configure_engine(app)
    app.permanent_session_lifetime = timedelta(hours=app.config['SESSION_LIFETIME_HOURS'])

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    storage = init_storage(app, storage)
    _init_auth(app, storage)

    register_error_handlers(app)

    # Register blueprints
    from eventforge.auth import auth_bp
    from eventforge.portfolio import portfolio_bp
    from eventforge.testimonials import testimonials_bp
    from eventforge.contact import contact_bp
    from eventforge.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(testimonials_bp)
    app.register_blueprint(contact_bp)
    app.register_blueprint(admin_bp)

    @app.route('/api/health')
    def health():
        """Liveness check; answers even when the database is down."""
        database = 'ok' if get_storage().ping() else 'unavailable'
        return jsonify({'status': 'ok', 'database': database})

    _register_request_logging(app)

    with app.app_context():
        _prepare_store(app, storage)

    logger.info(
        'EventForge API ready (env=%s, auth=%s, storage=%s)',
        app.config['ENV_NAME'], app.config['AUTH_STRATEGY'], storage.backend,
    )
    return app


def _ensure_secrets(app):
    """Fill in missing secrets outside production, loudly."""
    production = app.config['ENV_NAME'] == 'production'
    for key, invalidates in (('JWT_SECRET', 'tokens'), ('SECRET_KEY', 'sessions')):
        if app.config.get(key):
            continue
        if production:
            raise RuntimeError(f'{key} must be set in production')
        app.config[key] = secrets.token_urlsafe(48)
        logger.warning(
            '%s is not set; generated a random secret for this process. '
            'All previously issued %s are invalid and will be again after every restart.',
            key, invalidates,
        )


def _configure_engine(app):
    """Bound the connection pool for server databases."""
    url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
    if url.get_backend_name() == 'sqlite':
        return

    options = {
        'pool_pre_ping': True,
        'pool_size': app.config['DB_POOL_SIZE'],
        'max_overflow': app.config['DB_MAX_OVERFLOW'],
        'pool_timeout': app.config['DB_POOL_TIMEOUT'],
    }
    if url.get_backend_name() == 'postgresql':
        options['connect_args'] = {'connect_timeout': app.config['DB_POOL_TIMEOUT']}
    options.update(app.config.get('SQLALCHEMY_ENGINE_OPTIONS') or {})
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = options


def _init_auth(app, storage):
    from eventforge.auth.service import TOKENS_KEY
    from eventforge.auth.sessions import ServerSideSessionInterface
    from eventforge.auth.strategies import EXTENSION_KEY, build_strategy
    from eventforge.auth.tokens import TokenService

    ttl_hours = app.config['TOKEN_TTL_HOURS']
    if ttl_hours <= 0:
        raise ValueError('TOKEN_TTL_HOURS must be positive')

    tokens = TokenService(
        app.config['JWT_SECRET'],
        ttl=timedelta(hours=ttl_hours),
        algorithm=app.config['JWT_ALGORITHM'],
    )
    app.extensions[TOKENS_KEY] = tokens
    app.extensions[EXTENSION_KEY] = build_strategy(app.config['AUTH_STRATEGY'], tokens)

    if app.config['AUTH_STRATEGY'] in ('session', 'hybrid'):
        app.session_interface = ServerSideSessionInterface(storage.sessions)


def _register_request_logging(app):

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        if request.path.startswith('/api'):
            started = g.get('request_started')
            elapsed = (time.perf_counter() - started) * 1000 if started else 0.0
            logger.info('%s %s %s in %dms', request.method, request.path, response.status_code, elapsed)
        return response


def _prepare_store(app, storage):
    """Create tables and optional sample content.

    A database that is down at startup is logged, not fatal: the process
    still serves the health check and answers 503 for store-backed routes.
    """
    if storage.backend == 'sql':
        _ensure_sqlite_dir(app)
        try:
            db.create_all()
        except SQLAlchemyError as exc:
            logger.error('Could not create database tables (database unreachable?): %s', exc.__class__.__name__)
            return

    if app.config['SEED_SAMPLE_DATA']:
        from eventforge.seed import seed_sample_data
        try:
            seed_sample_data(storage)
        except StoreError as exc:
            logger.error('Could not seed sample data: %s', exc.message)


def _ensure_sqlite_dir(app):
    url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
    if url.get_backend_name() != 'sqlite' or not url.database or url.database == ':memory:':
        return
    directory = os.path.dirname(os.path.abspath(url.database))
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as exc:
        logger.error('Could not create database directory %s: %s', directory, exc)
