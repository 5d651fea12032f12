from datetime import datetime, timedelta

import pytest

from eventforge import create_app
from eventforge.storage import get_storage
from eventforge.storage.errors import ConflictError, StoreError
from eventforge.utils import utcnow


PORTFOLIO_ROW = {
    'title': 'Riverside Wedding',
    'category': 'Wedding',
    'venue': None,
    'image_url': 'https://example.com/w.jpg',
    'description': 'Garden ceremony.',
    'overview': 'Ceremony and reception for 120 guests.',
    'role': ['Planning', 'Decor'],
    'results': 'Happy couple.',
    'tags': ['Wedding'],
    'featured': False,
}

TESTIMONIAL_ROW = {
    'rating': 5,
    'content': 'Wonderful.',
    'author': 'Sam Lee',
    'position': 'Client',
    'avatar_initials': 'SL',
}

CONTACT_ROW = {
    'name': 'Jo',
    'email': 'jo@x.com',
    'phone': None,
    'event_type': None,
    'message': 'Hi',
}


@pytest.fixture(params=['sql', 'memory'])
def storage(request, make_config):
    app = create_app(make_config(STORAGE_BACKEND=request.param))
    with app.app_context():
        yield get_storage()


@pytest.mark.parametrize('repo_name, row', [
    ('portfolio', PORTFOLIO_ROW),
    ('testimonials', TESTIMONIAL_ROW),
])
def test_create_then_get_returns_payload_plus_id(storage, repo_name, row):
    repo = getattr(storage, repo_name)
    created = repo.create(row)
    assert isinstance(created['id'], int)
    assert repo.get(created['id']) == dict(row, id=created['id'])


def test_list_is_empty_then_ordered_by_id(storage):
    assert storage.testimonials.list() == []
    ids = [storage.testimonials.create(dict(TESTIMONIAL_ROW, author=name))['id'] for name in 'abc']
    assert [row['id'] for row in storage.testimonials.list()] == sorted(ids)


def test_get_missing_returns_none(storage):
    assert storage.portfolio.get(999) is None
    assert storage.users.get(999) is None


def test_portfolio_defaults_applied(storage):
    row = {key: value for key, value in PORTFOLIO_ROW.items() if key not in ('venue', 'featured')}
    created = storage.portfolio.create(row)
    assert created['featured'] is False
    assert created['venue'] is None


def test_store_assigns_id_even_when_payload_has_one(storage):
    first = storage.portfolio.create(dict(PORTFOLIO_ROW, id=500))
    assert first['id'] != 500
    assert storage.portfolio.get(500) is None


def test_update_changes_only_supplied_fields(storage):
    created = storage.portfolio.create(PORTFOLIO_ROW)
    updated = storage.portfolio.update(created['id'], {'title': 'Lakeside Wedding', 'tags': ['Wedding', 'Summer']})
    assert updated == dict(created, title='Lakeside Wedding', tags=['Wedding', 'Summer'])
    assert storage.portfolio.get(created['id']) == updated


def test_update_ignores_protected_and_unknown_keys(storage):
    created = storage.testimonials.create(TESTIMONIAL_ROW)
    updated = storage.testimonials.update(created['id'], {'id': 77, 'nonsense': True, 'rating': 3})
    assert updated['id'] == created['id']
    assert updated['rating'] == 3
    assert 'nonsense' not in updated


def test_update_missing_returns_none(storage):
    assert storage.testimonials.update(404, {'rating': 2}) is None


def test_rows_are_not_shared_with_the_caller(storage):
    created = storage.portfolio.create(PORTFOLIO_ROW)
    created['tags'].append('Mutated')
    assert storage.portfolio.get(created['id'])['tags'] == ['Wedding']


@pytest.mark.parametrize('repo_name', ['portfolio', 'testimonials', 'contacts'])
def test_delete_is_idempotent(storage, repo_name):
    repo = getattr(storage, repo_name)
    row = {'portfolio': PORTFOLIO_ROW, 'testimonials': TESTIMONIAL_ROW, 'contacts': CONTACT_ROW}[repo_name]
    created = repo.create(row)
    assert repo.delete(created['id']) is True
    assert repo.get(created['id']) is None
    assert repo.delete(created['id']) is True
    assert repo.delete(12345) is True


def test_user_delete_reports_missing_rows(storage):
    user = storage.users.create({'username': 'kim', 'password_hash': 'x'})
    assert storage.users.delete(user['id']) is True
    assert storage.users.delete(user['id']) is False


def test_duplicate_username_is_a_conflict(storage):
    storage.users.create({'username': 'kim', 'password_hash': 'x'})
    with pytest.raises(ConflictError):
        storage.users.create({'username': 'kim', 'password_hash': 'y'})
    assert [user['username'] for user in storage.users.list()] == ['kim']


def test_get_by_username(storage):
    user = storage.users.create({'username': 'kim', 'password_hash': 'x'})
    assert storage.users.get_by_username('kim') == user
    assert storage.users.get_by_username('KIM') is None


def test_users_cannot_be_updated(storage):
    user = storage.users.create({'username': 'kim', 'password_hash': 'x'})
    with pytest.raises(StoreError):
        storage.users.update(user['id'], {'username': 'lee'})
    assert storage.users.get(user['id'])['username'] == 'kim'


def test_ids_beyond_64_bits_are_simply_absent(storage):
    huge = 2 ** 80
    assert storage.portfolio.get(huge) is None
    assert storage.portfolio.update(huge, {'title': 'x'}) is None
    assert storage.portfolio.delete(huge) is True
    assert storage.contacts.mark_read(huge) is None
    assert storage.users.delete(huge) is False


def test_contact_gets_server_assigned_fields(storage):
    before = utcnow()
    created = storage.contacts.create(dict(CONTACT_ROW, read=True, created_at=datetime(2000, 1, 1)))
    assert created['read'] is False
    assert isinstance(created['created_at'], datetime)
    assert created['created_at'] >= before - timedelta(seconds=1)
    assert storage.contacts.get(created['id']) == created


def test_mark_read_is_idempotent(storage):
    created = storage.contacts.create(CONTACT_ROW)
    first = storage.contacts.mark_read(created['id'])
    second = storage.contacts.mark_read(created['id'])
    assert first['read'] is True
    assert second == first
    assert first['created_at'] == created['created_at']


def test_mark_read_missing_returns_none(storage):
    assert storage.contacts.mark_read(99) is None


def test_session_store_round_trip(storage):
    expires = utcnow() + timedelta(hours=1)
    storage.sessions.save('sid-1', {'_user_id': '4'}, expires)
    assert storage.sessions.load('sid-1') == {'_user_id': '4'}
    storage.sessions.save('sid-1', {'_user_id': '5'}, expires)
    assert storage.sessions.load('sid-1') == {'_user_id': '5'}
    storage.sessions.delete('sid-1')
    assert storage.sessions.load('sid-1') is None
    assert storage.sessions.load('never-existed') is None


def test_expired_sessions_are_absent_and_purged(storage):
    storage.sessions.save('old', {'a': 1}, utcnow() - timedelta(minutes=1))
    storage.sessions.save('older', {'a': 2}, utcnow() - timedelta(hours=1))
    storage.sessions.save('fresh', {'a': 3}, utcnow() + timedelta(hours=1))
    assert storage.sessions.load('old') is None
    assert storage.sessions.purge_expired() == 1
    assert storage.sessions.load('fresh') == {'a': 3}
