from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from backend.storage import DuplicateUserError, Storage, UserNotFoundError


def _user_data(**overrides) -> dict:
    data = {
        'username': 'otieno',
        'email': 'otieno@example.com',
        'password': 'not-a-real-hash',
        'first_name': 'Brian',
        'last_name': 'Otieno',
    }
    data.update(overrides)
    return data


def _fact_check_data(user_id: str, **overrides) -> dict:
    data = {
        'user_id': user_id,
        'text': 'The budget was confirmed by parliament.',
        'result': 'true',
        'confidence': 90,
        'explanation': 'Matches the record.',
    }
    data.update(overrides)
    return data


@pytest.fixture
def ticking_clock(monkeypatch: pytest.MonkeyPatch):
    start = datetime(2026, 1, 5, 9, 0)
    ticks = count()
    monkeypatch.setattr('backend.storage.utcnow', lambda: start + timedelta(seconds=next(ticks)))


def test_empty_store_lists_nothing() -> None:
    store = Storage('sqlite://', seed_sample_data=False)

    assert store.get_articles() == []
    assert store.get_civic_alerts() == []
    assert store.get_jobs() == []
    assert store.get_fact_checks_by_user('missing') == []
    store.close()


def test_seeded_articles_are_newest_first(storage: Storage) -> None:
    articles = storage.get_articles()

    assert [article.category for article in articles] == ['Politics', 'Infrastructure', 'Education', 'Health', 'Economy']
    published = [article.published_at for article in articles]
    assert published == sorted(published, reverse=True)


def test_get_articles_filters_by_exact_category(storage: Storage) -> None:
    assert [article.category for article in storage.get_articles(category='Health')] == ['Health']
    assert storage.get_articles(category='health') == []


def test_get_articles_applies_offset_after_sort(storage: Storage) -> None:
    page = storage.get_articles(limit=2, offset=1)

    assert [article.category for article in page] == ['Infrastructure', 'Education']


def test_create_article_ignores_caller_ids_and_timestamps(storage: Storage) -> None:
    stale = datetime(2001, 1, 1)
    article = storage.create_article(
        {
            'id': 'caller-chosen',
            'title': 'Clinic opens in Kisumu',
            'excerpt': 'A new clinic opened.',
            'content': 'Full story.',
            'category': 'Health',
            'source': 'Nation Media',
            'published_at': stale,
            'created_at': stale,
            'unknown_field': 'dropped',
        }
    )

    assert article.id != 'caller-chosen'
    assert article.published_at > stale
    assert article.verified is True
    assert storage.get_article(article.id).title == 'Clinic opens in Kisumu'
    assert storage.get_articles(limit=1, category='Health')[0].id == article.id


def test_get_article_returns_none_for_unknown_id(storage: Storage) -> None:
    assert storage.get_article('does-not-exist') is None


def test_get_civic_alerts_skips_inactive_alerts(storage: Storage) -> None:
    hidden = storage.create_civic_alert(
        {'title': 'Old notice', 'message': 'Expired', 'type': 'info', 'category': 'Budget', 'is_active': False}
    )
    shown = storage.create_civic_alert(
        {'title': 'Water outage', 'message': 'Tomorrow', 'type': 'urgent', 'category': 'Utilities'}
    )

    alerts = storage.get_civic_alerts()

    assert hidden.id not in [alert.id for alert in alerts]
    assert alerts[0].id == shown.id
    assert shown.is_active is True


def test_get_civic_alerts_respects_limit(storage: Storage) -> None:
    assert [alert.title for alert in storage.get_civic_alerts(limit=2)] == ['Public Hearing', 'Tax Deadline']


def test_get_jobs_filters_by_type_and_is_stable(storage: Storage) -> None:
    first = [job.id for job in storage.get_jobs(job_type='internship')]
    second = [job.id for job in storage.get_jobs(job_type='internship')]

    assert len(first) == 1
    assert first == second
    assert storage.get_jobs(job_type='full-time', limit=1)[0].title == 'Software Developer'


def test_create_job_normalizes_aware_expiry_to_utc(storage: Storage) -> None:
    expires = datetime(2026, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))
    job = storage.create_job(
        {
            'title': 'Data Clerk',
            'company': 'KNBS',
            'location': 'Nairobi, Kenya',
            'type': 'contract',
            'description': 'Census support.',
            'requirements': 'Diploma.',
            'expires_at': expires,
        }
    )

    assert job.expires_at == datetime(2026, 3, 1, 9, 0)
    assert storage.get_jobs(limit=1)[0].id == job.id


def test_create_user_applies_defaults(storage: Storage) -> None:
    user = storage.create_user(_user_data(facts_checked=50))

    assert user.role == 'user'
    assert user.location == 'Kenya'
    assert user.facts_checked == 0
    assert storage.get_user(user.id).email == 'otieno@example.com'
    assert storage.get_user_by_username('otieno').id == user.id
    assert storage.get_user_by_email('otieno@example.com').id == user.id


@pytest.mark.parametrize(
    'overrides',
    [
        {'username': 'someone-else'},
        {'email': 'someone-else@example.com'},
    ],
)
def test_create_user_rejects_duplicates(storage: Storage, overrides: dict) -> None:
    storage.create_user(_user_data())

    with pytest.raises(DuplicateUserError):
        storage.create_user(_user_data(**overrides))


def test_update_user_merges_fields(storage: Storage) -> None:
    user = storage.create_user(_user_data())

    updated = storage.update_user(user.id, {'facts_checked': 3, 'id': 'ignored'})

    assert updated.id == user.id
    assert updated.facts_checked == 3
    assert updated.username == 'otieno'
    assert storage.get_user(user.id).facts_checked == 3


def test_update_user_returns_none_for_unknown_id(storage: Storage) -> None:
    assert storage.update_user('missing', {'facts_checked': 1}) is None


def test_create_fact_check_requires_existing_user(storage: Storage) -> None:
    with pytest.raises(UserNotFoundError):
        storage.create_fact_check(_fact_check_data('missing'))


@pytest.mark.parametrize('confidence', [-1, 101, '90', True])
def test_create_fact_check_rejects_out_of_range_confidence(storage: Storage, confidence) -> None:
    user = storage.create_user(_user_data())

    with pytest.raises(ValueError):
        storage.create_fact_check(_fact_check_data(user.id, confidence=confidence))


def test_get_fact_checks_by_user_is_newest_first_and_scoped(storage: Storage, ticking_clock) -> None:
    owner = storage.create_user(_user_data())
    other = storage.create_user(_user_data(username='achieng', email='achieng@example.com'))

    older = storage.create_fact_check(_fact_check_data(owner.id))
    newer = storage.create_fact_check(_fact_check_data(owner.id, text='A hoax about fuel prices.'))
    storage.create_fact_check(_fact_check_data(other.id))

    assert [fact_check.id for fact_check in storage.get_fact_checks_by_user(owner.id)] == [newer.id, older.id]
