from savestack import plan_storage, settings
from savestack.models import LineItem, LineKind


def _items(rent=40000):
    return [
        LineItem('Salary', 100000, 0, LineKind.INCOME),
        LineItem('Rent', rent, 0, LineKind.FIXED_EXPENSE),
        LineItem('Misc', 500),
    ]


def test_upsert_then_load(tmp_path):
    path = tmp_path / 'plans.json'
    plan_storage.upsert_plan('alice', '2024-01-01', _items(), path=path)
    assert plan_storage.load_plan('alice', '2024-01-01', path=path) == _items()
    assert plan_storage.load_plan('bob', '2024-01-01', path=path) == []


def test_last_write_wins(tmp_path):
    path = tmp_path / 'plans.json'
    plan_storage.upsert_plan('alice', '2024-01-01', _items(), path=path)
    plan_storage.upsert_plan('alice', '2024-01-01', _items(rent=45000), path=path)
    loaded = plan_storage.load_plan('alice', '2024-01-01', path=path)
    assert loaded[1].planned_cents == 45000
    assert len(loaded) == 3


def test_list_and_delete_weeks(tmp_path):
    path = tmp_path / 'plans.json'
    for week in ('2024-01-01', '2024-01-15', '2024-01-08'):
        plan_storage.upsert_plan('alice', week, _items(), path=path)
    assert plan_storage.list_weeks('alice', path=path) == ['2024-01-15', '2024-01-08', '2024-01-01']

    assert plan_storage.delete_plan('alice', '2024-01-08', path=path)
    assert not plan_storage.delete_plan('alice', '2024-01-08', path=path)
    assert list(plan_storage.load_history('alice', path=path)) == ['2024-01-01', '2024-01-15']


def test_missing_or_corrupt_store_reads_empty(tmp_path):
    path = tmp_path / 'plans.json'
    assert plan_storage.list_weeks('alice', path=path) == []
    path.write_text('{not json', encoding='utf-8')
    assert plan_storage.load_plan('alice', '2024-01-01', path=path) == []

    plan_storage.upsert_plan('alice', '2024-01-01', _items(), path=path)
    assert plan_storage.list_weeks('alice', path=path) == ['2024-01-01']


def test_default_path_comes_from_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, 'PLANS_PATH', tmp_path / 'nested' / 'plans.json')
    plan_storage.upsert_plan('alice', '2024-01-01', _items())
    assert (tmp_path / 'nested' / 'plans.json').exists()
