import yaml
from fastapi.testclient import TestClient

from dicebox_lib.main import Config, build_registry, create_app
from dicebox_lib.services import ServiceRegistry
from tests.helpers import register_service_on_client


def make_config(tmp_path):
    cfg_dir = tmp_path / 'config'
    cfg_dir.mkdir()
    (cfg_dir / 'dicebox_config.yml').write_text(yaml.safe_dump({
        'local_player': {'id': 'p1', 'username': 'Alice'},
        'dice': {'dice_sets': [
            {'id': 'red', 'count': 2, 'color': '#f00'},
            {'id': 'blue', 'count': 1, 'color': '#00f'},
        ]},
    }), encoding='utf-8')
    return Config(data_dir=str(tmp_path), setup_logging=False)


def test_build_registry_is_lazy_and_wires_services(tmp_path):
    registry = build_registry(make_config(tmp_path))

    assert isinstance(registry, ServiceRegistry)
    for key in ('config', 'local_player', 'message_bus', 'network', 'dice_store', 'strategy'):
        assert registry.has(key)

    strategy = registry.get('strategy')
    assert strategy.context['state'] is registry.get('dice_store')
    assert strategy.context['network'] is registry.get('network')
    assert strategy.context['local_player'] == {'id': 'p1', 'username': 'Alice'}
    assert registry.get('network').peer_id == 'p1'
    assert registry.get('strategy') is strategy


def test_remote_rolls_apply_and_own_echo_is_ignored(tmp_path):
    registry = build_registry(make_config(tmp_path))
    strategy = registry.get('strategy')
    bus = registry.get('message_bus')
    store = registry.get('dice_store')

    bus.dispatch(
        {'type': 'dice:roll', 'payload': {'set_id': 'blue', 'values': [6], 'player_id': 'p2', 'username': 'Bob'}},
        {'from_peer_id': 'p2'},
    )
    assert store.dice_values['blue'] == [6]
    assert store.last_roller['blue']['player_id'] == 'p2'

    results = strategy.roll_picked_dice([0])
    assert store.dice_values['red'] == results[0]['values']
    assert store.last_roller['red']['player_id'] == 'p1'


def test_api_health_lists_registered_services(tmp_path):
    client = TestClient(create_app(make_config(tmp_path)))
    resp = client.get('/api/health')
    assert resp.status_code == 200
    body = resp.json()
    assert body['status'] == 'ok'
    assert 'strategy' in body['services']


def test_api_dice_state_and_roll(tmp_path):
    client = TestClient(create_app(make_config(tmp_path)))

    state = client.get('/api/dice').json()
    assert [s['id'] for s in state['config']['dice_sets']] == ['red', 'blue']
    assert state['values'] == {}

    dice = client.get('/api/dice/all').json()
    assert len(dice) == 3

    resp = client.post('/api/dice/roll', json={'indices': [0, 2]})
    assert resp.status_code == 200
    results = resp.json()['results']
    assert [r['set_id'] for r in results] == ['red', 'blue']

    state = client.get('/api/dice').json()
    assert state['values']['red'] == results[0]['values']
    assert state['last_roller']['blue'] == {'player_id': 'p1', 'username': 'Alice'}


def test_api_roll_requires_selection(tmp_path):
    client = TestClient(create_app(make_config(tmp_path)))
    resp = client.post('/api/dice/roll', json={'indices': []})
    assert resp.status_code == 400
    assert resp.json()['detail']['error'] == 'empty_selection'


def test_api_missing_service_is_500(tmp_path):
    client = TestClient(create_app(make_config(tmp_path)))
    client.app.state.container.remove('dice_store')
    resp = client.get('/api/dice')
    assert resp.status_code == 500
    assert 'dice_store' in resp.json()['detail']


def test_api_uses_services_registered_by_tests(tmp_path):
    class FakeStore:
        def get_snapshot(self):
            return {'fake': True}

    client = TestClient(create_app(make_config(tmp_path)))
    register_service_on_client(client, 'dice_store', FakeStore())
    assert client.get('/api/dice').json() == {'fake': True}
