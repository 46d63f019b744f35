import logging

import pytest
import yaml

from dicebox_lib.config.config import DEFAULT_APP_CONFIG, load_app_config, save_app_config
from dicebox_lib.logging_config import configure_logging


def test_missing_file_yields_defaults_with_generated_player_id(tmp_path):
    cfg = load_app_config(tmp_path / 'nope.yml')
    assert cfg['dice'] == DEFAULT_APP_CONFIG['dice']
    assert cfg['local_player']['username'] == 'Player'
    assert cfg['local_player']['id']
    # defaults are not mutated
    assert DEFAULT_APP_CONFIG['local_player']['id'] is None


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / 'dicebox_config.yml'
    path.write_text(yaml.safe_dump({
        'log_level': 'DEBUG',
        'local_player': {'username': 'Alice'},
        'dice': {'dice_sets': [{'id': 'red', 'count': 5, 'color': '#f00'}]},
    }), encoding='utf-8')

    cfg = load_app_config(path)

    assert cfg['log_level'] == 'DEBUG'
    assert cfg['local_player']['username'] == 'Alice'
    assert cfg['local_player']['id']
    assert cfg['dice']['dice_sets'] == [{'id': 'red', 'count': 5, 'color': '#f00'}]
    assert cfg['schema_version'] == 1


def test_non_mapping_config_is_rejected(tmp_path):
    path = tmp_path / 'bad.yml'
    path.write_text('- just\n- a list\n', encoding='utf-8')
    with pytest.raises(ValueError):
        load_app_config(path)


def test_save_then_load(tmp_path):
    path = tmp_path / 'nested' / 'cfg.yml'
    cfg = load_app_config(path)
    cfg['local_player'] = {'id': 'fixed', 'username': 'Bob'}
    save_app_config(cfg, path)

    assert load_app_config(path)['local_player'] == {'id': 'fixed', 'username': 'Bob'}


def test_configure_logging_reads_level(tmp_path):
    path = tmp_path / 'cfg.yml'
    path.write_text('log_level: debug\n', encoding='utf-8')
    try:
        configure_logging(path)
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(tmp_path / 'missing.yml')
        assert logging.getLogger().level == logging.WARNING
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)


@pytest.mark.parametrize('key, value', [
    ('local_player', None),
    ('local_player', 'Alice'),
    ('dice', None),
    ('dice', [1, 2]),
])
def test_non_mapping_sections_are_rejected(tmp_path, key, value):
    path = tmp_path / 'cfg.yml'
    path.write_text(yaml.safe_dump({key: value}), encoding='utf-8')
    with pytest.raises(ValueError, match=key):
        load_app_config(path)
