import json

import pytest

from netconfig import DEFAULT_CONFIG, InvalidProfileError, NetworkConfig, NetworkProfile
from netconfig import store


def test_dumps_shape():
    assert json.loads(store.dumps(DEFAULT_CONFIG)) == {
        "networks": {
            "main": {"host": "localhost", "port": 8645, "network_id": "1"},
            "development": {"host": "localhost", "port": 8645, "network_id": "*"},
        }
    }


def test_round_trip_preserves_every_field():
    reloaded = store.loads(store.dumps(DEFAULT_CONFIG))
    assert reloaded == DEFAULT_CONFIG
    for profile in DEFAULT_CONFIG:
        assert reloaded.lookup(profile.name).to_dict() == profile.to_dict()


def test_dumps_is_stable():
    assert store.dumps(DEFAULT_CONFIG) == store.dumps(store.loads(store.dumps(DEFAULT_CONFIG)))


def test_save_and_load(tmp_path):
    config = NetworkConfig([NetworkProfile("ganache", "127.0.0.1", 7545, "5777")])
    path = store.save(config, tmp_path / "networks.json")
    assert path.exists()
    assert store.load(path) == config


def test_loads_rejects_invalid_json():
    with pytest.raises(InvalidProfileError):
        store.loads("{not json")


def test_loads_rejects_bad_record():
    with pytest.raises(InvalidProfileError):
        store.loads('{"networks": {"main": {"host": "localhost", "port": 70000, "network_id": "1"}}}')


def test_loads_rejects_duplicate_environment_names():
    text = (
        '{"networks": {'
        '"main": {"host": "localhost", "port": 1, "network_id": "1"}, '
        '"main": {"host": "localhost", "port": 2, "network_id": "1"}}}'
    )
    with pytest.raises(InvalidProfileError):
        store.loads(text)


def test_loads_rejects_duplicate_record_fields():
    with pytest.raises(InvalidProfileError):
        store.loads('{"networks": {"main": {"host": "a", "host": "b", "port": 1, "network_id": "1"}}}')


def test_load_missing_file(tmp_path):
    with pytest.raises(InvalidProfileError):
        store.load(tmp_path / "nope.json")


def test_load_non_utf8_file(tmp_path):
    path = tmp_path / "networks.json"
    path.write_bytes(b"\xff\xfe{")
    with pytest.raises(InvalidProfileError):
        store.load(path)


def test_round_trip_with_largest_network_id():
    config = NetworkConfig([NetworkProfile("big", "localhost", 8545, str(2**64 - 1))])
    assert store.loads(store.dumps(config)) == config
