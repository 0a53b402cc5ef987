import json
import pytest
import numpy as np
import yaml
from trajan.core.coordinate import CoordKind
from trajan.utils.config_manager import ConfigManager, DEFAULT_CONFIG


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "trajan.yaml"
    path.write_text(
        "reader:\n"
        "  kind: velocity\n"
        "  dtype: float32\n"
        "writer:\n"
        "  precision: 6\n"
    )
    return path


def test_defaults():
    config = ConfigManager()
    assert config.to_dict() == DEFAULT_CONFIG
    reader_cfg = config.get_reader_config()
    assert reader_cfg == {'kind': CoordKind.POSITION, 'dtype': np.float64, 'strict': False}
    assert config.get_writer_config() == {'name_width': 8, 'precision': 12}
    assert config.get_logging_config() == {'level': 'INFO'}


def test_load_config_merges_onto_defaults(config_file):
    config = ConfigManager(config_file)
    reader_cfg = config.get_reader_config()
    assert reader_cfg['kind'] is CoordKind.VELOCITY
    assert reader_cfg['dtype'] is np.float32
    assert reader_cfg['strict'] is False
    assert config.get_writer_config() == {'name_width': 8, 'precision': 6}


def test_defaults_are_not_shared():
    config = ConfigManager()
    config.update_config({'writer': {'precision': 3}})
    assert DEFAULT_CONFIG['writer']['precision'] == 12
    assert ConfigManager().get_writer_config()['precision'] == 12


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        ConfigManager(tmp_path / "missing.yaml")


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert ConfigManager(path).to_dict() == DEFAULT_CONFIG


def test_non_mapping_config_file(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        ConfigManager(path)


@pytest.mark.parametrize("updates, error_message_part", [
    ({'reader': {'kind': 'acceleration'}}, "Unknown coordinate kind"),
    ({'reader': {'dtype': 'int32'}}, "floating point"),
    ({'reader': {'dtype': None}}, "reader.dtype"),
    ({'reader': {'strict': 'yes'}}, "reader.strict"),
    ({'writer': {'name_width': 0}}, "name_width must be positive"),
    ({'writer': {'precision': -2}}, "precision must be non-negative"),
    ({'writer': {'precision': 2.5}}, "writer.precision must be an integer"),
    ({'logging': {'level': 'LOUD'}}, "logging.level"),
    ({'writer': None}, "Missing required configuration section"),
])
def test_invalid_updates(updates, error_message_part):
    config = ConfigManager()
    with pytest.raises(ValueError, match=error_message_part):
        config.update_config(updates)
    assert config.to_dict() == DEFAULT_CONFIG


def test_rejected_update_keeps_earlier_settings():
    config = ConfigManager()
    config.update_config({'writer': {'precision': 4}})
    with pytest.raises(ValueError):
        config.update_config({'writer': {'name_width': 3, 'precision': -1}})
    assert config.get_writer_config() == {'name_width': 8, 'precision': 4}


def test_malformed_yaml_file(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("reader: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        ConfigManager(path)


def test_invalid_file_leaves_settings_unchanged(tmp_path, config_file):
    config = ConfigManager(config_file)
    before = config.to_dict()
    bad = tmp_path / "bad.yaml"
    bad.write_text("reader:\n  kind: force\nwriter:\n  precision: -3\n")
    with pytest.raises(ValueError, match="precision"):
        config.load_config(bad)
    assert config.to_dict() == before


def test_from_dict_accepts_partial_settings():
    config = ConfigManager.from_dict({'reader': {'kind': 'force', 'strict': True}})
    reader_cfg = config.get_reader_config()
    assert reader_cfg['kind'] is CoordKind.FORCE
    assert reader_cfg['strict'] is True
    assert reader_cfg['dtype'] is np.float64


def test_save_config(tmp_path, config_file):
    config = ConfigManager(config_file)
    out = tmp_path / "saved.yaml"
    config.save_config(out)
    with open(out) as f:
        assert yaml.safe_load(f) == config.to_dict()
    assert ConfigManager(out).to_dict() == config.to_dict()


def test_to_json():
    assert json.loads(ConfigManager().to_json()) == DEFAULT_CONFIG
