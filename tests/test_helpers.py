import logging
import pytest
from trajan.utils.helpers import update_dict_recursively, ensure_directory, configure_logging


def test_update_dict_recursively():
    base = {'reader': {'kind': 'position', 'strict': False}, 'logging': {'level': 'INFO'}}
    result = update_dict_recursively(base, {'reader': {'strict': True}, 'extra': 1})
    assert result is base
    assert base == {'reader': {'kind': 'position', 'strict': True}, 'logging': {'level': 'INFO'}, 'extra': 1}


def test_update_dict_replaces_non_dict_values():
    base = {'writer': {'precision': 12}}
    update_dict_recursively(base, {'writer': None})
    assert base == {'writer': None}


def test_ensure_directory(tmp_path):
    target = tmp_path / "a" / "b"
    path = ensure_directory(str(target))
    assert path == target
    assert target.is_dir()
    assert ensure_directory(target) == target


@pytest.mark.parametrize("level, expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)])
def test_configure_logging(level, expected):
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(level)
        assert root.level == expected
    finally:
        root.setLevel(previous)
