import json

import pytest

from glslmerge.config import (
    CONFIG_FILE_NAME,
    DEFAULT_EXTENSIONS,
    LoaderConfig,
    find_config,
    load_config,
)
from glslmerge.errors import ConfigError


def test_defaults():
    config = LoaderConfig()
    assert config.extensions == DEFAULT_EXTENSIONS
    assert config.recursive is False
    assert config.encoding == "utf-8"
    assert config.strip_extension is False
    assert config.matches("shadow.GLSL")
    assert not config.matches("shadow.txt")


def test_from_dict_normalizes_extensions():
    config = LoaderConfig.from_dict({"extensions": ["glsl", ".FRAG"], "recursive": True})
    assert config.extensions == [".glsl", ".frag"]
    assert config.recursive is True
    assert LoaderConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"unknown": 1},
        {"extensions": ".glsl"},
        {"recursive": "yes"},
        {"encoding": ""},
    ],
)
def test_from_dict_rejects_bad_values(data):
    with pytest.raises(ConfigError):
        LoaderConfig.from_dict(data)


def test_load_and_find_config(tmp_path):
    assert find_config(str(tmp_path)) is None

    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(json.dumps({"strip_extension": True}))

    assert find_config(str(tmp_path)) == str(path)
    assert load_config(str(path)).strip_extension is True


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(str(broken))
