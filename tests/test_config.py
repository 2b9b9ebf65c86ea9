from pathlib import Path

import pytest

from hunspell_dispatch.config import (
    SpellCheckConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from hunspell_dispatch.exceptions import (
    InvalidConfiguration,
    InvalidResponseShape,
    InvalidThreadNumber,
)
from hunspell_dispatch.validation import (
    ResponseShape,
    validate_response_shape,
    validate_thread_number,
)


def test_defaults():
    config = load_config()
    assert config.dictionary == "en_GB"
    assert config.encoding == "en_GB.utf8"
    assert config.response_shape is ResponseShape.JSON
    assert config.max_workers == 1
    assert config.min_words_per_worker == 1


def test_config_from_yaml_converts_loose_values(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "dictionary: en_US\n"
        "response_shape: array\n"
        "max_workers: '4'\n"
        "min_words_per_worker: 3\n"
        "timeout: 5\n"
        "unknown_key: ignored\n",
        encoding="utf-8",
    )

    config = config_from_yaml(path)

    assert config.dictionary == "en_US"
    assert config.response_shape is ResponseShape.ARRAY
    assert config.max_workers == 4
    assert config.min_words_per_worker == 3
    assert config.timeout == 5.0


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        config_from_yaml(path)


def test_config_from_dict_rejects_invalid_values():
    with pytest.raises(InvalidResponseShape):
        config_from_dict({"response_shape": "xml"})
    with pytest.raises(InvalidThreadNumber):
        config_from_dict({"max_workers": 0})
    with pytest.raises(InvalidThreadNumber):
        config_from_dict({"min_words_per_worker": "abc"})
    with pytest.raises(InvalidConfiguration):
        config_from_dict({"timeout": -1})


def test_config_from_yaml_rejects_malformed_signed_worker_count(tmp_path: Path):
    """A worker count like '+-5' is a configuration error, not a ValueError leak."""
    path = tmp_path / "config.yaml"
    path.write_text("max_workers: '+-5'\n", encoding="utf-8")
    with pytest.raises(InvalidThreadNumber):
        config_from_yaml(path)


def test_to_dict_is_yaml_friendly():
    data = SpellCheckConfig(response_shape=ResponseShape.ARRAY).to_dict()
    assert data["response_shape"] == "array"
    assert data["max_workers"] == 1


@pytest.mark.parametrize("value, expected", [(1, 1), (8, 8), ("3", 3), (" 2 ", 2)])
def test_validate_thread_number_accepts_positive_integers(value, expected):
    assert validate_thread_number(value) == expected


@pytest.mark.parametrize(
    "value", [0, -1, "-2", "abc", "", "+-5", "--3", "²", "1_0", 2.0, False, None, [2]]
)
def test_validate_thread_number_rejects(value):
    with pytest.raises(InvalidThreadNumber):
        validate_thread_number(value)


def test_validate_response_shape():
    assert validate_response_shape("json") is ResponseShape.JSON
    assert validate_response_shape(ResponseShape.ARRAY) is ResponseShape.ARRAY
    with pytest.raises(InvalidResponseShape):
        validate_response_shape("JSON")
    # InvalidConfiguration doubles as ValueError for generic callers.
    with pytest.raises(ValueError):
        validate_response_shape("xml")
