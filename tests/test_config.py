import pytest

from gridpaths.config import SEARCH_CONFIG, SearchConfig, validate_identity_separator
from gridpaths.types.base import PreconditionViolation


def test_defaults():
    config = SearchConfig()
    assert config.default_max_paths == 5
    assert config.identity_separator == "->"
    assert config.check_invariants is False


def test_resolve_max_paths():
    assert SEARCH_CONFIG.resolve_max_paths(None) == SEARCH_CONFIG.default_max_paths
    assert SEARCH_CONFIG.resolve_max_paths(3) == 3


@pytest.mark.parametrize("value", [0, -1, 1.5, True, "2"])
def test_resolve_max_paths_rejects(value):
    with pytest.raises(PreconditionViolation):
        SEARCH_CONFIG.resolve_max_paths(value)


def test_identity_separator_is_configurable(monkeypatch):
    from gridpaths.model.path import Path

    monkeypatch.setattr(SEARCH_CONFIG, "identity_separator", "|")
    assert Path(((0, 0), (0, 1))).identity == "0,0|0,1"


@pytest.mark.parametrize("separator", ["", "1", ",", "-0-", ";,"])
def test_identity_separator_rejects_ambiguous_values(separator):
    with pytest.raises(ValueError, match="identity_separator"):
        SearchConfig(identity_separator=separator)


@pytest.mark.parametrize("separator", ["", "2", "a,b"])
def test_path_identity_rejects_ambiguous_separator(separator):
    from gridpaths.model.path import path_identity

    with pytest.raises(ValueError, match="identity_separator"):
        path_identity([(0, 0), (0, 1)], separator=separator)


def test_path_identity_checks_global_separator(monkeypatch):
    from gridpaths.model.path import path_identity

    monkeypatch.setattr(SEARCH_CONFIG, "identity_separator", "")
    with pytest.raises(ValueError):
        path_identity([(0, 0), (0, 1)])


def test_valid_separators_accepted():
    assert validate_identity_separator("->") == "->"
    assert validate_identity_separator(" | ") == " | "
