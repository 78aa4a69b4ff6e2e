"""Unit tests for entry sources."""

from pathlib import Path

import pytest

from envlens.sources import (
    DotenvFileSource,
    ProcessEnvironmentSource,
    StartupLoadError,
    format_entry,
    source_for_path,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".env"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.unit
def test_process_environment_keeps_mapping_order() -> None:
    """One KEY=VALUE entry per variable, in the order the mapping yields them."""
    source = ProcessEnvironmentSource({"PATH": "/usr/bin", "HOME": "/root", "EMPTY": ""})

    assert source.load() == ["PATH=/usr/bin", "HOME=/root", "EMPTY="]
    assert source.label == "environment"


@pytest.mark.unit
def test_dotenv_file_entries_in_file_order(tmp_path: Path) -> None:
    """Comments and blank lines are skipped; quoting follows dotenv rules."""
    path = _write(
        tmp_path,
        "# database\nDB_HOST=localhost\n\nDB_PORT=5432\nGREETING=\"hello world\"\nexport TOKEN='abc'\n",
    )

    source = DotenvFileSource(path)

    assert source.load() == ["DB_HOST=localhost", "DB_PORT=5432", "GREETING=hello world", "TOKEN=abc"]
    assert source.label == str(path)


@pytest.mark.unit
def test_dotenv_key_without_value_is_empty(tmp_path: Path) -> None:
    """A bare key shows with an empty value."""
    path = _write(tmp_path, "BARE\nSET=1\n")

    assert DotenvFileSource(path).load() == ["BARE=", "SET=1"]


@pytest.mark.unit
def test_dotenv_interpolates_earlier_values(tmp_path: Path) -> None:
    """${VAR} references resolve against values defined earlier in the file."""
    path = _write(tmp_path, "ENVLENS_TEST_BASE=/srv\nENVLENS_TEST_DATA=${ENVLENS_TEST_BASE}/data\n")

    assert DotenvFileSource(path).load() == ["ENVLENS_TEST_BASE=/srv", "ENVLENS_TEST_DATA=/srv/data"]


@pytest.mark.unit
def test_dotenv_duplicate_key_keeps_first_position_last_value(tmp_path: Path) -> None:
    """Redefining a key updates its value in place."""
    path = _write(tmp_path, "A=1\nB=2\nA=3\n")

    assert DotenvFileSource(path).load() == ["A=3", "B=2"]


@pytest.mark.unit
def test_missing_file_is_startup_error(tmp_path: Path) -> None:
    """An unreadable file aborts loading with the path in the message."""
    path = tmp_path / "missing.env"

    with pytest.raises(StartupLoadError, match="missing.env"):
        DotenvFileSource(path).load()


@pytest.mark.unit
def test_directory_is_startup_error(tmp_path: Path) -> None:
    """A directory is not a readable dotenv file."""
    with pytest.raises(StartupLoadError):
        DotenvFileSource(tmp_path).load()


@pytest.mark.unit
def test_unparsable_statement_is_startup_error(tmp_path: Path) -> None:
    """A statement python-dotenv cannot parse fails the load, naming the line."""
    path = _write(tmp_path, "GOOD=1\nnot a valid line\n")

    with pytest.raises(StartupLoadError, match="line 2"):
        DotenvFileSource(path).load()


@pytest.mark.unit
def test_unterminated_quote_is_startup_error(tmp_path: Path) -> None:
    """An opening quote with no closing quote cannot be parsed."""
    path = _write(tmp_path, 'BROKEN="unterminated\n')

    with pytest.raises(StartupLoadError):
        DotenvFileSource(path).load()


@pytest.mark.unit
def test_source_for_path_picks_source(tmp_path: Path) -> None:
    """A path selects the dotenv source; no path selects the environment."""
    assert isinstance(source_for_path(None), ProcessEnvironmentSource)
    assert isinstance(source_for_path(tmp_path / ".env"), DotenvFileSource)


@pytest.mark.unit
def test_format_entry_handles_missing_value() -> None:
    assert format_entry("KEY", None) == "KEY="
    assert format_entry("KEY", "a=b") == "KEY=a=b"
