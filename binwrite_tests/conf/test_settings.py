from pathlib import Path

import pytest
from pydantic import ValidationError

from binwrite.conf import DEFAULT_SETTINGS_FILEPATH
from binwrite.conf.settings import Settings
from binwrite.endian import Endian


def test_default_file() -> None:
    settings = Settings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings.DEFAULT_ENDIAN == Endian.NATIVE
    assert settings.MAX_OUTPUT_BYTES is None


def test_extends_and_case_insensitive_endian(tmp_path: Path) -> None:
    base = tmp_path / 'base.yml'
    base.write_text('DEFAULT_ENDIAN: BIG\nMAX_OUTPUT_BYTES: 10\n')
    child = tmp_path / 'child.yml'
    child.write_text('extends: base.yml\nMAX_OUTPUT_BYTES: 20\n')
    settings = Settings.from_yaml(filepath=child)
    assert settings.DEFAULT_ENDIAN == Endian.BIG
    assert settings.MAX_OUTPUT_BYTES == 20


@pytest.mark.parametrize('contents', [
    'DEFAULT_ENDIAN: middle\n',
    'MAX_OUTPUT_BYTES: -1\n',
    'UNKNOWN_OPTION: 1\n',
])
def test_invalid_settings(tmp_path: Path, contents: str) -> None:
    filepath = tmp_path / 'bad.yml'
    filepath.write_text(contents)
    with pytest.raises(ValidationError):
        Settings.from_yaml(filepath=filepath)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match='is not a file'):
        Settings.from_yaml(filepath=tmp_path / 'missing.yml')


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.DEFAULT_ENDIAN = Endian.BIG  # type: ignore[misc]


def test_extends_recursively(tmp_path: Path) -> None:
    filepath = tmp_path / 'loop.yml'
    filepath.write_text('extends: loop.yml\nMAX_OUTPUT_BYTES: 1\n')
    with pytest.raises(ValueError, match='extends itself'):
        Settings.from_yaml(filepath=filepath)


def test_extends_absolute_path(tmp_path: Path) -> None:
    child = tmp_path / 'child.yml'
    child.write_text(f'extends: {DEFAULT_SETTINGS_FILEPATH}\nDEFAULT_ENDIAN: little\n')
    settings = Settings.from_yaml(filepath=child)
    assert settings.DEFAULT_ENDIAN == Endian.LITTLE
    assert settings.MAX_OUTPUT_BYTES is None
