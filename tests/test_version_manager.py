from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path

import pytest

from flutter_deploy.api.exceptions import FileAccessError, MalformedVersionError, NotFoundError
from flutter_deploy.core import VersionManager
from flutter_deploy.models import VersionString


def _manifest(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "pubspec.yaml"
    path.write_bytes(content.encode("utf-8"))
    return path


def test_read_version_parses_name_and_build(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "name: myapp\nversion: 1.0.1+42\n")

    assert VersionManager().read_version(path) == VersionString("1.0.1", 42)


def test_read_version_splits_on_first_plus_only(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1+2\n")

    with pytest.raises(MalformedVersionError):
        VersionManager().read_version(path)


def test_read_version_accepts_quoted_value(tmp_path: Path) -> None:
    path = _manifest(tmp_path, 'version: "2.0.0+5"\n')

    assert VersionManager().read_version(path) == VersionString("2.0.0", 5)


def test_read_version_uses_first_matching_line(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\nversion: 9.9.9+99\n")

    assert VersionManager().read_version(path) == VersionString("1.0.0", 1)


def test_read_version_ignores_indented_version_keys(tmp_path: Path) -> None:
    path = _manifest(
        tmp_path,
        "dependencies:\n  some_pkg:\n    version: 3.0.0+1\nversion: 1.1.0+3\n",
    )

    assert VersionManager().read_version(path) == VersionString("1.1.0", 3)


def test_read_version_without_build_suffix_is_malformed(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "name: myapp\nversion: 1.0.0\n")

    with pytest.raises(MalformedVersionError) as excinfo:
        VersionManager().read_version(path)

    assert excinfo.value.error_code == "FD003"
    assert "1.0.0" in str(excinfo.value)


@pytest.mark.parametrize("value", ["1.0.0+", "1.0.0+abc", "1.0.0+-3", "+5", "1.0.0+1.5"])
def test_read_version_rejects_bad_values(tmp_path: Path, value: str) -> None:
    path = _manifest(tmp_path, f"version: {value}\n")

    with pytest.raises(MalformedVersionError):
        VersionManager().read_version(path)


def test_read_version_without_version_line_is_not_found(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "name: myapp\ndescription: x\n")

    with pytest.raises(NotFoundError) as excinfo:
        VersionManager().read_version(path)

    assert excinfo.value.path == path


def test_read_version_missing_manifest_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        VersionManager().read_version(tmp_path / "pubspec.yaml")


def test_read_version_on_directory_is_file_access_error(tmp_path: Path) -> None:
    directory = tmp_path / "pubspec.yaml"
    directory.mkdir()

    with pytest.raises(FileAccessError):
        VersionManager().read_version(directory)


def test_bump_version_rewrites_only_the_version_line(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "name: myapp\nversion: 2.3.4+17\ndescription: x")

    new_version = VersionManager().bump_version(path, "2.3.5")

    assert new_version == VersionString("2.3.5", 18)
    assert path.read_bytes() == b"name: myapp\nversion: 2.3.5+18\ndescription: x"


def test_bump_then_read_returns_new_version(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+9\n")
    manager = VersionManager()

    manager.bump_version(path, "1.1.0")

    assert manager.read_version(path) == VersionString("1.1.0", 10)


def test_repeated_bumps_keep_incrementing(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+0\n")
    manager = VersionManager()

    for _ in range(3):
        manager.bump_version(path, "1.0.0")

    assert manager.read_version(path) == VersionString("1.0.0", 3)


def test_bump_with_same_name_preserves_other_bytes(tmp_path: Path) -> None:
    original = (
        "# header comment\r\n"
        "name: myapp\r\n"
        "version: 0.9.0+3\r\n"
        "\r\n"
        "dependencies:\r\n"
        "  http: ^1.0.0  \r\n"
        "  café: any\r\n"
    )
    path = _manifest(tmp_path, original)

    VersionManager().bump_version(path, "0.9.0")

    expected = original.replace("version: 0.9.0+3\r\n", "version: 0.9.0+4\r\n")
    assert path.read_bytes() == expected.encode("utf-8")


def test_bump_keeps_missing_trailing_newline(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "name: a\nversion: 1.0.0+1")

    VersionManager().bump_version(path, "1.0.1")

    assert path.read_bytes() == b"name: a\nversion: 1.0.1+2"


def test_bump_replaces_first_match_only_and_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\nother: y\nversion: 1.0.0+1\n")

    with caplog.at_level(logging.WARNING):
        VersionManager().bump_version(path, "1.0.1")

    assert path.read_text(encoding="utf-8") == "version: 1.0.1+2\nother: y\nversion: 1.0.0+1\n"
    assert "2 version lines" in caplog.text


def test_bump_propagates_malformed_current_version(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0\n")

    with pytest.raises(MalformedVersionError):
        VersionManager().bump_version(path, "1.0.1")

    assert path.read_text(encoding="utf-8") == "version: 1.0.0\n"


@pytest.mark.parametrize("new_name", ["", "   ", "1.0.0+5", "1.0\n0"])
def test_bump_rejects_unwritable_names(tmp_path: Path, new_name: str) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\n")

    with pytest.raises(MalformedVersionError):
        VersionManager().bump_version(path, new_name)

    assert path.read_text(encoding="utf-8") == "version: 1.0.0+1\n"


def test_bump_preserves_file_mode_and_leaves_no_temp_files(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\n")
    path.chmod(0o640)

    VersionManager().bump_version(path, "1.0.1")

    assert stat.S_IMODE(path.stat().st_mode) == 0o640
    assert sorted(p.name for p in tmp_path.iterdir()) == ["pubspec.yaml"]


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permissions")
def test_bump_in_read_only_directory_is_file_access_error(tmp_path: Path) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\n")
    tmp_path.chmod(0o500)

    try:
        with pytest.raises(FileAccessError):
            VersionManager().bump_version(path, "1.0.1")
    finally:
        tmp_path.chmod(0o700)

    assert path.read_text(encoding="utf-8") == "version: 1.0.0+1\n"


def _deny(monkeypatch: pytest.MonkeyPatch, target: Path, denied_mode: int) -> None:
    real_access = os.access

    def access(path, mode, *args, **kwargs):
        if Path(path) == target and mode & denied_mode:
            return False
        return real_access(path, mode, *args, **kwargs)

    monkeypatch.setattr(os, "access", access)


def _unsearchable(monkeypatch: pytest.MonkeyPatch, target: Path) -> None:
    real_stat = Path.stat

    def stat_(self, *args, **kwargs):
        if self == target:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", stat_)


def test_bump_read_only_manifest_is_file_access_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\n")
    path.chmod(0o444)
    _deny(monkeypatch, path, os.W_OK)

    with pytest.raises(FileAccessError) as excinfo:
        VersionManager().bump_version(path, "1.0.1")

    assert excinfo.value.error_code == "FD004"
    assert path.read_text(encoding="utf-8") == "version: 1.0.0+1\n"
    assert stat.S_IMODE(path.stat().st_mode) == 0o444
    assert sorted(p.name for p in tmp_path.iterdir()) == ["pubspec.yaml"]


def test_read_uninspectable_manifest_is_file_access_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _manifest(tmp_path, "version: 1.0.0+1\n")
    _unsearchable(monkeypatch, path)

    with pytest.raises(FileAccessError) as excinfo:
        VersionManager().read_version(path)

    assert excinfo.value.path == path


def test_read_manifest_below_a_file_is_not_found(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(NotFoundError):
        VersionManager().read_version(blocker / "pubspec.yaml")
