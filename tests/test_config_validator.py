from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest
from conftest import write_signing_config

from flutter_deploy.api.exceptions import FileAccessError
from flutter_deploy.constants import CheckKind
from flutter_deploy.core import ConfigValidator


def test_validate_with_nothing_present(project_dir: Path) -> None:
    report = ConfigValidator().validate(project_dir)

    assert report.valid is False
    assert [check.kind for check in report.checks] == [CheckKind.PROPERTIES, CheckKind.KEYSTORE]
    assert all(not check.present for check in report.checks)


def test_validate_with_both_files_present(signed_project: Path) -> None:
    report = ConfigValidator().validate(signed_project)

    assert report.valid is True
    assert report.missing == []
    assert report.checks[0].path == signed_project / "android" / "keystore.properties"
    assert report.checks[1].path == signed_project / "android" / "keystore" / "app-release.jks"


@pytest.mark.parametrize(
    "properties, keystore, missing_kind",
    [
        (True, False, CheckKind.KEYSTORE),
        (False, True, CheckKind.PROPERTIES),
    ],
)
def test_validate_with_one_file_present(
    project_dir: Path, properties: bool, keystore: bool, missing_kind: CheckKind
) -> None:
    write_signing_config(project_dir, properties=properties, keystore=keystore)

    report = ConfigValidator().validate(project_dir)

    assert report.valid is False
    assert [check.kind for check in report.missing] == [missing_kind]


def test_validate_does_not_read_file_contents(project_dir: Path) -> None:
    write_signing_config(project_dir)
    (project_dir / "android" / "keystore.properties").write_bytes(b"\xff\xfe not properties")

    assert ConfigValidator().validate(project_dir).valid


def test_validate_treats_directory_as_missing(project_dir: Path) -> None:
    write_signing_config(project_dir, keystore=False)
    (project_dir / "android" / "keystore" / "app-release.jks").mkdir(parents=True)

    report = ConfigValidator().validate(project_dir)

    assert [check.kind for check in report.missing] == [CheckKind.KEYSTORE]


def test_validate_missing_project_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as excinfo:
        ConfigValidator().validate(tmp_path / "does-not-exist")

    assert excinfo.value.error_code == "FD004"


def test_validate_project_root_that_is_a_file_raises(tmp_path: Path) -> None:
    file_path = tmp_path / "file.txt"
    file_path.write_text("x", encoding="utf-8")

    with pytest.raises(FileAccessError):
        ConfigValidator().validate(file_path)


def test_validate_unreadable_project_root_raises(project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    real_access = os.access

    def access(path, mode, *args, **kwargs):
        if Path(path) == project_dir:
            return False
        return real_access(path, mode, *args, **kwargs)

    monkeypatch.setattr(os, "access", access)

    with pytest.raises(FileAccessError) as excinfo:
        ConfigValidator().validate(project_dir)

    assert "No read permission" in str(excinfo.value)


@pytest.mark.parametrize("blocked", ["", "android/keystore/app-release.jks"])
def test_validate_uninspectable_path_raises(signed_project: Path, monkeypatch: pytest.MonkeyPatch, blocked: str) -> None:
    target = signed_project / blocked if blocked else signed_project
    real_stat = Path.stat

    def stat_(self, *args, **kwargs):
        if self == target:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", stat_)

    with pytest.raises(FileAccessError) as excinfo:
        ConfigValidator().validate(signed_project)

    assert excinfo.value.path == target
