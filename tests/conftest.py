from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import pytest

from flutter_deploy.constants import BuildKind, KEYSTORE_FILE, KEYSTORE_PROPERTIES_FILE
from flutter_deploy.core import ProcessRunner
from flutter_deploy.models import CommandResult

PUBSPEC = """name: myapp
description: A Flutter app.
publish_to: 'none'

version: 1.2.3+7

environment:
  sdk: '>=3.0.0 <4.0.0'

dependencies:
  flutter:
    sdk: flutter
"""


class FakeRunner(ProcessRunner):
    """Records commands instead of running them

    ``missing`` lists executables that `which` reports as absent.
    ``failures`` maps a command prefix (joined with spaces) to an exit code.
    A successful ``flutter build <kind>`` writes the matching artifact.
    """

    def __init__(self, project_root: Optional[Path] = None,
                 missing: Optional[List[str]] = None,
                 failures: Optional[Dict[str, int]] = None,
                 produce_artifacts: bool = True):
        super().__init__()
        self.project_root = project_root
        self.missing = set(missing or [])
        self.failures = failures or {}
        self.produce_artifacts = produce_artifacts
        self.calls: List[List[str]] = []
        self.interactive_calls: List[bool] = []

    def which(self, name):
        if name in self.missing:
            return None
        return f"/usr/bin/{name}"

    def run(self, args, cwd=None, interactive=False):
        argv = [str(arg) for arg in args]
        self.calls.append(argv)
        self.interactive_calls.append(interactive)

        command_line = " ".join(argv)
        for prefix, code in self.failures.items():
            if command_line.startswith(prefix):
                return CommandResult(args=argv, returncode=code, stderr="boom")

        if argv[:2] == ["flutter", "build"] and self.produce_artifacts and self.project_root:
            artifact = self.project_root / BuildKind(argv[2]).output_path
            artifact.parent.mkdir(parents=True, exist_ok=True)
            artifact.write_bytes(b"\0" * 2048)

        if argv[:2] == ["keytool", "-genkey"]:
            keystore = Path(argv[argv.index("-keystore") + 1])
            keystore.write_bytes(b"jks")

        return CommandResult(args=argv, returncode=0)


def write_signing_config(project_root: Path, properties: bool = True, keystore: bool = True) -> None:
    if properties:
        path = project_root / KEYSTORE_PROPERTIES_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("storePassword=x\nkeyPassword=x\nkeyAlias=app-release\n", encoding="utf-8")
    if keystore:
        path = project_root / KEYSTORE_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"jks")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = (tmp_path / "myapp").resolve()
    root.mkdir()
    (root / "pubspec.yaml").write_text(PUBSPEC, encoding="utf-8")
    return root


@pytest.fixture
def signed_project(project_dir: Path) -> Path:
    write_signing_config(project_dir)
    return project_dir


@pytest.fixture
def fake_runner(project_dir: Path) -> FakeRunner:
    return FakeRunner(project_root=project_dir)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLUTTER_PROJECT_DIR", raising=False)
    monkeypatch.delenv("FLUTTER_DEPLOY_CONFIG", raising=False)
