from pathlib import Path

from pytest import MonkeyPatch, fixture

from sassz.configuring import settings


@fixture
def working_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    working_dir = tmp_path / "work"
    working_dir.mkdir()
    monkeypatch.chdir(working_dir)
    monkeypatch.setattr(settings, "_user_config_dir", tmp_path / "config")
    return working_dir
