from pathlib import Path

from formdef.config import load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FORMDEF_APP_ROOT", raising=False)
    monkeypatch.delenv("FORMDEF_FORMS_DIR", raising=False)
    settings = load_settings()
    assert settings.app_root == Path(".")
    assert settings.forms_dir == "Models"
    assert settings.form_suffix == ".json"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FORMDEF_APP_ROOT", f"  {tmp_path}  ")
    monkeypatch.setenv("FORMDEF_FORMS_DIR", "Forms")
    settings = load_settings()
    assert settings.app_root == tmp_path
    assert settings.forms_dir == "Forms"
