import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    app_root: Path
    forms_dir: str
    form_suffix: str = ".json"


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    return Settings(
        app_root=Path(_getenv("FORMDEF_APP_ROOT", ".")),
        forms_dir=_getenv("FORMDEF_FORMS_DIR", "Models"),
    )
