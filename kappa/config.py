from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (kappa package directory)
_KAPPA_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _KAPPA_DIR / 'prelude' / 'core.clj'
_DEFAULT_PROMPT = 'λ> '


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_prelude_path() -> Path:
    return path_from_env('KAPPA_PRELUDE_PATH', _DEFAULT_PRELUDE)


def get_prompt() -> str:
    return os.environ.get('KAPPA_PROMPT', _DEFAULT_PROMPT)
