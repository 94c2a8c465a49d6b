from pathlib import Path
from typing import Optional
import os

from app.data.config_loader import load_config
from app.domain.models import Config

CONFIG_ENV_VAR = "VANITY_CONFIG"
_REPO_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_CONFIG_PATH = _REPO_ROOT / "vanity.yaml"

_config: Optional[Config] = None

def get_config_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return _DEFAULT_CONFIG_PATH

def get_config() -> Config:
    global _config
    if _config is None:
        _config = load_config(get_config_path())
    return _config
