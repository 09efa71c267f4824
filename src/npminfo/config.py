from pathlib import Path
from typing import Dict, Optional

from .domain.package import DEFAULT_REGISTRY

CONFIG_DIR = Path.home() / ".npminfo"
CONFIG_FILE = CONFIG_DIR / "config"

REGISTRY_KEY = "NPMINFO_REGISTRY"

def _read_config() -> Dict[str, str]:
    config = {}
    if not CONFIG_FILE.exists():
        return config

    try:
        with open(CONFIG_FILE, "r") as f:
            for line in f:
                line = line.strip()
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key] = value
    except (IOError, PermissionError, OSError):
        # unreadable config is treated as empty
        return {}
    return config

def _write_config(config: Dict[str, str]):
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    try:
        with open(CONFIG_FILE, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e

def get_registry_url() -> Optional[str]:
    """get the configured registry URL from config file."""
    return _read_config().get(REGISTRY_KEY) or None

def set_registry_url(url: str):
    """set the registry URL in config file, preserving other config values."""
    config = _read_config()
    config[REGISTRY_KEY] = url
    _write_config(config)

def clear_registry_url():
    config = _read_config()
    if config.pop(REGISTRY_KEY, None) is not None:
        _write_config(config)

def resolve_registry(explicit: Optional[str] = None) -> str:
    """pick the registry: explicit flag, then config file, then the public npm registry."""
    return explicit or get_registry_url() or DEFAULT_REGISTRY
