import os
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, "config.yaml"))

DEFAULTS = {
    "host": "127.0.0.1",
    "port": 8000,
    "log_level": "INFO",
    "version": "dev",
    "base_url": "http://127.0.0.1:8000",
    "defaults": {"timeout": 10},
}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Read the YAML config file. A missing file yields an empty config."""
    path = path or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        return {}
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid config file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")
    return data


def _int_setting(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


def merge_config(config: Optional[Dict[str, Any]], environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Return defaults overlaid with `config`, then with environment variables.

    Environment variables supported:
      - TYPE_PROVIDER_HOST
      - TYPE_PROVIDER_PORT
      - TYPE_PROVIDER_LOG_LEVEL
      - TYPE_PROVIDER_VERSION
      - BASE_URL
      - DEFAULT_TIMEOUT
    """
    environ = os.environ if environ is None else environ
    cfg = dict(DEFAULTS)
    cfg["defaults"] = dict(DEFAULTS["defaults"])
    for key, value in (config or {}).items():
        if key == "defaults" and isinstance(value, dict):
            cfg["defaults"].update(value)
        else:
            cfg[key] = value

    host = environ.get("TYPE_PROVIDER_HOST")
    if host:
        cfg["host"] = host
    port = environ.get("TYPE_PROVIDER_PORT")
    if port:
        cfg["port"] = port
    level = environ.get("TYPE_PROVIDER_LOG_LEVEL")
    if level:
        cfg["log_level"] = level
    version = environ.get("TYPE_PROVIDER_VERSION")
    if version:
        cfg["version"] = version
    base = environ.get("BASE_URL")
    if base:
        cfg["base_url"] = base
    timeout = environ.get("DEFAULT_TIMEOUT")
    if timeout:
        cfg["defaults"]["timeout"] = timeout

    cfg["port"] = _int_setting("port", cfg["port"])
    cfg["defaults"]["timeout"] = _int_setting("timeout", cfg["defaults"]["timeout"])
    cfg["log_level"] = str(cfg["log_level"]).upper()
    cfg["version"] = str(cfg["version"])
    return cfg
