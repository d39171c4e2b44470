from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from reqres_client.errors import ConfigurationError


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "api": {
        "base_url": "https://reqres.in/api/",
        "timeout": 10.0,
        "connect_timeout": 5.0,
        "max_attempts": 3,
        "backoff_base": 2.0,
    },
    "cache": {
        "user_ttl": 300,
        "all_users_ttl": 600,
    },
}


def create_config(
    yaml_path: str = "config.yaml",
    env_prefix: str = "REQRES",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``REQRES__API__BASE_URL``.
        defaults: Default configuration values.
        overrides: Highest-priority values, e.g. from CLI options.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


@dataclass(frozen=True)
class ReqResApiOptions:
    base_url: str = "https://reqres.in/api/"
    timeout: float = 10.0
    connect_timeout: float = 5.0
    max_attempts: int = 3
    backoff_base: float = 2.0


@dataclass(frozen=True)
class CacheOptions:
    user_ttl: float = 300
    all_users_ttl: float = 600


def _number(cfg: AppConfig, key: str, kind: type[int] | type[float]) -> int | float:
    # env vars arrive as strings
    raw = cfg[key]
    try:
        value = kind(str(raw))
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}")
    return value


def load_api_options(cfg: AppConfig | None = None) -> ReqResApiOptions:
    if cfg is None:
        cfg = create_config()
    base_url = str(cfg["api.base_url"]).strip()
    if not base_url:
        raise ConfigurationError("api.base_url must not be empty")
    if not base_url.endswith("/"):
        base_url += "/"
    return ReqResApiOptions(
        base_url=base_url,
        timeout=float(_number(cfg, "api.timeout", float)),
        connect_timeout=float(_number(cfg, "api.connect_timeout", float)),
        max_attempts=int(_number(cfg, "api.max_attempts", int)),
        backoff_base=float(_number(cfg, "api.backoff_base", float)),
    )


def load_cache_options(cfg: AppConfig | None = None) -> CacheOptions:
    if cfg is None:
        cfg = create_config()
    return CacheOptions(
        user_ttl=_number(cfg, "cache.user_ttl", float),
        all_users_ttl=_number(cfg, "cache.all_users_ttl", float),
    )
