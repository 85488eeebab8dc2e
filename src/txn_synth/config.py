"""Configuration loading from YAML + environment overrides."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from txn_synth.schemas import MERGE_STRATEGY_VALUES, ON_EXHAUSTION_VALUES, GenerationSettings


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class AppSettings(BaseSettings):
    """App-level settings with env override."""

    model_config = SettingsConfigDict(
        env_prefix="TXN_SYNTH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    config_path: str = Field(default="config/default.yaml", alias="TXN_SYNTH_CONFIG_PATH")
    log_level: str | None = Field(default=None, alias="TXN_SYNTH_LOG_LEVEL")
    seed: int | None = Field(default=None, alias="TXN_SYNTH_SEED")
    iterations: int | None = Field(default=None, alias="TXN_SYNTH_ITERATIONS")


def validate_generation(config: dict[str, Any]) -> None:
    """Raise ValueError if generation/extraction settings are out of range."""
    gen = config.get("generation") or {}
    iterations = gen.get("iterations", 1)
    if not isinstance(iterations, int) or isinstance(iterations, bool) or iterations < 1:
        raise ValueError(f"generation.iterations must be a positive integer, got {iterations!r}")
    seed = gen.get("seed", 0)
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise ValueError(f"generation.seed must be an integer, got {seed!r}")
    policy = gen.get("on_exhaustion", "abort")
    if policy not in ON_EXHAUSTION_VALUES:
        raise ValueError(
            f"generation.on_exhaustion must be one of {sorted(ON_EXHAUSTION_VALUES)}, got {policy!r}"
        )
    for section, key in (("generation", "skip_repeats"), ("extraction", "skip_incomplete")):
        value = (config.get(section) or {}).get(key, False)
        if not isinstance(value, bool):
            raise ValueError(f"{section}.{key} must be true or false, got {value!r}")
    merge = (config.get("extraction") or {}).get("merge", "endpoint")
    if merge not in MERGE_STRATEGY_VALUES:
        raise ValueError(
            f"extraction.merge must be one of {sorted(MERGE_STRATEGY_VALUES)}, got {merge!r}"
        )


def get_config(config_path: str | None = None) -> dict[str, Any]:
    """Load merged config from defaults + YAML and apply env overrides via AppSettings."""
    settings = AppSettings()
    path = config_path or settings.config_path
    base = _default_config()
    if Path(path).exists():
        base = _deep_merge(base, _load_yaml(path))
    elif config_path:
        raise FileNotFoundError(str(path))
    if settings.log_level:
        base.setdefault("app", {})["log_level"] = settings.log_level
    if settings.seed is not None:
        base.setdefault("generation", {})["seed"] = settings.seed
    if settings.iterations is not None:
        base.setdefault("generation", {})["iterations"] = settings.iterations
    validate_generation(base)
    return base


def _default_config() -> dict[str, Any]:
    return {
        "app": {"name": "txn-chain-synth", "log_level": "INFO"},
        "ingest": {"encoding": "utf-8"},
        "generation": {
            "seed": 5,
            "iterations": 5000,
            "on_exhaustion": "abort",
            "skip_repeats": False,
        },
        "extraction": {"merge": "endpoint", "skip_incomplete": False},
    }


def generation_settings(config: dict[str, Any], **overrides: Any) -> GenerationSettings:
    """Build GenerationSettings from config sections; non-None overrides win."""
    gen = config.get("generation") or {}
    ext = config.get("extraction") or {}
    values: dict[str, Any] = {
        "seed": gen.get("seed", 5),
        "iterations": gen.get("iterations", 5000),
        "on_exhaustion": gen.get("on_exhaustion", "abort"),
        "skip_repeats": gen.get("skip_repeats", False),
        "merge": ext.get("merge", "endpoint"),
        "skip_incomplete": ext.get("skip_incomplete", False),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GenerationSettings(**values)


def get_config_hash(config: dict[str, Any]) -> str:
    """SHA256 of resolved config for run reproducibility (canonical key order)."""
    canonical = yaml.dump(config, default_flow_style=False, sort_keys=True, allow_unicode=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
