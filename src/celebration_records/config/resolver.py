"""設定リゾルバ（defaults + user config の合成と正規化）。

設計意図:
- defaults（不変）と user config（可変）を合成し、ロギング設定として扱いやすい形へ正規化する。
- I/O は持たない。呼び出し側が用意した mapping だけを扱う純粋関数とする。
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping

from celebration_records.config.defaults import DEFAULTS
from celebration_records.core.logging import LOG_LEVELS
from celebration_records.exceptions import ConfigurationError


def resolve_config(user_config: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """defaults と user config を合成し、正規化済み config を返す。

    Args:
        user_config: ユーザー設定（dict 相当）。

    Returns:
        正規化済み設定 dict（"logging" セクションを必ず持つ）。

    Raises:
        ConfigurationError: 設定の型が不正、値が許容外など。
    """
    if user_config is None:
        user_config_dict: dict[str, Any] = {}
    else:
        if not isinstance(user_config, Mapping):
            raise ConfigurationError("user_config must be a mapping.")
        user_config_dict = dict(user_config)

    merged = _deep_merge(deepcopy(DEFAULTS), user_config_dict)
    return _normalize_config(merged)


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """辞書を deep merge する（override が優先）。"""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        elif isinstance(value, Mapping):
            result[key] = dict(value)
        else:
            result[key] = value
    return result


def _normalize_config(config: dict[str, Any]) -> dict[str, Any]:
    """最小の正規化（型・許容値）を行う。"""
    cfg = dict(config)

    # ---- logging ----
    logging_cfg = _ensure_dict(cfg.get("logging"), name="logging")
    level = logging_cfg.get("level")
    if not isinstance(level, str) or not level.strip():
        raise ConfigurationError("logging.level must be a non-empty string.")

    level_u = level.strip().upper()
    if level_u not in LOG_LEVELS:
        allowed = ", ".join(sorted(LOG_LEVELS))
        raise ConfigurationError(f"logging.level must be one of: {allowed}.", context={"value": level_u})
    logging_cfg["level"] = level_u
    cfg["logging"] = logging_cfg

    return cfg


def _ensure_dict(value: Any, *, name: str) -> dict[str, Any]:
    """dict を要求し、None なら空 dict とする。"""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{name} must be a dict.")
    return dict(value)
