"""Configuration resolution and merging logic.

This module provides the single entrypoint for configuration resolution:
resolve_config(). It merges ParamConfig and UserConfig in precedence order
and returns a validated InternalConfig.

Precedence (highest to lowest):
1. UserConfig (user file)
2. ParamConfig (expert defaults)
"""

from typing import Union, Optional
from hmpi.schemas.param import ParamConfig
from hmpi.schemas.user import UserConfig
from hmpi.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
    >>> override = {"b": {"d": 4, "e": 5}, "f": 6}
    >>> deep_merge(base, override)
    {'a': 1, 'b': {'c': 2, 'd': 4, 'e': 5}, 'f': 6}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Union[dict, ParamConfig, None] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
) -> InternalConfig:
    """Resolve final runtime configuration from param and user configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Expert configuration. ``None`` means ``ParamConfig()``.
    user_cfg : dict or UserConfig, optional
        User configuration with overrides.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration

    Raises
    ------
    ValidationError
        If any config fails Pydantic validation

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(DISPLAY_PRECISION=3))
    >>> config.report.precision
    3
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if user_cfg is None or (isinstance(user_cfg, dict) and not user_cfg):
        user = UserConfig()
    elif not isinstance(user_cfg, UserConfig):
        user = UserConfig.model_validate(user_cfg)
    else:
        user = user_cfg

    merged = deep_merge(param.model_dump(), user.to_internal_overrides())

    return InternalConfig.model_validate(merged)
