"""
Configuration utilities for logintoken.
Provides environment lookup, duration parsing and config file loading.
"""

import json
import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


DEFAULT_ENV_PREFIX = "LOGINTOKEN_"


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = DEFAULT_ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type; a value that fails the cast
    raises ValueError naming the variable.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        return cast_type(value)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid value for {env_key}: {value!r}")


def _make_timedelta(value: float, unit: str) -> timedelta:
    try:
        return timedelta(**{unit: value})
    except OverflowError:
        raise ValueError(f"Duration out of range: {value} {unit}")


def parse_duration_string(duration_str: str) -> timedelta:
    """
    Parse duration string like '30s', '5m', '2h', '1d' into timedelta.
    A bare number is taken as minutes.
    """
    if not isinstance(duration_str, str):
        raise ValueError("Duration must be a string")

    duration_str = duration_str.strip().lower()

    pattern = r'^(-?\d+(?:\.\d+)?)\s*(ms|[smhd])?$'
    match = re.match(pattern, duration_str)

    if not match:
        raise ValueError(f"Invalid duration format: {duration_str}")

    value, unit = match.groups()
    units = {
        'ms': 'milliseconds',
        's': 'seconds',
        None: 'minutes',
        'm': 'minutes',
        'h': 'hours',
        'd': 'days',
    }
    return _make_timedelta(float(value), units[unit])


def to_duration(value: Union[str, int, float, timedelta]) -> timedelta:
    """Coerce a raw configuration value into a timedelta (numbers are minutes)."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return _make_timedelta(value, 'minutes')
    return parse_duration_string(value)


def load_config_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext in ['.json']:
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {file_path}")
    return data
