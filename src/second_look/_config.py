"""Thresholds come from three places: built-in defaults, the
[tool.second-look] table in pyproject.toml, and CLI flags. A flag beats
the file, the file beats the default. Ignore patterns from both add up.
"""  # sl:vetted

import os
import tomllib

from second_look._heuristics import DEFAULTS


class ConfigError(Exception):
    """The config file is unreadable or holds keys we don't understand."""


def _table(data, path):
    tool = data.get("tool", {})
    table = tool.get("second-look", tool.get("second_look", {})) if isinstance(tool, dict) else None
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [tool.second-look] must be a table")
    return table


def load_config(root, config_path=None):
    """Read and validate [tool.second-look]; an absent pyproject.toml is an empty config."""
    if config_path is None:
        base = root if os.path.isdir(root) else os.path.dirname(root)
        path = os.path.join(base, "pyproject.toml")
        if not os.path.isfile(path):
            return {}
    else:
        path = config_path

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{path}: {e.strerror or e}") from e

    config = {}
    for key, value in _table(data, path).items():
        name = key.replace("-", "_")
        if name in DEFAULTS:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{path}: '{key}' must be a non-negative integer, got {value!r}")
        elif name == "ignore":
            if not isinstance(value, list) or not all(isinstance(pattern, str) for pattern in value):
                raise ConfigError(f"{path}: 'ignore' must be a list of glob strings")
        else:
            raise ConfigError(f"{path}: unknown key '{key}' in [tool.second-look]")
        config[name] = value
    return config


def apply_config(args, config):
    """Fill every threshold the CLI left unset, from config then defaults."""
    for name, default in DEFAULTS.items():
        if getattr(args, name, None) is None:
            setattr(args, name, config.get(name, default))
    args.ignore = list(config.get("ignore", [])) + list(getattr(args, "ignore", None) or [])
    return args
