"""
Environment configuration for the keyword tree trainer.

Configuration priority (highest to lowest):
1. Arguments passed to ClassifierTrainer
2. Environment variables
3. ~/.keyword_tree_env file (or the file named by KEYWORD_TREE_ENV_FILE)
4. Default values
"""

import os
from collections import ChainMap
from pathlib import Path
from typing import Any, Dict

# Cache for env file contents, keyed by path
_env_file_cache: Dict[Path, Dict[str, str]] = {}


def _env_file_path() -> Path:
    override = os.environ.get('KEYWORD_TREE_ENV_FILE')
    if override:
        return Path(override).expanduser()
    return Path.home() / '.keyword_tree_env'


def _load_env_file() -> Dict[str, str]:
    """
    Load VAR=value lines from the env file.

    Comments and blank lines are skipped; surrounding quotes are removed.

    Returns:
        Dictionary of key-value pairs from the file (empty if unreadable)
    """
    path = _env_file_path()
    if path in _env_file_cache:
        return _env_file_cache[path]

    values: Dict[str, str] = {}
    if path.exists():
        try:
            with open(path) as f:
                for line in f:
                    line = line.strip()
                    if not line or line.startswith('#') or '=' not in line:
                        continue
                    key, _, value = line.partition('=')
                    value = value.strip()
                    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
                        value = value[1:-1]
                    values[key.strip()] = value
        except (IOError, OSError):
            pass  # Unreadable file, use defaults

    _env_file_cache[path] = values
    return values


def _settings() -> ChainMap:
    """Environment variables layered over the env file, keyed without the prefix."""
    prefix = 'KEYWORD_TREE_'
    environ = {k[len(prefix):]: v for k, v in os.environ.items() if k.startswith(prefix)}
    env_file = {k[len(prefix):]: v for k, v in _load_env_file().items() if k.startswith(prefix)}
    return ChainMap(environ, env_file)


def get_trainer_config() -> Dict[str, Any]:
    """
    Get trainer configuration from environment variables, env file, or defaults.

    Returns:
        Dictionary with criterion, max_depth, min_samples_split,
        min_samples_leaf, min_impurity_decrease, random_state, inducer
        and verbosity
    """
    settings = _settings()
    max_depth = settings.get('MAX_DEPTH', '')
    return {
        'inducer': settings.get('INDUCER', 'sklearn'),
        'criterion': settings.get('CRITERION', 'entropy'),
        # Empty or non-numeric means unlimited.
        'max_depth': int(max_depth) if max_depth.isdigit() else None,
        'min_samples_split': int(settings.get('MIN_SAMPLES_SPLIT', '2')),
        'min_samples_leaf': int(settings.get('MIN_SAMPLES_LEAF', '1')),
        'min_impurity_decrease': float(settings.get('MIN_IMPURITY_DECREASE', '1e-9')),
        'random_state': int(settings.get('RANDOM_STATE', '42')),
        'verbosity': int(settings.get('VERBOSITY', '1')),
    }


def clear_config_cache() -> None:
    """Forget cached env file contents (tests and long-lived processes)."""
    _env_file_cache.clear()
