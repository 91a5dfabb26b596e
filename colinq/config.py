import logging
import os
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict

logger = logging.getLogger(__name__)

_FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass
class CollectionConfig:
    """runtime switches shared by every container"""
    guard_iteration: bool = True  # raise on structural mutation inside each/until callbacks
    log_level: str = 'WARNING'

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level: '{self.log_level}'")


def _from_environment() -> CollectionConfig:
    """build the initial config, letting COLINQ_* environment variables override the defaults"""
    guard = os.environ.get('COLINQ_GUARD_ITERATION')
    level = os.environ.get('COLINQ_LOG_LEVEL')
    overrides: Dict[str, Any] = {}
    if guard is not None:
        overrides['guard_iteration'] = guard.strip().lower() not in _FALSE_VALUES
    if level:
        overrides['log_level'] = level.strip()
    return CollectionConfig(**overrides)


def _apply_log_level() -> None:
    logging.getLogger('colinq').setLevel(config.log_level)


config = _from_environment()

# only touch the package logger at import when explicitly asked to
if os.environ.get('COLINQ_LOG_LEVEL'):
    _apply_log_level()


def configure(**overrides: Any) -> CollectionConfig:
    """
    update the live configuration in place and apply the log level.
    unknown option names raise a TypeError, invalid log levels a ValueError.
    """
    known = {f.name for f in fields(CollectionConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown config option(s): {', '.join(sorted(unknown))}")

    # validate through the dataclass before touching the live instance
    updated = CollectionConfig(**{**asdict(config), **overrides})
    for name in known:
        setattr(config, name, getattr(updated, name))

    _apply_log_level()
    logger.debug(f"configuration updated: {asdict(config)}")
    return config
