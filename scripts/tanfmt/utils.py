from typing import Mapping, TypeVar

T = TypeVar("T", bound=Mapping)


def resolve_config(config: Mapping | None, default_config: T) -> T:
    """Overlay the known keys of ``config`` onto a copy of ``default_config``.

    Keys the defaults do not declare are ignored.
    """
    _config = dict(default_config)
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config  # type: ignore[return-value]
