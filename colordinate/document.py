# document.py

from typing import Any, Dict

import yaml

from .model import ConfigModel, GroupConfig

_SKIP = object()
_SCALARS = (str, int, float, bool, type(None))


def _representable(value: Any) -> Any:
    """Return value stripped of anything YAML cannot represent, or _SKIP."""
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (list, tuple)):
        items = (_representable(v) for v in value)
        return [v for v in items if v is not _SKIP]
    if isinstance(value, dict):
        result = {}
        for k, v in value.items():
            if not isinstance(k, _SCALARS):
                continue
            v = _representable(v)
            if v is not _SKIP:
                result[k] = v
        return result
    return _SKIP


def _group_record(conf: GroupConfig) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    if conf.color is not None:
        record["color"] = {
            side: value
            for side, value in (("fg", conf.color.fg), ("bg", conf.color.bg))
            if value is not None
        }
    if conf.style is not None:
        record["style"] = list(conf.style)
    if conf.links is not None:
        record["links"] = list(conf.links)
    for key, value in conf.extra.items():
        if key in record:
            continue
        value = _representable(value)
        if value is not _SKIP:
            record[key] = value
    return _representable(record)


def to_document(model: ConfigModel) -> str:
    """
    Serialize a ConfigModel as a YAML document.

    Records are written in model order with fields ordered color, style,
    links, then any unrecognized fields. Values YAML cannot represent are
    dropped instead of failing the whole document.
    """
    data = {
        name: _group_record(conf)
        for name, conf in model.items()
        if isinstance(conf, GroupConfig)
    }
    return yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
