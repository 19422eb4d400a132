"""
Argument bag helpers
Build the name-keyed parameters sent with every Slack API call
"""

import json
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel


def build_args(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the argument bag for an API call

    Parameters whose value is None were not supplied by the caller and are
    left out entirely rather than sent as empty values.

    Args:
        params: Wire parameter names mapped to (possibly None) values

    Returns:
        Ordered dict containing only the supplied parameters
    """
    return {name: value for name, value in params.items() if value is not None}


def dump_model(model: BaseModel) -> Dict[str, Any]:
    """Serialize a schema object the way Slack expects it"""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return dump_model(value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items() if v is not None}
    return value


def encode_value(value: Any) -> str:
    """
    Encode a single argument value for a form body or query string

    Strings pass through, booleans become "true"/"false", and schema
    objects, dicts and lists are sent as compact JSON. ID lists such as
    "channels" are comma-joined by the endpoint before they get here.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return _to_json(_jsonable(value))


def encode_args(args: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Encode a whole argument bag, dropping anything left unset"""
    if not args:
        return {}
    return {name: encode_value(value) for name, value in build_args(args).items()}
