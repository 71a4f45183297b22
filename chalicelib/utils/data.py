import json
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from urllib.parse import parse_qs

from chalicelib.utils.exceptions import ValidationException

_leading_int = re.compile(r'\s*([+-]?\d+)')


def replace_dict_key(item, orig_key, new_key):
    if orig_key in item:
        if new_key not in item:
            item[new_key] = item[orig_key]
        del item[orig_key]


def substitute_keys(dict_to_process: dict, base_keys: dict, opt_dict=None):
    if opt_dict is None:
        opt_dict = {}
    all_keys = {**base_keys, **opt_dict}
    for key, val in all_keys.items():
        if val:
            replace_dict_key(dict_to_process, key, val)
        elif key in dict_to_process.keys():
            dict_to_process.pop(key, None)


def parse_raw_body(chalice_request) -> dict:
    """
    Request body as a dict, from json or urlencoded form data.
    Keys with None values are dropped
    """
    request_raw_body = chalice_request.raw_body
    if not request_raw_body:
        return {}
    content_type = (chalice_request.headers or {}).get('content-type', '')
    if content_type.startswith('application/x-www-form-urlencoded'):
        form = parse_qs(request_raw_body.decode('utf-8'), keep_blank_values=True)
        return {key: values[-1] for key, values in form.items()}
    try:
        item = json.loads(request_raw_body)
    except ValueError:
        raise ValidationException('Request body must be a JSON object')
    if not isinstance(item, dict):
        raise ValidationException('Request body must be a JSON object')
    return cleanup_dict(item, [None])


def cleanup_dict(item: dict, list_of_values: list):
    """ Remove None fields in dict with. Supports one nesting.  """

    def sub_clean(sub_item):
        return {
            key: value
            for key, value in sub_item.items()
            if value not in list_of_values
        }

    clean = {}
    for k, v in item.items():
        if isinstance(v, dict):
            nested = sub_clean(v)
            if len(nested.keys()) > 0:
                clean[k] = nested
        elif v not in list_of_values:
            clean[k] = v
    return clean


def is_blank(value: Any) -> bool:
    # None, '', 0 and False all count as a missing value
    return value is None or value == '' or value == 0


def parse_int(value: Any) -> Optional[int]:
    """
    Integer at the start of value, like parseInt in browsers:
    '12abc' -> 12, 2.9 -> 2, 'abc' -> None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and value not in (float('inf'), float('-inf')) else None
    if isinstance(value, str):
        match = _leading_int.match(value)
        return int(match.group(1)) if match else None
    return None


def _format_iso(value: datetime) -> str:
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _parse_iso(value) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (AttributeError, TypeError, ValueError):
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def now_iso() -> str:
    return _format_iso(datetime.now(timezone.utc))


def now_iso_after(*previous) -> str:
    """
    Current time, moved 1 ms past the latest of previous when the clock
    has not yet passed it at millisecond precision
    """
    now = datetime.now(timezone.utc)
    now = now.replace(microsecond=now.microsecond // 1000 * 1000)
    for value in previous:
        parsed = _parse_iso(value)
        if parsed is not None and now <= parsed:
            now = parsed.replace(microsecond=parsed.microsecond // 1000 * 1000) + timedelta(milliseconds=1)
    return _format_iso(now)
