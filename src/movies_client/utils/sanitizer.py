# src/movies_client/utils/sanitizer.py
"""
Маскирование чувствительных данных перед записью в лог.
"""

import re
from typing import Any, Dict

MASK = "***REDACTED***"

# Ключи сравниваются без учёта регистра и по вхождению подстроки
SENSITIVE_KEYS = {
    'password', 'passwd', 'secret', 'token', 'api_key', 'apikey',
    'authorization', 'cookie', 'session_id', 'credentials',
}

SENSITIVE_PATTERNS = [
    # Bearer / Basic в заголовках
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), rf'\1{MASK}'),
    (re.compile(r'(Basic\s+)([A-Za-z0-9+/]+=*)', re.IGNORECASE), rf'\1{MASK}'),
    # key=value в query строках и сообщениях
    (re.compile(r'((?:api[_-]?key|token|password)=)([^\s&,;]+)', re.IGNORECASE), rf'\1{MASK}'),
]


def mask_sensitive_data(data: Any, mask: str = MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в dict, list, tuple и str.

    Examples:
        >>> mask_sensitive_data({"Authorization": "Bearer abc", "Accept": "application/json"})
        {'Authorization': '***REDACTED***', 'Accept': 'application/json'}

        >>> mask_sensitive_data("http://host/path?api_key=abc&page=1")
        'http://host/path?api_key=***REDACTED***&page=1'
    """
    if isinstance(data, str):
        return _mask_string(data, mask)

    if isinstance(data, dict):
        return _mask_dict(data, mask)

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    # Числа, None и прочие объекты как есть
    return data


def _mask_dict(data: Dict[Any, Any], mask: str) -> Dict[Any, Any]:
    result = {}
    for key, value in data.items():
        if is_sensitive_key(str(key)):
            result[key] = mask
        else:
            result[key] = mask_sensitive_data(value, mask)
    return result


def _mask_string(text: str, mask: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        text = pattern.sub(replacement.replace(MASK, mask), text)
    return text


def is_sensitive_key(key: str) -> bool:
    key = key.lower()
    return any(sensitive in key for sensitive in SENSITIVE_KEYS)
