# src/postmark_client/utils/sanitizer.py
"""
Утилита для маскирования чувствительных данных в логах.

Используется, чтобы токены Postmark (account и server), пароли SMTP
и прочие секреты не попадали в логи клиента.
"""

import re
from typing import Any, Dict


# Список чувствительных полей (case-insensitive, частичное совпадение)
SENSITIVE_KEYS = {
    # Токены Postmark
    'x-postmark-server-token', 'x-postmark-account-token',
    'server_token', 'account_token', 'servertoken', 'accounttoken',
    'api_tokens', 'apitokens',
    # Общие токены и секреты
    'token', 'secret', 'api_key', 'apikey',
    'authorization', 'password', 'passwd',
    # SMTP и webhook credentials
    'smtp_password', 'httpauth', 'http_auth',
    'credentials', 'cookie',
}

# Регулярные выражения для обнаружения sensitive данных в строках
SENSITIVE_PATTERNS = [
    # Заголовки аутентификации Postmark в сыром виде
    (re.compile(r'(X-Postmark-(?:Server|Account)-Token[\s:=]+)([^\s,;]+)', re.IGNORECASE),
     r'\1***REDACTED***'),
    # Bearer tokens
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), r'\1***REDACTED***'),
    # Токены (формат: token=value)
    (re.compile(r'(token[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1***REDACTED***'),
    # Пароли (формат: password=value)
    (re.compile(r'(password[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1***REDACTED***'),
]


def mask_sensitive_data(data: Any, mask: str = "***REDACTED***") -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Args:
        data: Данные для маскирования (dict, list, str или любой другой тип)
        mask: Строка-заменитель

    Returns:
        Копия данных с замаскированными чувствительными полями

    Examples:
        >>> mask_sensitive_data({"X-Postmark-Server-Token": "abc", "Accept": "application/json"})
        {'X-Postmark-Server-Token': '***REDACTED***', 'Accept': 'application/json'}

        >>> mask_sensitive_data("X-Postmark-Server-Token: abc")
        'X-Postmark-Server-Token: ***REDACTED***'
    """
    # None, числа, булевы значения возвращаем как есть
    if data is None or isinstance(data, (bool, int, float)):
        return data

    if isinstance(data, str):
        return _mask_string(data, mask)

    if isinstance(data, dict):
        return _mask_dict(data, mask)

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    # Прочие объекты возвращаем как есть
    return data


def _mask_dict(data: Dict[str, Any], mask: str) -> Dict[str, Any]:
    """Маскирует чувствительные поля в словаре."""
    result = {}

    for key, value in data.items():
        key_lower = key.lower() if isinstance(key, str) else str(key).lower()

        if _is_sensitive_key(key_lower):
            result[key] = mask
        else:
            result[key] = mask_sensitive_data(value, mask)

    return result


def _mask_string(text: str, mask: str) -> str:
    """Маскирует чувствительные данные в строке по SENSITIVE_PATTERNS."""
    result = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        result = pattern.sub(replacement.replace('***REDACTED***', mask), result)
    return result


def _is_sensitive_key(key: str) -> bool:
    """
    Проверяет, является ли ключ чувствительным.

    Args:
        key: Имя ключа (в нижнем регистре)
    """
    if key in SENSITIVE_KEYS:
        return True

    return any(sensitive_key in key for sensitive_key in SENSITIVE_KEYS)

