import re

_FIRST_CAP_RE = re.compile(r'(.)([A-Z][a-z]+)')
_ALL_CAP_RE = re.compile(r'([a-z0-9])([A-Z])')


def snake_to_camel(snake_str: str) -> str:
    """
    Description:
        Schema 필드 이름(snake_case)을 JSON 키(camelCase)로 변환.
        예) "api_version" -> "apiVersion", "secret" -> "secret"
    """
    head, *rest = snake_str.split('_')
    return head + ''.join(part.title() for part in rest)


def camel_to_snake(camel_str: str) -> str:
    """
    Description:
        JSON 키(camelCase)를 Schema 필드 이름(snake_case)으로 변환.
        대문자가 없는 키(이미 snake_case이거나 단일 단어)는 그대로 반환.
        예) "createdDateTime" -> "created_date_time", "display_name" -> "display_name"
    """
    if not any(c.isupper() for c in camel_str):
        return camel_str
    s1 = _FIRST_CAP_RE.sub(r'\1_\2', camel_str)
    return _ALL_CAP_RE.sub(r'\1_\2', s1).lower()
