import os

# default 인자가 전달되지 않았음을 None과 구분하기 위한 표식
_MISSING = object()


def get_env_var(key: str, cast_func=lambda x: x, default=_MISSING):
    value = os.getenv(key)
    if value is None:
        if default is not _MISSING:
            return default
        raise ValueError(f"Environment variable '{key}' is not set.")
    try:
        return cast_func(value)
    except Exception as e:
        raise ValueError(f"Error converting environment variable '{key}': {e}") from e
