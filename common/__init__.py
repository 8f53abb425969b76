from .util import snake_to_camel, camel_to_snake
from .env_helper import get_env_var
from .enums import EntityStatus
