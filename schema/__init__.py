from .schema import Schema
from .entity_error import EntityError
from .webhook import WebHookProperties, WebHookEvents, WebHook
