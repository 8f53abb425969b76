from .webhook_properties import WebHookProperties
from .webhook_events import WebHookEvents
from .webhook import WebHook
