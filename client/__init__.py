from .exception import BatchClientError
from .batch_client import BatchClient
