from dotenv import load_dotenv
load_dotenv()

from .batch_client_config import BatchClientConfig
