from common import get_env_var


class BatchClientConfig:
    """
    Description:
        배치 서비스 REST API 접속 정보를 관리하는 클래스.
    """
    HOST = get_env_var("BATCH_CLIENT_HOST", default="https://westus.api.cognitive.microsoft.com")
    API_PATH = "/speechtotext/v3.1"
    SUBSCRIPTION_KEY = get_env_var("BATCH_CLIENT_SUBSCRIPTION_KEY", default="")
    TIMEOUT_SEC = get_env_var("BATCH_CLIENT_TIMEOUT_SEC", float, default=10.0)

    @staticmethod
    def get_base_url(host: str = None) -> str:
        return (host or BatchClientConfig.HOST).rstrip("/") + BatchClientConfig.API_PATH
