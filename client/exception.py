from typing import Optional

from schema import EntityError


class BatchClientError(Exception):
    """
    Description:
        배치 서비스 호출 실패를 나타내는 예외.

    Attributes:
        status (int): 응답 HTTP 상태 코드 (응답을 받지 못한 경우 None)
        error (EntityError): 응답 본문의 오류 정보 (본문이 없거나 해석할 수 없는 경우 None)
    """

    def __init__(self, message: str, status: Optional[int] = None, error: Optional[EntityError] = None):
        super().__init__(message)
        self.status = status
        self.error = error
