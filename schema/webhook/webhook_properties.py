from dataclasses import dataclass, field
from typing import Optional

from schema.schema import Schema
from schema.entity_error import EntityError


@dataclass
class WebHookProperties(Schema):
    """
    Description:
        웹훅 등록 정보에 딸린 부가 속성.

        세 필드 모두 서로 독립적으로 읽고 쓸 수 있으며 별도의 검증은 없다.
        값이 설정되지 않은 필드는 None을 가진다.

    Attributes:
        api_version (str): 웹훅 수신 엔드포인트가 기대하는 웹훅 API 계약 버전
        error (EntityError): 웹훅 관련 이전 작업에서 발생한 오류 정보
        secret (str): 웹훅 호출 서명/인증에 쓰이는 공유 비밀 값 (repr 출력에서 제외)
    """
    api_version: Optional[str] = None
    error: Optional[EntityError] = None
    secret: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        """객체 초기화 후 error를 딕셔너리에서 EntityError 객체로 변환"""
        if isinstance(self.error, dict):
            self.error = EntityError.create_from_dict(self.error)

    @classmethod
    def create_from_dict(cls, properties_dict: dict, strict: bool = True) -> "WebHookProperties":
        """
        Description:
            입력 딕셔너리의 키를 검증한 뒤,
            error 필드를 EntityError 객체로 변환하여 인스턴스를 생성합니다.

        Args:
            properties_dict (dict): 입력 딕셔너리
            strict (bool): 알 수 없는 키에 대해 예외를 발생시킬지 여부

        Returns:
            WebHookProperties: 생성된 인스턴스
        """
        processed_dict = cls.validate_keys(properties_dict, strict)

        # error 변환 (dict -> EntityError 객체)
        if isinstance(processed_dict.get("error"), dict):
            processed_dict["error"] = EntityError.create_from_dict(processed_dict["error"], strict)

        return cls(**processed_dict)


# dict -> schema 변환 테스트: dict 필드 검증 및 인스턴스 반환
if __name__=='__main__':
    input_dict = {
        "apiVersion": "2023-10-01",
        "secret": "abc123",
        "error": {
            "code": "Unreachable",
            "message": "Ping failed"
        }
    }

    properties = WebHookProperties.create_from_dict(input_dict)
    print(properties)
    print(properties.as_dict())

    properties = WebHookProperties()
    properties.api_version = "3.1"
    print(properties.as_dict(omit_none=True))
