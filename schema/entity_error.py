from dataclasses import dataclass
from typing import Optional

from schema.schema import Schema


@dataclass
class EntityError(Schema):
    """서비스가 엔티티 처리 실패 시 또는 실패한 요청의 응답 본문으로 전달하는 오류 정보"""
    code: Optional[str] = None
    message: Optional[str] = None


# dict -> schema 변환 테스트: dict 필드 검증 및 인스턴스 반환
if __name__=='__main__':
    input_dict = {
        "code": "InvalidPayload",
        "message": "The web hook URL is not reachable."
    }

    error = EntityError.create_from_dict(input_dict)
    print(error)
    print(error.as_dict())
