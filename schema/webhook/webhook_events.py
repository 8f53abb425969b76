from dataclasses import dataclass
from typing import Optional

from schema.schema import Schema


@dataclass
class WebHookEvents(Schema):
    """웹훅으로 통지받을 서비스 이벤트 선택 (True로 설정된 이벤트만 전달됨)"""
    dataset_creation: Optional[bool] = None
    dataset_processing: Optional[bool] = None
    dataset_completion: Optional[bool] = None
    dataset_deletion: Optional[bool] = None

    model_creation: Optional[bool] = None
    model_processing: Optional[bool] = None
    model_completion: Optional[bool] = None
    model_deletion: Optional[bool] = None

    evaluation_creation: Optional[bool] = None
    evaluation_processing: Optional[bool] = None
    evaluation_completion: Optional[bool] = None
    evaluation_deletion: Optional[bool] = None

    transcription_creation: Optional[bool] = None
    transcription_processing: Optional[bool] = None
    transcription_completion: Optional[bool] = None
    transcription_deletion: Optional[bool] = None

    endpoint_creation: Optional[bool] = None
    endpoint_processing: Optional[bool] = None
    endpoint_completion: Optional[bool] = None
    endpoint_deletion: Optional[bool] = None

    ping: Optional[bool] = None
    challenge: Optional[bool] = None

    @staticmethod
    def transcriptions() -> "WebHookEvents":
        """전사(transcription) 작업의 생성/진행/완료/삭제 이벤트만 구독하는 설정"""
        return WebHookEvents(
            transcription_creation=True,
            transcription_processing=True,
            transcription_completion=True,
            transcription_deletion=True
        )
