from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from common import EntityStatus
from schema.schema import Schema
from schema.webhook.webhook_events import WebHookEvents
from schema.webhook.webhook_properties import WebHookProperties


@dataclass
class WebHook(Schema):
    """
    Description:
        서비스에 등록된 웹훅 엔티티.
        새 웹훅 등록 요청 본문과 서비스 응답 모두 이 클래스로 표현한다.

    Attributes:
        self_url (str): 엔티티 자신의 URL (JSON 키: "self")
        links (dict): 관련 작업 URL 모음 (ping, test 등)
        display_name (str): 표시 이름
        description (str): 설명
        web_url (str): 이벤트를 전달받을 URL
        events (WebHookEvents): 구독할 이벤트
        properties (WebHookProperties): API 버전, 비밀 값, 오류 정보
        created_date_time (str): 생성 시각 (ISO 8601)
        last_action_date_time (str): 마지막 상태 변경 시각 (ISO 8601)
        status (EntityStatus): 처리 상태
        custom_properties (dict): 사용자 정의 속성
    """
    _WIRE_KEYS: ClassVar[dict[str, str]] = {"self_url": "self"}

    self_url: Optional[str] = None
    links: Optional[dict[str, Any]] = None

    display_name: Optional[str] = None
    description: Optional[str] = None
    web_url: Optional[str] = None
    events: Optional[WebHookEvents] = None
    properties: Optional[WebHookProperties] = None

    created_date_time: Optional[str] = None
    last_action_date_time: Optional[str] = None
    status: Optional[EntityStatus] = None

    custom_properties: Optional[dict[str, str]] = None

    def __post_init__(self):
        """객체 초기화 후 중첩 딕셔너리와 status 문자열을 각각의 객체로 변환"""
        if isinstance(self.events, dict):
            self.events = WebHookEvents.create_from_dict(self.events)
        if isinstance(self.properties, dict):
            self.properties = WebHookProperties.create_from_dict(self.properties)
        if isinstance(self.status, str):
            self.status = EntityStatus(self.status)

    @property
    def webhook_id(self) -> Optional[str]:
        """self URL의 마지막 경로 구간 (서비스가 부여한 웹훅 ID)"""
        if not self.self_url:
            return None
        return self.self_url.rstrip("/").rsplit("/", 1)[-1]

    @staticmethod
    def create(
        display_name: str,
        web_url: str,
        events: WebHookEvents,
        secret: Optional[str] = None,
        description: Optional[str] = None
    ) -> "WebHook":
        """
        Description:
            새 웹훅 등록 요청을 만드는 팩토리 메서드.
            secret이 주어진 경우에만 properties를 채운다.

        Args:
            display_name (str): 표시 이름
            web_url (str): 이벤트를 전달받을 URL
            events (WebHookEvents): 구독할 이벤트
            secret (str): 웹훅 호출 서명에 사용할 공유 비밀 값
            description (str): 설명

        Returns:
            WebHook: 등록 요청용 웹훅 엔티티
        """
        return WebHook(
            display_name=display_name,
            description=description,
            web_url=web_url,
            events=events,
            properties=WebHookProperties(secret=secret) if secret is not None else None
        )

    @classmethod
    def create_from_dict(cls, webhook_dict: dict, strict: bool = True) -> "WebHook":
        """
        Description:
            입력 딕셔너리의 키를 검증한 뒤,
            events, properties 필드를 각각의 Schema 객체로 변환하여 인스턴스를 생성합니다.
            status 문자열 변환은 __post_init__에서 처리합니다.

        Args:
            webhook_dict (dict): 입력 딕셔너리
            strict (bool): 알 수 없는 키에 대해 예외를 발생시킬지 여부 (중첩 객체에도 적용)

        Returns:
            WebHook: 생성된 인스턴스
        """
        processed_dict = cls.validate_keys(webhook_dict, strict)

        if isinstance(processed_dict.get("events"), dict):
            processed_dict["events"] = WebHookEvents.create_from_dict(processed_dict["events"], strict)
        if isinstance(processed_dict.get("properties"), dict):
            processed_dict["properties"] = WebHookProperties.create_from_dict(processed_dict["properties"], strict)

        return cls(**processed_dict)


# dict -> schema 변환 테스트: dict 필드 검증 및 인스턴스 반환
if __name__=='__main__':
    input_dict = {
        "self": "https://westus.api.cognitive.microsoft.com/speechtotext/v3.1/webhooks/0f1e2d3c",
        "displayName": "TranscriptionCompletionWebHook",
        "webUrl": "https://contoso.com/callback",
        "events": {"transcriptionCompletion": True},
        "properties": {"apiVersion": "v3.1"},
        "status": "Succeeded"
    }

    webhook = WebHook.create_from_dict(input_dict)
    print(webhook)
    print(webhook.webhook_id)
    print(webhook.as_dict(omit_none=True))
