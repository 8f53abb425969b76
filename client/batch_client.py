import asyncio
import json
import logging
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import quote

import aiohttp

from config import BatchClientConfig
from schema import EntityError, WebHook
from client.exception import BatchClientError

T = TypeVar("T")


class BatchClient:
    """
    배치 서비스의 웹훅 등록 정보를 비동기적으로 조회/등록/수정/삭제하는 클래스.
    """

    SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

    def __init__(
        self,
        host: Optional[str] = None,
        subscription_key: Optional[str] = None,
        timeout_sec: Optional[float] = None
    ):
        """
        HTTP 요청 시 세션을 재사용하기 위해 세션 객체를 속성으로 유지.
        인자가 주어지지 않은 항목은 BatchClientConfig 값을 사용.
        """
        self.session = None
        self.base_url = BatchClientConfig.get_base_url(host)
        self.subscription_key = subscription_key if subscription_key is not None else BatchClientConfig.SUBSCRIPTION_KEY
        self.timeout = aiohttp.ClientTimeout(
            total=timeout_sec if timeout_sec is not None else BatchClientConfig.TIMEOUT_SEC
        )

    async def initialize(self):
        """
        비동기 HTTP 요청을 처리하기 위한 aiohttp 세션을 초기화.
        모든 요청에 구독 키 헤더가 포함되도록 세션 기본 헤더로 설정.
        """
        self.session = aiohttp.ClientSession(
            headers={self.SUBSCRIPTION_KEY_HEADER: self.subscription_key}
        )

    async def shutdown(self):
        """
        클래스를 안전하게 종료하기 위해 세션을 정리.
        """
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> "BatchClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.shutdown()

    async def get_webhooks(self) -> list[WebHook]:
        """
        Description:
            등록된 모든 웹훅을 조회합니다.
            응답의 @nextLink가 없어질 때까지 다음 페이지를 따라가며 수집합니다.
            이미 조회한 페이지를 다시 가리키는 @nextLink는 오류로 처리합니다.

        Returns:
            list[WebHook]: 웹훅 목록
        """
        webhooks: list[WebHook] = []
        url = f"{self.base_url}/webhooks"
        visited: set[str] = set()

        while url:
            if url in visited:
                logging.error(f"Batch client error: @nextLink repeats an already fetched page ({url})")
                raise BatchClientError(f"Paging loop detected at {url}")
            visited.add(url)

            status, page = await self._request("GET", url)
            values, url = self._decode(self._decode_page, page, url, status)
            webhooks.extend(values)

        return webhooks

    async def get_webhook(self, webhook_id: str) -> WebHook:
        url = self._webhook_url(webhook_id)
        status, body = await self._request("GET", url)
        return self._decode(self._decode_webhook, body, url, status)

    async def create_webhook(self, webhook: WebHook) -> WebHook:
        """
        Description:
            새 웹훅을 등록합니다. 값이 None인 필드는 요청 본문에서 제외합니다.

        Args:
            webhook (WebHook): 등록할 웹훅 (WebHook.create로 생성)

        Returns:
            WebHook: 서비스가 생성한 웹훅 엔티티 (self URL, 상태 포함)
        """
        url = f"{self.base_url}/webhooks"
        status, body = await self._request("POST", url, webhook.as_dict(omit_none=True))
        created = self._decode(self._decode_webhook, body, url, status)
        logging.info(f"Web hook created: {created.self_url}")
        return created

    async def update_webhook(self, webhook_id: str, webhook: WebHook) -> WebHook:
        """값이 설정된 필드만 PATCH 요청으로 전달하여 웹훅을 수정"""
        url = self._webhook_url(webhook_id)
        status, body = await self._request("PATCH", url, webhook.as_dict(omit_none=True))
        return self._decode(self._decode_webhook, body, url, status)

    async def delete_webhook(self, webhook_id: str) -> None:
        await self._request("DELETE", self._webhook_url(webhook_id))
        logging.info(f"Web hook deleted: {webhook_id}")

    async def ping_webhook(self, webhook_id: str) -> int:
        """서비스가 웹훅 URL로 ping 이벤트를 보내도록 요청하고 응답 상태 코드를 반환"""
        status, _ = await self._request("POST", self._webhook_url(webhook_id, ":ping"))
        return status

    async def test_webhook(self, webhook_id: str) -> int:
        """서비스가 구독 중인 이벤트의 테스트 통지를 보내도록 요청하고 응답 상태 코드를 반환"""
        status, _ = await self._request("POST", self._webhook_url(webhook_id, ":test"))
        return status

    def _webhook_url(self, webhook_id: str, action: str = "") -> str:
        # ID에 포함된 '/', ':' 등이 경로 구분자로 해석되지 않도록 인코딩
        return f"{self.base_url}/webhooks/{quote(webhook_id, safe='')}{action}"

    async def _request(self, method: str, url: str, body: Optional[dict] = None) -> tuple[int, Any]:
        """
        Description:
            배치 서비스로 HTTP 요청을 보내고 (상태 코드, JSON 본문)을 반환합니다.
            본문이 비어 있으면 None을 반환합니다.

        Raises:
            BatchClientError: 세션 미초기화, 200~299 이외의 응답, 네트워크 오류/타임아웃
        """
        if self.session is None:
            logging.error(f"Batch client error: session is not initialized ({method} {url})")
            raise BatchClientError("BatchClient is not initialized. Call initialize() first.")

        try:
            # async with 구문은 요청이 끝나면 자동으로 리소스를 정리
            async with self.session.request(method, url, json=body, timeout=self.timeout) as response:
                payload = await self._read_json(response)

                if not 200 <= response.status < 300:
                    error = EntityError.create_from_dict(payload, strict=False) if isinstance(payload, dict) else None
                    logging.error(f"Batch client error: {method} {url} returned {response.status} ({error})")
                    raise BatchClientError(
                        f"{method} {url} failed with status {response.status}",
                        status=response.status,
                        error=error
                    )

                return response.status, payload
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logging.error(f"Batch client error: {method} {url} failed: {str(e)}")
            raise BatchClientError(f"{method} {url} failed: {str(e)}") from e

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> Any:
        """응답 본문을 JSON으로 해석. 본문이 비었거나 JSON이 아니면 None"""
        text = await response.text()
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return None

    @staticmethod
    def _decode(decode_func: Callable[[Any], T], payload: Any, url: str, status: int) -> T:
        """
        Description:
            응답 본문을 decode_func로 해석합니다.
            본문 형식이 기대와 다르면(객체가 아님, 알 수 없는 status 값 등) BatchClientError로 변환합니다.

        Raises:
            BatchClientError: 응답 본문을 해석할 수 없는 경우 (status에 응답 상태 코드 포함)
        """
        try:
            return decode_func(payload)
        except (ValueError, TypeError, AttributeError) as e:
            logging.error(f"Batch client error: unexpected response body from {url}: {str(e)}")
            raise BatchClientError(f"Unexpected response body from {url}: {str(e)}", status=status) from e

    @staticmethod
    def _decode_webhook(body: Any) -> WebHook:
        if not isinstance(body, dict):
            raise TypeError(f"expected a JSON object, got {type(body).__name__}")
        return WebHook.create_from_dict(body, strict=False)

    @staticmethod
    def _decode_page(page: Any) -> tuple[list[WebHook], Optional[str]]:
        """목록 응답 한 페이지를 (웹훅 목록, 다음 페이지 URL)로 해석"""
        if not isinstance(page, dict):
            raise TypeError(f"expected a JSON object, got {type(page).__name__}")
        values = page.get("values", [])
        if not isinstance(values, list):
            raise TypeError(f"'values' must be a list, got {type(values).__name__}")
        return [BatchClient._decode_webhook(value) for value in values], page.get("@nextLink")
