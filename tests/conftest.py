import itertools

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from client import BatchClient

API_PATH = "/speechtotext/v3.1"
SUBSCRIPTION_KEY = "test-key"


class FakeBatchService:
    """In-memory stand-in for the web hook endpoints of the batch service."""

    def __init__(self, page_size: int = 100):
        self.page_size = page_size
        self.webhooks: dict[str, dict] = {}
        self.pings: list[str] = []
        self.tests: list[str] = []
        self.requests: list[tuple[str, str, dict]] = []
        self._ids = itertools.count(1)

    def build_app(self) -> web.Application:
        app = web.Application(middlewares=[self._check_subscription_key])
        app.router.add_get(f"{API_PATH}/webhooks", self.list_webhooks)
        app.router.add_post(f"{API_PATH}/webhooks", self.create_webhook)
        app.router.add_post(f"{API_PATH}/webhooks/{{webhook_id:[^/:]+}}:ping", self.ping_webhook)
        app.router.add_post(f"{API_PATH}/webhooks/{{webhook_id:[^/:]+}}:test", self.test_webhook)
        app.router.add_get(f"{API_PATH}/webhooks/{{webhook_id:[^/:]+}}", self.get_webhook)
        app.router.add_patch(f"{API_PATH}/webhooks/{{webhook_id:[^/:]+}}", self.update_webhook)
        app.router.add_delete(f"{API_PATH}/webhooks/{{webhook_id:[^/:]+}}", self.delete_webhook)
        return app

    @web.middleware
    async def _check_subscription_key(self, request, handler):
        self.requests.append((request.method, request.path, dict(request.headers)))
        if request.headers.get("Ocp-Apim-Subscription-Key") != SUBSCRIPTION_KEY:
            return web.json_response(
                {
                    "code": "Unauthorized",
                    "message": "Invalid subscription key.",
                    "innerError": {"code": "InvalidSubscriptionKey"},
                },
                status=401,
            )
        return await handler(request)

    @staticmethod
    def _not_found(webhook_id: str) -> web.Response:
        return web.json_response(
            {"code": "NotFound", "message": f"Web hook {webhook_id} does not exist."},
            status=404,
        )

    async def list_webhooks(self, request):
        skip = int(request.query.get("skip", 0))
        top = int(request.query.get("top", self.page_size))
        values = list(self.webhooks.values())
        page = {"values": values[skip:skip + top]}
        if skip + top < len(values):
            page["@nextLink"] = f"{request.url.origin()}{API_PATH}/webhooks?skip={skip + top}&top={top}"
        return web.json_response(page)

    async def create_webhook(self, request):
        data = await request.json()
        if "webUrl" not in data:
            return web.json_response(
                {"code": "InvalidPayload", "message": "webUrl is required."},
                status=400,
            )

        webhook_id = f"wh-{next(self._ids)}"
        self_url = f"{request.url.origin()}{API_PATH}/webhooks/{webhook_id}"
        properties = {k: v for k, v in data.get("properties", {}).items() if k != "secret"}
        properties["apiVersion"] = "3.1"

        entity = dict(data)
        entity.update({
            "self": self_url,
            "links": {"ping": f"{self_url}:ping", "test": f"{self_url}:test"},
            "properties": properties,
            "createdDateTime": "2024-01-01T00:00:00Z",
            "lastActionDateTime": "2024-01-01T00:00:00Z",
            "status": "Succeeded",
        })
        self.webhooks[webhook_id] = entity
        return web.json_response(entity, status=201)

    async def get_webhook(self, request):
        webhook_id = request.match_info["webhook_id"]
        if webhook_id not in self.webhooks:
            return self._not_found(webhook_id)
        return web.json_response(self.webhooks[webhook_id])

    async def update_webhook(self, request):
        webhook_id = request.match_info["webhook_id"]
        if webhook_id not in self.webhooks:
            return self._not_found(webhook_id)
        data = await request.json()
        entity = self.webhooks[webhook_id]
        for key, value in data.items():
            if key == "properties":
                entity["properties"].update({k: v for k, v in value.items() if k != "secret"})
            else:
                entity[key] = value
        entity["lastActionDateTime"] = "2024-01-02T00:00:00Z"
        return web.json_response(entity)

    async def delete_webhook(self, request):
        webhook_id = request.match_info["webhook_id"]
        if self.webhooks.pop(webhook_id, None) is None:
            return self._not_found(webhook_id)
        return web.Response(status=204)

    async def ping_webhook(self, request):
        webhook_id = request.match_info["webhook_id"]
        if webhook_id not in self.webhooks:
            return self._not_found(webhook_id)
        self.pings.append(webhook_id)
        return web.Response(status=202)

    async def test_webhook(self, request):
        webhook_id = request.match_info["webhook_id"]
        if webhook_id not in self.webhooks:
            return self._not_found(webhook_id)
        self.tests.append(webhook_id)
        return web.Response(status=202)


@pytest.fixture
def fake_service():
    return FakeBatchService()


@pytest.fixture
async def server(fake_service):
    async with TestServer(fake_service.build_app()) as server:
        yield server


@pytest.fixture
def host(server):
    return f"http://{server.host}:{server.port}"


@pytest.fixture
async def batch_client(host):
    async with BatchClient(host=host, subscription_key=SUBSCRIPTION_KEY) as client:
        yield client


@pytest.fixture
async def serve():
    """Starts a throwaway service from the given routes and returns its host."""
    servers = []

    async def _serve(routes) -> str:
        app = web.Application()
        app.router.add_routes(routes)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return f"http://{server.host}:{server.port}"

    yield _serve

    for server in servers:
        await server.close()
