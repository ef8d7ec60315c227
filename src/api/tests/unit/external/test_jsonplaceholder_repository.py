"""Unit tests for JsonPlaceholderRepository.

HTTP is served by `httpx.MockTransport`, so no network access is needed.
"""

import json
from unittest.mock import create_autospec

import httpx
import pytest

from external.infrastructure.jsonplaceholder_repository import JsonPlaceholderRepository
from external.infrastructure.observability import ExternalApiProbe
from external.ports.exceptions import ExternalFetchError
from external.ports.repositories import IExternalUserRepository

BASE_URL = "https://api.example.test"


@pytest.fixture
def mock_probe():
    return create_autospec(ExternalApiProbe, instance=True)


def make_repository(handler, probe) -> JsonPlaceholderRepository:
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return JsonPlaceholderRepository(client=client, probe=probe)


class TestProtocolCompliance:
    def test_implements_external_user_repository(self, mock_probe):
        repository = make_repository(lambda request: httpx.Response(200), mock_probe)
        assert isinstance(repository, IExternalUserRepository)


class TestGetUser:
    """Tests for fetching one user."""

    def test_requests_user_path(self, mock_probe, jsonplaceholder_user_payload):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=jsonplaceholder_user_payload)

        make_repository(handler, mock_probe).get_user("1")

        assert seen[0].method == "GET"
        assert str(seen[0].url) == f"{BASE_URL}/users/1"

    @pytest.mark.parametrize(
        ("user_id", "raw_path"),
        [
            ("../posts/7", b"/users/..%2Fposts%2F7"),
            ("..", b"/users/%2E%2E"),
            ("1?_limit=1", b"/users/1%3F_limit%3D1"),
        ],
    )
    def test_id_stays_in_user_path(self, mock_probe, user_id, raw_path):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.raw_path == b"/posts/7":
                return httpx.Response(200, json={"id": 7, "title": "post"})
            return httpx.Response(404, json={})

        with pytest.raises(ExternalFetchError) as exc_info:
            make_repository(handler, mock_probe).get_user(user_id)

        assert exc_info.value.status_code == 404
        assert seen[0].url.raw_path == raw_path

    def test_parses_body(self, mock_probe, jsonplaceholder_user_payload):
        repository = make_repository(
            lambda request: httpx.Response(200, json=jsonplaceholder_user_payload),
            mock_probe,
        )

        user = repository.get_user("1")

        assert user.id == 1
        assert user.name == "Leanne Graham"
        assert user.address.geo.lat == "-37.3159"
        assert user.company.catch_phrase == "Multi-layered client-server neural-net"

    def test_missing_strings_default_to_empty(self, mock_probe):
        repository = make_repository(
            lambda request: httpx.Response(200, json={"id": 7}), mock_probe
        )

        user = repository.get_user("7")

        assert user.name == ""
        assert user.company.catch_phrase == ""

    def test_reports_success(self, mock_probe, jsonplaceholder_user_payload):
        repository = make_repository(
            lambda request: httpx.Response(200, json=jsonplaceholder_user_payload),
            mock_probe,
        )

        repository.get_user("1")

        mock_probe.request_started.assert_called_once_with(url=f"{BASE_URL}/users/1")
        call = mock_probe.request_succeeded.call_args
        assert call.kwargs["status_code"] == 200
        assert call.kwargs["elapsed_ms"] >= 0


class TestListUsers:
    def test_parses_list(self, mock_probe, jsonplaceholder_user_payload):
        second = {**jsonplaceholder_user_payload, "id": 2, "name": "Ervin Howell"}
        repository = make_repository(
            lambda request: httpx.Response(
                200, json=[jsonplaceholder_user_payload, second]
            ),
            mock_probe,
        )

        users = repository.list_users()

        assert [u.id for u in users] == [1, 2]

    def test_requests_users_path(self, mock_probe):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=[])

        assert make_repository(handler, mock_probe).list_users() == []
        assert seen == ["/users"]


class TestFetchErrors:
    """Tests for failure mapping to ExternalFetchError."""

    def test_transport_error(self, mock_probe):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ExternalFetchError) as exc_info:
            make_repository(handler, mock_probe).get_user("1")

        assert exc_info.value.status_code is None
        assert exc_info.value.url == f"{BASE_URL}/users/1"
        mock_probe.request_failed.assert_called_once()

    def test_timeout(self, mock_probe):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ExternalFetchError):
            make_repository(handler, mock_probe).list_users()

    def test_non_success_status(self, mock_probe):
        repository = make_repository(
            lambda request: httpx.Response(404, json={}), mock_probe
        )

        with pytest.raises(ExternalFetchError) as exc_info:
            repository.get_user("999")

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "HTTP 404: failed to fetch /users/999"
        mock_probe.request_failed.assert_called_once_with(
            url=f"{BASE_URL}/users/999", reason="HTTP error", status_code=404
        )

    def test_server_error(self, mock_probe):
        repository = make_repository(lambda request: httpx.Response(503), mock_probe)

        with pytest.raises(ExternalFetchError) as exc_info:
            repository.list_users()

        assert exc_info.value.status_code == 503

    def test_malformed_json(self, mock_probe):
        repository = make_repository(
            lambda request: httpx.Response(200, content=b"not json"), mock_probe
        )

        with pytest.raises(ExternalFetchError) as exc_info:
            repository.get_user("1")

        assert "failed to unmarshal" in str(exc_info.value)

    def test_wrong_shape(self, mock_probe):
        repository = make_repository(
            lambda request: httpx.Response(200, content=json.dumps({"name": "x"})),
            mock_probe,
        )

        with pytest.raises(ExternalFetchError):
            repository.get_user("1")

        mock_probe.request_succeeded.assert_not_called()

    def test_string_id_is_rejected(self, mock_probe, jsonplaceholder_user_payload):
        repository = make_repository(
            lambda request: httpx.Response(
                200, json={**jsonplaceholder_user_payload, "id": "1"}
            ),
            mock_probe,
        )

        with pytest.raises(ExternalFetchError) as exc_info:
            repository.get_user("1")

        assert "failed to unmarshal" in str(exc_info.value)


class TestClientLifecycle:
    def test_close_leaves_injected_client_open(self, mock_probe):
        client = httpx.Client(
            base_url=BASE_URL,
            transport=httpx.MockTransport(lambda request: httpx.Response(200)),
        )
        repository = JsonPlaceholderRepository(client=client, probe=mock_probe)

        repository.close()

        assert not client.is_closed

    def test_close_closes_owned_client(self, mock_probe):
        repository = JsonPlaceholderRepository(base_url=BASE_URL, probe=mock_probe)

        repository.close()

        assert repository._client.is_closed

    def test_owned_client_uses_base_url_and_timeout(self, mock_probe):
        repository = JsonPlaceholderRepository(
            base_url=BASE_URL, timeout_seconds=2.5, probe=mock_probe
        )

        assert repository._client.base_url.scheme == "https"
        assert repository._client.base_url.host == "api.example.test"
        assert repository._client.timeout.read == 2.5
        repository.close()
