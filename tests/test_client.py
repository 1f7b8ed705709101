"""
Tests for the access token provider and the paginated streams client
"""
from unittest.mock import patch

import pytest
import requests

from api.client import AccessTokenProvider, TwitchClient
from conftest import NOW, make_page, make_record, make_response
from core.exceptions import DecodeError, NetworkError, ProtocolError
from models.config import AppConfig
from models.types import TWITCH_STREAMS_URL, TWITCH_TOKEN_URL


class TestAccessTokenProvider:
    """Client credentials exchange"""

    def test_returns_token(self, app_config):
        with patch("utilities.network.requests.request") as mock_request:
            mock_request.return_value = make_response({"access_token": "abc", "expires_in": 5000})
            assert AccessTokenProvider(app_config).acquire() == "abc"

        mock_request.assert_called_once()
        method, url = mock_request.call_args.args
        kwargs = mock_request.call_args.kwargs
        assert method == "POST"
        assert url == TWITCH_TOKEN_URL
        assert kwargs["data"] == {
            "client_id": "test_client_id",
            "client_secret": "test_client_secret",
            "grant_type": "client_credentials",
        }

    def test_transport_failure(self, app_config):
        with patch("utilities.network.requests.request") as mock_request:
            mock_request.side_effect = requests.ConnectionError("connection refused")
            with pytest.raises(NetworkError):
                AccessTokenProvider(app_config).acquire()

    def test_error_status(self, app_config):
        with patch("utilities.network.requests.request") as mock_request:
            mock_request.return_value = make_response({"message": "invalid client"}, status_code=403)
            with pytest.raises(NetworkError) as exc:
                AccessTokenProvider(app_config).acquire()
        assert exc.value.status_code == 403

    def test_body_not_json(self, app_config):
        with patch("utilities.network.requests.request") as mock_request:
            mock_request.return_value = make_response(json_error=True)
            with pytest.raises(ProtocolError):
                AccessTokenProvider(app_config).acquire()

    @pytest.mark.parametrize("body", [{}, {"access_token": 123}, {"access_token": None}, ["abc"]])
    def test_missing_token(self, app_config, body):
        with patch("utilities.network.requests.request") as mock_request:
            mock_request.return_value = make_response(body)
            with pytest.raises(ProtocolError):
                AccessTokenProvider(app_config).acquire()

    def test_proxy_and_timeout_are_passed(self):
        config = AppConfig(
            client_id="id",
            client_secret="secret",
            https_proxy="http://proxy:3128",
            request_timeout=7.5,
        )
        with patch("utilities.network.requests.request") as mock_request:
            mock_request.return_value = make_response({"access_token": "abc"})
            AccessTokenProvider(config).acquire()

        kwargs = mock_request.call_args.kwargs
        assert kwargs["proxies"] == {"https": "http://proxy:3128"}
        assert kwargs["timeout"] == 7.5


class TestPagination:
    """Following the cursor across pages"""

    def test_consumes_every_page(self, app_config, fake_api):
        pages = [
            make_page([make_record(user_name=f"a{i}") for i in range(3)], cursor="c1"),
            make_page([make_record(user_name=f"b{i}") for i in range(2)], cursor="c2"),
            make_page([make_record(user_name="c0")]),
        ]
        request = fake_api(pages)

        with patch("utilities.network.requests.request", side_effect=request):
            client = TwitchClient("tok", app_config)
            result = list(client.iter_pages(NOW))

        assert [p.number for p in result] == [1, 2, 3]
        assert sum(len(p.entries) for p in result) == 6
        assert len(request.calls) == 3

    def test_cursor_is_sent_as_after(self, app_config, fake_api):
        request = fake_api([
            make_page([make_record()], cursor="next-page"),
            make_page([make_record()]),
        ])

        with patch("utilities.network.requests.request", side_effect=request):
            TwitchClient("tok", app_config).fetch_all(NOW)

        first, second = request.calls
        assert first[0] == "GET"
        assert first[1] == TWITCH_STREAMS_URL
        assert first[2]["params"] == {"game_id": "1469308723", "first": 100}
        assert second[2]["params"]["after"] == "next-page"
        assert first[2]["headers"] == {"Authorization": "Bearer tok", "Client-Id": "test_client_id"}

    def test_empty_cursor_ends_pagination(self, app_config, fake_api):
        request = fake_api([make_page([make_record()], cursor="")])

        with patch("utilities.network.requests.request", side_effect=request):
            entries = TwitchClient("tok", app_config).fetch_all(NOW)

        assert len(entries) == 1
        assert len(request.calls) == 1

    def test_missing_pagination_ends_pagination(self, app_config, fake_api):
        request = fake_api([{"data": [make_record()]}])

        with patch("utilities.network.requests.request", side_effect=request):
            entries = TwitchClient("tok", app_config).fetch_all(NOW)

        assert len(entries) == 1

    def test_order_is_preserved(self, app_config, fake_api):
        request = fake_api([
            make_page([make_record(user_name="first"), make_record(user_name="second")], cursor="c"),
            make_page([make_record(user_name="third")]),
        ])

        with patch("utilities.network.requests.request", side_effect=request):
            entries = TwitchClient("tok", app_config).fetch_all(NOW)

        assert [e.display_name for e in entries] == ["first", "second", "third"]

    def test_empty_page(self, app_config, fake_api):
        request = fake_api([make_page([])])

        with patch("utilities.network.requests.request", side_effect=request):
            assert TwitchClient("tok", app_config).fetch_all(NOW) == []


class TestMalformedPages:
    """A bad page aborts the whole fetch instead of ending it quietly"""

    @pytest.mark.parametrize("body", [{}, {"data": None}, {"data": {"not": "a list"}}, []])
    def test_missing_data_array_raises(self, app_config, fake_api, body):
        request = fake_api([make_page([make_record()], cursor="c"), body])

        with patch("utilities.network.requests.request", side_effect=request):
            with pytest.raises(ProtocolError):
                TwitchClient("tok", app_config).fetch_all(NOW)

    def test_body_not_json_raises(self, app_config, fake_api):
        request = fake_api([make_response(json_error=True)])

        with patch("utilities.network.requests.request", side_effect=request):
            with pytest.raises(ProtocolError):
                TwitchClient("tok", app_config).fetch_all(NOW)

    def test_bad_record_aborts(self, app_config, fake_api):
        bad = make_record()
        del bad["title"]
        request = fake_api([
            make_page([make_record()], cursor="c"),
            make_page([make_record(), bad]),
        ])

        with patch("utilities.network.requests.request", side_effect=request):
            with pytest.raises(DecodeError):
                TwitchClient("tok", app_config).fetch_all(NOW)

    def test_failed_request_aborts(self, app_config, fake_api):
        request = fake_api([
            make_page([make_record()], cursor="c"),
            make_response({"error": "Unauthorized"}, status_code=401),
        ])

        with patch("utilities.network.requests.request", side_effect=request):
            with pytest.raises(NetworkError):
                TwitchClient("tok", app_config).fetch_all(NOW)
