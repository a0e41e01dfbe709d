import pytest
from redis.exceptions import AuthenticationError
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from tests.conftest import FakeCacheConnection


def test_root_returns_service_info_without_touching_cache(client, fake_cache):
    response = client.get("/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["service"] == "Cache Probe Service"
    assert payload["endpoints"]["health"] == "/health"
    assert payload["redis_config"] == {
        "host": "cache.internal",
        "port": 6379,
        "tls": False,
        "auth_enabled": False,
    }
    assert "timestamp" in payload
    assert fake_cache.open_count == 0
    assert not fake_cache.is_open


def test_root_reports_tls_and_auth_without_leaking_password(monkeypatch, make_client):
    monkeypatch.setenv("REDIS_TLS", "true")
    monkeypatch.setenv("REDIS_PASSWORD", "s3cret")
    broken = FakeCacheConnection(fail=RedisConnectionError("unreachable"))

    with make_client(broken) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json()["redis_config"]["tls"] is True
    assert response.json()["redis_config"]["auth_enabled"] is True
    assert "s3cret" not in response.text


def test_set_then_get_returns_value(client):
    set_response = client.get("/set", params={"key": "greeting", "value": "hello"})
    assert set_response.status_code == 200
    assert set_response.json()["success"] is True
    assert set_response.json()["operation"] == "set"
    assert set_response.json()["key"] == "greeting"
    assert set_response.json()["value"] == "hello"

    get_response = client.get("/get", params={"key": "greeting"})
    assert get_response.status_code == 200
    payload = get_response.json()
    assert payload["success"] is True
    assert payload["value"] == "hello"
    assert payload["found"] is True


def test_get_missing_key_is_not_found(client):
    response = client.get("/get", params={"key": "never-set"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["found"] is False
    assert payload["value"] is None


def test_set_requires_key_and_value(make_client):
    broken = FakeCacheConnection(fail=RedisConnectionError("unreachable"))
    with make_client(broken) as client:
        for params in ({}, {"key": "k"}, {"value": "v"}, {"key": "", "value": "v"}):
            response = client.get("/set", params=params)
            assert response.status_code == 400
            assert response.json()["example"] == "/set?key=mykey&value=myvalue"

    assert not broken.is_open


def test_get_requires_key(make_client):
    broken = FakeCacheConnection(fail=RedisConnectionError("unreachable"))
    with make_client(broken) as client:
        response = client.get("/get")

    assert response.status_code == 400
    assert response.json() == {
        "error": "Key query parameter is required",
        "example": "/get?key=mykey",
    }


def test_set_and_get_report_cache_errors(make_client):
    broken = FakeCacheConnection(
        fail=RedisConnectionError("Error 111 connecting to cache.internal:6379. Connection refused.")
    )
    with make_client(broken) as client:
        set_response = client.get("/set", params={"key": "k", "value": "v"})
        get_response = client.get("/get", params={"key": "k"})

    assert set_response.status_code == 500
    assert set_response.json()["success"] is False
    assert set_response.json()["operation"] == "set"
    assert "Connection refused" in set_response.json()["error"]
    assert set_response.json()["error_code"] == "ECONNREFUSED"

    assert get_response.status_code == 500
    assert get_response.json()["success"] is False
    assert get_response.json()["operation"] == "get"


def test_health_succeeds_and_round_trips_value(client, fake_cache):
    response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["redis"] == "ok"
    assert payload["redis_host"] == "cache.internal"
    assert payload["redis_port"] == 6379
    assert payload["ping_response"] == "PONG"
    assert payload["test_value"] == fake_cache.store["health_check"]
    assert fake_cache.open_count == 1


def test_connection_opened_once_and_closed_on_shutdown(make_client):
    cache = FakeCacheConnection()
    with make_client(cache) as client:
        client.get("/health")
        client.get("/set", params={"key": "a", "value": "1"})
        client.get("/get", params={"key": "a"})
        assert cache.is_open

    assert cache.open_count == 1
    assert not cache.is_open


def test_health_failure_includes_troubleshooting(make_client):
    broken = FakeCacheConnection(fail=AuthenticationError("invalid password"))
    with make_client(broken) as client:
        response = client.get("/health")

    assert response.status_code == 500
    payload = response.json()
    assert payload["status"] == "unhealthy"
    assert payload["redis"] == "error"
    assert payload["error"] == "invalid password"
    assert payload["error_code"] == "NOAUTH"
    assert payload["error_type"] == "AuthenticationError"
    assert set(payload["troubleshooting"]) == {
        "check_vpc_connector",
        "check_security_groups",
        "check_nacls",
        "check_redis_endpoint",
    }


@pytest.mark.parametrize("failing_command", ["ping", "set", "get"])
def test_health_fails_when_any_command_after_connect_fails(make_client, failing_command):
    cache = FakeCacheConnection(
        fail_on={failing_command: RedisTimeoutError("Timeout reading from socket")}
    )
    with make_client(cache) as client:
        response = client.get("/health")

    assert cache.open_count == 1
    assert response.status_code == 500
    payload = response.json()
    assert payload["status"] == "unhealthy"
    assert payload["error_code"] == "ETIMEDOUT"
    assert set(payload["troubleshooting"]) == {
        "check_vpc_connector",
        "check_security_groups",
        "check_nacls",
        "check_redis_endpoint",
    }
