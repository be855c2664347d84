"""Tests for nexmo.config module."""

import os
import threading
from unittest import mock

import pytest

from nexmo import Client, ConfigurationError, Credentials
from nexmo.config import (
    DEFAULT_ENDPOINT_URL,
    endpoint_url,
    reset_endpoint_url,
    resolve_credentials,
    set_endpoint_url,
)


class TestResolveCredentials:
    """Test resolve_credentials function."""

    def test_explicit_values_win(self):
        env = {"NEXMO_API_KEY": "env-key", "NEXMO_API_SECRET": "env-secret"}

        creds = resolve_credentials("key", "secret", environ=env)

        assert creds == Credentials(key="key", secret="secret")

    def test_falls_back_to_environment(self):
        env = {"NEXMO_API_KEY": "env-key", "NEXMO_API_SECRET": "env-secret"}

        creds = resolve_credentials(environ=env)

        assert creds.key == "env-key"
        assert creds.secret == "env-secret"

    def test_mixes_explicit_and_environment(self):
        creds = resolve_credentials(key="key", environ={"NEXMO_API_SECRET": "env-secret"})

        assert creds == Credentials(key="key", secret="env-secret")

    def test_reads_os_environ_by_default(self):
        env = {"NEXMO_API_KEY": "os-key", "NEXMO_API_SECRET": "os-secret"}
        with mock.patch.dict(os.environ, env, clear=True):
            creds = resolve_credentials()
        assert creds == Credentials(key="os-key", secret="os-secret")

    def test_missing_key_names_variable(self):
        with pytest.raises(ConfigurationError, match="NEXMO_API_KEY"):
            resolve_credentials(environ={"NEXMO_API_SECRET": "secret"})

    def test_missing_secret_names_variable(self):
        with pytest.raises(ConfigurationError, match="NEXMO_API_SECRET"):
            resolve_credentials(key="key", environ={})

    def test_empty_values_are_missing(self):
        with pytest.raises(ConfigurationError):
            resolve_credentials(environ={"NEXMO_API_KEY": "", "NEXMO_API_SECRET": ""})

    def test_credentials_are_immutable(self):
        creds = resolve_credentials("key", "secret", environ={})
        with pytest.raises(AttributeError):
            creds.key = "other"

    def test_repr_hides_secret(self):
        assert "s3cr3t" not in repr(Credentials(key="key", secret="s3cr3t"))


class TestClientConstruction:
    def test_fails_before_any_request(self, transport):
        with mock.patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigurationError):
                Client(transport=transport)
        assert transport.requests == []

    def test_uses_environment_credentials(self, transport):
        env = {"NEXMO_API_KEY": "env-key", "NEXMO_API_SECRET": "env-secret"}
        with mock.patch.dict(os.environ, env, clear=True):
            client = Client(transport=transport)

        client.get_verification("abc123")

        assert client.key == "env-key"
        assert transport.query()["api_secret"] == ["env-secret"]


class TestEndpointUrl:
    def test_default(self):
        assert endpoint_url() == DEFAULT_ENDPOINT_URL == "https://api.nexmo.com"

    def test_set_and_reset(self):
        set_endpoint_url("https://example.test")
        assert endpoint_url() == "https://example.test"

        reset_endpoint_url()
        assert endpoint_url() == DEFAULT_ENDPOINT_URL

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            set_endpoint_url("")

    def test_concurrent_writes_leave_a_written_value(self):
        urls = [f"https://host{i}.example.test" for i in range(20)]
        threads = [threading.Thread(target=set_endpoint_url, args=(url,)) for url in urls]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert endpoint_url() in urls
