"""Tests for configuration loading."""

import pytest

from flowdeck.clients import DataverseClient, InMemoryWorkflowClient, get_client
from flowdeck.config import FlowdeckConfig, load_config


def test_load_config_from_env(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
api:
  token_url: https://flows.example.com/invoke
  data_url: https://org.crm.dynamics.com/api/data/v9.2/workflows
  page_size: 25
  timeout: 5
client:
  backend: inmemory
"""
    )
    monkeypatch.setenv("FLOWDECK_CONFIG", str(config_path))

    config = load_config()
    assert config.api.token_url == "https://flows.example.com/invoke"
    assert config.api.page_size == 25
    assert config.api.timeout == 5.0
    assert config.client.backend == "inmemory"


def test_env_overrides_urls(monkeypatch):
    monkeypatch.setenv("FLOWDECK_TOKEN_URL", "https://token.example.com")
    monkeypatch.setenv("FLOWDECK_DATA_URL", "https://data.example.com/workflows")

    config = load_config()
    assert config.api.token_url == "https://token.example.com"
    assert config.api.data_url == "https://data.example.com/workflows"
    assert config.api.page_size == 50
    assert config.client.backend == "dataverse"


def test_get_client_uses_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
api:
  token_url: https://flows.example.com/invoke
  data_url: https://org.crm.dynamics.com/api/data/v9.2/workflows
  page_size: 10
"""
    )
    monkeypatch.setenv("FLOWDECK_CONFIG", str(config_path))

    client = get_client()
    assert isinstance(client, DataverseClient)
    assert client.page_size == 10
    assert client.data_url.endswith("/workflows")
    assert get_client() is client


def test_get_client_backend_from_env(monkeypatch):
    monkeypatch.setenv("FLOWDECK_BACKEND", "inmemory")

    client = get_client()
    assert isinstance(client, InMemoryWorkflowClient)


def test_dataverse_backend_requires_urls():
    with pytest.raises(ValueError):
        get_client(config=FlowdeckConfig())


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        get_client(backend="sharepoint", config=FlowdeckConfig())
