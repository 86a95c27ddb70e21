from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from .constants import DEFAULT_PAGE_SIZE


class ApiConfig(BaseModel):
    """Endpoints of the credential and data APIs."""

    token_url: str = ""
    data_url: str = ""
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    timeout: float = 30.0


class ClientConfig(BaseModel):
    """Fetch client selection."""

    backend: Literal["dataverse", "inmemory"] = "dataverse"


class FlowdeckConfig(BaseModel):
    """Top-level configuration model."""

    api: ApiConfig = ApiConfig()
    client: ClientConfig = ClientConfig()


def load_config(path: Optional[str] = None) -> FlowdeckConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to FLOWDECK_CONFIG env
            variable or 'config.yaml' in the current directory.
    """

    config_path = path or os.getenv("FLOWDECK_CONFIG", "config.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = FlowdeckConfig(**data)
    else:
        config = FlowdeckConfig()

    env_token_url = os.getenv("FLOWDECK_TOKEN_URL")
    if env_token_url:
        config.api.token_url = env_token_url
    env_data_url = os.getenv("FLOWDECK_DATA_URL")
    if env_data_url:
        config.api.data_url = env_data_url
    return config
