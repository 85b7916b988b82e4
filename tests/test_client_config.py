"""Tests for client configuration per dialect."""

import pytest

from chatgptx.core.errors import ConfigurationError
from chatgptx.infrastructure.llm.client_config import build_client_config
from tests.helpers import make_settings


def test_openai_uses_bearer_and_base_as_is() -> None:
    config = build_client_config(make_settings(api_base="https://api.openai.com/v1"))

    assert config.dialect == "openai"
    assert config.base_url == "https://api.openai.com/v1"
    assert config.headers == {"Authorization": "Bearer sk-test"}
    assert config.params == {}
    assert config.timeout == 30.0


def test_azure_trims_suffix_and_extracts_version() -> None:
    options = make_settings(
        api_type="azure",
        api_base=(
            "https://x.openai.azure.com/openai/deployments/d1/chat/completions"
            "?api-version=2023-05-15"
        ),
    )

    config = build_client_config(options)

    assert config.base_url == "https://x.openai.azure.com/openai/deployments/d1"
    assert config.api_version == "2023-05-15"
    assert config.params == {"api-version": "2023-05-15"}
    assert config.headers == {"api-key": "sk-test"}


def test_azure_url_version_beats_option() -> None:
    options = make_settings(
        api_type="azure",
        api_base="https://x.openai.azure.com/openai/deployments/d1?api-version=2024-02-01",
        api_version="2023-05-15",
    )

    assert build_client_config(options).api_version == "2024-02-01"


def test_azure_falls_back_to_version_option() -> None:
    options = make_settings(
        api_type="azure",
        api_base="https://x.openai.azure.com/openai/deployments/d1/",
        api_version="2023-05-15",
    )

    config = build_client_config(options)

    assert config.base_url == "https://x.openai.azure.com/openai/deployments/d1"
    assert config.api_version == "2023-05-15"


def test_azure_without_version_fails() -> None:
    options = make_settings(
        api_type="azure", api_base="https://x.openai.azure.com/openai/deployments/d1"
    )

    with pytest.raises(ConfigurationError):
        build_client_config(options)


def test_unsupported_dialect_fails() -> None:
    with pytest.raises(ConfigurationError, match="unsupported api type: anthropic"):
        build_client_config(make_settings(api_type="anthropic"))


def test_timeout_from_options() -> None:
    assert build_client_config(make_settings(request_timeout=10)).timeout == 10
