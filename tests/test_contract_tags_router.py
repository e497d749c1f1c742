from __future__ import annotations

from fastapi.testclient import TestClient

from pool_tags.api.deps import get_return_tags_use_case
from pool_tags.application.dto.contract_tags import ReturnTagsOutput
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.exceptions import (
    ReturnTagsError,
    SubgraphNotConfiguredError,
    TransportError,
    UnsupportedChainError,
)
from pool_tags.main import app


class FakeReturnTagsUseCase:
    def __init__(self, error: Exception | None = None):
        self._error = error
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        if self._error is not None:
            raise self._error
        return ReturnTagsOutput(
            chain_id=command.chain_id,
            tags=[
                ContractTag(
                    contract_address=f"eip155:{command.chain_id}:0xabc",
                    public_name_tag="USDC Pool",
                    project_name="Stargate v1",
                    website_link="https://stargate.finance/",
                    public_note="note",
                )
            ],
        )


def test_router_returns_registry_shaped_tags():
    fake = FakeReturnTagsUseCase()
    app.dependency_overrides[get_return_tags_use_case] = lambda: fake

    client = TestClient(app)
    response = client.get("/v1/contract-tags/1", headers={"X-Graph-Api-Key": "secret"})

    assert response.status_code == 200
    payload = response.json()
    assert payload[0]["Contract Address"] == "eip155:1:0xabc"
    assert payload[0]["Public Name Tag"] == "USDC Pool"
    assert payload[0]["UI/Website Link"] == "https://stargate.finance/"
    assert fake.commands[0].api_key == "secret"

    app.dependency_overrides.clear()


def test_router_maps_unsupported_chain_to_400():
    error = ReturnTagsError("7", UnsupportedChainError("7", ("1", "10")))
    app.dependency_overrides[get_return_tags_use_case] = lambda: FakeReturnTagsUseCase(error=error)

    client = TestClient(app)
    response = client.get("/v1/contract-tags/7", headers={"X-Graph-Api-Key": "secret"})

    assert response.status_code == 400
    assert "Supported chain ids: 1, 10" in response.json()["detail"]

    app.dependency_overrides.clear()


def test_router_maps_upstream_failure_to_502():
    error = ReturnTagsError("1", TransportError("Subgraph request failed with HTTP 500."))
    app.dependency_overrides[get_return_tags_use_case] = lambda: FakeReturnTagsUseCase(error=error)

    client = TestClient(app)
    response = client.get("/v1/contract-tags/1", headers={"X-Graph-Api-Key": "secret"})

    assert response.status_code == 502

    app.dependency_overrides.clear()


def test_router_maps_missing_subgraph_config_to_500():
    error = ReturnTagsError("1", SubgraphNotConfiguredError("Missing GRAPH_SUBGRAPH_ID_ETHEREUM for chain_id=1."))
    app.dependency_overrides[get_return_tags_use_case] = lambda: FakeReturnTagsUseCase(error=error)

    client = TestClient(app)
    response = client.get("/v1/contract-tags/1", headers={"X-Graph-Api-Key": "secret"})

    assert response.status_code == 500
    assert "GRAPH_SUBGRAPH_ID_ETHEREUM" in response.json()["detail"]

    app.dependency_overrides.clear()

def test_router_requires_api_key(monkeypatch):
    monkeypatch.delenv("GRAPH_API_KEY", raising=False)
    app.dependency_overrides[get_return_tags_use_case] = lambda: FakeReturnTagsUseCase()

    client = TestClient(app)
    response = client.get("/v1/contract-tags/1")

    assert response.status_code == 401

    app.dependency_overrides.clear()


def test_router_lists_supported_chains():
    client = TestClient(app)
    response = client.get("/v1/contract-tags/chains")

    assert response.status_code == 200
    assert response.json()["chain_ids"] == ["1", "10", "56", "137", "250", "8453", "42161", "43114"]
