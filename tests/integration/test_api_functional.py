import importlib

import pytest
from fastapi.testclient import TestClient

_PROVIDER_ENV = (
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_DEPLOYMENT",
    "AZURE_OPENAI_PRIMARY_KEY",
    "AZURE_OPENAI_SECONDARY_KEY",
    "OPENAI_API_KEY",
    "PORTUS_CORPUS_PATH",
)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    for name in _PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)
    # Reload so the module-level pipeline is rebuilt without a provider.
    import portus_agent.api.main as api_main

    api_main = importlib.reload(api_main)
    return TestClient(api_main.app)


def test_api_query_state_trace_metrics(client: TestClient) -> None:
    health = client.get("/health").json()
    assert health["status"] == "ok"
    assert health["llm_configured"] is False
    assert health["documents"] == 12

    query_resp = client.post(
        "/query",
        json={"question": "If Suez canal is delayed 48 hours, which shipments are affected?"},
    )
    assert query_resp.status_code == 200
    payload = query_resp.json()
    assert payload["outcome"] == "not_configured"
    assert payload["language"] == "English"
    assert len(payload["documents"]) == 3
    assert payload["analysis"]["sources"] == ["vessels:V101", "weather:Current", "ports:Singapore"]
    assert payload["analysis"]["trace"][1]["actionName"] == "check_vessel_status"

    state = client.get("/state").json()
    assert state["current_analysis"]["explain"] == payload["analysis"]["explain"]
    assert state["selected_vessel"] == "V101"
    assert state["map_focus"] == {
        "entity_id": "V101",
        "coordinates": {"x": 200, "y": 150},
        "zoom": 1.5,
    }

    trace_resp = client.get(f"/traces/{payload['trace_id']}")
    assert trace_resp.status_code == 200
    assert trace_resp.json()["outcome"] == "not_configured"
    assert client.get("/traces").json()["items"][0]["trace_id"] == payload["trace_id"]

    metrics = client.get("/metrics").json()
    assert metrics["total_requests"] == 1
    assert metrics["outcomes"] == {"not_configured": 1}


def test_api_rejects_empty_question(client: TestClient) -> None:
    assert client.post("/query", json={"question": ""}).status_code == 422


def test_api_unknown_trace_is_404(client: TestClient) -> None:
    assert client.get("/traces/does-not-exist").status_code == 404


def test_api_manual_selection(client: TestClient) -> None:
    vessel = client.post("/state/vessel", json={"vessel_id": "V102"}).json()
    assert vessel["selected_vessel"] == "V102"

    event = client.post("/state/event", json={"event": "Storm"}).json()
    assert event["selected_event"] == "storm"
    assert event["selected_vessel"] == "V102"

    focus = client.post(
        "/state/focus", json={"entity_id": "P01", "x": 120.0, "y": 80.0, "zoom": 2.0}
    ).json()
    assert focus["map_focus"]["coordinates"] == {"x": 120.0, "y": 80.0}

    cleared = client.post("/state/vessel", json={"vessel_id": None}).json()
    assert cleared["selected_vessel"] is None
    assert cleared["map_focus"]["entity_id"] == "P01"


def test_api_focus_requires_both_coordinates(client: TestClient) -> None:
    resp = client.post("/state/focus", json={"entity_id": "V101", "x": 10.0})
    assert resp.status_code == 422


def test_api_source_search_and_dataset(client: TestClient) -> None:
    search = client.post("/sources/search", json={"query": "hazardous cargo spill", "top_k": 3})
    assert search.status_code == 200
    items = search.json()["items"]
    assert [item["doc_id"] for item in items] == [
        "CUSTOMS-CLEAR-15",
        "BERTHING-ALGO-02",
        "OPS-HAZMAT-11B",
    ]
    assert all(item["score"] >= 0 for item in items)

    dataset = client.get("/dataset").json()
    assert [vessel["vessel_id"] for vessel in dataset["vessels"]] == ["V101", "V102", "V201"]
    assert len(dataset["routes"]) == 3
