import pytest

import flowdeck.clients as clients


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from real config files and cached clients."""
    monkeypatch.setenv("FLOWDECK_CONFIG", str(tmp_path / "missing.yaml"))
    for name in ("FLOWDECK_TOKEN_URL", "FLOWDECK_DATA_URL", "FLOWDECK_BACKEND"):
        monkeypatch.delenv(name, raising=False)
    clients._client_instance = None
    yield
    clients._client_instance = None


def _make_records(count: int) -> list[dict]:
    return [
        {
            "workflowid": f"wf-{i}",
            "name": f"Flow {i}",
            "uniquename": f"flow_{i}",
            "category": 5,
            "statecode": 1,
            "statuscode": 2,
            "createdon": "2024-01-01T08:00:00Z",
            "modifiedon": "2024-02-01T09:30:00Z",
        }
        for i in range(count)
    ]


@pytest.fixture
def make_records():
    """Factory for raw workflow rows as the data API returns them."""
    return _make_records
