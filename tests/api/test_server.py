import uvicorn

from mortgage_calculator.api import server
from mortgage_calculator.config import settings


class TestServe:
    def test_runs_app_with_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

        server.main(["--port", "9001"])

        assert len(calls) == 1
        app, kwargs = calls[0]
        assert app == "mortgage_calculator.api.app:app"
        assert kwargs["port"] == 9001
        assert kwargs["host"] == settings.host
        assert kwargs["reload"] is False
