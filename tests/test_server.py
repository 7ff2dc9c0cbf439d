import json

import pytest

from task_api import server
from task_api.errors import InvalidInputError
from task_api.generate_openapi import generate_openapi, main as generate_main
from task_api.routers.tasks import parse_task_id


class TestParseTaskId:
    @pytest.mark.parametrize("token, expected", [("1", 1), ("42", 42), ("+7", 7), ("007", 7), ("9223372036854775807", 2**63 - 1)])
    def test_valid(self, token, expected):
        assert parse_task_id(token) == expected

    @pytest.mark.parametrize("token", ["", "abc", "0", "-3", "1.0", " 1", "1_000", "١", "1/2", "9223372036854775808"])
    def test_invalid(self, token):
        with pytest.raises(InvalidInputError) as info:
            parse_task_id(token)
        assert info.value.message == "Invalid task ID"
        assert info.value.status_code == 400


class TestServerMain:
    def test_runs_uvicorn_with_settings(self, monkeypatch):
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9123")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        levels = []
        calls = []
        monkeypatch.setattr(server, "setup_logging", levels.append)
        monkeypatch.setattr(server.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))

        server.main()

        assert levels == ["WARNING"]
        assert len(calls) == 1
        app, kwargs = calls[0]
        assert kwargs == {"host": "127.0.0.1", "port": 9123, "log_config": None}
        assert app.state.task_store.count() == 0


class TestGenerateOpenapi:
    def test_writes_schema(self, tmp_path):
        out = generate_openapi(tmp_path / "nested" / "openapi.json")
        schema = json.loads(out.read_text(encoding="utf-8"))
        assert "/tasks" in schema["paths"]
        assert "/tasks/{task_id}" in schema["paths"]
        assert {t["name"] for t in schema["tags"]} >= {"health", "tasks"}

    def test_cli_accepts_output_path(self, tmp_path):
        target = tmp_path / "api.json"
        generate_main([str(target)])
        assert target.exists()
