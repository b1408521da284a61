import json

import pytest

from tpbridge.lib.common.schemas import AuthDescriptor
from tpbridge.lib.devtools import list_presets, parse_variables, resolve_auth, run_compile
from tpbridge.lib.devtools.__main__ import main
from tpbridge.lib.enums import AuthScheme


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("TP_API_KEY", "TP_AUTH_TYPE", "TP_TOKEN"):
        monkeypatch.delenv(var, raising=False)


def test_run_compile_where():
    query = run_compile(AuthDescriptor(), where="Priority eq High", take=10)
    assert query == "format=json&take=10&where=Priority+eq+%27High%27"


def test_run_compile_preset_wins_over_where():
    auth = AuthDescriptor(scheme=AuthScheme.API_KEY, token="k")
    query = run_compile(auth, where="Name eq x", preset="unassigned", order_by=["Name desc"])
    assert query == "format=json&where=AssignedUser+is+null&orderBy=Name&access_token=k"


def test_run_compile_format():
    assert run_compile(AuthDescriptor(), fmt="xml") == "format=xml"


def test_list_presets_contains_open():
    assert ("open", 'EntityState.Name eq "Open"') in list_presets()


def test_parse_variables():
    assert parse_variables(["a=1", "b=x=y"]) == {"a": "1", "b": "x=y"}
    assert parse_variables(None) == {}


def test_parse_variables_rejects_missing_separator():
    with pytest.raises(ValueError, match="key=value"):
        parse_variables(["oops"])


def test_resolve_auth_prefers_config():
    auth = resolve_auth({"auth": {"type": "apikey", "token": "cfg"}}, environ={"TP_API_KEY": "env"})
    assert auth.token == "cfg"


def test_resolve_auth_from_environ():
    assert resolve_auth(environ={"TP_API_KEY": "env"}).token == "env"


def test_main_compile_with_config(tmp_path, capsys):
    cfg = tmp_path / "tp.json"
    cfg.write_text(json.dumps({"auth": {"type": "apikey", "token": "abc123"}}), encoding="utf-8")
    assert main(["compile", "--config", str(cfg)]) == 0
    assert capsys.readouterr().out.strip() == "format=json&access_token=abc123"


def test_main_compile_preset_with_vars(clean_env, capsys):
    code = main([
        "compile", "--preset", "myTasks", "--var", "currentUser=jo@example.com",
        "--include", "Project", "--include", "AssignedUser",
    ])
    assert code == 0
    out = capsys.readouterr().out.strip()
    assert out == (
        "format=json&where=AssignedUser.Email+eq+%27jo%40example.com%27"
        "&include=%5BProject%2CAssignedUser%5D"
    )


def test_main_reports_invalid_where(clean_env, capsys):
    assert main(["compile", "--where", "Priority is High"]) == 2
    assert "Invalid condition format: Priority is High" in capsys.readouterr().err


def test_main_lists_presets(capsys):
    assert main(["presets"]) == 0
    assert 'open: EntityState.Name eq "Open"' in capsys.readouterr().out
