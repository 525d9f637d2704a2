import json

import pytest
from typer.testing import CliRunner

import doclinks.api.link.check_links as check_links_module
from doclinks.api.link.Dispatcher import Dispatcher
from doclinks.cli import main
from doclinks.cli._create_app import _create_app
from tests.conftest import FakeContextFactory, FakeSession

runner = CliRunner()


@pytest.fixture
def fake_browser(monkeypatch):
    """Route the CLI through fake contexts and a fake HEAD session."""
    factory = FakeContextFactory(statuses={"https://gone.example": 404})

    class FakeDispatcher(Dispatcher):
        def __init__(self, config, context_factory=None, session=None):
            super().__init__(config, context_factory=factory, session=FakeSession())

    monkeypatch.setattr(check_links_module, "Dispatcher", FakeDispatcher)
    for name in ("GITHUB_REPOSITORY", "GITHUB_SHA", "GITHUB_WORKSPACE"):
        monkeypatch.delenv(name, raising=False)
    return factory


def invoke(*args):
    return runner.invoke(_create_app(), list(args))


def test_check_passes(fake_browser, docs_root):
    (docs_root / "README.md").write_text("[ok](https://ok.example)\n", encoding="utf-8")

    result = invoke("--display", "json", "check", str(docs_root), "-r", "acme/docs", "-c", "abc123")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["total_links"] == 1
    assert payload["total_failures"] == 0


def test_check_fails_on_broken_link(fake_browser, docs_root):
    (docs_root / "README.md").write_text("[gone](https://gone.example)\n", encoding="utf-8")

    result = invoke("--display", "json", "check", str(docs_root), "-r", "acme/docs", "-c", "abc123")

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["failures"][0]["status"] == "404"
    assert payload["failures"][0]["file"] == "README.md"


def test_check_reads_github_environment(fake_browser, docs_root, monkeypatch):
    (docs_root / "README.md").write_text("[rel](guide.md)\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/docs")
    monkeypatch.setenv("GITHUB_SHA", "abc123")
    monkeypatch.setenv("GITHUB_WORKSPACE", str(docs_root))

    result = invoke("--display", "json", "check")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["files"][0]["links"][0]["url"] == "https://github.com/acme/docs/blob/abc123/guide.md"


def test_check_config_file_with_overrides(fake_browser, docs_root, tmp_path):
    (docs_root / "README.md").write_text("[rel](guide.md)\n", encoding="utf-8")
    config_path = tmp_path / "doclinks.json"
    config_path.write_text(
        json.dumps({"root": str(docs_root), "repository": {"owner": "acme", "name": "docs", "commit": "old"}}),
        encoding="utf-8",
    )

    result = invoke("--display", "json", "check", "--config", str(config_path), "-c", "new", "-n", "1")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["repository"] == "acme/docs@new"
    assert len(fake_browser.created) == 1


def test_check_missing_repository(fake_browser, docs_root):
    result = invoke("check", str(docs_root))
    assert result.exit_code == 1
    assert "Repository identity required" in result.stderr


def test_check_missing_root(fake_browser, tmp_path):
    result = invoke("--display", "json", "check", str(tmp_path / "nope"), "-r", "acme/docs", "-c", "abc123")
    assert result.exit_code == 1
    assert "does not exist" in json.loads(result.stdout)["errors"][0]


def test_invalid_display_format():
    result = invoke("--display", "xml", "check")
    assert result.exit_code == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("doclinks ")


def test_display_json_reaches_output(fake_browser, docs_root):
    result = invoke("--display", "json", "check", str(docs_root), "-r", "acme/docs", "-c", "abc123")
    assert result.stdout.lstrip().startswith("{")


def test_display_defaults_to_yaml(fake_browser, docs_root):
    result = invoke("check", str(docs_root), "-r", "acme/docs", "-c", "abc123")
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("errors:")


def test_partial_config_file_uses_environment(fake_browser, docs_root, tmp_path, monkeypatch):
    (docs_root / "README.md").write_text("[rel](guide.md)\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/docs")
    monkeypatch.setenv("GITHUB_SHA", "abc123")
    monkeypatch.setenv("GITHUB_WORKSPACE", str(docs_root))
    config_path = tmp_path / "doclinks.json"
    config_path.write_text(json.dumps({"pool_size": 1, "browser": {"headless": True}}), encoding="utf-8")

    result = invoke("--display", "json", "check", "--config", str(config_path))

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["repository"] == "acme/docs@abc123"
    assert payload["files"][0]["links"][0]["url"] == "https://github.com/acme/docs/blob/abc123/guide.md"
    assert len(fake_browser.created) == 1


def test_partial_config_file_with_cli_repository(fake_browser, docs_root, tmp_path):
    config_path = tmp_path / "doclinks.json"
    config_path.write_text(json.dumps({"pool_size": 1}), encoding="utf-8")

    result = invoke(
        "--display", "json", "check", str(docs_root), "--config", str(config_path), "-r", "acme/docs", "-c", "abc123"
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["repository"] == "acme/docs@abc123"


def test_invalid_config_file_value(fake_browser, docs_root, tmp_path):
    config_path = tmp_path / "doclinks.json"
    config_path.write_text(json.dumps({"pool_size": 0}), encoding="utf-8")

    result = invoke("check", str(docs_root), "--config", str(config_path), "-r", "acme/docs", "-c", "abc123")

    assert result.exit_code == 1
    assert "pool_size" in result.stderr


def test_main_usage_error_exits_1(capsys):
    assert main(["check", "--pool-size", "notanint"]) == 1
    assert "notanint" in capsys.readouterr().err


def test_main_returns_check_exit_code(fake_browser, docs_root):
    (docs_root / "README.md").write_text("[gone](https://gone.example)\n", encoding="utf-8")
    assert main(["--display", "json", "check", str(docs_root), "-r", "acme/docs", "-c", "abc123"]) == 1
