"""
CLI Tests

Runs taskie_cli.main() against the in-memory backend.

To run these tests:
    pytest tests/test_taskie_cli.py -v
"""

import logging

import pytest

import taskie_cli
from config.settings import CLIENT_ENV_OVERRIDES
from core.network import MockConnectivityManager, NetworkStatusChecker
from networking.auth.session import Session
from networking.constants import DEMO_EMAIL, DEMO_PASSWORD, DEMO_TASK_ID, DEMO_TOKEN
from networking.implementations.mock_api_service import MockRemoteApiService
from networking.models import UserDataRequest
from networking.remote_api import RemoteApi


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep config/client.yaml and logs/ out of the repo, and host TASKIE_* out of the config"""
    monkeypatch.chdir(tmp_path)
    for name in CLIENT_ENV_OVERRIDES.values():
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers main() attaches so they don't outlive the test"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def backend(monkeypatch):
    """
    One mock backend shared by every main() call in a test.

    A registered user alice@example.com/pw exists.
    """
    service = MockRemoteApiService()
    service.register_user(UserDataRequest(name="Alice", email="alice@example.com", password="pw"))

    def fake_create_remote_api(session=None, force_mock=False, config=None):
        return RemoteApi(service, session or Session())

    monkeypatch.setattr(taskie_cli, "create_remote_api", fake_create_remote_api)
    return service


def run(*argv):
    return taskie_cli.main(["--mock", "--log-dir", "cli-logs", *argv])


# =============================================================================
# COMMAND TESTS
# =============================================================================


@pytest.mark.unit
def test_status_online(capsys):
    assert run("status") == taskie_cli.EXIT_OK
    assert "Internet available" in capsys.readouterr().out


@pytest.mark.unit
def test_register_with_fresh_mock(capsys):
    code = run("register", "Bob", "bob@example.com", "pw")

    assert code == taskie_cli.EXIT_OK
    assert "created" in capsys.readouterr().out


@pytest.mark.unit
def test_login_prints_token(backend, capsys):
    code = run("login", "Alice", "alice@example.com", "pw")

    out = capsys.readouterr().out
    assert code == taskie_cli.EXIT_OK
    assert "export TASKIE_TOKEN=" in out


@pytest.mark.unit
def test_tasks_without_token_fails(backend, capsys):
    code = run("--token", "", "tasks")

    assert code == taskie_cli.EXIT_FAILED
    assert "validation" in capsys.readouterr().out


@pytest.mark.unit
def test_full_task_flow(backend, capsys):
    token = backend.login_user(
        UserDataRequest(name="Alice", email="alice@example.com", password="pw")
    ).token

    assert run("--token", token, "add", "Buy milk", "--content", "2%", "--priority", "2") == 0
    task_id = capsys.readouterr().out.strip().split()[-1]

    assert run("--token", token, "tasks") == 0
    listing = capsys.readouterr().out
    assert "Buy milk" in listing
    assert task_id in listing

    assert run("--token", token, "profile") == 0
    assert "Open tasks: 1" in capsys.readouterr().out

    assert run("--token", token, "complete", task_id) == 0
    capsys.readouterr()

    assert run("--token", token, "tasks") == 0
    assert "Nothing left to do" in capsys.readouterr().out


@pytest.mark.unit
def test_delete_reports_local_only(backend, capsys):
    code = run("--token", "whatever", "delete", "t1")

    assert code == taskie_cli.EXIT_OK
    assert "server keeps it" in capsys.readouterr().out
    assert not backend.was_called("delete_task")


@pytest.mark.unit
def test_offline_skips_call(backend, monkeypatch, capsys):
    offline = NetworkStatusChecker(MockConnectivityManager([]))
    monkeypatch.setattr(taskie_cli, "create_network_status_checker", lambda force_mock=False: offline)
    backend.clear_history()

    code = run("register", "Carol", "carol@example.com", "pw")

    assert code == taskie_cli.EXIT_OFFLINE
    assert "No internet connection" in capsys.readouterr().out
    assert backend.get_request_history() == []


@pytest.mark.unit
def test_skip_network_check(backend, monkeypatch):
    offline = NetworkStatusChecker(MockConnectivityManager([]))
    monkeypatch.setattr(taskie_cli, "create_network_status_checker", lambda force_mock=False: offline)

    code = run("--skip-network-check", "register", "Carol", "carol@example.com", "pw")

    assert code == taskie_cli.EXIT_OK
    assert backend.was_called("register_user")


@pytest.mark.unit
def test_cli_does_not_write_client_config(isolated_cwd):
    assert run("register", "Bob", "bob@example.com", "pw") == taskie_cli.EXIT_OK

    assert not (isolated_cwd / "config" / "client.yaml").exists()


# =============================================================================
# MOCK DEMO ACCOUNT TESTS
# =============================================================================


@pytest.mark.unit
def test_mock_demo_token_lists_demo_task(capsys):
    code = run("--token", DEMO_TOKEN, "tasks")

    assert code == taskie_cli.EXIT_OK
    assert DEMO_TASK_ID in capsys.readouterr().out


@pytest.mark.unit
def test_mock_demo_login(capsys):
    code = run("login", "Demo", DEMO_EMAIL, DEMO_PASSWORD)

    assert code == taskie_cli.EXIT_OK
    assert "export TASKIE_TOKEN=" in capsys.readouterr().out


@pytest.mark.unit
def test_mock_demo_complete(capsys):
    code = run("--token", DEMO_TOKEN, "complete", DEMO_TASK_ID)

    assert code == taskie_cli.EXIT_OK
    assert f"Completed task {DEMO_TASK_ID}" in capsys.readouterr().out


@pytest.mark.unit
def test_mock_demo_profile(capsys):
    code = run("--token", DEMO_TOKEN, "profile")

    out = capsys.readouterr().out
    assert code == taskie_cli.EXIT_OK
    assert DEMO_EMAIL in out
    assert "Open tasks: 1" in out
