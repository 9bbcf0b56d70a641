import pytest

from envload.infrastructure.environments import MemoryEnvironment


@pytest.fixture
def memory_env():
    return MemoryEnvironment()


@pytest.fixture
def write_env(tmp_path):
    def _write(*lines: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def unset_env(monkeypatch):
    """Remove names from os.environ and restore their original state afterwards."""

    def _unset(*names: str) -> None:
        for name in names:
            # setenv first so monkeypatch records the original state for undo
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    return _unset
