import os
from typing import MutableMapping


class OsEnvironment:
    """EnvironmentView over the process environment."""

    def __init__(self, environ: MutableMapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    def lookup(self, name: str) -> str | None:
        return self._environ.get(name)

    def set(self, name: str, value: str, overwrite: bool = True) -> bool:
        if not overwrite and name in self._environ:
            return False
        # os.environ raises ValueError for names containing "=" or NUL
        self._environ[name] = value
        return True


class MemoryEnvironment:
    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def lookup(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str, overwrite: bool = True) -> bool:
        if "\x00" in name:
            raise ValueError("embedded null byte in name")
        if "\x00" in value:
            raise ValueError("embedded null byte in value")
        if not overwrite and name in self._values:
            return False
        self._values[name] = value
        return True

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)
