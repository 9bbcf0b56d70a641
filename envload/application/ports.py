from typing import Protocol


class EnvironmentView(Protocol):
    def lookup(self, name: str) -> str | None: ...

    def set(self, name: str, value: str, overwrite: bool = True) -> bool: ...
