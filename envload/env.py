from __future__ import annotations

import os

from envload.application.loader import Loader
from envload.application.ports import EnvironmentView
from envload.domain.models import LoadFlags, LoadReport
from envload.infrastructure.environments import OsEnvironment


def load(
    path: str | os.PathLike[str] = ".env",
    flags: LoadFlags = LoadFlags.NONE,
    environment: EnvironmentView | None = None,
) -> None:
    """Populate the environment from a dotenv-style file.

    Existing names are replaced unless ``flags`` includes ``LoadFlags.PRESERVE``.
    Problems are reported per line through logging and never raised.
    """
    load_report(path, flags, environment)


def load_report(
    path: str | os.PathLike[str] = ".env",
    flags: LoadFlags = LoadFlags.NONE,
    environment: EnvironmentView | None = None,
) -> LoadReport:
    env = OsEnvironment() if environment is None else environment
    return Loader(env).load_file(path, flags)


def get_with_default(
    name: str, default: str = "", environment: EnvironmentView | None = None
) -> str:
    env = OsEnvironment() if environment is None else environment
    value = env.lookup(name)
    return default if value is None else value
