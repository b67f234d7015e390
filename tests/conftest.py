import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wine_pathmap.main import app


@pytest.fixture
def root_dir(tmp_path) -> Path:
    """``tmp_path`` with symlinks resolved, so it compares equal to discovered roots."""
    return Path(os.path.realpath(tmp_path))


@pytest.fixture
def make_prefix(root_dir) -> Callable[..., Path]:
    """Return a factory building a prefix whose ``dosdevices`` entries link to *drives*.

    By default only ``c:`` -> ``../drive_c`` is created, like a fresh prefix
    without the ``z:`` root mapping.
    """

    def _make(
        drives: dict[str, str | Path] | None = None,
        name: str = "prefix",
    ) -> Path:
        prefix = root_dir / name
        dosdevices = prefix / "dosdevices"
        dosdevices.mkdir(parents=True)
        (prefix / "drive_c").mkdir()
        for entry, target in (drives if drives is not None else {"c:": "../drive_c"}).items():
            (dosdevices / entry).symlink_to(target)
        return prefix

    return _make


@pytest.fixture
def prefix(make_prefix) -> Path:
    return make_prefix()


@pytest.fixture
def drive_c(prefix) -> Path:
    return prefix / "drive_c"


@pytest.fixture
def case_sensitive(root_dir) -> None:
    probe = root_dir / "case-probe"
    probe.touch()
    if (root_dir / "CASE-PROBE").exists():
        pytest.skip("filesystem is case-insensitive")


@pytest.fixture
def client(prefix, monkeypatch) -> Generator[TestClient, None, None]:
    monkeypatch.setattr("wine_pathmap.config.settings.prefix", prefix)
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
