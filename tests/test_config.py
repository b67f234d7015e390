from pathlib import Path

import pytest

from wine_pathmap import config
from wine_pathmap.config import Settings, resolve_prefix
from wine_pathmap.mapping.errors import PrefixNotFoundError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("WINEPREFIX", "WINEPATHMAP_PREFIX", "WINEPATHMAP_PORT", "WINEPATHMAP_HOST"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


class TestSettings:
    def test_defaults_to_home_wine(self, tmp_path) -> None:
        s = Settings()
        assert s.prefix == tmp_path / "home" / ".wine"
        assert s.host == "127.0.0.1"
        assert s.port == 8426

    def test_wineprefix(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("WINEPREFIX", str(tmp_path / "games"))
        assert Settings().prefix == tmp_path / "games"

    def test_own_variable_wins_over_wineprefix(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("WINEPREFIX", str(tmp_path / "games"))
        monkeypatch.setenv("WINEPATHMAP_PREFIX", str(tmp_path / "other"))
        assert Settings().prefix == tmp_path / "other"

    def test_tilde_expanded(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("WINEPREFIX", "~/prefixes/steam")
        assert Settings().prefix == tmp_path / "home" / "prefixes" / "steam"

    def test_server_settings_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("WINEPATHMAP_PORT", "9000")
        monkeypatch.setenv("WINEPATHMAP_HOST", "0.0.0.0")
        s = Settings()
        assert (s.host, s.port) == ("0.0.0.0", 9000)


class TestResolvePrefix:
    def test_explicit_prefix(self, tmp_path) -> None:
        assert resolve_prefix(tmp_path / "x") == tmp_path / "x"
        assert resolve_prefix(str(tmp_path / "y")) == tmp_path / "y"

    def test_configured_prefix(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr(config.settings, "prefix", tmp_path / "configured")
        assert resolve_prefix() == tmp_path / "configured"

    def test_unconfigured_prefix(self, monkeypatch) -> None:
        monkeypatch.setattr(config.settings, "prefix", Path(""))
        with pytest.raises(PrefixNotFoundError):
            resolve_prefix()

    def test_later_environment_changes_need_fresh_settings(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr(config.settings, "prefix", tmp_path / "configured")
        monkeypatch.setenv("WINEPREFIX", str(tmp_path / "later"))
        assert resolve_prefix() == tmp_path / "configured"
        assert resolve_prefix(Settings().prefix) == tmp_path / "later"
