import logging
import subprocess
import sys

import pytest

from py_vec3 import Viewport, basicConfig, get_config
from py_vec3.config import Vec3Config, find_config_file, load_config

VIEWPORT_TOML = """
[pyvec3.viewport]
width = 800
height = 600
fov = 300.0
viewer_distance = 5.0
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / ".pyvec3.toml"
    path.write_text(VIEWPORT_TOML)
    return path


@pytest.mark.usefixtures("restore_config")
class TestConfigLoader:

    def test_load_viewport(self, config_file):
        config = load_config(str(config_file))
        assert config.viewport == Viewport(800, 600, 300.0, 5.0)
        assert get_config() is config

    def test_partial_viewport_keeps_defaults(self, tmp_path):
        path = tmp_path / "pyvec3.toml"
        path.write_text("[pyvec3.viewport]\nfov = 128.0\n")
        config = load_config(str(path))
        assert config.viewport == Viewport()._replace(fov=128.0)

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = tmp_path / "pyvec3.toml"
        path.write_text("[pyvec3.viewport]\nwidth = 100\nzoom = 2\n")
        with caplog.at_level(logging.WARNING, logger="py_vec3"):
            config = load_config(str(path))
        assert config.viewport.width == 100
        assert "zoom" in caplog.text

    def test_missing_section_warns(self, tmp_path, caplog):
        path = tmp_path / "pyvec3.toml"
        path.write_text("[other]\nvalue = 1\n")
        with caplog.at_level(logging.WARNING, logger="py_vec3"):
            config = load_config(str(path))
        assert config == Vec3Config()
        assert "Config has no `pyvec3` section" in caplog.text

    def test_missing_section_suppressed(self, tmp_path, caplog):
        path = tmp_path / "pyvec3.toml"
        path.write_text("[pyvec3]\n")
        with caplog.at_level(logging.WARNING, logger="py_vec3"):
            load_config(str(path), suppress_warnings=True)
        assert caplog.text == ""

    def test_search_walks_up(self, config_file, tmp_path, monkeypatch):
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert find_config_file() == str(config_file)

    def test_search_prefers_dotted_name(self, tmp_path):
        (tmp_path / "pyvec3.toml").write_text("")
        dotted = tmp_path / ".pyvec3.toml"
        dotted.write_text("")
        assert find_config_file(str(tmp_path)) == str(dotted)

    def test_basic_config_from_cwd(self, config_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        basicConfig()
        assert Viewport.default() == Viewport(800, 600, 300.0, 5.0)

    def test_basic_config_explicit_file(self, config_file):
        basicConfig(str(config_file))
        assert get_config().viewport.width == 800

    def test_invalid_toml_propagates(self, tmp_path):
        path = tmp_path / "pyvec3.toml"
        path.write_text("[pyvec3.viewport\n")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestImportDoesNotReadConfig:

    def test_import_ignores_malformed_file(self, tmp_path):
        (tmp_path / "pyvec3.toml").write_text("[broken\n")
        result = subprocess.run(
            [sys.executable, "-c", "import py_vec3; print(py_vec3.Vector3(1, 2, 3))"],
            cwd=tmp_path, capture_output=True, text=True,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "(1.0, 2.0, 3.0)"

    def test_default_viewport_until_loaded(self, config_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert Viewport.default() == Viewport()
