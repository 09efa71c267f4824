"""test suite for the config file."""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from npminfo import config
from npminfo.domain.package import DEFAULT_REGISTRY


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """point the config file at a temporary directory."""
    directory = tmp_path / ".npminfo"
    monkeypatch.setattr(config, "CONFIG_DIR", directory)
    monkeypatch.setattr(config, "CONFIG_FILE", directory / "config")
    return directory


class TestRegistryConfig:
    def test_unset(self, config_dir):
        assert config.get_registry_url() is None
        assert config.resolve_registry() == DEFAULT_REGISTRY

    def test_set_and_get(self, config_dir):
        config.set_registry_url("https://registry.npmmirror.com/")
        assert config.get_registry_url() == "https://registry.npmmirror.com/"
        assert (config_dir / "config").read_text() == "NPMINFO_REGISTRY=https://registry.npmmirror.com/\n"

    def test_preserves_other_keys(self, config_dir):
        config_dir.mkdir()
        (config_dir / "config").write_text("OTHER=value\n")
        config.set_registry_url("https://r.example.com/")
        content = (config_dir / "config").read_text()
        assert "OTHER=value" in content
        assert "NPMINFO_REGISTRY=https://r.example.com/" in content

    def test_clear(self, config_dir):
        config.set_registry_url("https://r.example.com/")
        config.clear_registry_url()
        assert config.get_registry_url() is None

    def test_clear_without_config(self, config_dir):
        config.clear_registry_url()
        assert not (config_dir / "config").exists()

    def test_resolve_prefers_explicit(self, config_dir):
        config.set_registry_url("https://configured.example.com/")
        assert config.resolve_registry("https://flag.example.com/") == "https://flag.example.com/"
        assert config.resolve_registry() == "https://configured.example.com/"

    def test_write_failure(self, config_dir, monkeypatch):
        def fail(*args, **kwargs):
            raise PermissionError("read-only")

        config_dir.mkdir()
        monkeypatch.setattr(config, "open", fail, raising=False)
        with pytest.raises(RuntimeError, match="failed to write config file"):
            config.set_registry_url("https://r.example.com/")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
