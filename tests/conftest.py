import pytest

from dn_mail import config as dn_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(dn_config, "CONFIG_PATH", config_path)
    monkeypatch.setattr(dn_config, "DEFAULT_ALIAS_FILE", tmp_path / "default-aliases")
    monkeypatch.setattr(dn_config._config, "_data", {})
    return config_path


@pytest.fixture()
def alias_file(tmp_path):
    path = tmp_path / "aliases"
    path.write_text("alias johnno John Citizen <john@isp.com> # personal email\n")
    return path
