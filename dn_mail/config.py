from pathlib import Path

import yaml

CONFIG_DIR = Path.home() / ".config" / "dn-mail"
CONFIG_PATH = CONFIG_DIR / "config.yaml"
DEFAULT_ALIAS_FILE = Path.home() / ".config" / "neomutt" / "aliases"


class Config:
    _instance: "Config | None" = None
    _data: dict = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._data = {}
            cls._instance._load()
        return cls._instance

    def _load(self):
        if not CONFIG_PATH.exists():
            self._data = {}
            return
        try:
            with open(CONFIG_PATH) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            data = None
        self._data = data if isinstance(data, dict) else {}

    def _save(self):
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_PATH, "w") as f:
            yaml.dump(self._data, f, default_flow_style=False, allow_unicode=True)

    def reload(self) -> None:
        self._load()

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def set(self, key: str, value) -> None:
        self._data[key] = value
        self._save()


_config = Config()


def get_alias_file(override: str | Path | None = None) -> Path:
    """Alias file path: explicit override, then config file, then neomutt default."""
    if override:
        return Path(override).expanduser()
    configured = _config.get("alias_file")
    if configured and isinstance(configured, str):
        return Path(configured).expanduser()
    return DEFAULT_ALIAS_FILE


def set_alias_file(path: str | Path) -> None:
    _config.set("alias_file", str(Path(path).expanduser()))


def get_buffer_overrides() -> dict:
    overrides = _config.get("buffer", {})
    return overrides if isinstance(overrides, dict) else {}
