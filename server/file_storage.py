"""File-based storage implementation."""

import json
import os

from core.interfaces import Storage

DEFAULT_CONFIG_FILE = os.path.expanduser('~/.config/tango/config.json')
STORE_FILENAME = 'tango_store.json'


def read_config_file(config_file: str) -> dict:
    """Read the optional JSON config. Raises FileNotFoundError when absent."""
    if not os.path.exists(config_file):
        raise FileNotFoundError(
            f"No config at {config_file}\n"
            f'To use your own word list create it with: {{"words_file": "/path/to/words.json"}}'
        )
    with open(config_file, 'r', encoding='utf-8') as f:
        return json.load(f)


class FileStorage(Storage):
    """Key-value store kept in a single JSON file."""

    def __init__(self, config_file: str = None, state_dir: str = None):
        self.config_file = config_file or DEFAULT_CONFIG_FILE
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or os.environ.get('TANGO_STATE_DIR') or project_root

    @property
    def store_file(self) -> str:
        return os.path.join(self.state_dir, STORE_FILENAME)

    def load_config(self) -> dict:
        return read_config_file(self.config_file)

    def _read_all(self) -> dict:
        """All stored items. An unreadable file counts as empty."""
        if not os.path.exists(self.store_file):
            return {}
        try:
            with open(self.store_file, 'r', encoding='utf-8') as f:
                items = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Ignoring unreadable store {self.store_file}: {e}")
            return {}
        return items if isinstance(items, dict) else {}

    def _write_all(self, items: dict) -> None:
        os.makedirs(self.state_dir, exist_ok=True)
        tmp_file = self.store_file + '.tmp'
        with open(tmp_file, 'w', encoding='utf-8') as f:
            json.dump(items, f, indent=2, ensure_ascii=False)
        os.replace(tmp_file, self.store_file)

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)
