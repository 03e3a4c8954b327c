import json
import os

from chromepdf.constants import DEFAULT_BINARIES, DEFAULT_FLAGS
from chromepdf.paths import CONFIG_FILE


class Config:
    """Converter defaults persisted as a JSON object.

    A missing file leaves the built-in defaults in place. A file that cannot
    be read or parsed is reported through ``load_error`` instead of raising.
    """

    def __init__(self, path=None):
        self.path = path or CONFIG_FILE
        self.load_error = None
        self.data = {
            "binary": "",
            "binaries": list(DEFAULT_BINARIES),
            "flags": list(DEFAULT_FLAGS),
            "use_temp_file": True,
            "temp_dir": "",
        }
        self.load()

    def load(self):
        self.load_error = None
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise ValueError("Config payload must be a JSON object.")
            self.data.update(saved)
        except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
            self.load_error = str(exc)

    def save(self):
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.save()
