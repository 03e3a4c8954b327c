import os


CONFIG_DIR = os.environ.get("CHROMEPDF_CONFIG_DIR") or os.path.join(
    os.path.expanduser("~"), ".config", "chromepdf"
)
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
