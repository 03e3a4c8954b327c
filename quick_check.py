import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
PY_FILES = [
    "chromepdf/__init__.py",
    "chromepdf/constants.py",
    "chromepdf/paths.py",
    "chromepdf/errors.py",
    "chromepdf/converter.py",
    "chromepdf/browser/errors.py",
    "chromepdf/browser/flags.py",
    "chromepdf/browser/inputs.py",
    "chromepdf/browser/process.py",
    "chromepdf/browser/runtime.py",
    "chromepdf/infra/config_store.py",
]


def run(cmd):
    print("> " + " ".join(cmd))
    result = subprocess.run(cmd, cwd=ROOT)
    if result.returncode != 0:
        raise SystemExit(result.returncode)


def main():
    run([sys.executable, "-m", "py_compile", *PY_FILES])
    run([sys.executable, "-c", "import chromepdf, chromepdf.converter, chromepdf.infra.config_store; print('imports ok')"])
    run([sys.executable, "-m", "pytest", "-q"])
    print("All automated checks passed.")


if __name__ == "__main__":
    main()
