import os
import tempfile
from pathlib import Path


def list_files(path, include_ext):
    """Regular files directly inside path whose names end with include_ext, sorted by name."""
    result = []
    for entry in sorted(os.scandir(path), key=lambda e: e.name):
        if entry.is_file() and entry.name.endswith(include_ext):
            result.append(entry.path)
    return result


def read_file_contents(filename, errors="strict"):
    with open(filename, encoding="utf-8", errors=errors, newline="") as fp:
        return fp.read()


def write_file_contents(filename, content):
    """Overwrites filename by writing a sibling temporary file and renaming it into place."""
    target = Path(filename)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fp:
            fp.write(content)
        if target.exists():
            os.chmod(tmp_name, target.stat().st_mode & 0o7777)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise
