# src/wordheat/core/reader.py
from pathlib import Path
from typing import Union

from wordheat.config import DEFAULT_INPUT_FILE

class FileAccessError(OSError):
    """Raised when the input file is missing or cannot be read as text."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason

def read_file_content(path: Union[str, Path] = DEFAULT_INPUT_FILE) -> str:
    """Reads the whole input file as UTF-8 text."""
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileAccessError(file_path, "file not found") from e
    except UnicodeDecodeError as e:
        raise FileAccessError(file_path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileAccessError(file_path, e.strerror or str(e)) from e
