"""JSON file reading with Result-based error handling.

Provides a thin wrapper around reading JSON documents, returning Result
types instead of raising exceptions.
"""

import json
from pathlib import Path
from typing import Any

from focusflow.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """Low-level JSON file reading.

    Does not contain any domain logic - just file I/O.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("task.json"))
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Load a JSON object from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            Ok(dict) if successful, Err(str) with error message if failed.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except UnicodeDecodeError as e:
            return Err(f"Invalid UTF-8 in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

        if not isinstance(data, dict):
            return Err(f"Expected a JSON object in {path}")
        return Ok(data)
