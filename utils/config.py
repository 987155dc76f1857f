"""``config.json`` handling for the composer CLI."""

import json
import os
import time
from typing import Any, NoReturn

DEFAULT_CONFIG: dict[str, Any] = {
    "webhook": "",
    "username": "",
    "avatar_url": "",
    "timeout": None,
}


def validate_config(config: dict[str, Any]) -> list[str]:
    """Return a human-readable problem for each invalid setting.

    Only ``webhook`` is mandatory. ``timeout`` must be empty or a
    non-negative number of seconds.
    """
    problems = []
    if not config.get("webhook"):
        problems.append("webhook: missing webhook URL")

    timeout = config.get("timeout")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0):
        problems.append(f"timeout: expected a number of seconds, got {timeout!r}")

    return problems


def load_config(path: str = "config.json") -> dict[str, Any]:
    """Read the settings file, filling absent keys from :data:`DEFAULT_CONFIG`.

    A missing file is written out with the defaults, and an invalid one is
    reported; both end the program so the user can edit the file first.

    Args:
        path: Path to the JSON config file.

    Returns:
        The validated configuration.

    Raises:
        SystemExit: If the file was just created or fails validation.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    if not os.path.isfile(path):
        save_config(DEFAULT_CONFIG, path)
        _abort(f"Created '{path}', add your webhook URL to it and restart.")

    with open(path, "r", encoding="utf-8") as f:
        config = {**DEFAULT_CONFIG, **json.load(f)}

    problems = validate_config(config)
    if problems:
        _abort(f"Invalid settings in '{path}':\n" + "\n".join(f"   - {p}" for p in problems))

    return config


def save_config(config: dict[str, Any], path: str = "config.json") -> None:
    """Write ``config`` to ``path`` as indented JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)


def _abort(reason: str) -> NoReturn:
    print(f"[!] {reason}")
    time.sleep(5)
    raise SystemExit(1)
