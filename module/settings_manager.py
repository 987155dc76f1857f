import time
from typing import Optional

from utils.config import load_config, save_config
from utils.menu import print_header


def _safe_tail(value: Optional[str], tail: int = 20) -> str:
    """Return a safe shortened representation of a sensitive string.

    Args:
        value: Original string (possibly None).
        tail: Number of trailing characters to keep.

    Returns:
        "Not set" if value is falsy, otherwise a redacted value (e.g. "...abcd").
    """
    if not value:
        return "Not set"
    if len(value) <= tail:
        return value
    return f"...{value[-tail:]}"


def parse_timeout(text: str) -> Optional[float]:
    """Parse a timeout entered by the user; blank or 0 means no timeout.

    Raises:
        ValueError: If the value is not a non-negative number.
    """
    text = text.strip()
    if not text:
        return None
    timeout = float(text)
    if timeout < 0:
        raise ValueError(f"invalid timeout: {text!r}")
    return timeout or None


def settings_manager() -> None:
    """Interactive configuration menu (CLI).

    Displays the current settings and lets the user change the webhook URL,
    the default username/avatar overrides and the request timeout. Every
    change is persisted with :func:`utils.config.save_config`.

    The function loops until the user chooses to return.
    """
    while True:
        config = load_config()

        print_header("Settings")
        print("")
        print(" (1) Change webhook URL")
        print(" (2) Change default username")
        print(" (3) Change default avatar URL")
        print(" (4) Change request timeout")
        print(" (5) Return")
        print("")

        # Avoid printing full webhook URL (sensitive value) to the terminal.
        print(" Webhook: ", _safe_tail(config.get("webhook")))
        print(" Username: ", config.get("username") or "Not set")
        print(" Avatar URL: ", config.get("avatar_url") or "Not set")
        print(" Timeout: ", config.get("timeout") or "None")

        choice = input("\nPlease enter your choice : ")
        try:
            choice_int = int(choice)
        except ValueError:
            continue

        match choice_int:
            case 1:
                webhook = input("\nEnter the new webhook URL: ").strip()
                if not webhook:
                    print("Invalid webhook URL. Please try again.")
                    time.sleep(1)
                    continue
                config["webhook"] = webhook
            case 2:
                config["username"] = input("\nEnter the default username (blank to clear): ").strip()
            case 3:
                config["avatar_url"] = input("\nEnter the default avatar URL (blank to clear): ").strip()
            case 4:
                try:
                    config["timeout"] = parse_timeout(input("\nEnter the timeout in seconds (blank for none): "))
                except ValueError:
                    print("Invalid timeout. Please try again.")
                    time.sleep(1)
                    continue
            case 5:
                break
            case _:
                print("Invalid choice. Please try again.")
                time.sleep(1)
                continue

        print("Saving settings...")
        save_config(config)
        time.sleep(1)
