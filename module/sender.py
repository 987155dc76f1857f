import json
import threading
from contextlib import contextmanager
from itertools import cycle
from typing import Any, Iterator

from embedhook import Message, WebhookError
from embedhook.client import build_webhook_client
from utils.menu import print_header

SPINNER_FRAMES = "|/-\\"


@contextmanager
def sending_indicator(label: str, interval: float = 0.1) -> Iterator[None]:
    """Animate ``label`` on the current line while the POST is in flight.

    The line is cleared once the block exits, whether it raised or not.
    """
    finished = threading.Event()

    def animate() -> None:
        for frame in cycle(SPINNER_FRAMES):
            print(f"\r{label} {frame}", end="", flush=True)
            if finished.wait(interval):
                return

    worker = threading.Thread(target=animate, daemon=True)
    worker.start()
    try:
        yield
    finally:
        finished.set()
        worker.join()
        print("\r" + " " * (len(label) + 2) + "\r", end="", flush=True)


def preview_payload(draft: Message) -> None:
    """Print the JSON payload that would be sent for ``draft``."""
    print_header("Payload preview")
    print(json.dumps(draft.to_dict(), indent=4, ensure_ascii=False))
    input("\nPress Enter to return to the menu...")


def send_handler(draft: Message, config: dict[str, Any]) -> bool:
    """CLI entry-point to deliver the draft to the configured webhook.

    Args:
        draft: Message to send.
        config: Loaded configuration (webhook URL and optional timeout).

    Returns:
        True if the webhook accepted the message, False otherwise.
    """
    if not draft.content and not draft.embeds:
        print("The draft is empty, compose a message first.")
        return False

    with build_webhook_client(config) as client:
        try:
            with sending_indicator("Sending webhook..."):
                client.send(draft)
        except WebhookError as exc:
            print(f"Failed to send the webhook: {exc}")
            return False

    print("Webhook sent successfully!")
    return True
