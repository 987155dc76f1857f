"""Webhook client initialization from the project configuration."""

from __future__ import annotations

from typing import Any

from embedhook.webhook import WebhookClient


def build_webhook_client(config: dict[str, Any]) -> WebhookClient:
    """Create the WebhookClient using the configured webhook URL and timeout.

    Args:
        config: Configuration dictionary as returned by ``utils.config.load_config``.

    Returns:
        A WebhookClient instance. If the webhook is empty, the client will still
        be created, but sending will fail at runtime with a TransportError.
    """
    webhook_url = config.get("webhook") or ""
    timeout = config.get("timeout")
    return WebhookClient(webhook_url, timeout=float(timeout) if timeout else None)
