"""Webhook message builder and client.

Build a :class:`Message`, add embeds through :meth:`Message.new_embed` and
deliver it with :meth:`Message.send` or a reusable :class:`WebhookClient`.
"""

from .embed import Author, Embed, Field, Footer, Image, Thumbnail
from .message import Message
from .webhook import (
    RemoteRejectionError,
    SerializationError,
    TransportError,
    WebhookClient,
    WebhookError,
)

__all__ = [
    "Author",
    "Embed",
    "Field",
    "Footer",
    "Image",
    "Message",
    "RemoteRejectionError",
    "SerializationError",
    "Thumbnail",
    "TransportError",
    "WebhookClient",
    "WebhookError",
]
