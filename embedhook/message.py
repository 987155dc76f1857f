"""Top-level webhook message builder."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from embedhook.embed import Clock, Embed, utc_now
from embedhook.webhook import WebhookClient


@dataclass
class Message:
    """A webhook message: text content, sender overrides and embeds.

    Example:
        >>> message = Message()
        >>> message.set_content("Deploy finished")
        >>> embed = message.new_embed()
        >>> embed.set_title("build #42")
        >>> embed.add_field("Status", "green", inline=True)
        >>> message.send("https://discord.com/api/webhooks/...")
        True
    """

    content: str = ""
    username: str = ""
    avatar_url: str = ""
    embeds: list[Embed] = field(default_factory=list)
    clock: Clock = field(default=utc_now, repr=False, compare=False)

    def set_content(self, content: str) -> None:
        self.content = content

    def set_username(self, username: str) -> None:
        """Override the webhook's display name for this message only."""
        self.username = username

    def set_avatar_url(self, avatar_url: str) -> None:
        """Override the webhook's avatar for this message only."""
        self.avatar_url = avatar_url

    def new_embed(self) -> Embed:
        """Append an empty embed to the message and return it.

        The returned object is the one stored in :attr:`embeds`, so any
        further setter call on it is reflected in the payload.
        """
        embed = Embed(clock=self.clock)
        self.embeds.append(embed)
        return embed

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON-ready payload.

        Empty ``content``/``username``/``avatar_url`` are omitted, ``embeds``
        is always present.
        """
        payload: dict[str, Any] = {}
        if self.content:
            payload["content"] = self.content
        if self.username:
            payload["username"] = self.username
        if self.avatar_url:
            payload["avatar_url"] = self.avatar_url
        payload["embeds"] = [embed.to_dict() for embed in self.embeds]
        return payload

    def to_json(self) -> str:
        """Serialize the message to compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def send(
        self,
        webhook_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> bool:
        """Serialize the message and POST it to ``webhook_url``.

        Args:
            webhook_url: Destination webhook URL (not validated).
            session: Optional session to reuse; a private one is used otherwise.
            timeout: Optional request timeout in seconds. ``None`` waits
                until the server answers.

        Returns:
            True when the endpoint answered 204.

        Raises:
            SerializationError: If the message cannot be encoded.
            TransportError: If the request could not be completed.
            RemoteRejectionError: If any status other than 204 came back.
        """
        with WebhookClient(webhook_url, session=session, timeout=timeout) as client:
            return client.send(self)
