"""Embed panels attached to a webhook message.

An :class:`Embed` is never built on its own in normal use: it is created by
:meth:`embedhook.message.Message.new_embed`, which keeps it in the message's
embed list and hands the same object back to the caller for configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current moment as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is empty/zero ("" / 0 / False)."""
    return {key: value for key, value in values.items() if value}


@dataclass
class Footer:
    text: str = ""
    icon_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"icon_url": self.icon_url, "text": self.text})


@dataclass
class Thumbnail:
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"url": self.url})


@dataclass
class Image:
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"url": self.url})


@dataclass
class Author:
    name: str = ""
    url: str = ""
    icon_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "url": self.url, "icon_url": self.icon_url})


@dataclass
class Field:
    """A labelled name/value pair shown inside an embed."""

    name: str = ""
    value: str = ""
    inline: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "value": self.value, "inline": self.inline})


@dataclass
class Embed:
    """A rich panel (title, colour, images, fields...) inside a message.

    Every attribute starts at its zero value, which means "unset" and is left
    out of the payload. Note that ``color == 0`` (black) is treated as unset
    too.
    """

    title: str = ""
    url: str = ""
    description: str = ""
    color: int = 0
    timestamp: str = ""
    footer: Footer = field(default_factory=Footer)
    thumbnail: Thumbnail = field(default_factory=Thumbnail)
    image: Image = field(default_factory=Image)
    author: Author = field(default_factory=Author)
    fields: list[Field] = field(default_factory=list)
    clock: Clock = field(default=utc_now, repr=False, compare=False)

    def set_title(self, title: str) -> None:
        self.title = title

    def set_url(self, url: str) -> None:
        self.url = url

    def set_description(self, description: str) -> None:
        self.description = description

    def set_colour(self, colour_code: int) -> None:
        """Set the side-bar colour as a packed RGB integer (e.g. ``0xFF0000``)."""
        self.color = colour_code

    set_color = set_colour

    def set_timestamp(self) -> None:
        """Stamp the embed with the current time in UTC.

        The value is formatted as ``YYYY-MM-DDTHH:MM:SS+0000`` using the
        embed's clock; calling it again overwrites the previous stamp.
        """
        self.timestamp = self.clock().astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)

    def set_footer(self, text: str, icon_url: str = "") -> None:
        self.footer = Footer(text=text, icon_url=icon_url)

    def set_image(self, url: str) -> None:
        self.image = Image(url=url)

    def set_thumbnail(self, url: str) -> None:
        self.thumbnail = Thumbnail(url=url)

    def set_author(self, name: str, url: str = "", icon_url: str = "") -> None:
        self.author = Author(name=name, url=url, icon_url=icon_url)

    def add_field(self, name: str, value: str, inline: bool = False) -> Field:
        """Append a field; fields are displayed in the order they were added.

        Returns:
            The appended :class:`Field`.
        """
        new_field = Field(name=name, value=value, inline=bool(inline))
        self.fields.append(new_field)
        return new_field

    def to_dict(self) -> dict[str, Any]:
        """Build the wire representation of this embed.

        ``footer``, ``thumbnail`` and ``author`` are always present (possibly
        as ``{}``) while ``image`` and ``fields`` are dropped when unset.
        """
        payload = _compact(
            {
                "title": self.title,
                "url": self.url,
                "description": self.description,
                "color": self.color,
                "timestamp": self.timestamp,
            }
        )
        payload["footer"] = self.footer.to_dict()
        payload["thumbnail"] = self.thumbnail.to_dict()

        image = self.image.to_dict()
        if image:
            payload["image"] = image

        payload["author"] = self.author.to_dict()

        if self.fields:
            payload["fields"] = [f.to_dict() for f in self.fields]

        return payload
