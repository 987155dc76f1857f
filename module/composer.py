from typing import Any

from embedhook import Embed, Message
from utils.menu import print_header


def parse_colour(text: str) -> int:
    """Parse a colour entered by the user.

    Accepted forms: ``#FF0000``, ``0xff0000``, ``ff0000`` (hex) or
    ``16711680`` (decimal).

    Args:
        text: Raw user input.

    Returns:
        The packed RGB integer.

    Raises:
        ValueError: If the text is neither valid hex nor decimal, or is negative.
    """
    value = text.strip().lower()
    if value.startswith("#"):
        colour = int(value[1:], 16)
    elif value.startswith("0x"):
        colour = int(value[2:], 16)
    elif value.isdigit():
        colour = int(value)
    else:
        colour = int(value, 16)

    if colour < 0:
        raise ValueError(f"invalid colour: {text!r}")
    return colour


def prompt_yes_no(question: str) -> bool:
    """Ask a y/n question; anything other than "y"/"yes" counts as no."""
    answer = input(f"{question} (y/n) : ").strip().lower()
    return answer in ("y", "yes")


def prompt_text(label: str, default: str = "") -> str:
    """Prompt for free text, falling back to ``default`` on empty input."""
    suffix = f" [{default}]" if default else ""
    value = input(f"{label}{suffix}: ").strip()
    return value or default


def compose_message(draft: Message, config: dict[str, Any]) -> None:
    """Interactive flow to fill the draft message.

    Steps:
        1) Content, username and avatar overrides (defaults from config).
        2) Any number of embeds, each configured with :func:`configure_embed`.

    Every answer replaces the previous value; a blank answer clears it, except
    for the username and avatar, which fall back to the config defaults.

    Args:
        draft: Message being composed; it is mutated in place.
        config: Loaded configuration.
    """
    print_header("Compose message")
    print("")

    draft.set_content(prompt_text("Message content"))
    draft.set_username(prompt_text("Username override", config.get("username") or ""))
    draft.set_avatar_url(prompt_text("Avatar URL override", config.get("avatar_url") or ""))

    while prompt_yes_no("\nWould you like to add an embed ?"):
        embed = draft.new_embed()
        configure_embed(embed)
        print(f"Embed #{len(draft.embeds)} added.")


def configure_embed(embed: Embed) -> None:
    """Prompt for every embed attribute and apply the answers to ``embed``.

    Args:
        embed: Embed returned by :meth:`Message.new_embed`.
    """
    embed.set_title(prompt_text("Title"))
    embed.set_url(prompt_text("Title URL"))
    embed.set_description(prompt_text("Description"))

    while True:
        colour = prompt_text("Colour (hex or decimal, blank for none)")
        if not colour:
            break
        try:
            embed.set_colour(parse_colour(colour))
            break
        except ValueError:
            print("Invalid colour. Please try again.")

    if prompt_yes_no("Add the current time as timestamp ?"):
        embed.set_timestamp()

    footer_text = prompt_text("Footer text")
    if footer_text:
        embed.set_footer(footer_text, prompt_text("Footer icon URL"))

    thumbnail = prompt_text("Thumbnail URL")
    if thumbnail:
        embed.set_thumbnail(thumbnail)

    image = prompt_text("Image URL")
    if image:
        embed.set_image(image)

    author = prompt_text("Author name")
    if author:
        embed.set_author(author, prompt_text("Author URL"), prompt_text("Author icon URL"))

    while prompt_yes_no("Add a field ?"):
        name = prompt_text("  Field name")
        value = prompt_text("  Field value")
        embed.add_field(name, value, prompt_yes_no("  Inline ?"))
