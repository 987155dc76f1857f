from typing import Optional

from embedhook import Message

VERSION = "v1.0"


def print_header(section: str) -> None:
    """Clear the terminal and print the composer header for ``section``."""
    # ANSI escape sequence: move cursor home + clear screen.
    print("\033[H\033[J", end="")
    print(f"embedhook {VERSION} | {section}")
    print("-" * 40)


def print_menu(draft: Message) -> None:
    """Print the main CLI menu with a summary of the current draft.

    Args:
        draft: Message being composed in this session.
    """
    embed_count = len(draft.embeds)
    field_count = sum(len(embed.fields) for embed in draft.embeds)

    print_header("Main menu")
    print(f"Draft: {embed_count} embed(s), {field_count} field(s), content {'set' if draft.content else 'empty'}.")
    print("")
    print(" (1) Compose message")
    print(" (2) Preview payload")
    print(" (3) Send message")
    print(" (4) Settings")
    print(" (5) Exit")


def get_selection() -> Optional[int]:
    """Prompt until the user enters a number, and return it."""
    print("")
    while True:
        choice = input("Please select an option: ")
        try:
            return int(choice)
        except ValueError:
            continue
