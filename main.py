"""Project entry-point (CLI menu loop).

This module:
- Loads and validates configuration
- Keeps a draft message for the session
- Displays the interactive menu and dispatches user actions
"""

import time

import utils.config
import utils.menu
from embedhook import Message
from module.composer import compose_message
from module.sender import preview_payload, send_handler
from module.settings_manager import settings_manager


def run_cli() -> None:
    """Run the main interactive CLI loop.

    The draft is reset after a successful send; a failed send keeps it so the
    user can retry or edit it.
    """
    draft = Message()

    while True:
        config = utils.config.load_config()
        utils.menu.print_menu(draft)

        choice = utils.menu.get_selection()

        match choice:
            case 1:
                compose_message(draft, config)
            case 2:
                preview_payload(draft)
            case 3:
                if send_handler(draft, config):
                    draft = Message()
                time.sleep(2)
            case 4:
                settings_manager()
            case _:
                # Exit
                print("\033[H\033[J", end="")
                print("Bye!")
                raise SystemExit(0)


if __name__ == "__main__":
    run_cli()
