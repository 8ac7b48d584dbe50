# src/waformat/__main__.py
"""Allow ``python -m waformat`` to start the bot."""

from waformat.app import main

if __name__ == "__main__":
    main()
