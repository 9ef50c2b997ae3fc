"""Entry point for the menu-browser Textual app."""

from __future__ import annotations

from menu_browser.menu_app import MenuBrowserApp


def main() -> None:
    """Run the Textual application."""
    MenuBrowserApp().run()


if __name__ == "__main__":
    main()
