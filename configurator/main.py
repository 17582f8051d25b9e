"""Entry point for the burger configurator Textual app."""

from __future__ import annotations

from configurator.builder_app import BurgerConfiguratorApp


def main() -> None:
    """Run the Textual application."""
    BurgerConfiguratorApp().run()


if __name__ == "__main__":
    main()
