"""CLI state container."""

from ..app import App


class CLIState:
    """Application state container for CLI commands.

    Holds the bootstrapped App so commands can read Settings.
    """

    def __init__(self, app: App):
        self.app = app

    @property
    def settings(self):
        return self.app.settings
