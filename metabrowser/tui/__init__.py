from metabrowser.tui.renderers import MetabrowserConsoleUI

__all__ = ["MetabrowserConsoleUI"]
