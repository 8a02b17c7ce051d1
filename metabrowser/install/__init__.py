from metabrowser.install.registry import IRegistry, WinRegistry
from metabrowser.install.service import InstallService

__all__ = ["IRegistry", "InstallService", "WinRegistry"]
