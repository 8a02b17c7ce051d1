"""Access to the current user's registry hive.

Only ``HKEY_CURRENT_USER`` is touched. Keys are addressed by backslash
separated paths relative to it.
"""

from abc import ABC, abstractmethod
from typing import Any

from metabrowser.errors import UnsupportedPlatformError


class IRegistry(ABC):
    @abstractmethod
    def set_value(self, key: str, name: str, value: str) -> None:
        """Create ``key`` if needed and set a string value on it."""

    @abstractmethod
    def delete_tree(self, key: str) -> bool:
        """Delete ``key`` and all of its subkeys. Return False if it was missing."""

    @abstractmethod
    def delete_value(self, key: str, name: str) -> bool:
        """Delete one value. Return False if it was missing."""


class WinRegistry(IRegistry):
    def __init__(self) -> None:
        try:
            import winreg
        except ImportError as exc:
            raise UnsupportedPlatformError("Registry access", "this platform") from exc
        self._winreg: Any = winreg

    def set_value(self, key: str, name: str, value: str) -> None:
        winreg = self._winreg
        with winreg.CreateKeyEx(winreg.HKEY_CURRENT_USER, key, 0, winreg.KEY_WRITE) as handle:
            winreg.SetValueEx(handle, name, 0, winreg.REG_SZ, value)

    def delete_tree(self, key: str) -> bool:
        winreg = self._winreg
        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key, 0, winreg.KEY_ALL_ACCESS) as handle:
                while True:
                    try:
                        child = winreg.EnumKey(handle, 0)
                    except OSError:
                        break
                    self.delete_tree(f"{key}\\{child}")
        except FileNotFoundError:
            return False
        winreg.DeleteKey(winreg.HKEY_CURRENT_USER, key)
        return True

    def delete_value(self, key: str, name: str) -> bool:
        winreg = self._winreg
        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key, 0, winreg.KEY_ALL_ACCESS) as handle:
                winreg.DeleteValue(handle, name)
        except FileNotFoundError:
            return False
        return True
