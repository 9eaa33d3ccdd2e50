"""This module provides a manager for handling .env file configurations."""

from pathlib import Path

from date_formatting.exceptions.date import ConfigurationError
from date_formatting.providers.config import Config
from dotenv import dotenv_values, set_key
from pydantic import ValidationError


class ConfigManager:
    """Manages reading and writing to a .env file."""

    def __init__(self, env_file: str | Path = ".env") -> None:
        """Initializes the ConfigManager.

        Args:
            env_file: The path to the .env file.
        """
        self.env_file = Path(env_file)

    def get_all(self) -> dict[str, str | None]:
        """Reads all key-value pairs from the .env file.

        Returns:
            A dictionary of all key-value pairs, empty if the file is missing.
        """
        if not self.env_file.exists():
            return {}
        return dict(dotenv_values(self.env_file))

    def get(self, key: str) -> str | None:
        """Gets the value of a single key from the .env file.

        Args:
            key: The key to retrieve.

        Returns:
            The value of the key, or None if it doesn't exist.
        """
        return self.get_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Sets a key-value pair in the .env file, creating the file if needed.

        The file is loaded back into :class:`Config` after the write; a value
        the settings reject is rolled back.

        Args:
            key: The key to set.
            value: The value to set.

        Raises:
            ConfigurationError: If the new value makes the settings invalid.
        """
        previous = self.env_file.read_text(encoding="utf-8") if self.env_file.exists() else None
        if previous is None:
            self.env_file.touch(mode=0o600)
        set_key(self.env_file, key, value)
        try:
            Config(_env_file=self.env_file)  # type: ignore[call-arg]
        except ValidationError as e:
            if previous is None:
                self.env_file.unlink()
            else:
                self.env_file.write_text(previous, encoding="utf-8")
            raise ConfigurationError(f"Invalid value for {key}: {e}") from e

    def unset(self, key: str) -> None:
        """Removes a key from the .env file.

        Args:
            key: The key to remove.
        """
        if not self.env_file.exists():
            return
        lines = self.env_file.read_text(encoding="utf-8").splitlines()
        new_lines = [line for line in lines if not line.startswith(f"{key}=")]
        self.env_file.write_text("\n".join(new_lines) + "\n", encoding="utf-8")
