"""Profile Loader for loading profiles from YAML or JSON files."""

from pathlib import Path
from typing import Any

import yaml

from onelink.errors import ParseError
from onelink.profiles.base import Profile


class ProfileLoader:
    """Loads profiles from YAML files.

    JSON is a subset of YAML, so ``.json`` profiles load the same way.
    """

    def load_file(self, path: Path | str) -> Profile:
        """Load a profile from a YAML or JSON file.

        Args:
            path: Path to the file

        Returns:
            Loaded Profile instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        with open(path, encoding="utf-8") as f:
            content = f.read()

        return self.load_from_string(content)

    def load_from_string(self, content: str) -> Profile:
        """Load a profile from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded Profile instance
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ParseError(f"Invalid profile file: {e}", cause=e) from e

        return self._parse_profile(data)

    def _parse_profile(self, data: Any) -> Profile:
        """Parse profile data from YAML structure."""
        if data is None:
            data = {}
        return Profile.from_data(data)

    def save_file(self, profile: Profile, path: Path | str) -> None:
        """Save a profile to a YAML file.

        Args:
            profile: The profile to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                profile.to_data(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )


def load_profile(path: Path | str) -> Profile:
    """Convenience function to load a profile from a file.

    Args:
        path: Path to the YAML or JSON file

    Returns:
        Loaded Profile instance
    """
    loader = ProfileLoader()
    return loader.load_file(path)
