"""Project settings loader.

Reads form behaviour defaults from .formguard.yaml in the project root, so
teams can pick the error policy once instead of at every form.

Example .formguard.yaml:
    form:
      hide_error_on_focus: true    # Hide a field's error while it is focused
      show_errors: true            # Render error text under inputs
      log_level: DEBUG             # Level used by setup_logging()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".formguard.yaml"


@dataclass
class FormSettings:
    """Form behaviour settings."""

    hide_error_on_focus: bool = False

    # Widgets render error text only when this is on
    show_errors: bool = True

    log_level: Optional[str] = None

    @classmethod
    def load(cls, project_root: Path | None = None) -> "FormSettings":
        """Load settings from .formguard.yaml in project root.

        Args:
            project_root: Project root directory. Defaults to cwd.

        Returns:
            FormSettings with values from config file or defaults.
        """
        root = project_root or Path.cwd()
        config_path = root / SETTINGS_FILE

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable %s: %s", config_path, exc)
            return cls()

        form_config = config.get("form") if isinstance(config, dict) else None
        if not isinstance(form_config, dict):
            return cls()

        return cls(
            hide_error_on_focus=bool(
                form_config.get("hide_error_on_focus", cls.hide_error_on_focus)
            ),
            show_errors=bool(form_config.get("show_errors", cls.show_errors)),
            log_level=form_config.get("log_level", cls.log_level),
        )


# Global settings instance (loaded on first access)
_settings: FormSettings | None = None


def get_settings(reload: bool = False) -> FormSettings:
    """Get the global form settings.

    Args:
        reload: Force reload from config file.
    """
    global _settings
    if _settings is None or reload:
        _settings = FormSettings.load()
    return _settings
