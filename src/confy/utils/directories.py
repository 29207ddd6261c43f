"""Platform config directory resolution."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path


def resolve_base_config_dir(organization: str, app_name: str) -> Path | None:
    """Return the per-user config directory for ``app_name``, or None if there is none.

    Linux: $XDG_CONFIG_HOME/{app_name} (default ~/.config/{app_name}).
    macOS: ~/Library/Application Support/{app_name}.
    Windows: %APPDATA%\\{organization}\\{app_name}.
    """
    if not app_name.strip():
        return None

    try:
        config_dir = user_config_path(appname=app_name, appauthor=organization or False, roaming=True)
    except (KeyError, OSError, RuntimeError):
        return None

    # expanduser leaves "~" in place when no home directory can be found
    if not config_dir.is_absolute():
        return None
    return config_dir
