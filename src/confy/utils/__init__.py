from .directories import resolve_base_config_dir

__all__ = ["resolve_base_config_dir"]
