APP_NAME = "confy"
DEFAULT_CONFIG_NAME = "default-config"
