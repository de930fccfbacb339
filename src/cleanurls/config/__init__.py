"""Configuration facade.

Consumers import everything configuration-related from here:

    from cleanurls.config import SiteConfig, load_site_config
"""

from cleanurls.config.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
)
from cleanurls.config.settings import (
    CONFIG_FILENAMES,
    DEFAULT_PAGINATE_PATH,
    DEFAULT_PERMALINK_STYLE,
    CollectionSettings,
    SiteConfig,
    create_default_config,
    find_site_config,
    load_site_config,
    save_site_config,
)

__all__ = [
    "CONFIG_FILENAMES",
    "DEFAULT_PAGINATE_PATH",
    "DEFAULT_PERMALINK_STYLE",
    "CollectionSettings",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "SiteConfig",
    "create_default_config",
    "find_site_config",
    "load_site_config",
    "save_site_config",
]
