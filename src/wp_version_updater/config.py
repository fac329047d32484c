from typing import NamedTuple, Dict, Any, ChainMap, Mapping

ENV_PREFIX = "WP_VERSION_UPDATER_"


class Option(NamedTuple):
    key: str
    default: Any
    help: str = ""

    @property
    def env_var(self) -> str:
        return ENV_PREFIX + self.key.upper()


class Settings:
    LOG_LEVEL = Option("log_level", "INFO", "Logging level")
    README = Option("readme", "readme.txt", "Name of the plugin readme")
    WORDPRESS_URL = Option(
        "wordpress_url",
        "https://api.wordpress.org/core/version-check/1.7/",
        "WordPress core version-check endpoint",
    )
    WOOCOMMERCE_URL = Option(
        "woocommerce_url",
        "https://api.wordpress.org/plugins/info/1.2/?action=plugin_information&request[slug]=woocommerce",
        "WooCommerce plugin information endpoint",
    )
    HTTP_TIMEOUT = Option("http_timeout", 10.0, "Seconds to wait for each remote version request")


def get_all_settings() -> list[Option]:
    return [option for _name, option in vars(Settings).items() if isinstance(option, Option)]


def env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Picks up WP_VERSION_UPDATER_<KEY> variables, coerced to the type of the option default."""
    overrides = {}
    for option in get_all_settings():
        raw = environ.get(option.env_var)
        if raw is None:
            continue
        if isinstance(option.default, float):
            try:
                overrides[option.key] = float(raw)
            except ValueError:
                raise ValueError(f"{option.env_var} must be a number, got {raw!r}") from None
        else:
            overrides[option.key] = raw
    return overrides


def create_config(*dicts: Mapping[str, Any]) -> Mapping[str, Any]:
    """Creates a dict-like configuration from multiple dictionaries
    Priority order:
    1. given dictionaries, first one wins
    2. default values
    """
    defaults = {option.key: option.default for option in get_all_settings()}
    return ChainMap({}, *dicts, defaults)


def conf_get(d, option: Option):
    return d.get(option.key, option.default)
