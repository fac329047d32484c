"""wp-version-updater

Bumps the version of the WordPress plugin in the current directory and
refreshes its "Tested up to" / "WC tested up to" fields.

Usage:
    wp-version-updater
    wp-version-updater (-h | --help)
    wp-version-updater --version

Options:
    -h --help       show this screen.
    --version       show version.

Environment:
    WP_VERSION_UPDATER_LOG_LEVEL        logging level [default: INFO]
    WP_VERSION_UPDATER_README           readme file name [default: readme.txt]
    WP_VERSION_UPDATER_WORDPRESS_URL    WordPress version-check endpoint
    WP_VERSION_UPDATER_WOOCOMMERCE_URL  WooCommerce plugin information endpoint
    WP_VERSION_UPDATER_HTTP_TIMEOUT     seconds per remote request [default: 10]
"""

import os
import sys
from pathlib import Path

from docopt import docopt
from rich.markup import escape

from wp_version_updater import __version__
from . import prompts, remote
from .config import Settings, conf_get, create_config, env_overrides
from .slug import resolve_slug
from .updater import update_plugin_files
from .util import log
from .version import Version, read_current_version

version = __version__
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def bump(directory, conf) -> str:
    """Runs the whole pipeline against directory and returns the new version."""
    directory = Path(directory)
    readme = conf_get(conf, Settings.README)

    current = read_current_version(directory / readme)
    new_version = prompts.choose_version(Version.parse(current))
    slug = resolve_slug(directory)
    log.debug(f"plugin slug: {slug}")
    latest = remote.get_latest_versions(
        conf_get(conf, Settings.WORDPRESS_URL),
        conf_get(conf, Settings.WOOCOMMERCE_URL),
        timeout=conf_get(conf, Settings.HTTP_TIMEOUT),
    )
    update_plugin_files(directory, new_version, slug, latest, readme=readme)
    return new_version


def run(argv=None, environ=None, directory="."):
    docopt(__doc__, argv=argv, version=f"wp-version-updater {version}")
    conf = create_config(env_overrides(os.environ if environ is None else environ))
    log.set_default_level(conf_get(conf, Settings.LOG_LEVEL).upper())
    log.debug(f"wp-version-updater {version}")
    return bump(directory, conf)


def run_wp_version_updater():
    try:
        run()
    except (KeyboardInterrupt, EOFError):
        log.error("Aborted.")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        log.error(f"Error: {escape(str(e))}")
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    run_wp_version_updater()
