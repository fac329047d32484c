from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple

import requests
from rich.markup import escape

from . import prompts
from .errors import NetworkFailure
from .util import http_util, log
from .version import truncate_wordpress_version


class RemoteVersions(NamedTuple):
    wordpress: str
    woocommerce: str


def _wordpress_version(data):
    return data["offers"][0]["version"]


def _woocommerce_version(data):
    return data["version"]


def fetch_version(url, extract, timeout=None) -> str:
    try:
        version = extract(http_util.get_json(url, timeout=timeout))
    except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
        raise NetworkFailure(url, e) from e
    if not isinstance(version, str):
        raise NetworkFailure(url, TypeError(f"expected a version string, got {version!r}"))
    return version


def fetch_latest_versions(wordpress_url, woocommerce_url, timeout=None) -> RemoteVersions:
    """Fetches both versions concurrently. Raises NetworkFailure if either one fails."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        wordpress = executor.submit(fetch_version, wordpress_url, _wordpress_version, timeout)
        woocommerce = executor.submit(fetch_version, woocommerce_url, _woocommerce_version, timeout)
        return RemoteVersions(truncate_wordpress_version(wordpress.result()), woocommerce.result())


def get_latest_versions(wordpress_url, woocommerce_url, timeout=None) -> RemoteVersions:
    try:
        with log.status(
            "Fetching latest versions...",
            done="Fetched latest versions",
        ):
            versions = fetch_latest_versions(wordpress_url, woocommerce_url, timeout)
    except NetworkFailure as e:
        log.error(f"Error fetching versions: {escape(str(e))}")
        return RemoteVersions(
            prompts.ask_version("WordPress", "6.5"),
            prompts.ask_version("WooCommerce", "9.0.2"),
        )
    log.info(f"WordPress {versions.wordpress}, WooCommerce {versions.woocommerce}")
    return versions
