import requests
from rich.markup import escape

from wp_version_updater import __version__
from . import log

_session = None
USER_AGENT = f"wp-version-updater/{__version__}"


def initialize_session(session=None):
    global _session
    _session = session or requests.Session()
    return _session


def get_json(url: str, timeout: float = None):
    """GETs url and returns the decoded JSON body. Raises for error statuses and undecodable bodies."""
    log.debug(f"GET {escape(url)}")
    r = _session.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    log.debug(f"{escape(url)} -> {r.status_code}")
    r.raise_for_status()
    return r.json()


initialize_session()
