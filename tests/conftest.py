import json

import pytest
import requests

from wp_version_updater import prompts
from wp_version_updater.util import http_util, log

README = """=== My Plugin ===
Contributors: someone
Requires at least: 6.0
Tested up to: 6.4
WC requires at least: 8.0
WC tested up to: 8.5.1
Stable tag: 1.2.3
License: GPLv2 or later

A plugin.
"""

PLUGIN_FILE = """<?php
/**
 * Plugin Name: My Plugin
 * Version: 1.2.3
 * Text Domain: myplugin
 * Tested up to: 6.4
 * WC tested up to: 8.5.1
 */

define('MYPLUGIN_VERSION', '1.2.3');
"""

WORDPRESS_RESPONSE = {"offers": [{"response": "upgrade", "version": "6.5.3"}]}
WOOCOMMERCE_RESPONSE = {"name": "WooCommerce", "slug": "woocommerce", "version": "9.0.2"}


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return json.loads(self.text)


class DummySession:
    """
    Poor man's requests-like session answering GETs from a url -> body (or exception) table.
    """
    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "timeout": timeout})
        body = self.routes[url]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, FakeResponse):
            return body
        return FakeResponse(body)


@pytest.fixture
def dummy_session():
    def install(routes):
        return http_util.initialize_session(DummySession(routes))

    yield install
    http_util.initialize_session(None)


@pytest.fixture
def answers(monkeypatch):
    """Feeds canned answers to every interactive prompt, recording what was asked."""
    given = []
    asked = []

    def fake_ask(prompt, **kwargs):
        asked.append((prompt, kwargs))
        answer = given.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    monkeypatch.setattr(prompts.Prompt, "ask", fake_ask)
    monkeypatch.setattr(log.console, "input", fake_ask)

    def feed(*values):
        given.extend(values)
        return asked

    return feed


@pytest.fixture
def plugin_dir(tmp_path):
    (tmp_path / "readme.txt").write_text(README)
    (tmp_path / "myplugin.php").write_text(PLUGIN_FILE)
    return tmp_path
