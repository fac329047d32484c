import re
from dataclasses import dataclass
from pathlib import Path

from .headers import header_pattern
from .remote import RemoteVersions
from .util import file_util, log

VERSION_CONSTANT = re.compile(
    r"(?P<prefix>define\(\s*(['\"])\w+_VERSION\2\s*,\s*(['\"]))[^'\"]*(?P<suffix>\3\s*\))"
)


@dataclass(frozen=True)
class ReplacementRule:
    pattern: re.Pattern
    value: str
    count: int = 1  # 0 replaces every match

    def apply(self, text: str) -> str:
        def replace(m):
            return m.group("prefix") + self.value + (m.groupdict().get("suffix") or "")

        return self.pattern.sub(replace, text, count=self.count)


def apply_rules(text: str, rules) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


def readme_rules(version: str, latest: RemoteVersions) -> list[ReplacementRule]:
    return [
        ReplacementRule(header_pattern("Stable tag"), version),
        ReplacementRule(header_pattern("Tested up to"), latest.wordpress),
        ReplacementRule(header_pattern("WC tested up to"), latest.woocommerce),
    ]


def plugin_file_rules(version: str, latest: RemoteVersions) -> list[ReplacementRule]:
    return [
        ReplacementRule(header_pattern("Version"), version),
        ReplacementRule(header_pattern("Stable tag"), version),
        ReplacementRule(header_pattern("Tested up to"), latest.wordpress),
        ReplacementRule(header_pattern("WC tested up to"), latest.woocommerce),
        ReplacementRule(VERSION_CONSTANT, version, count=0),
    ]



def update_plugin_files(directory, version: str, slug: str, latest: RemoteVersions, readme="readme.txt"):
    """
    Rewrites the readme and <slug>.php. Both files are rendered before either
    is written, so a missing or unreadable file leaves both untouched. The two
    writes themselves are not transactional.
    """
    directory = Path(directory)
    plugin_file = f"{slug}.php"
    targets = [
        (directory / readme, readme_rules(version, latest)),
        (directory / plugin_file, plugin_file_rules(version, latest)),
    ]
    rendered = [(path, apply_rules(file_util.read_file_contents(path), rules)) for path, rules in targets]

    with log.status("Updating plugin files...", done="Plugin files updated successfully"):
        for path, content in rendered:
            file_util.write_file_contents(path, content)
            log.debug(f"wrote {path}")
    log.info(f"Updated {readme} and {plugin_file} to version [b]{version}[/b]")
