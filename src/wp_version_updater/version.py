import re
from dataclasses import dataclass

from .errors import MissingField, VersionFormatError
from .headers import header_pattern
from .util import file_util

STABLE_TAG = header_pattern("Stable tag")
VERSION_STRING = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, slots=True)
class Version:
    major: int
    minor: int
    patch: int

    @staticmethod
    def parse(s: str) -> "Version":
        m = VERSION_STRING.match(s.strip())
        if not m:
            raise VersionFormatError(f"Expected a version like 1.2.3, got {s!r}")
        return Version(*(int(part) for part in m.groups()))

    def bump_patch(self) -> "Version":
        return Version(self.major, self.minor, self.patch + 1)

    def bump_minor(self) -> "Version":
        return Version(self.major, self.minor + 1, 0)

    def bump_major(self) -> "Version":
        return Version(self.major + 1, 0, 0)

    def bump(self, part: str) -> "Version":
        bumpers = {"patch": self.bump_patch, "minor": self.bump_minor, "major": self.bump_major}
        if part not in bumpers:
            raise ValueError(f"Unknown version part: {part}")
        return bumpers[part]()

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.patch}"


def read_stable_tag(readme_text: str, source: str = "readme.txt") -> str:
    m = STABLE_TAG.search(readme_text)
    if not m:
        raise MissingField("Stable tag", source)
    return m.group("value")


def read_current_version(readme_path) -> str:
    return read_stable_tag(file_util.read_file_contents(readme_path), str(readme_path))


def truncate_wordpress_version(version: str) -> str:
    """'6.5.3' -> '6.5'. Shorter versions are returned unchanged."""
    return ".".join(version.split(".")[:2])
