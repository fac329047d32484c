import re

# header lines may be decorated as PHP doc-comments (" * "), shell style ("#") or line comments ("//")
_HEADER_PREFIX = r"^(?P<prefix>[ \t]*(?:\*|#|//)?[ \t]*{name}:[ \t]*)"


def header_pattern(name: str) -> re.Pattern:
    """Matches the first `name: value` header line; groups are `prefix` and `value`."""
    return re.compile(
        _HEADER_PREFIX.format(name=re.escape(name)) + r"(?P<value>\S+)",
        re.IGNORECASE | re.MULTILINE,
    )
