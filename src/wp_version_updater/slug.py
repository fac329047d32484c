import re

from .errors import MissingField
from .util import file_util, log

TEXT_DOMAIN = re.compile(r"Text Domain:\s*(\S+)", re.IGNORECASE)


def resolve_slug(directory=".") -> str:
    """Returns the lower-cased Text Domain of the first .php file in directory that declares one."""
    for filename in file_util.list_files(directory, ".php"):
        # helper files may be in legacy encodings
        m = TEXT_DOMAIN.search(file_util.read_file_contents(filename, errors="replace"))
        if m:
            log.debug(f"Text Domain found in {filename}")
            return m.group(1).lower()
    raise MissingField("Text Domain", f"any PHP file in {directory}")
