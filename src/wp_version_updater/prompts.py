from rich.prompt import Prompt

from .util import log
from .version import Version

BUMP_CHOICES = ["patch", "minor", "major"]


def version_candidates(current: Version) -> dict[str, Version]:
    return {part: current.bump(part) for part in BUMP_CHOICES}


def choose_version(current: Version) -> str:
    """Asks which part to bump and returns the new version string.
    KeyboardInterrupt and EOFError are left to abort the run."""
    candidates = version_candidates(current)
    log.console.print(f"Current version is [b]{current}[/b]")
    for part, candidate in candidates.items():
        log.console.print(f"  [cyan]{part}[/cyan]\t{part.capitalize()} - {current} => {candidate}")

    part = Prompt.ask(
        "Select version type to update",
        choices=BUMP_CHOICES,
        default="patch",
        console=log.console,
    )
    return str(candidates[part])


def ask_version(product: str, example: str) -> str:
    """Free-form manual entry, used verbatim (no trimming, no validation)."""
    return log.console.input(
        f"Could not fetch latest {product} version. Please enter it manually (e.g., {example}): "
    )
