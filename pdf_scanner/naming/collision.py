from dataclasses import dataclass
from pathlib import Path, PurePath


@dataclass(frozen=True)
class ResolvedFilename:
    name: str
    was_renamed: bool


def resolve_filename(directory: Path, candidate: str) -> ResolvedFilename:
    """Return ``candidate`` or the first free ``stem_N.ext`` in ``directory``.

    The existence check is not atomic with the later write: a concurrent
    writer to ``directory`` can still take the name first.
    """
    if not (directory / candidate).exists():
        return ResolvedFilename(name=candidate, was_renamed=False)

    parsed = PurePath(candidate)
    counter = 1
    while True:
        name = f"{parsed.stem}_{counter}{parsed.suffix}"
        if not (directory / name).exists():
            return ResolvedFilename(name=name, was_renamed=True)
        counter += 1
