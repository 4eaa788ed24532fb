from pathlib import Path

from pseudonymizer.anonymization.exceptions import PlaceholderNamesError

_DEFAULT_DATA_DIR = Path(__file__).parent / "data"

MIN_PLACEHOLDER_NAMES = 10


def load_placeholder_names(path: Path | None = None) -> list[str]:
    """Load the placeholder name list used by the personal-name policy.

    Args:
        path: Text file with one name per line.
              Defaults to the bundled placeholder_names.txt.

    Returns:
        Names in file order, duplicates removed.

    Raises:
        PlaceholderNamesError: if the file cannot be read or holds fewer
            than ``MIN_PLACEHOLDER_NAMES`` distinct names.
    """
    if path is None:
        path = _DEFAULT_DATA_DIR / "placeholder_names.txt"
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PlaceholderNamesError(f"Failed to load placeholder names: {exc}") from exc

    names: list[str] = []
    for line in raw.splitlines():
        name = line.strip()
        if not name or name.startswith("#") or name in names:
            continue
        names.append(name)

    if len(names) < MIN_PLACEHOLDER_NAMES:
        raise PlaceholderNamesError(
            f"Placeholder name list {path} has {len(names)} names "
            f"(need at least {MIN_PLACEHOLDER_NAMES})"
        )
    return names
