"""Handle normalisation helpers."""

import re

_SEPARATORS = re.compile(r"[\s._-]+")


def normalize_handle(raw: str | None) -> str:
    """
    Map a free-text handle to its canonical lookup key.

    Lower-cases and trims the input, then deletes every run of whitespace,
    periods, underscores and hyphens. Other characters (``#`` included) are
    kept, so ``"Fox_Hound.#12"`` becomes ``"foxhound#12"``.
    """
    return _SEPARATORS.sub("", (raw or "").lower().strip())
