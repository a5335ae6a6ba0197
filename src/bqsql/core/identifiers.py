"""Helpers for splicing quoted identifiers into SQL fragments.

Identifiers cannot be bound as query parameters, so they have to be written
into the literal text.  Keeping the quoting in one place means the rest of the
package never concatenates caller supplied names by hand.
"""

from __future__ import annotations

from .builders import raw
from .types import Fragment


def escape_identifier(name: str) -> str:
    """Escape a name so it can be placed between backticks."""

    return name.replace("\\", "\\\\").replace("`", "\\`")


def identifier(name: str) -> Fragment:
    """Return ``name`` as a backtick-quoted BigQuery identifier fragment.

    Dotted paths such as ``project.dataset.table`` are quoted as a whole, which
    BigQuery accepts for table references.
    """

    if not name:
        raise ValueError("identifier name must not be empty")
    return raw("`{}`".format(escape_identifier(name)))
