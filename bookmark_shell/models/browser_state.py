"""Browser state record held by the bookmark store."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class BrowserState:
    """Represents the browser state shared by all commands."""

    history: List[str] = field(default_factory=list)  # Declared only, never updated
    bookmarks: List[str] = field(default_factory=list)
