"""
Catalogue listing entry.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MovieListing:
    """Flat catalogue entry: director is kept as a display name"""

    title: Optional[str] = None
    year: Optional[int] = None
    director: Optional[str] = None
