"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- CollectionEntry: A watched title with its personal rating
- MediaKind: Movie or series
- UserRating: love / up / down
"""

from nextflix.core.entities.collection import CollectionEntry, MediaKind, UserRating

__all__ = [
    "CollectionEntry",
    "MediaKind",
    "UserRating",
]
