"""
Exports de la collection complete.

Trois formats, chacun fonction pure de l'etat de la collection :
- CSV : une ligne par entree, pour tableur
- JSON : fidelite complete, avec date d'export et nombre d'entrees
- TXT : resume lisible, une ligne par entree

Les fichiers sont nommes avec la date du jour ; leur livraison est faite par
un IExportSink.
"""

import csv
import io
import json
from collections.abc import Callable, Sequence
from datetime import datetime

from nextflix.core.entities.collection import CollectionEntry, MediaKind, UserRating
from nextflix.core.ports.export_sink import ExportPayload

CSV_HEADER = (
    "Title",
    "Type",
    "Year",
    "Release Date",
    "Your Rating",
    "TMDB Rating",
    "Date Added",
    "Genres",
    "Cast",
    "Director",
    "Overview",
    "TMDB ID",
)

RATING_LABELS = {
    UserRating.LOVE: "Love This!",
    UserRating.UP: "I Like It",
    UserRating.DOWN: "Not For Me",
}

KIND_LABELS = {
    MediaKind.MOVIE: "Movie",
    MediaKind.SERIES: "Series",
}

EXPORT_BASENAME = "nextflix-collection"


def _join(values) -> str:
    return ", ".join(values or ())


class CollectionExporter:
    """
    Produit le contenu des trois exports.

    Example:
        exporter = CollectionExporter(lambda: store.entries)
        for payload in exporter.payloads():
            sink.write(payload)
    """

    def __init__(
        self,
        entries: Callable[[], Sequence[CollectionEntry]],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Args:
            entries: Retourne la collection complete (non filtree)
            clock: Source de l'heure courante (horodatage et noms de fichiers)
        """
        self._entries = entries
        self._clock = clock

    def export_csv(self) -> str:
        """Export tabulaire, une ligne par entree."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for entry in self._entries():
            writer.writerow((
                entry.title,
                KIND_LABELS[entry.media_kind],
                entry.year if entry.year is not None else "",
                entry.release_date or "",
                RATING_LABELS[entry.user_rating] if entry.user_rating else "",
                f"{entry.provider_rating:.1f}" if entry.provider_rating is not None else "",
                entry.date_added,
                _join(entry.genres),
                _join(entry.cast),
                entry.director or "",
                entry.overview,
                entry.provider_id if entry.provider_id is not None else "",
            ))
        return buffer.getvalue()

    def export_json(self) -> str:
        """
        Export structure complet.

        Le champ "collection" se relit avec CollectionEntry.from_dict et
        reproduit les entrees champ par champ.
        """
        entries = self._entries()
        document = {
            "exportDate": self._clock().isoformat(),
            "totalItems": len(entries),
            "collection": [entry.to_dict() for entry in entries],
        }
        return json.dumps(document, ensure_ascii=False, indent=2)

    def export_txt(self) -> str:
        """Resume lisible : en-tete puis une ligne numerotee par entree."""
        entries = self._entries()
        now = self._clock()
        lines = [
            "My NextFlix Collection",
            f"Exported: {now:%Y-%m-%d %H:%M}",
            f"Total: {len(entries)} item(s)",
            "",
        ]
        for position, entry in enumerate(entries, start=1):
            year = f" ({entry.year})" if entry.year is not None else ""
            parts = [f"{position}. {entry.title}{year} [{KIND_LABELS[entry.media_kind]}]"]
            parts.append(RATING_LABELS[entry.user_rating] if entry.user_rating else "Not rated")
            if entry.provider_rating is not None:
                parts.append(f"TMDB {entry.provider_rating:.1f}")
            parts.append(f"Added {entry.date_added}")
            lines.append(" | ".join(parts))
        return "\n".join(lines) + "\n"

    def payloads(self) -> list[ExportPayload]:
        """Les trois exports, nommes avec la date du jour."""
        stamp = self._clock().date().isoformat()
        return [
            ExportPayload(f"{EXPORT_BASENAME}-{stamp}.csv", self.export_csv(), "text/csv"),
            ExportPayload(f"{EXPORT_BASENAME}-{stamp}.json", self.export_json(), "application/json"),
            ExportPayload(f"{EXPORT_BASENAME}-{stamp}.txt", self.export_txt(), "text/plain"),
        ]
