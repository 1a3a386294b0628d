"""
Destination des exports : ecriture dans un repertoire.
"""

from pathlib import Path

from loguru import logger

from nextflix.core.ports.export_sink import ExportPayload, IExportSink


class DirectoryExportSink(IExportSink):
    """
    Ecrit chaque export sous son nom dans un repertoire (cree si absent).

    Un fichier du meme nom (meme export le meme jour) est remplace.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory).expanduser()

    def write(self, payload: ExportPayload) -> Path:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._directory / payload.filename
        target.write_text(payload.content, encoding="utf-8")
        logger.info(f"Export ecrit: {target}")
        return target
