"""Adaptateurs de destination des exports."""

from nextflix.adapters.export.file_sink import DirectoryExportSink

__all__ = ["DirectoryExportSink"]
