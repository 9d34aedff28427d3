"""Inspection result exporters."""

from .base_exporter import BaseExporter
from .js_exporter import JSExporter
from .json_exporter import JSONExporter
from .markdown_exporter import MarkdownExporter

EXPORTERS = {
    'js': JSExporter,
    'json': JSONExporter,
    'markdown': MarkdownExporter
}

__all__ = ['BaseExporter', 'JSExporter', 'JSONExporter', 'MarkdownExporter', 'EXPORTERS']
