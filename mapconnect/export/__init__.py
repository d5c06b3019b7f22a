"""
Exporters for connected entities.
"""

from .entities_json import EntitiesJSONExporter, summarize

__all__ = ["EntitiesJSONExporter", "summarize"]
