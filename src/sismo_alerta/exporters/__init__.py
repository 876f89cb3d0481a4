"""Exporters for event assessments."""

from sismo_alerta.exporters.json_export import assessment_to_dict, export_json
from sismo_alerta.exporters.markdown_export import export_markdown, render_markdown

__all__ = ["assessment_to_dict", "export_json", "export_markdown", "render_markdown"]
