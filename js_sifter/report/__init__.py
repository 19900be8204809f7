# File: js_sifter/report/__init__.py
"""js_sifter.report: per-script artifacts and run summaries (JSON, HTML)."""

from .html_report import render_html
from .json_report import render_json
from .text_report import artifact_path, write_artifact

__all__ = ["artifact_path", "write_artifact", "render_json", "render_html"]
