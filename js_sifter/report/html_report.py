# File: js_sifter/report/html_report.py
"""js_sifter.report.html_report: HTML run summary rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from js_sifter.aggregator import SiftReport

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def render_html(
    report: SiftReport,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Render the run summary from ``report.html.j2`` and save it.

    Args:
        report: SiftReport of a finished run.
        template_dir: directory holding ``report.html.j2``; None uses the
            template shipped with the package.
        output_path: target HTML file.

    Returns:
        Path of the saved HTML file.
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = {
        "target": report.target,
        "scripts": report.scripts,
        "summary": report.summary(),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
