# js_sifter/report/json_report.py

"""
JSON run summary for JsSifter.

Serialises a SiftReport to a file.
"""
from pathlib import Path

from js_sifter.aggregator import SiftReport


def render_json(report: SiftReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: SiftReport of a finished run
    :param output_path: target JSON file
    :param pretty: indent the output
    :return: Path of the saved file

    Example:
    ```python
    from js_sifter.report.json_report import render_json
    report_path = render_json(report, 'reports/run.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=pretty), encoding="utf-8")
    return output
