# js_sifter/report/text_report.py

"""
Per-script artifacts: newline-separated UTF-8 text, one file per script.
"""
from pathlib import Path
from typing import Optional, Sequence

from js_sifter.errors import PersistenceError
from js_sifter.models import ScriptReference


def artifact_path(output_dir: Path | str, domain: str, reference: ScriptReference) -> Path:
    """<output_dir>/<domain>/<last path segment>.txt"""
    return Path(output_dir) / domain / f"{reference.identifier}.txt"


def write_artifact(
    output_dir: Path | str,
    domain: str,
    reference: ScriptReference,
    values: Sequence[str],
) -> Optional[Path]:
    """
    Write the accepted strings of one script.

    :param output_dir: root directory of all artifacts
    :param domain: host of the crawled page, used as sub-directory
    :param reference: the analysed script
    :param values: accepted strings, in extraction order
    :return: path of the written file, or None when there was nothing to write
    :raises PersistenceError: the directory or file could not be written
    """
    if not values:
        return None

    output = artifact_path(output_dir, domain, reference)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text("\n".join(values), encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(str(output), exc.strerror or str(exc)) from exc
    return output
