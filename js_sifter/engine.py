# File: js_sifter/engine.py
"""js_sifter.engine: run driver that streams every script result to persistence."""

from __future__ import annotations

from js_sifter.aggregator import ScriptInfo, SiftReport, script_info
from js_sifter.config import SifterConfig
from js_sifter.crawler.sifter import Sifter
from js_sifter.errors import ParseError, PersistenceError, TransportError
from js_sifter.extract.noise import load_stoplist
from js_sifter.logger import logger
from js_sifter.models import AnalysisResult
from js_sifter.report.text_report import write_artifact

__all__ = ["start_sift", "persist_result"]


def persist_result(config: SifterConfig, result: AnalysisResult) -> ScriptInfo:
    """Write the artifact for *result* (if any), log the outcome, return its report entry."""
    url = result.reference.url
    error = result.error
    if isinstance(error, TransportError):
        logger.warning("%s | failed http request %s", url, error.status_text)
        return script_info(result)
    if isinstance(error, ParseError):
        logger.warning("%s | failed to parse javascript %s", url, error.reason)
        return script_info(result)

    try:
        artifact = write_artifact(config.output_dir, config.domain, result.reference, result.strings)
    except PersistenceError as exc:
        logger.error("%s | failed to write file: %s", url, exc.reason)
        return script_info(result, write_error=exc)

    if artifact is not None:
        logger.info("%s | %d strings found", url, len(result.strings))
    else:
        logger.debug("%s | no strings found", url)
    return script_info(result, artifact)


async def start_sift(config: SifterConfig) -> SiftReport:
    """
    Sift every script of ``config.base_url`` and return the run report.

    Results are persisted one by one as their analysis completes. A failure
    to fetch the root page raises TransportError.
    """
    stoplist = load_stoplist(config.stoplist_file)
    report = SiftReport(target=str(config.base_url))
    logger.info("Sifting %s (mode=%s)", config.base_url, config.mode)

    async with Sifter(config, stoplist) as sifter:
        async for result in sifter.sift():
            report.add(persist_result(config, result))

    logger.info("Finished: %s", ", ".join(f"{k}={v}" for k, v in report.summary().items()))
    return report
