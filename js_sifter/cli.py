# === FILE: js_sifter/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of JsSifter.

Commands:
  sift      Crawl a page, sift its external scripts and write one artifact per script
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON configuration file (optional)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Log format string

sift options:
  --url, -u URL       Page whose scripts are sifted (overrides base_url)
  --spoof, -s         Present a browser-like identity
  --mode MODE         reachable (default) or coarse
  --out-dir, -o DIR   Root directory of the artifacts
  --timeout SEC       Timeout of a single request
  --concurrency N     Upper bound on concurrently analysed scripts
  --json PATH         Save the JSON run summary
  --html PATH         Save the HTML run summary
  --template DIR      Directory holding report.html.j2
  --pretty            Indent JSON printed to stdout

Example:
  js_sifter sift --url https://example.com/ --spoof --json run.json
"""
import asyncio
import sys
from pathlib import Path

import click

from js_sifter import __version__
from js_sifter.config import load_config
from js_sifter.engine import start_sift
from js_sifter.errors import TransportError
from js_sifter.logger import DEFAULT_FORMAT, init_logging
from js_sifter.report.html_report import render_html
from js_sifter.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='JsSifter, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Log format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """JsSifter command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('sift', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='Page whose scripts are sifted')
@click.option(
    '--spoof', '-s', 'spoof',
    is_flag=True,
    help='Present a browser-like identity'
)
@click.option(
    '--mode', 'mode',
    default=None,
    type=click.Choice(['reachable', 'coarse']),
    help='Extraction mode [default: reachable]'
)
@click.option(
    '--out-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Root directory of the artifacts [default: .]'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Timeout of a single request (seconds)')
@click.option('--concurrency', 'max_concurrency', type=int, default=None, help='Max scripts analysed at once')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON run summary'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the HTML run summary'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory holding report.html.j2'
)
@click.option('--pretty', is_flag=True, help='Indent JSON printed to stdout')
@click.pass_context
def sift(ctx, url, spoof, mode, output_dir, timeout, max_concurrency,
         json_output, html_output, template_dir, pretty):
    """Sift the external scripts of a page."""
    try:
        cfg = load_config(
            ctx.obj['config_path'],
            base_url=url,
            spoof=spoof or None,
            mode=mode,
            output_dir=output_dir,
            timeout=timeout,
            max_concurrency=max_concurrency,
        )
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')

    try:
        report = asyncio.run(start_sift(cfg))
    except TransportError as e:
        print_error(f'{e.url} | failed http request {e.status_text}')
    except Exception as e:
        print_error(f'Sifting failed: {e}')

    # Nothing to save → summary to stdout
    if not json_output and not html_output:
        click.echo(report.json(pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Failed to save HTML report: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'url', default=None, help='Override base_url')
@click.pass_context
def show_config(ctx, url):
    """Show the effective configuration as JSON."""
    try:
        cfg = load_config(ctx.obj['config_path'], base_url=url)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
