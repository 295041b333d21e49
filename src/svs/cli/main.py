"""``svs-extract``: convert SVS relay captures to CSV/XML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import click

from svs.config.config import ExtractConfig
from svs.core.errors import FatalPoolError
from svs.monitoring.metrics import generate_latest
from svs.pipeline.naming import ensure_dir
from svs.pipeline.runner import BoundedRunner
from svs.pipeline.sources import iter_input_paths
from svs.utils.logging import configure_logging, get_logger

EXIT_DATADIR = 12
EXIT_POOL = 1


def _load_config(config_path: Optional[Path]) -> ExtractConfig:
    if config_path is not None:
        return ExtractConfig.from_yaml(config_path)
    return ExtractConfig.from_env()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "-d", "--datadir", type=click.Path(path_type=Path), help="Output root directory."
)
@click.option(
    "-k", "--keep-bad", is_flag=True, default=False, help="Also process .bad files."
)
@click.option("-p", "--per", type=int, help="Files per shard directory [512].")
@click.option("-w", "--workers", type=int, help="Files processed concurrently [4].")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML settings file (flags take precedence).",
)
@click.option(
    "--log-level",
    default=lambda: os.getenv("LOG_LEVEL", "INFO"),
    show_default="INFO",
    help="Logging level.",
)
@click.option("--json-logs/--console-logs", default=False, help="Log renderer.")
@click.option(
    "--metrics-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write Prometheus metrics here when the run ends.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    paths: tuple[Path, ...],
    datadir: Optional[Path],
    keep_bad: bool,
    per: Optional[int],
    workers: Optional[int],
    config_path: Optional[Path],
    log_level: str,
    json_logs: bool,
    metrics_file: Optional[Path],
) -> None:
    """
    Decode SVS captures under PATHS (walked recursively).

    Without PATHS, paths are read one per line from standard input.
    """
    configure_logging(level=log_level, json_output=json_logs)
    logger = get_logger(__name__)

    config = _load_config(config_path).with_overrides(
        datadir=datadir,
        files_per_dir=per,
        workers=workers,
        keep_bad=True if keep_bad else None,
    )

    try:
        ensure_dir(config.datadir)
    except OSError as exc:
        click.echo(str(exc), err=True)
        ctx.exit(EXIT_DATADIR)

    logger.info(
        "starting_extract",
        datadir=str(config.datadir),
        files_per_dir=config.files_per_dir,
        workers=config.workers,
        keep_bad=config.keep_bad,
    )

    stream = None if paths else click.get_text_stream("stdin")
    inputs = iter_input_paths(paths, keep_bad=config.keep_bad, stream=stream)
    try:
        BoundedRunner(config).run_sync(inputs)
    except FatalPoolError as exc:
        logger.error("run_aborted", error=str(exc))
        ctx.exit(EXIT_POOL)
    finally:
        if metrics_file is not None:
            metrics_file.write_bytes(generate_latest())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
