import json
import logging
import time

import click

from .pipeline import MetaParser, MetaParserConfig, MetaParserError

logger = logging.getLogger(__name__)

USAGE = (
    "Arguments parse error!\n"
    "Please call the tool like this:\n"
    "meta_parser  project_file_name  include_file_name_to_generate  project_base_directory "
    "sys_include_directory module_name showErrors(0 or 1)\n"
)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--log-level",
    "-l",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
@click.argument("project_file", required=False, default=None)
@click.argument("include_file", required=False, default=None)
@click.argument("include_paths", required=False, default=None)
@click.argument("sys_include", required=False, default=None)
@click.argument("module_name", required=False, default=None)
@click.argument("show_errors", required=False, default=None)
@click.pass_context
def meta_parser(ctx, config, log_level, project_file, include_file, include_paths, sys_include, module_name, show_errors):
    logging.basicConfig(level=log_level.upper(), format="%(message)s")
    start_time = time.monotonic()

    arguments = (project_file, include_file, include_paths, sys_include, module_name, show_errors)
    if any(argument is None for argument in arguments):
        click.echo(USAGE, err=True)
        ctx.exit(-1)

    if config is not None:
        with open(config) as f:
            config = MetaParserConfig.from_dict(json.load(f))
    else:
        config = MetaParserConfig()

    logger.info('Parsing meta data for target "%s"', module_name)

    try:
        with MetaParser(
            project_file,
            include_file,
            include_paths,
            sys_include,
            module_name,
            show_errors != "0",
            config,
        ) as parser:
            logger.info("Parsing in %s", include_paths)
            parser.parse()
            parser.generate_files()
    except MetaParserError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(e.exit_code)

    logger.info("Completed in %dms", (time.monotonic() - start_time) * 1000)
