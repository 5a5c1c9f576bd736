"""CLI interface for drivepath."""

import logging
from typing import Any, Optional

import click

from .api import DriveClient
from .backend import ApiBackend, InMemoryBackend, StorageBackend
from .config import config
from .exceptions import DriveAPIError
from .models import Disambiguated, MultiplePaths, ResolutionError
from .output import OutputFormatter
from .resolver import IdResolver, PathResolver

logger = logging.getLogger(__name__)


@click.group()
@click.option("--api-key", "-k", envvar="DRIVEPATH_API_KEY", help="Storage API key")
@click.option(
    "--snapshot",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Resolve against a JSON snapshot instead of the API",
)
@click.option("--workspace", "-w", type=int, default=0, help="Workspace ID")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose/debug logging output",
)
@click.version_option(package_name="drivepath")
@click.pass_context
def main(
    ctx: Any,
    api_key: Optional[str],
    snapshot: Optional[str],
    workspace: int,
    quiet: bool,
    json: bool,
    verbose: bool,
) -> None:
    """drivepath - Resolve cloud storage names, IDs and folder paths."""
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["snapshot"] = snapshot
    ctx.obj["workspace"] = workspace
    ctx.obj["out"] = OutputFormatter(json_output=json, quiet=quiet)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("drivepath").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


def _get_backend(ctx: Any) -> StorageBackend:
    """Create the backend selected by the global options."""
    out: OutputFormatter = ctx.obj["out"]
    snapshot = ctx.obj.get("snapshot")
    if snapshot:
        logger.debug(f"Resolving against snapshot {snapshot}")
        return InMemoryBackend.from_json_file(snapshot)

    api_key = ctx.obj.get("api_key")
    if not config.is_configured() and not api_key:
        out.error("API key not configured.")
        out.info("Run 'drivepath init' to configure your API key")
        ctx.exit(1)

    client = DriveClient(api_key=api_key)
    ctx.call_on_close(client.close)
    return ApiBackend(
        client, workspace_id=ctx.obj.get("workspace", 0), root_name=config.root_name
    )


def _report(ctx: Any, result: Any, heading: Optional[str] = None) -> None:
    """Print a resolution result and exit with status 1 on errors."""
    out: OutputFormatter = ctx.obj["out"]

    if isinstance(result, ResolutionError):
        if out.json_output:
            out.output_json(
                {"ok": False, "error": result.kind.value, "message": result.message}
            )
        else:
            out.error(result.message)
        ctx.exit(1)

    if out.json_output:
        out.output_json({"ok": True, "result": result.to_value()})
        return

    if isinstance(result, (MultiplePaths, Disambiguated)):
        if heading:
            out.info(heading)
        for line in result.to_value():
            out.print(line)
    else:
        out.print(result.to_value())


@main.command()
@click.option(
    "--api-key",
    "-k",
    prompt="Enter your storage API key",
    hide_input=True,
    help="Storage API key",
)
@click.pass_context
def init(ctx: Any, api_key: str) -> None:
    """Initialize drivepath configuration.

    Stores your API key in ~/.config/drivepath/config for future use.
    """
    out: OutputFormatter = ctx.obj["out"]

    out.info("Validating API key...")
    try:
        with DriveClient(api_key=api_key) as client:
            client.get_file_entries(per_page=1)
        out.success("API key is valid")
    except DriveAPIError as e:
        out.error(f"API key validation failed: {e}")
        if not click.confirm("Save API key anyway?", default=False):
            out.warning("Configuration cancelled.")
            ctx.exit(1)

    try:
        config.save_api_key(api_key)
    except OSError as e:
        out.error(f"Could not save configuration: {e}")
        ctx.exit(1)

    out.success("Configuration saved successfully")
    out.info(f"Config file: {config.get_config_path()}")


@main.command()
@click.argument("item_id")
@click.option(
    "--delimiter", "-d", default=None, help="Separator between folder names"
)
@click.option(
    "--max-paths",
    "-m",
    type=int,
    default=None,
    help="Maximum number of parent folders to resolve",
)
@click.pass_context
def path(
    ctx: Any, item_id: str, delimiter: Optional[str], max_paths: Optional[int]
) -> None:
    """Show the folder path of an item.

    ITEM_ID: ID of the file or folder. An item filed in several folders
    prints one path per folder.
    """
    out: OutputFormatter = ctx.obj["out"]
    if delimiter is None:
        delimiter = config.default_delimiter
    if max_paths is None:
        max_paths = config.max_results

    try:
        result = PathResolver(_get_backend(ctx)).resolve(item_id, delimiter, max_paths)
    except DriveAPIError as e:
        out.error(str(e))
        ctx.exit(1)

    _report(ctx, result, heading=f"Item {item_id} is filed in several folders:")


@main.command("file-id")
@click.argument("name")
@click.option(
    "--max-files",
    "-m",
    type=int,
    default=None,
    help="Maximum number of matching files",
)
@click.pass_context
def file_id(ctx: Any, name: str, max_files: Optional[int]) -> None:
    """Show the ID of the file named NAME.

    When several files share the name, prints "<path> > <id>" for each.
    """
    out: OutputFormatter = ctx.obj["out"]
    if max_files is None:
        max_files = config.max_results

    try:
        result = IdResolver(_get_backend(ctx)).resolve_file_id(name, max_files)
    except DriveAPIError as e:
        out.error(str(e))
        ctx.exit(1)

    _report(ctx, result, heading=f"Several files are named '{name}':")


@main.command("folder-id")
@click.argument("name")
@click.option(
    "--max-folders",
    "-m",
    type=int,
    default=None,
    help="Maximum number of matching folders",
)
@click.pass_context
def folder_id(ctx: Any, name: str, max_folders: Optional[int]) -> None:
    """Show the ID of the folder named NAME.

    When several folders share the name, prints "<path> > <id>" for each.
    """
    out: OutputFormatter = ctx.obj["out"]
    if max_folders is None:
        max_folders = config.max_results

    try:
        result = IdResolver(_get_backend(ctx)).resolve_folder_id(name, max_folders)
    except DriveAPIError as e:
        out.error(str(e))
        ctx.exit(1)

    _report(ctx, result, heading=f"Several folders are named '{name}':")


if __name__ == "__main__":
    main()
