# deb_tool/cli/utils/output.py
"""Output formatting utilities"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import MSG_BUILD_SUCCESS, MSG_BUILD_FAILED, EMOJI_PACKAGE, EMOJI_WARNING
from ...models import BuildResult
from ...services import BuildPlan
from ...utils.file_utils import format_size

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print error message"""
    error_console.print(f"[red]{message}[/red]")


def print_warning(message: str) -> None:
    """Print warning message"""
    error_console.print(f"[yellow]{EMOJI_WARNING} {message}[/yellow]")


def format_build_result(result: BuildResult) -> None:
    """Format and display build operation result"""
    if result.success:
        print_success(MSG_BUILD_SUCCESS.format(
            path=result.package_path,
            size=format_size(result.package_size)
        ))
    else:
        print_error(MSG_BUILD_FAILED.format(stage=result.stage, error=result.error))


def show_build_plan(plan: BuildPlan) -> None:
    """Show the resolved package metadata"""
    metadata = plan.metadata

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")

    table.add_row("Target", str(plan.target))
    table.add_row("Package", metadata.name)
    table.add_row("Version", metadata.version)
    table.add_row("Maintainer", metadata.maintainer)
    table.add_row("Description", metadata.short_description.strip())
    table.add_row("Install prefix", '/' + plan.install_prefix.strip('/'))
    table.add_row("Output", str(plan.output_path))

    console.print(Panel(table, title=f"{EMOJI_PACKAGE} Package Plan", border_style="blue"))
