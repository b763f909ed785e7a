"""Search command: substring search through the data's property paths."""
from rich.console import Console

from ..utils.output import print_find

console = Console()


def register(registry):
    registry.register("find", cmd_find, "Search property paths for a keyword")


def cmd_find(args, config, validator):
    if not args:
        console.print(
            "[yellow]Usage:[/yellow] find <keyword>\n"
            "[dim]Example: find address[/dim]"
        )
        return
    if validator.data is None:
        console.print("[bold red]Error:[/bold red] No data loaded")
        return
    keyword = " ".join(args)
    print_find(keyword, validator.find(keyword), config.output_format)
