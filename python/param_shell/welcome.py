"""Welcome screen."""
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()

BANNER = r"""
 ____                              ____  _          _ _
|  _ \ __ _ _ __ __ _ _ __ ___    / ___|| |__   ___| | |
| |_) / _` | '__/ _` | '_ ` _ \   \___ \| '_ \ / _ \ | |
|  __/ (_| | | | (_| | | | | | |   ___) | | | |  __/ | |
|_|   \__,_|_|  \__,_|_| |_| |_|  |____/|_| |_|\___|_|_|
"""


def show_welcome(config, validator):
    console.print(BANNER, style="bold #00afaf", markup=False, highlight=False)
    console.print(
        Panel(
            "[bold]Welcome to Parameter Shell![/bold]\n\n"
            "Check that the $parameters used by a conditions file exist in a JSON document.\n"
            "Type [bold cyan]validate[/bold cyan] to check every parameter, "
            "[bold cyan]check <name>[/bold cyan] for a single one, "
            "or [bold cyan]help[/bold cyan] for all commands.\n"
            "Press [bold]Tab[/bold] for auto-completion. "
            "Press [bold]Ctrl+D[/bold] to exit.",
            title="Parameter Shell v0.1.0",
            border_style="#00afaf",
        )
    )

    if validator.data is not None:
        console.print(
            f"  Data: [bold green]{escape(validator.data_path)}[/bold green] "
            f"({len(validator.properties)} properties)"
        )
    else:
        console.print(
            "  [bold red]Warning:[/bold red] No data loaded. "
            "Use [bold]load-data <file>[/bold]."
        )
    if validator.conditions:
        console.print(
            f"  Conditions: [bold green]{escape(validator.conditions_path)}[/bold green] "
            f"({len(validator.conditions)} parameters)\n"
        )
    else:
        console.print(
            "  [bold red]Warning:[/bold red] No parameters loaded. "
            "Use [bold]load-conditions <file>[/bold].\n"
        )
