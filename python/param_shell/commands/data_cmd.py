"""Loading data/conditions files and listing what they contain."""
from rich.console import Console
from rich.markup import escape

from ..utils.output import print_properties

console = Console()


def register(registry):
    registry.register("load-data", cmd_load_data, "Load a JSON data file")
    registry.register("load-conditions", cmd_load_conditions, "Load parameter names from a conditions file")
    registry.register("params", cmd_params, "List parameters from the conditions file")
    registry.register("props", cmd_props, "List all properties in the data")


def cmd_load_data(args, config, validator):
    path = args[0] if args else config.data_path
    if validator.load_data(path):
        console.print(
            f"[green]Loaded data:[/green] {escape(path)} "
            f"[dim]({len(validator.properties)} properties)[/dim]"
        )
    else:
        console.print(f"[red]Could not load data from[/red] {escape(path)}")


def cmd_load_conditions(args, config, validator):
    path = args[0] if args else config.conditions_path
    if validator.load_conditions(path):
        console.print(
            f"[green]Loaded conditions:[/green] {escape(path)} "
            f"[dim]({len(validator.conditions)} parameters)[/dim]"
        )
    else:
        console.print(
            f"[red]No parameters found in[/red] {escape(path)} "
            f"[dim](looking for {escape(validator.marker)}name tokens)[/dim]"
        )


def cmd_params(args, config, validator):
    if not validator.conditions:
        console.print("[dim]No parameters loaded. Use load-conditions <file>.[/dim]")
        return
    console.print("Required parameters from conditions file:")
    for i, name in enumerate(validator.conditions, 1):
        console.print(f"  {i}. {name}", markup=False)


def cmd_props(args, config, validator):
    if validator.data is None:
        console.print("[bold red]Error:[/bold red] No data loaded")
        return
    print_properties(validator.properties, config.output_format)
