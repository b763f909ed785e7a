"""General shell commands."""
import os

from rich.console import Console
from rich.table import Table

from ..config import OUTPUT_FORMATS

console = Console()


def register(registry):
    registry.register("set-output", cmd_set_output, "Set output format (table|json|text)")
    registry.register("set-config", cmd_set_config, "Set a config value")
    registry.register("show-config", cmd_show_config, "Show all config values")
    registry.register("clear", cmd_clear, "Clear the terminal")
    registry.register("exit", cmd_exit, "Exit the shell")
    registry.register("quit", cmd_exit, "Exit the shell")


def cmd_set_output(args, config, validator):
    if not args:
        console.print(f"[yellow]Current output format:[/yellow] {config.output_format}")
        console.print("[yellow]Usage:[/yellow] set-output <table|json|text>")
        return
    fmt = args[0].lower()
    if config.set_output(fmt):
        console.print(f"[green]Output format set to:[/green] {fmt}")
    else:
        console.print(f"[red]Invalid format.[/red] Choose: {', '.join(OUTPUT_FORMATS)}")


def cmd_set_config(args, config, validator):
    if len(args) < 2:
        console.print("[yellow]Usage:[/yellow] set-config <key> <value>")
        console.print("[dim]Example: set-config data_path payload.json[/dim]")
        console.print("[dim]Example: set-config show_similar false[/dim]")
        return
    key = args[0]
    value = " ".join(args[1:])
    if not config.set_config(key, value):
        console.print(
            f"[red]Invalid config:[/red] {key} = {value}\n"
            f"Known keys: {', '.join(config.as_dict().keys())}",
            highlight=False,
        )
        return
    if key == "marker":
        validator.marker = config.marker
    console.print(f"[green]Config set:[/green] {key} = {getattr(config, key)}", highlight=False)


def cmd_show_config(args, config, validator):
    table = Table(title="Shell Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in config.as_dict().items():
        table.add_row(key, str(value))
    table.add_row("config_path", config.config_path)

    console.print(table)


def cmd_clear(args, config, validator):
    os.system("clear" if os.name != "nt" else "cls")


def cmd_exit(args, config, validator):
    console.print("[dim]Goodbye![/dim]")
    raise EOFError
