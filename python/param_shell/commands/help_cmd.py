"""Help command."""
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

COMMAND_HELP = {
    "load-data": {
        "usage": "load-data [file]",
        "description": "Load a JSON document; defaults to the configured data_path",
        "example": "load-data payload.json",
    },
    "load-conditions": {
        "usage": "load-conditions [file]",
        "description": "Extract $name parameters from a conditions file; "
                       "defaults to the configured conditions_path",
        "example": "load-conditions rules.js",
    },
    "validate": {
        "usage": "validate",
        "description": "Check every loaded parameter and print a summary with the success rate",
        "example": "validate",
    },
    "check": {
        "usage": "check <parameter> [parameter ...]",
        "description": "Exact match on the last dotted key, plus case-insensitive similar properties",
        "example": "check userName",
    },
    "find": {
        "usage": "find <keyword>",
        "description": "List property paths containing the keyword (case-insensitive)",
        "example": "find address",
    },
    "params": {
        "usage": "params",
        "description": "List the parameter names extracted from the conditions file",
        "example": "params",
    },
    "props": {
        "usage": "props",
        "description": "List every property path in the loaded data",
        "example": "props",
    },
    "set-output": {
        "usage": "set-output <table|json|text>",
        "description": "Choose how results are printed",
        "example": "set-output table",
    },
    "set-config": {
        "usage": "set-config <key> <value>",
        "description": "Persist a setting (data_path, conditions_path, marker, output_format, show_similar)",
        "example": "set-config marker @",
    },
    "show-config": {
        "usage": "show-config",
        "description": "Show all settings and the config file path",
        "example": "show-config",
    },
    "clear": {
        "usage": "clear",
        "description": "Clear the terminal",
        "example": "clear",
    },
    "exit": {
        "usage": "exit | quit",
        "description": "Exit the shell (or press Ctrl+D)",
        "example": "exit",
    },
}


def register(registry):
    registry.register("help", cmd_help, "Show available commands")


def cmd_help(args, config, validator):
    if args:
        command = args[0].lower()
        if command == "quit":
            command = "exit"
        if command in COMMAND_HELP:
            _show_command_help(command)
        else:
            console.print(
                f"[red]No help for:[/red] {command}\n"
                f"Available: {', '.join(COMMAND_HELP.keys())}"
            )
        return

    table = Table(title="Parameter Shell Commands")
    table.add_column("Command", style="bold cyan", min_width=15)
    table.add_column("Description", style="white")
    table.add_column("Example", style="dim")

    for command, info in COMMAND_HELP.items():
        table.add_row(command, info["description"], info["example"])

    console.print(table)
    console.print(
        "\n[dim]Type [bold]help <command>[/bold] for usage. "
        "Press [bold]Tab[/bold] for auto-completion.[/dim]"
    )


def _show_command_help(command):
    info = COMMAND_HELP[command]
    table = Table(title=f"{command} - {info['description']}")
    table.add_column("Usage", style="bold cyan", min_width=30)
    table.add_column("Example", style="dim")
    table.add_row(escape(info["usage"]), info["example"])
    console.print(table)
