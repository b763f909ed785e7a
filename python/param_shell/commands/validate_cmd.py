"""Validate commands: all parameters at once, or a single name."""
from rich.console import Console

from ..utils.output import print_check, print_validation

console = Console()


def register(registry):
    registry.register("validate", cmd_validate, "Validate all parameters against the data")
    registry.register("check", cmd_check, "Check a single parameter name")


def cmd_validate(args, config, validator):
    # Raises NotReadyError when data or conditions are missing
    results = validator.validate()
    print_validation(results, config.output_format, show_similar=config.show_similar)


def cmd_check(args, config, validator):
    if not args:
        console.print(
            "[yellow]Usage:[/yellow] check <parameter>\n"
            "[dim]Example: check userName[/dim]"
        )
        return
    if validator.data is None:
        console.print("[bold red]Error:[/bold red] No data loaded")
        return
    for name in args:
        print_check(name, validator.check(name), config.output_format)
