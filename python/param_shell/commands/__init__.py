"""Command registry for Parameter Shell."""
from rich.console import Console

console = Console()


class CommandRegistry:
    def __init__(self, config, validator):
        self.config = config
        self.validator = validator
        self._commands = {}
        self._register_all()

    def _register_all(self):
        from .general import register as register_general
        from .help_cmd import register as register_help
        from .data_cmd import register as register_data
        from .validate_cmd import register as register_validate
        from .search_cmd import register as register_search

        register_general(self)
        register_help(self)
        register_data(self)
        register_validate(self)
        register_search(self)

    def register(self, name, handler, help_text=""):
        self._commands[name] = {
            "handler": handler,
            "help": help_text,
        }

    def dispatch(self, command, args):
        if command in self._commands:
            try:
                self._commands[command]["handler"](
                    args, self.config, self.validator
                )
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception as e:
                console.print(f"[bold red]Error:[/bold red] {e}", highlight=False)
        else:
            console.print(
                f"[bold red]Unknown command:[/bold red] {command}\n"
                f"Type [bold cyan]help[/bold cyan] to see available commands."
            )

    def get_all_commands(self):
        return self._commands
