"""Main Parameter Shell application - the REPL loop."""
import os
import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.lexers import PygmentsLexer
from rich.console import Console

from .commands import CommandRegistry
from .completer import build_completer
from .config import ShellConfig
from .lexer import ParameterShellLexer
from .style import get_style
from .toolbar import get_toolbar
from .validator import ParameterValidator
from .welcome import show_welcome

console = Console()


class ParameterShell:
    def __init__(self, config_path=None, data_path=None, conditions_path=None):
        self.config = ShellConfig(config_path=config_path)
        self.validator = ParameterValidator(
            data_path=data_path or self.config.data_path,
            conditions_path=conditions_path or self.config.conditions_path,
            marker=self.config.marker,
        )
        self.registry = CommandRegistry(self.config, self.validator)
        self.completer = build_completer(self.registry, self.validator)

        history_path = os.path.expanduser("~/.param_shell_history")

        bindings = KeyBindings()

        @bindings.add(Keys.Escape, eager=True)
        def _handle_escape(event):
            """Dismiss the completion menu on Escape."""
            buf = event.current_buffer
            if buf.complete_state:
                buf.cancel_completion()

        self.prompt_session = PromptSession(
            history=FileHistory(history_path),
            completer=self.completer,
            lexer=PygmentsLexer(ParameterShellLexer),
            style=get_style(),
            auto_suggest=AutoSuggestFromHistory(),
            complete_while_typing=True,
            key_bindings=bindings,
        )

    def run(self):
        show_welcome(self.config, self.validator)

        while True:
            try:
                toolbar = get_toolbar(self.config, self.validator)
                text = self.prompt_session.prompt(
                    "params> ",
                    bottom_toolbar=toolbar,
                ).strip()

                if not text:
                    continue
                self.execute(text)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

    def execute(self, text):
        try:
            parts = shlex.split(text)
        except ValueError as e:
            console.print(f"[bold red]Parse error:[/bold red] {e}")
            return

        command_name = parts[0].lower()
        args = parts[1:]
        self.registry.dispatch(command_name, args)
