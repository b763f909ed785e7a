"""Auto-completion for Parameter Shell with descriptions."""
from prompt_toolkit.completion import Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .commands.help_cmd import COMMAND_HELP
from .config import OUTPUT_FORMATS

CONFIG_KEYS = ("data_path", "conditions_path", "marker", "output_format", "show_similar")

FILE_COMMANDS = ("load-data", "load-conditions")


class ParameterShellCompleter(Completer):
    """Completes commands, then command-specific arguments."""

    def __init__(self, registry, validator):
        self.registry = registry
        self.validator = validator
        self._paths = PathCompleter(expanduser=True)

    def _descriptions(self):
        return {
            name: info["help"] for name, info in self.registry.get_all_commands().items()
        }

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        parts = text.split()

        if not parts or (len(parts) == 1 and not text.endswith(" ")):
            # Completing the first word (top-level command)
            partial = parts[0].lower() if parts else ""
            for cmd, desc in sorted(self._descriptions().items()):
                if cmd.startswith(partial):
                    yield Completion(cmd, start_position=-len(partial), display_meta=desc)
            return

        command = parts[0].lower()
        partial = "" if text.endswith(" ") else parts[-1]

        if command in FILE_COMMANDS:
            if len(parts) > 2 or (len(parts) == 2 and text.endswith(" ")):
                return
            sub_doc = Document(partial, cursor_position=len(partial))
            yield from self._paths.get_completions(sub_doc, complete_event)
            return

        # Only the second word is completed for the remaining commands
        if len(parts) > 2 or (len(parts) == 2 and text.endswith(" ")):
            if command != "check":
                return

        if command == "set-output":
            yield from _complete_words(OUTPUT_FORMATS, partial.lower(), "output format")
        elif command == "set-config":
            yield from _complete_words(CONFIG_KEYS, partial.lower(), "config key")
        elif command == "help":
            yield from _complete_words(COMMAND_HELP.keys(), partial.lower(), "help topic")
        elif command == "check":
            names = list(dict.fromkeys(self.validator.conditions))
            yield from _complete_words(names, partial, "parameter")
        elif command == "find":
            keys = dict.fromkeys(
                p.split(".")[-1] for p in self.validator.properties
            )
            yield from _complete_words(keys, partial, "property")


def _complete_words(words, partial, meta):
    for word in words:
        if word.startswith(partial):
            yield Completion(word, start_position=-len(partial), display_meta=meta)


def build_completer(registry, validator):
    return ParameterShellCompleter(registry, validator)
