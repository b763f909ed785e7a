"""Syntax highlighting lexer for Parameter Shell."""
from pygments.lexer import RegexLexer
from pygments.token import Keyword, Name, String, Text

COMMANDS = (
    "load-data", "load-conditions", "validate", "check", "find",
    "params", "props", "set-output", "set-config", "show-config",
    "help", "clear", "exit", "quit",
)


class ParameterShellLexer(RegexLexer):
    name = "ParameterShell"
    aliases = ["paramshell"]

    tokens = {
        "root": [
            # Known commands, not when part of a longer hyphenated word
            (r"(?<![\w-])(" + "|".join(COMMANDS) + r")(?![\w-])", Keyword),
            # $name parameter references
            (r"\$\w+", Name.Variable),
            # Dotted/indexed property paths such as user.tags[0].name
            (r"\w+(?:\[\d+\])*(?:\.\w+(?:\[\d+\])*)+", Name.Attribute),
            # Quoted strings
            (r'"[^"]*"', String),
            (r"'[^']*'", String),
            (r"\s+", Text),
            (r".", Text),
        ]
    }
