"""CLI entry point for param-shell."""
import argparse
import sys

from .config import OUTPUT_FORMATS, ShellConfig
from .log import configure_logging
from .utils.output import err_console, print_find, print_properties, print_validation
from .validator import ParameterValidator

MODES = ("shell", "validate", "props", "find")

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_LOAD_ERROR = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog="param-shell",
        description="Check that the $parameters of a conditions file exist in a JSON document",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to config YAML file")
    parser.add_argument("--data", type=str, default=None, help="JSON data file (default: config data_path)")
    parser.add_argument("--conditions", type=str, default=None,
                        help="Conditions file with $name parameters (default: config conditions_path)")
    parser.add_argument("--output", type=str, default=None, choices=OUTPUT_FORMATS,
                        help="Output format for one-shot modes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("mode", nargs="?", default="shell", choices=MODES,
                        help="Start the interactive shell (default) or run one command and exit")
    parser.add_argument("keyword", nargs="?", default=None, help="Keyword for 'find'")
    return parser


def run_once(mode, config, validator, keyword=None):
    """Run a single non-interactive mode and return the process exit code."""
    if mode == "find" and not keyword:
        err_console.print("[bold red]Error:[/bold red] find requires a keyword")
        return EXIT_LOAD_ERROR

    if validator.data is None:
        err_console.print("[bold red]Error:[/bold red] Failed to load data")
        return EXIT_LOAD_ERROR

    if mode == "props":
        print_properties(validator.properties, config.output_format)
        return EXIT_OK
    if mode == "find":
        print_find(keyword, validator.find(keyword), config.output_format)
        return EXIT_OK

    if not validator.is_ready():
        err_console.print("[bold red]Error:[/bold red] Failed to load conditions")
        return EXIT_LOAD_ERROR
    summary = print_validation(validator.validate(), config.output_format, config.show_similar)
    return EXIT_MISSING if summary.missing else EXIT_OK


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.mode == "shell":
        from .app import ParameterShell

        shell = ParameterShell(
            config_path=args.config,
            data_path=args.data,
            conditions_path=args.conditions,
        )
        if args.output:
            shell.config.set_output(args.output)
        shell.run()
        return EXIT_OK

    config = ShellConfig(config_path=args.config)
    if args.output:
        config.set_output(args.output)
    validator = ParameterValidator(
        data_path=args.data or config.data_path,
        conditions_path=(args.conditions or config.conditions_path) if args.mode == "validate" else None,
        marker=config.marker,
    )
    return run_once(args.mode, config, validator, keyword=args.keyword)


if __name__ == "__main__":
    sys.exit(main())
