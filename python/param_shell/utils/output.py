"""Output formatting utilities."""
import json

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from ..models import ValidationSummary
from .search import is_exact_match

console = Console()
err_console = Console(stderr=True)


def print_json(data):
    json_str = json.dumps(data, indent=2, default=str)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
    console.print(syntax)


def _rule(char, width):
    console.print(char * width, style="dim", markup=False)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

def print_validation(results, output_format="text", show_similar=True):
    summary = ValidationSummary.from_results(results)

    if output_format == "json":
        print_json({
            "results": [r.to_dict() for r in results],
            "summary": summary.to_dict(),
        })
        return summary

    if output_format == "table":
        table = Table(title="Parameter Validation")
        table.add_column("#", style="dim")
        table.add_column("Parameter", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Similar Properties", style="yellow", overflow="fold")
        for i, r in enumerate(results, 1):
            status = "[green]FOUND[/green]" if r.found else "[red]MISSING[/red]"
            similar = "" if r.found or not show_similar else "\n".join(r.similar_matches)
            table.add_row(str(i), escape(r.parameter), status, escape(similar))
        console.print(table)
    else:
        console.print("[bold]Validating parameters against data...[/bold]\n")
        console.print("Required parameters from conditions file:")
        for i, r in enumerate(results, 1):
            console.print(f"  {i}. {r.parameter}", markup=False)
        console.print()
        _rule("=", 60)
        console.print()

        for i, r in enumerate(results, 1):
            console.print(f"Checking parameter {i}: {r.parameter}", markup=False)
            if r.found:
                console.print(f"[green]FOUND:[/green] {escape(r.parameter)} exists in data")
            else:
                console.print(f"[red]MISSING:[/red] {escape(r.parameter)} not found in data")
                if show_similar and r.similar_matches:
                    console.print("   [yellow]Similar properties found:[/yellow]")
                    for match in r.similar_matches:
                        console.print(f"      - {match}", markup=False)
            _rule("-", 40)
            console.print()

    _print_summary(summary)
    return summary


def _print_summary(summary):
    console.print("[bold]VALIDATION SUMMARY[/bold]")
    _rule("=", 30)
    console.print(f"[green]Found:[/green] {summary.found}/{summary.total} parameters")
    console.print(f"[red]Missing:[/red] {summary.missing}/{summary.total} parameters")
    console.print(f"[cyan]Success Rate:[/cyan] {summary.success_rate}%")

    if summary.missing_parameters:
        console.print("\n[bold red]MISSING PARAMETERS:[/bold red]")
        for name in summary.missing_parameters:
            console.print(f"   - {name}", markup=False)


# ---------------------------------------------------------------------------
# check / props / find
# ---------------------------------------------------------------------------

def print_check(parameter_name, result, output_format="text"):
    if output_format == "json":
        data = result.to_dict()
        data.pop("allProperties")
        print_json({"parameter": parameter_name, **data})
        return

    if result.exact_match:
        console.print(f"[green]FOUND:[/green] {escape(parameter_name)} exists in data")
    else:
        console.print(f"[red]MISSING:[/red] {escape(parameter_name)} not found in data")

    if not result.similar_matches:
        return
    if output_format == "table":
        table = Table(title=f"Similar properties: '{escape(parameter_name)}'")
        table.add_column("Key Path", style="cyan")
        table.add_column("Exact", style="bold")
        for path in result.similar_matches:
            exact = is_exact_match(parameter_name, path)
            table.add_row(escape(path), "[green]yes[/green]" if exact else "")
        console.print(table)
    else:
        console.print("   [yellow]Similar properties found:[/yellow]")
        for path in result.similar_matches:
            console.print(f"      - {path}", markup=False)


def print_properties(properties, output_format="text"):
    if output_format == "json":
        print_json(properties)
        return
    if not properties:
        console.print("[dim]No properties in data[/dim]")
        return
    if output_format == "table":
        table = Table(title="All Properties in Data")
        table.add_column("#", style="dim")
        table.add_column("Key Path", style="cyan")
        for i, path in enumerate(properties, 1):
            table.add_row(str(i), escape(path))
        console.print(table)
    else:
        console.print("[bold]ALL PROPERTIES IN DATA:[/bold]")
        _rule("=", 40)
        for path in properties:
            console.print(f"   - {path}", markup=False)
    console.print(f"[dim]{len(properties)} propert{'y' if len(properties) == 1 else 'ies'}[/dim]")


def print_find(keyword, matches, output_format="text"):
    if output_format == "json":
        print_json({"keyword": keyword, "matches": matches})
        return
    console.print(f"Searching for: {keyword}", markup=False)
    if not matches:
        console.print("[dim]No matches found[/dim]")
        return
    if output_format == "table":
        table = Table(title=f"Search: '{escape(keyword)}'")
        table.add_column("Key Path", style="cyan")
        for path in matches:
            table.add_row(escape(path))
        console.print(table)
    else:
        console.print("Found matches:")
        for path in matches:
            console.print(f"   - {path}", markup=False)
    console.print(f"[dim]{len(matches)} match(es) found[/dim]")
