"""Issue commands (issue, list)."""

import json
import sys
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from bueller.cli._utils import console, err_console, print_error, get_config
from bueller.exceptions import ReadError
from bueller.index_spec import parse_index_spec
from bueller.issues import (
    IssueStatus,
    list_issues as list_issues_func,
    normalize_issue_reference,
    resolve_issue_reference,
)
from bueller.summary import expand_messages, format_issue_summary, summarize_issue

issues_dir_option = click.option(
    "--issues-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing the issue queue (default: ./issues or .bueller.yaml)",
)


@click.command("issue")
@click.argument("references", nargs=-1, required=True)
@click.option(
    "--index", "index_spec",
    metavar="N|M,N",
    help="Expand message N, or messages M through N",
)
@issues_dir_option
@click.option("--json", "as_json", is_flag=True, help="Output summaries as JSON")
def issue(references: tuple, index_spec: str | None, issues_dir: Path | None, as_json: bool) -> None:
    """Summarize one or more issues.

    REFERENCES are issue filenames (the .md suffix is optional) or paths.
    Each issue is looked up in open/, review/ and stuck/, in that order.

    Examples:
        bueller issue p1-003-read-helper-002.md
        bueller issue p1-003 p2-005 --index 1
        bueller issue /path/to/issue.md --index 0,2
    """
    config = get_config(issues_dir)
    root = config.get_issues_path()

    if index_spec is not None and parse_index_spec(index_spec, limit=0) is None:
        err_console.print(
            f"[yellow]Ignoring invalid --index value {escape(repr(index_spec))} (expected N or M,N)[/yellow]"
        )
        index_spec = None

    failed = 0
    shown = 0
    results = []

    for reference in references:
        located = resolve_issue_reference(normalize_issue_reference(reference), root, config)
        if located is None:
            print_error(f"Could not find issue: {reference}")
            failed += 1
            continue

        try:
            summary = summarize_issue(located, config)
        except ReadError as e:
            print_error(f"Could not summarize {reference}: {e.reason}")
            failed += 1
            continue

        if index_spec:
            summary = expand_messages(summary, index_spec)

        if as_json:
            results.append(summary.model_dump(mode="json"))
        else:
            # Print raw text so long lines aren't wrapped or markup-parsed
            if shown:
                print()
            print(format_issue_summary(summary, index_spec))
        shown += 1

    if as_json:
        print(json.dumps(results, indent=2))

    if failed:
        sys.exit(1)


@click.command("list")
@click.option(
    "--status", "-s",
    type=click.Choice([s.value for s in IssueStatus]),
    help="Only list issues with this status",
)
@issues_dir_option
def list_issues(status: str | None, issues_dir: Path | None) -> None:
    """List issues in the queue.

    Open issues are listed in the order the agent loop picks them up.

    Examples:
        bueller list
        bueller list --status stuck
    """
    config = get_config(issues_dir)
    root = config.get_issues_path()

    statuses = [IssueStatus(status)] if status else list(IssueStatus)
    rows = [(s, name) for s in statuses for name in list_issues_func(root, s, config)]

    if not rows:
        console.print("[yellow]No issues found[/yellow]")
        return

    table = Table(title=f"Issues in {root}")
    table.add_column("Status", style="magenta")
    table.add_column("Issue", style="cyan")

    status_style = {
        IssueStatus.OPEN: "green",
        IssueStatus.REVIEW: "blue",
        IssueStatus.STUCK: "red",
    }

    for issue_status, name in rows:
        style = status_style[issue_status]
        table.add_row(f"[{style}]{issue_status.value}[/{style}]", name)

    console.print(table)
