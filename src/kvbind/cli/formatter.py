# src/kvbind/cli/formatter.py
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from kvbind.core.models import ConfigLine
from kvbind.core.store import LineStore

# Shared console; resolves sys.stdout at write time
console = Console()

class KvFormatter:
    """
    Terminal rendering for the inspection CLI: value tables, YAML panels,
    lint reports and error lines.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def show_table(self, store: LineStore, title: str):
        """Builds the resolved-values table, one row per name."""
        table = Table(title=escape(title), show_header=True, header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Value")
        table.add_column("Source", style="dim")

        for name, value in store.resolved().items():
            table.add_row(escape(name), escape(value), store.source_of(name))

        self.console.print(table)

    def show_yaml(self, yaml_text: str, title: str):
        if not yaml_text:
            self.console.print(f"[dim]ℹ No values in {escape(title)}.[/dim]")
            return
        syntax = Syntax(yaml_text.rstrip(), "yaml", theme="monokai", line_numbers=False)
        self.console.print(Panel(syntax, title=escape(title), border_style="green"))

    def show_plain(self, text: str):
        """Prints text verbatim: no markup, no highlighting."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True, end="")

    def show_lint(self, lines: List[ConfigLine], file_name: str):
        if not lines:
            self.console.print(f"[green]✅ {escape(file_name)}: no malformed lines.[/green]", soft_wrap=True)
            return

        table = Table(title=f"Ignored lines in {escape(file_name)}", header_style="bold yellow")
        table.add_column("Line", justify="right")
        table.add_column("Content", style="red")
        for line in lines:
            table.add_row(str(line.line_no), escape(line.raw_line))
        self.console.print(table)

    def show_error(self, message: str):
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)
