"""Output formatters for CLI commands"""

import csv
import json
from abc import ABC, abstractmethod
from io import StringIO
from typing import Any

from rich.console import Console
from rich.table import Table


class OutputFormatter(ABC):
    """Base class for CLI output formatters

    Expansion results are dicts with ``input``, ``region``, ``name`` and
    ``known`` keys; region listings are dicts with ``code`` and ``name``.
    """

    @abstractmethod
    def format_expansions(self, results: list[dict[str, Any]]) -> str:
        """Format expanded regions"""

    @abstractmethod
    def format_regions(self, regions: list[dict[str, str]]) -> str:
        """Format a region listing"""


class TableFormatter(OutputFormatter):
    """Human readable tables rendered with rich"""

    def __init__(self, width: int = 100):
        self.width = width

    def _render(self, table: Table) -> str:
        buffer = StringIO()
        console = Console(file=buffer, width=self.width, color_system=None)
        console.print(table)
        return buffer.getvalue().rstrip("\n")

    def format_expansions(self, results: list[dict[str, Any]]) -> str:
        if not results:
            return "No regions to expand"

        table = Table(show_header=True)
        table.add_column("Input")
        table.add_column("Region")
        table.add_column("Location")
        for result in results:
            location = result["name"] if result["known"] else "(unknown)"
            table.add_row(result["input"] or "(default)", result["region"], location)
        return self._render(table)

    def format_regions(self, regions: list[dict[str, str]]) -> str:
        if not regions:
            return "No regions found"

        table = Table(show_header=True, title=f"Regions ({len(regions)})")
        table.add_column("Region Code")
        table.add_column("Location")
        for region in regions:
            table.add_row(region["code"], region["name"])
        return self._render(table)


class JSONFormatter(OutputFormatter):
    """JSON output for scripting"""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format_expansions(self, results: list[dict[str, Any]]) -> str:
        return json.dumps({"regions": results}, indent=self.indent)

    def format_regions(self, regions: list[dict[str, str]]) -> str:
        return json.dumps({"regions": regions}, indent=self.indent)


class CSVFormatter(OutputFormatter):
    """CSV output for spreadsheets"""

    def _write(self, header: list[str], rows: list[list[Any]]) -> str:
        if not rows:
            return ""
        buffer = StringIO()
        writer = csv.writer(buffer)
        writer.writerow(header)
        writer.writerows(rows)
        return buffer.getvalue()

    def format_expansions(self, results: list[dict[str, Any]]) -> str:
        rows = [
            [r["input"], r["region"], r["name"], "yes" if r["known"] else "no"]
            for r in results
        ]
        return self._write(["Input", "Region", "Location", "Known"], rows)

    def format_regions(self, regions: list[dict[str, str]]) -> str:
        rows = [[r["code"], r["name"]] for r in regions]
        return self._write(["Region Code", "Location"], rows)


FORMATTERS = {
    "table": TableFormatter,
    "json": JSONFormatter,
    "csv": CSVFormatter,
}


def get_formatter(format_name: str) -> OutputFormatter:
    """Get an output formatter by name

    Raises:
        ValueError: If the format is not supported
    """
    try:
        return FORMATTERS[format_name]()
    except KeyError:
        raise ValueError(
            f"Unknown format '{format_name}'. Choose from: {', '.join(FORMATTERS)}"
        ) from None
