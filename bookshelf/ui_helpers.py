import os
import json
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "BOOKSHELF_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def print_book_list(books: List[Any], title: str = "Books") -> None:
    """Print books according to the current output mode.
    - plain: 'ISBN - Title by Author' lines, or 'No books found.'
    - json: JSON array of isbn, title, author
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif not books:
        print("No books found.")
    elif mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        for b in books:
            table.add_row(b.isbn, b.title, b.author)
        _console.print(table)
    else:
        for b in books:
            print(f"{b.isbn} - {b.title} by {b.author}")


def print_shelves(shelves: Dict[str, Any]) -> None:
    """Print a shelf overview: id, used/capacity, then the books on each shelf."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({sid: s.to_dict() for sid, s in shelves.items()}, ensure_ascii=False))
    elif not shelves:
        print("No shelves created.")
    elif mode == "rich":
        table = Table(title="🗄️  Shelves", show_lines=True, header_style="bold cyan")
        table.add_column("Shelf ID", style="magenta", no_wrap=True)
        table.add_column("Used", justify="right")
        table.add_column("Books", style="white")
        for sid, s in shelves.items():
            names = "\n".join(f"{b.title} ({b.isbn})" for b in s.books) or "-"
            table.add_row(sid, f"{len(s.books)}/{s.capacity}", names)
        _console.print(table)
    else:
        for sid, s in shelves.items():
            print(f"Shelf {sid} ({len(s.books)}/{s.capacity})")
            for b in s.books:
                print(f"  {b.isbn} - {b.title} by {b.author}")
