import logging
from dataclasses import FrozenInstanceError
from typing import Optional

import typer
from rich.console import Console

from bookshelf.config import settings
from bookshelf.controller import BookForm, BookshelfController
from bookshelf.exceptions import ShelfError
from bookshelf.registry import ShelfRegistry
from bookshelf.ui_helpers import print_book_list, print_shelves, set_output_mode

console = Console()

app = typer.Typer(help=f"{settings.app_name} CLI")

MENU = """
1) Create shelf
2) Add book
3) Remove book
4) Search books
5) List shelves
6) Quit"""


def _configure_logging() -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _print_counts(registry: ShelfRegistry, shelf_id: str) -> None:
    print(f"Books Count: {registry.books_count(shelf_id)}")
    print(f"Books Remaining: {registry.books_remaining(shelf_id)}")


def _add_books(registry: ShelfRegistry, shelf_id: str, books) -> None:
    try:
        registry.add_books(shelf_id, books)
    except ShelfError as e:
        print(f"Error: {e}")


def _print_status(controller: BookshelfController) -> None:
    if controller.error_message:
        print(f"Error: {controller.error_message}")
    elif controller.success_message:
        print(controller.success_message)


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    _configure_logging()
    if output:
        set_output_mode(output)


@app.command("demo")
def cli_demo(capacity: int = typer.Option(3, "--capacity", "-c", help="Capacity of the demo shelf")):
    """Walk through shelf creation, adding, searching and removing books."""
    registry = ShelfRegistry(default_capacity=settings.default_capacity)

    console.print("[bold]>> Initializing the bookshelf[/]")
    shelf_id = registry.create_shelf(capacity)
    print(f"Book Shelf ID: {shelf_id}")
    _print_counts(registry, shelf_id)

    console.print("[bold]>> Adding a book[/]")
    _add_books(registry, shelf_id, {"title": "One", "author": "Sohail", "isbn": "123asf"})
    _print_counts(registry, shelf_id)
    print_book_list(registry.get_all_books(shelf_id))

    console.print("[bold]>> Adding two books[/]")
    _add_books(registry, shelf_id, [
        {"title": "Two", "author": "Sohail", "isbn": "123863asf"},
        {"title": "Three", "author": "Alam", "isbn": "r217iba8"},
    ])
    _print_counts(registry, shelf_id)
    print_book_list(registry.get_all_books(shelf_id))

    console.print("[bold]>> Searching for '123'[/]")
    print_book_list(registry.search("123"), title="Search results")

    console.print("[bold]>> Removing book 123863asf[/]")
    registry.remove_book(shelf_id, {"isbn": "123863asf"})
    _print_counts(registry, shelf_id)
    print_book_list(registry.get_all_books(shelf_id))

    console.print("[bold]>> Searching for '123'[/]")
    found = registry.search("123")
    print_book_list(found, title="Search results")

    console.print("[bold]>> Trying to change the isbn of a found book[/]")
    if found:
        book = found[0]
        try:
            book.isbn = "NEW ISBN"
        except FrozenInstanceError:
            print(f"Book is read-only, ISBN is still {book.isbn}")


@app.command("shell")
def cli_shell():
    """Interactive session; shelves live until you quit."""
    registry = ShelfRegistry(default_capacity=settings.default_capacity)
    controller = BookshelfController(registry, max_books=settings.ui_max_books)
    console.print(f"[bold blue]📚 {settings.app_name}[/] [dim]v{settings.app_version}[/]")

    while True:
        print(MENU)
        choice = typer.prompt("Choice", default="6").strip()

        if choice == "1":
            controller.create_shelf()
            _print_status(controller)
        elif choice == "2":
            shelf_id = typer.prompt("Shelf ID", default="", show_default=False)
            controller.book = BookForm(
                title=typer.prompt("Title", default="", show_default=False),
                author=typer.prompt("Author", default="", show_default=False),
                isbn=typer.prompt("ISBN", default="", show_default=False),
            )
            added = controller.add_book(shelf_id)
            _print_status(controller)
            if added:
                print_book_list(controller.all_books[shelf_id])
        elif choice == "3":
            shelf_id = typer.prompt("Shelf ID", default="", show_default=False)
            isbn = typer.prompt("ISBN", default="", show_default=False)
            controller.remove_book(shelf_id, isbn)
            _print_status(controller)
            if shelf_id in controller.all_books:
                print_book_list(controller.all_books[shelf_id])
        elif choice == "4":
            text = typer.prompt("Search text", default="", show_default=False)
            shelf_id = typer.prompt("Shelf ID (empty for all)", default="", show_default=False)
            print_book_list(controller.search(text, shelf_id or None), title="Search results")
        elif choice == "5":
            print_shelves(controller.shelves())
        elif choice == "6":
            print("Goodbye!")
            break
        else:
            print(f"Unknown choice: {choice}")


if __name__ == "__main__":
    app()
