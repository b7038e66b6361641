"""Rich-based adapter for Prompter port."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from prisma_init.core.models import MenuChoice, MenuEntry, MenuSeparator
from prisma_init.ports.prompter import Prompter

NEXT_PAGE = "n"
PREVIOUS_PAGE = "p"


class RichPrompter(Prompter):
    """Prompter that renders menus as numbered tables on a rich Console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def select(self, message: str, entries: Sequence[MenuEntry], page_size: int | None = None) -> str:
        """Show a numbered menu and return the value of the picked choice.

        Menus longer than page_size rows are shown a page at a time; ``n``
        and ``p`` move between pages.
        """
        choices = [entry for entry in entries if isinstance(entry, MenuChoice)]
        if not choices:
            msg = "Cannot select from a menu without choices"
            raise ValueError(msg)

        numbered: list[tuple[int | None, MenuEntry]] = []
        index = 0
        for entry in entries:
            if isinstance(entry, MenuChoice):
                index += 1
                numbered.append((index, entry))
            else:
                numbered.append((None, entry))

        size = page_size if page_size and page_size > 0 else len(numbered)
        pages = [numbered[i : i + size] for i in range(0, len(numbered), size)]

        page = 0
        while True:
            rows = pages[page]
            self.console.print()
            self.console.print(f"[bold cyan]{escape(message)}[/bold cyan]")
            self.console.print(self._menu_table(rows))

            valid_choices = [str(number) for number, _ in rows if number is not None]
            if page + 1 < len(pages):
                valid_choices.append(NEXT_PAGE)
            if page > 0:
                valid_choices.append(PREVIOUS_PAGE)
            if len(pages) > 1:
                self.console.print(f"  [dim]Page {page + 1}/{len(pages)}[/dim]")

            choice_str = Prompt.ask(
                "  [cyan]Select[/cyan]",
                console=self.console,
                default=valid_choices[0],
                choices=valid_choices,
            )
            if choice_str == NEXT_PAGE:
                page += 1
            elif choice_str == PREVIOUS_PAGE:
                page -= 1
            else:
                return choices[int(choice_str) - 1].value

    def _menu_table(self, rows: Sequence[tuple[int | None, MenuEntry]]) -> Table:
        table = Table(
            box=box.SIMPLE,
            show_header=False,
            padding=(0, 2),
            border_style="dim",
        )
        table.add_column("Option", style="yellow", width=4)
        table.add_column("Choice", no_wrap=True)

        for number, entry in rows:
            if isinstance(entry, MenuSeparator):
                table.add_row("", f"[bold]{escape(entry.title)}[/bold]" if entry.title else "")
            else:
                table.add_row(f"[{number}]", escape(entry.label))
        return table

    def ask(self, message: str, default: str | None = None, password: bool = False) -> str:
        if default is None:
            return Prompt.ask(f"  [cyan]{escape(message)}[/cyan]", console=self.console, password=password)
        return Prompt.ask(
            f"  [cyan]{escape(message)}[/cyan]",
            console=self.console,
            default=default,
            password=password,
            show_default=bool(default),
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(f"  [cyan]{escape(message)}[/cyan]", console=self.console, default=default)
