"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `generate`, `words` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("feedpass", style="bold cyan")
    subtitle = Text("Memorable passwords from news feeds", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_passwords_table(passwords: list[str], pattern: str) -> Table:
    table = Table(title=f"Passwords ({pattern})")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Password", style="bold green", no_wrap=True)
    table.add_column("Length", style="cyan", justify="right")
    for idx, password in enumerate(passwords, start=1):
        table.add_row(str(idx), password, str(len(password)))
    return table


def build_wordlist_panel(words: list[str], *, source: str, limit: int = 20) -> Panel:
    """Panel con el tamaño de la lista, su origen y una muestra."""

    body = Text()
    body.append(f"{len(words)} words", style="bold")
    body.append(f" (source: {source})\n\n", style="dim")
    sample = words[:limit]
    if sample:
        body.append(", ".join(sample))
        if len(words) > limit:
            body.append(f", … (+{len(words) - limit})", style="dim")
    else:
        body.append("No words available.", style="red")
    return Panel(body, title=Text("Word list", style="bold yellow"), border_style="yellow")
