"""Actions for examples/whim.yaml.

Run from this directory so `notes_actions` is importable:

    cd examples && PYTHONPATH=. python -m whim add intro.md --depth 2
"""
from pathlib import Path

from whim.console import console


def add(path: str, depth: int | None = None, dry_run: bool | None = None) -> int:
    document = Path(path)
    if not document.is_file():
        console.print(f"[whim.error]No such document:[/] {document}")
        return 1
    verb = "Would add" if dry_run else "Adding"
    console.print(f"{verb} [whim.value]{document}[/] (depth={depth})")
    return 0


def scan(depth: int | None = None, dry_run: bool | None = None) -> None:
    pattern = "**/*.md" if depth is None else "/".join(["*"] * depth + ["*.md"])
    for document in sorted(Path.cwd().glob(pattern)):
        console.print(f"[whim.value]{document.relative_to(Path.cwd())}[/]")
