"""CLI entry point for nsresolve."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from nsresolve.core.config import load_registry
from nsresolve.core.exceptions import ConfigError
from nsresolve.core.models import SymbolHandle
from nsresolve.core.namespace import ResolvedNamespace
from nsresolve.core.registry import SourceRegistry

app = typer.Typer(
    name="nsresolve",
    help="List the classes and namespaces a namespace name owns.",
    no_args_is_help=True,
)
console = Console()

DEFAULT_CONFIG_NAME = "nsresolve.yaml"

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help=f"Sources file (default: ./{DEFAULT_CONFIG_NAME})"),
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def get_default_config_path(project_root: Path) -> Path:
    """Get the default sources file for a project."""
    return project_root / DEFAULT_CONFIG_NAME


def get_registry(config: Path | None) -> SourceRegistry:
    """Build a registry from the given or default sources file."""
    path = config if config is not None else get_default_config_path(Path(".").resolve())
    if config is None and not path.exists():
        return load_registry(None)
    try:
        return load_registry(path)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e


def handle_to_dict(name: str, qualified_name: str, handle: Any) -> dict[str, Any]:
    """Convert a class handle to a JSON-serializable dict."""
    location = handle.location if isinstance(handle, SymbolHandle) else None
    return {
        "name": name,
        "qualified_name": qualified_name,
        "location": str(location) if location is not None else None,
    }


def tree_to_dict(namespace: ResolvedNamespace, depth: int, max_depth: int) -> dict[str, Any]:
    """Convert a namespace and its descendants to a JSON-serializable dict."""
    children = []
    if depth < max_depth:
        children = [
            tree_to_dict(child, depth + 1, max_depth)
            for child in namespace.namespaces().values()
        ]
    return {
        "name": namespace.short_name,
        "qualified_name": namespace.name,
        "depth": depth,
        "classes": list(namespace.class_names()),
        "children": children,
    }


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log resolution steps")] = False,
) -> None:
    """Inspect namespaces resolved from declared sources."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def show(
    name: Annotated[str, typer.Argument(help="Namespace name, e.g. App.Models")],
    config: ConfigOption = None,
    declared: Annotated[
        bool, typer.Option("--declared", help="Include classes declared by the interpreter")
    ] = False,
    legacy: Annotated[bool, typer.Option("--legacy", help="Resolve legacy prefix roots")] = False,
    output_json: JsonOption = False,
) -> None:
    """Show the classes and child namespaces of a namespace."""
    registry = get_registry(config)
    if declared:
        registry.load_declared_symbols()
    if legacy:
        registry.load_legacy_prefixes()

    namespace = ResolvedNamespace(name, registry)
    class_names = namespace.class_names()
    classes = namespace.classes()
    namespace_names = namespace.namespace_names()

    if output_json:
        result = {
            "name": namespace.name,
            "parent": namespace.parent_name,
            "classes": [
                handle_to_dict(short, class_names[short], handle)
                for short, handle in classes.items()
            ],
            "namespaces": [
                {"name": short, "qualified_name": qualified}
                for short, qualified in namespace_names.items()
            ],
        }
        print(json.dumps(result))
        return

    if not classes and not namespace_names:
        console.print(f"Nothing found under '[cyan]{namespace.name or '<root>'}[/cyan]'")
        return

    console.print(f"\n[bold cyan]{namespace.name or '<root>'}[/]")
    if classes:
        console.print("  [green]Classes:[/]")
        for short, handle in classes.items():
            location = handle.location if isinstance(handle, SymbolHandle) else None
            suffix = f" [dim]({location})[/]" if location is not None else ""
            console.print(f"    [cyan]{short}[/]{suffix}")
    if namespace_names:
        console.print("  [green]Namespaces:[/]")
        for short in namespace_names:
            console.print(f"    [blue]{short}[/]")


@app.command()
def tree(
    name: Annotated[str, typer.Argument(help="Namespace to start from")] = "",
    config: ConfigOption = None,
    max_depth: Annotated[int, typer.Option("--depth", "-d", help="Maximum depth")] = 5,
    output_json: JsonOption = False,
) -> None:
    """Show the namespace hierarchy below a namespace."""
    registry = get_registry(config)
    root = ResolvedNamespace(name, registry)

    if output_json:
        print(json.dumps(tree_to_dict(root, 0, max_depth)))
        return

    console.print(f"[bold yellow]{root.name or '<root>'}[/]")

    def print_children(namespace: ResolvedNamespace, prefix: str, depth: int) -> None:
        """Print child namespaces, then owned classes."""
        children = list(namespace.namespaces().values())
        classes = list(namespace.class_names())
        entries = [(child.short_name, child) for child in children]
        entries += [(short, None) for short in classes]
        for i, (label, child) in enumerate(entries):
            is_last = i == len(entries) - 1
            branch = "└─" if is_last else "├─"
            if child is None:
                console.print(f"{prefix}{branch} [cyan]{label}[/]")
                continue
            console.print(f"{prefix}{branch} [blue]{label}[/]")
            if depth < max_depth:
                print_children(child, prefix + ("   " if is_last else "│  "), depth + 1)

    print_children(root, "", 1)

    console.print(
        f"\n[dim]Classes: {len(root.class_names())} | "
        f"Namespaces: {len(root.namespace_names())}[/]"
    )


if __name__ == "__main__":
    app()
