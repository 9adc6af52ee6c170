"""Rich renderers for each pipeline operation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from typeset.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from typeset.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult as human-readable text."""
    console = create_console()
    if not result.ok:
        _render_error(console, result)
    elif result.op == "parse":
        _render_tree(console, result)
    elif result.op == "layout":
        _render_commands(console, result)
    elif result.op == "functions":
        _render_functions(console, result)
    else:
        _status_line(console, result)
        for key, value in result.data.items():
            console.print(f"  [ts.key]{key}:[/] {escape(str(value))}")
    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text()
    line.append("OK", style="ts.ok")
    line.append(": ")
    line.append(result.op, style="ts.op")
    if result.meta and "document" in result.meta:
        line.append(f" {result.meta['document']}", style="ts.key")
    console.print(line)


def _render_error(console: Console, result: ServiceResult) -> None:
    line = Text()
    line.append("ERROR", style="ts.error")
    line.append(f": {result.op} - ")
    line.append(result.error.message if result.error else "Unknown error")
    console.print(line)
    if result.error is not None:
        for key in ("function", "offset", "document"):
            if key in result.error.detail:
                console.print(f"  [ts.key]{key}:[/] {escape(str(result.error.detail[key]))}")


def _add_nodes(parent: Tree, nodes: list[dict[str, Any]]) -> None:
    for node in nodes:
        kind = node["type"]
        if kind == "text":
            parent.add(Text(repr(node["text"]), style="ts.text"))
        elif kind == "function":
            label = Text(f"[{node['name']}]", style="ts.func")
            if node["args"]:
                label.append(f" {json.dumps(node['args'])}", style="ts.key")
            branch = parent.add(label)
            _add_nodes(branch, node.get("body", []))
        else:
            parent.add(Text(kind, style="ts.struct"))


def _render_tree(console: Console, result: ServiceResult) -> None:
    _status_line(console, result)
    root = Tree(Text(f"{result.data['count']} nodes", style="ts.key"))
    _add_nodes(root, result.data["nodes"])
    console.print(root)


def _render_commands(console: Console, result: ServiceResult) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="ts.key", box=None)
    table.add_column("#", justify="right")
    table.add_column("command", style="ts.command")
    table.add_column("arguments")
    for index, command in enumerate(result.data["commands"]):
        args = {k: v for k, v in command.items() if k != "kind"}
        table.add_row(str(index), command["kind"], json.dumps(args) if args else "")
    console.print(table)


def _render_functions(console: Console, result: ServiceResult) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="ts.key", box=None)
    table.add_column("name", style="ts.func")
    table.add_column("kind")
    table.add_column("body")
    table.add_column("layout")
    table.add_column("meta")
    for item in result.data["items"]:
        table.add_row(
            item["name"],
            item["kind"],
            item["body"],
            "yes" if item["layout"] else "no",
            json.dumps(item["meta"]) if item["meta"] is not None else "",
        )
    console.print(table)
