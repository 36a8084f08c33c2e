"""Demo script for the code-quality rule engine.

This demonstrates:
1. Rule Registry - the built-in catalogue and its kind index
2. Analyzer - diagnostics for a unit handed over as an interchange document
3. Fault isolation - a broken custom rule next to the built-ins
4. Batch analysis - several units in parallel, one of them malformed
5. Cancellation - stopping a pass between node visits

Usage:
    pip install -e ".[demo]"
    python examples/demo_analyzer.py
"""

import threading

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from code_analyzer import Analyzer, RuleRegistry, SyntaxKind, load_tree
from code_analyzer.logging_config import configure_logging
from code_analyzer.rules import BUILTIN_RULES, rule
from code_analyzer.settings import AnalyzerSettings

console = Console()


def _add(nodes: list[dict], parent: int | None, kind: str, **fields) -> int:
    """Append a node in pre-order and return its index."""
    nodes.append({"kind": kind, "parent": parent, **fields})
    return len(nodes) - 1


def _ident(nodes: list[dict], parent: int, name: str, role: str | None = None) -> int:
    return _add(nodes, parent, "identifier_name", text=name, identifier=name, role=role)


def _sample_nodes() -> list[dict]:
    # class ReportManager
    # {
    #     public int Count;
    #
    #     public void Export(List<int> rows, bool overwrite)
    #     {
    #         foreach (var row in rows.ToArray()) { break; }
    #         if (overwrite) { }
    #         throw new Exception();
    #     }
    # }
    # struct Cell { }
    nodes: list[dict] = []
    unit = _add(nodes, None, "compilation_unit")
    cls = _add(nodes, unit, "class_declaration", identifier="ReportManager", text="class ReportManager")

    field = _add(nodes, cls, "field_declaration")
    _add(nodes, field, "modifier", text="public")
    declaration = _add(nodes, field, "variable_declaration")
    _add(nodes, declaration, "predefined_type", text="int", role="type")
    _add(nodes, declaration, "variable_declarator", identifier="Count", text="Count")

    export = _add(nodes, cls, "method_declaration", identifier="Export")
    _add(nodes, export, "modifier", text="public")
    _add(nodes, export, "predefined_type", text="void", role="type")
    params = _add(nodes, export, "parameter_list")
    rows = _add(nodes, params, "parameter", identifier="rows")
    generic = _add(nodes, rows, "generic_name", identifier="List", text="List<int>", role="type")
    type_args = _add(nodes, generic, "type_argument_list", text="<int>")
    _add(nodes, type_args, "predefined_type", text="int")
    overwrite = _add(nodes, params, "parameter", identifier="overwrite")
    _add(nodes, overwrite, "predefined_type", text="bool", role="type")

    body = _add(nodes, export, "block", role="body")
    loop = _add(nodes, body, "foreach_statement", identifier="row")
    _ident(nodes, loop, "var")
    call = _add(nodes, loop, "invocation_expression", role="expression", text="rows.ToArray()")
    member = _add(nodes, call, "member_access_expression")
    _ident(nodes, member, "rows")
    _ident(nodes, member, "ToArray")
    _add(nodes, call, "argument_list", text="()")
    loop_body = _add(nodes, loop, "block", role="body")
    _add(nodes, loop_body, "break_statement", text="break;")

    branch = _add(nodes, body, "if_statement")
    _ident(nodes, branch, "overwrite", role="condition")
    _add(nodes, branch, "block", text="{ }", role="body")

    throw = _add(nodes, body, "throw_statement")
    creation = _add(nodes, throw, "object_creation_expression", text="new Exception()")
    _ident(nodes, creation, "Exception", role="type")
    _add(nodes, creation, "argument_list", text="()")

    _add(nodes, unit, "struct_declaration", identifier="Cell", text="struct Cell")
    return nodes


SAMPLE_DOCUMENT = {"path": "ReportManager.cs", "nodes": _sample_nodes()}

CLEAN_DOCUMENT = {
    "path": "Invoice.cs",
    "nodes": [
        {"kind": "compilation_unit"},
        {"kind": "class_declaration", "parent": 0, "identifier": "Invoice", "text": "class Invoice"},
    ],
}

MALFORMED_DOCUMENT = {
    "path": "Broken.cs",
    "nodes": [{"kind": "compilation_unit"}, {"kind": "lambda", "parent": 0}],
}


@rule("DEMO001", "Fragile", SyntaxKind.IDENTIFIER_NAME)
def fragile_rule(node, tree):
    """Breaks on every identifier."""
    raise RuntimeError(f"cannot handle {node.name}")


class StopAfter:
    """Signal that trips after a number of node visits."""

    def __init__(self, visits: int):
        self.visits = visits

    def is_set(self) -> bool:
        self.visits -= 1
        return self.visits < 0


def demo_registry():
    """Show the built-in catalogue."""
    console.print("\n[bold cyan]═══ Rule Registry Demo ═══[/bold cyan]\n")

    registry = RuleRegistry.default()

    table = Table(title=f"Built-in Rules ({len(registry)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Node Kinds", style="yellow")
    table.add_column("Description", style="white")

    for descriptor in BUILTIN_RULES:
        table.add_row(
            descriptor.id,
            descriptor.name,
            ", ".join(sorted(k.value for k in descriptor.interested_kinds)),
            descriptor.description,
        )

    console.print(table)
    console.print(f"Kinds with at least one rule: {len(registry.kinds)}")


def demo_analyzer(analyzer: Analyzer):
    """Analyze the sample unit."""
    console.print("\n[bold cyan]═══ Analyzer Demo ═══[/bold cyan]\n")

    tree = load_tree(SAMPLE_DOCUMENT)
    console.print(f"Loaded {tree.path} with {tree.node_count} nodes")

    diagnostics = analyzer.analyze(tree)

    table = Table(title="Diagnostics")
    table.add_column("Rule", style="cyan")
    table.add_column("Offset", style="green")
    table.add_column("Message", style="white")

    for d in diagnostics:
        message = d.message if len(d.message) <= 70 else d.message[:67] + "..."
        table.add_row(d.rule_id, f"{d.location.start}-{d.location.end}", message)

    console.print(table)


def demo_fault_isolation(settings: AnalyzerSettings):
    """Run a broken rule next to the built-ins."""
    console.print("\n[bold cyan]═══ Fault Isolation Demo ═══[/bold cyan]\n")

    registry = RuleRegistry([fragile_rule, *BUILTIN_RULES])
    result = Analyzer(registry, settings).analyze_unit(SAMPLE_DOCUMENT)

    console.print(f"Diagnostics still reported: {len(result.diagnostics)}")
    console.print(f"Rule failures recorded: {len(result.failures)}")
    for failure in result.failures[:3]:
        console.print(f"  • [{failure.rule_id}] {failure.error_type}: {failure.error}")


def demo_batch(analyzer: Analyzer):
    """Analyze several units at once."""
    console.print("\n[bold cyan]═══ Batch Analysis Demo ═══[/bold cyan]\n")

    results = analyzer.analyze_many([SAMPLE_DOCUMENT, MALFORMED_DOCUMENT, CLEAN_DOCUMENT])

    for result in results:
        status = "[green]OK[/green]" if result.ok else "[red]REJECTED[/red]"
        console.print(f"{status} {result.path}: {len(result.diagnostics)} diagnostic(s)")
        if result.error:
            console.print(f"   [dim]{result.error}[/dim]")


def demo_cancellation(analyzer: Analyzer):
    """Stop a pass part-way through."""
    console.print("\n[bold cyan]═══ Cancellation Demo ═══[/bold cyan]\n")

    stopped = threading.Event()
    stopped.set()
    console.print(f"Cancelled before start: {len(analyzer.analyze(SAMPLE_DOCUMENT, stopped))} diagnostic(s)")

    result = analyzer.analyze_unit(SAMPLE_DOCUMENT, StopAfter(12))
    console.print(f"Cancelled after 12 visits: {len(result.diagnostics)} diagnostic(s), cancelled={result.cancelled}")


def run_demo():
    """Run the complete demo."""
    console.print(Panel.fit(
        "[bold magenta]Code Analyzer[/bold magenta]\n"
        "[cyan]Rule dispatch over C#-shaped syntax trees[/cyan]",
        border_style="bright_blue",
    ))

    settings = AnalyzerSettings(log_level="ERROR", max_workers=2)
    configure_logging(settings)
    analyzer = Analyzer(settings=settings)

    demo_registry()
    demo_analyzer(analyzer)
    demo_fault_isolation(settings)
    demo_batch(analyzer)
    demo_cancellation(analyzer)

    console.print(Panel.fit(
        "[bold green]✓ Demo Complete![/bold green]",
        border_style="green",
    ))


if __name__ == "__main__":
    run_demo()
