"""Rich tables for metric collections."""

from typing import Optional

from rich.markup import escape
from rich.table import Table

from ..metrics.collection import MetricsCollection
from ..metrics.models import MethodMetrics
from ..metrics.names import MetricName
from ..metrics.statistics import ClassMetricsStatistics
from ._common import console


def _delta_text(metric: MethodMetrics, name: MetricName) -> str:
    delta = metric.delta(name)
    if delta is None or delta.has_not_changed():
        return ""
    if delta.has_increased():
        return f" [red]↑{delta.difference:.3f}[/red]"
    return f" [green]↓{-delta.difference:.3f}[/green]"


def _score_text(score: float, threshold: float) -> str:
    color = "red" if score > threshold else "green"
    return f"[{color}]{score:.3f}[/{color}]"


def render_collection(collection: MetricsCollection, score_threshold: float) -> None:
    """One table per class, in collection order."""
    for class_name, group in collection.group_by("class").items():
        table = Table(title=escape(class_name), title_justify="left", show_lines=False)
        table.add_column("Method", style="bold", no_wrap=True)
        for name in MetricName:
            table.add_column(name.label, justify="right")
        table.add_column("Score", justify="right")

        for metric in group:
            cells = [escape(metric.method_name)]
            for name in MetricName:
                weight = metric.weight(name)
                cell = str(metric.count(name))
                if weight > 0:
                    cell += f" ({weight:.3f})"
                cells.append(cell + _delta_text(metric, name))
            cells.append(_score_text(metric.score, score_threshold))
            table.add_row(*cells)

        console.print(table)


def render_summary(collection: MetricsCollection, score_threshold: float, limit: Optional[int] = 5) -> None:
    stats = ClassMetricsStatistics(collection, score_threshold)
    overall = stats.overall()

    console.print()
    console.print("[bold cyan]Summary[/bold cyan]")
    console.print(f"  Methods: {overall.method_count} in {len(collection.class_names())} classes")
    console.print(f"  Average score: {overall.average_score:.3f} (median {overall.median_score:.3f})")
    console.print(
        f"  Above {score_threshold}: {overall.methods_above_threshold} "
        f"({overall.percentage_above_threshold:.1f}%)"
    )

    top = [s for s in stats.most_complex_classes(limit or 5) if s.average_score > 0]
    if not top:
        return
    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Class", min_width=24)
    table.add_column("Methods", justify="right")
    table.add_column("Avg score", justify="right")
    table.add_column("Max score", justify="right")
    table.add_column("Above threshold", justify="right")
    for summary in top:
        table.add_row(
            escape(summary.name),
            str(summary.method_count),
            f"{summary.average_score:.3f}",
            f"{summary.max_score:.3f}",
            f"{summary.methods_above_threshold} ({summary.percentage_above_threshold:.1f}%)",
        )
    console.print(table)
