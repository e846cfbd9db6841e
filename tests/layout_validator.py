"""Layout validator: programmatic checks for layout defects.

Runs a suite of checks against a :class:`LayoutResult` and returns a
list of Violation objects describing any problems found.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from blazor_graph.layout.config import LayoutConfig
from blazor_graph.layout.constants import ROOT_ROW, STATE_ROW
from blazor_graph.layout.engine import LayoutResult
from blazor_graph.rules import NamingRules


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_layout(
    result: LayoutResult,
    config: LayoutConfig,
    rules: NamingRules | None = None,
) -> list[Violation]:
    """Run all layout checks and return violations."""
    rules = rules or NamingRules()
    violations: list[Violation] = []
    violations.extend(check_card_overlap(result, config))
    violations.extend(check_coordinate_sanity(result, config))
    violations.extend(check_row_rules(result, rules))
    violations.extend(check_unique_cells(result))
    violations.extend(check_every_component_accounted(result))
    return violations


def check_card_overlap(
    result: LayoutResult, config: LayoutConfig, tolerance: float = 1e-9
) -> list[Violation]:
    """Check that no two card rectangles overlap.

    Cards may touch; the tolerance absorbs floating point noise.
    """
    violations: list[Violation] = []
    boxes = [
        (n.name, n.x, n.y - config.card_height, n.x + config.card_width, n.y)
        for n in result.nodes
    ]

    for i in range(len(boxes)):
        name_a, ax1, ay1, ax2, ay2 = boxes[i]
        for j in range(i + 1, len(boxes)):
            name_b, bx1, by1, bx2, by2 = boxes[j]
            overlap_x = min(ax2, bx2) - max(ax1, bx1)
            overlap_y = min(ay2, by2) - max(ay1, by1)
            if overlap_x > tolerance and overlap_y > tolerance:
                violations.append(
                    Violation(
                        check="card_overlap",
                        severity=Severity.ERROR,
                        message=(
                            f"Cards '{name_a}' and '{name_b}' overlap by "
                            f"{overlap_x:.2f}x{overlap_y:.2f}"
                        ),
                        context={"cards": (name_a, name_b)},
                    )
                )

    return violations


def check_coordinate_sanity(
    result: LayoutResult, config: LayoutConfig, max_coord: float = 10000.0
) -> list[Violation]:
    """Check for NaN, Inf or extreme coordinates, and the margin shift."""
    violations: list[Violation] = []

    for node in result.nodes:
        for coord_name, value in [("x", node.x), ("y", node.y)]:
            if math.isnan(value) or math.isinf(value):
                violations.append(
                    Violation(
                        check="coordinate_sanity",
                        severity=Severity.ERROR,
                        message=f"Card '{node.name}' has non-finite {coord_name}",
                        context={"card": node.name, "coordinate": coord_name},
                    )
                )
            elif abs(value) > max_coord:
                violations.append(
                    Violation(
                        check="coordinate_sanity",
                        severity=Severity.WARNING,
                        message=(
                            f"Card '{node.name}' has extreme {coord_name}={value:.0f} "
                            f"(>{max_coord})"
                        ),
                        context={"card": node.name, "coordinate": coord_name},
                    )
                )

    if result.nodes:
        expected = {
            "x": config.horizontal_page_margin,
            "y": config.vertical_page_margin,
        }
        actual = {
            "x": min(n.x for n in result.nodes),
            "y": min(n.y for n in result.nodes),
        }
        for coord_name, want in expected.items():
            if not math.isclose(actual[coord_name], want, abs_tol=1e-9):
                violations.append(
                    Violation(
                        check="coordinate_sanity",
                        severity=Severity.ERROR,
                        message=(
                            f"Smallest {coord_name} is {actual[coord_name]:.3f}, "
                            f"expected the page margin {want:.3f}"
                        ),
                        context={"coordinate": coord_name},
                    )
                )

    return violations


def check_row_rules(result: LayoutResult, rules: NamingRules) -> list[Violation]:
    """Check each card sits on the row its placement rule gives it.

    State components sit on the state row, parentless components on the
    root row, and everything else one row below the first parent placed
    before it.
    """
    violations: list[Violation] = []
    graph = result.graph
    rank = {name: i for i, name in enumerate(result.order)}
    rows = {node.name: node.row for node in result.nodes}

    for node in result.nodes:
        if rules.is_state(node.name):
            expected, reason = STATE_ROW, "state component"
        elif not graph.parents(node.name):
            expected, reason = ROOT_ROW, "root component"
        else:
            earlier = [
                p for p in graph.parents(node.name)
                if p in rows and rank[p] < rank[node.name]
            ]
            if not earlier:
                violations.append(
                    Violation(
                        check="row_rules",
                        severity=Severity.ERROR,
                        message=f"Card '{node.name}' was placed before all its parents",
                        context={"card": node.name},
                    )
                )
                continue
            expected = rows[earlier[0]] + 1
            reason = f"below parent '{earlier[0]}'"

        if node.row != expected:
            violations.append(
                Violation(
                    check="row_rules",
                    severity=Severity.ERROR,
                    message=(
                        f"Card '{node.name}' is on row {node.row}, "
                        f"expected {expected} ({reason})"
                    ),
                    context={"card": node.name, "row": node.row},
                )
            )

    return violations


def check_unique_cells(result: LayoutResult) -> list[Violation]:
    """Check that cells are unique and each row fills columns from 0."""
    violations: list[Violation] = []
    owners: dict[tuple[int, int], str] = {}
    columns: dict[int, list[int]] = {}

    for node in result.nodes:
        cell = (node.row, node.column)
        if cell in owners:
            violations.append(
                Violation(
                    check="unique_cells",
                    severity=Severity.ERROR,
                    message=f"Cards '{owners[cell]}' and '{node.name}' share cell {cell}",
                    context={"cell": cell},
                )
            )
        owners[cell] = node.name
        columns.setdefault(node.row, []).append(node.column)

    for row, cols in columns.items():
        if sorted(cols) != list(range(len(cols))):
            violations.append(
                Violation(
                    check="unique_cells",
                    severity=Severity.ERROR,
                    message=f"Row {row} has gaps in its columns: {sorted(cols)}",
                    context={"row": row},
                )
            )

    return violations


def check_every_component_accounted(result: LayoutResult) -> list[Violation]:
    """Every component is either laid out or reported as unplaced."""
    violations: list[Violation] = []
    placed = {node.name for node in result.nodes}

    for name in result.graph.names:
        if name in placed and name in result.unplaced:
            severity, what = Severity.ERROR, "both laid out and unplaced"
        elif name not in placed and name not in result.unplaced:
            severity, what = Severity.ERROR, "missing from the layout"
        else:
            continue
        violations.append(
            Violation(
                check="accounted",
                severity=severity,
                message=f"Component '{name}' is {what}",
                context={"component": name},
            )
        )

    return violations
