#!/usr/bin/env python3
"""Batch render all relation fixtures to SVG, in every theme.

Each render is also run through the layout validator used by the test
suite. Outputs go to /tmp/blazor_graph_topology_renders/.

Usage:
    python scripts/render_topologies.py [--config settings.yaml]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root and tests to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))
sys.path.insert(0, str(project_root / "tests"))

from layout_validator import Severity, validate_layout  # noqa: E402

from blazor_graph.config import Settings, load_settings  # noqa: E402
from blazor_graph.layout import compute_layout  # noqa: E402
from blazor_graph.parser import read_relation  # noqa: E402
from blazor_graph.render import render_svg  # noqa: E402
from blazor_graph.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/blazor_graph_topology_renders")
RELATIONS_DIR = project_root / "tests" / "fixtures" / "relations"

FIXTURE_FILES = sorted(RELATIONS_DIR.glob("*.json"))


def render_file(
    json_path: Path, output_dir: Path, settings: Settings
) -> tuple[str, list[str]]:
    """Read, lay out, validate and render one relation file.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        relation = read_relation(json_path)
    except ValueError as e:
        return name, [f"READ ERROR: {e}"]

    result = compute_layout(relation, settings.layout, settings.rules)
    if result.unplaced:
        issues.append(f"not laid out: {', '.join(result.unplaced)}")

    for violation in validate_layout(result, settings.layout, settings.rules):
        prefix = "ERROR" if violation.severity == Severity.ERROR else "warning"
        issues.append(f"{prefix}: {violation.message}")

    for theme_name, theme in THEMES.items():
        svg_str = render_svg(result.nodes, settings.layout, theme, settings.rules)
        (output_dir / f"{name}_{theme_name}.svg").write_text(svg_str + "\n")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render relation fixtures")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    args = parser.parse_args()

    settings = load_settings(args.config)
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    print(f"Rendering {len(FIXTURE_FILES)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in FIXTURE_FILES)
    any_errors = False

    for json_path in FIXTURE_FILES:
        name, issues = render_file(json_path, OUTPUT_DIR, settings)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
