"""Extraction of component usages from Razor markup.

Uses a simple tag scan rather than compiling the markup: any opening tag
whose name starts with an uppercase letter and is not an HTML element is
taken to be a component usage.
"""

from __future__ import annotations

__all__ = [
    "ExtractionError",
    "build_relation",
    "extract_components",
    "find_razor_files",
    "promote_starting_node",
    "read_relation",
    "write_relation",
]

import json
import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from blazor_graph.parser.model import AdjacencyRelation
from blazor_graph.rules import NamingRules

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"<([A-Za-z_][\w.]*)(?=[\s/>])")
_COMMENT_PATTERN = re.compile(r"@\*.*?\*@|<!--.*?-->", re.DOTALL)

HTML_TAGS = frozenset({
    "a", "div", "span", "h1", "h2", "h3", "h4", "h5", "h6", "p", "br", "hr",
    "input", "button", "form", "label", "select", "option", "textarea",
    "img", "ul", "li", "ol", "table", "thead", "tbody", "tfoot", "tr", "td",
    "th", "style", "strong", "em", "b", "i", "u", "script", "link", "nav",
    "header", "footer", "main", "section", "article", "aside", "code", "pre",
})


class ExtractionError(ValueError):
    """Raised when component sources cannot be located or read."""


def extract_components(source: str) -> list[str]:
    """Return component names used in *source*, in first-seen order."""
    source = _COMMENT_PATTERN.sub("", source)
    found: list[str] = []
    for match in _TAG_PATTERN.finditer(source):
        name = match.group(1)
        if name.lower() in HTML_TAGS or not name[0].isupper():
            continue
        if name not in found:
            found.append(name)
    return found


def find_razor_files(directory: Path | str) -> list[Path]:
    """Return every ``.razor`` file below *directory*, sorted by path."""
    directory = Path(directory)
    if not directory.is_dir():
        raise ExtractionError(f"Directory '{directory}' does not exist.")
    files = sorted(directory.rglob("*.razor"))
    if not files:
        logger.warning("No .razor files found in %s", directory)
    else:
        logger.info("Found %d .razor file(s) in %s", len(files), directory)
    return files


def promote_starting_node(
    relation: Mapping[str, Sequence[str]], node: str | None
) -> AdjacencyRelation:
    """Return a copy of *relation* with *node* moved to the front."""
    result = {name: list(deps) for name, deps in relation.items()}
    if node is None or node not in result:
        if node is not None:
            logger.warning("Starting node %s not found among components", node)
        return result
    first = {node: result.pop(node)}
    first.update(result)
    return first


def build_relation(
    directory: Path | str,
    rules: NamingRules | None = None,
    starting_node: str | None = None,
) -> AdjacencyRelation:
    """Build the adjacency relation for all components under *directory*.

    Each file stem names one component.
    """
    relation: AdjacencyRelation = {}
    for path in find_razor_files(directory):
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExtractionError(f"Unable to read {path}: {exc}") from exc
        used = extract_components(source)
        logger.debug("%s uses %s", path.stem, used)
        relation[path.stem] = used

    if rules is not None:
        relation = rules.filter_relation(relation)
    return promote_starting_node(relation, starting_node)


def read_relation(path: Path | str) -> AdjacencyRelation:
    """Read an adjacency relation from a JSON object of name -> names."""
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    for name, deps in data.items():
        if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
            raise ValueError(f"{path}: dependencies of '{name}' must be a list of names")
    return data


def write_relation(relation: Mapping[str, Sequence[str]], path: Path | str) -> None:
    Path(path).write_text(
        json.dumps({k: list(v) for k, v in relation.items()}, indent=2) + "\n"
    )
