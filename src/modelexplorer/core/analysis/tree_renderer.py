from __future__ import annotations

"""
Explorer Tree Renderer.

Converts an editing context into a visual ASCII explorer tree. Only the
content of expanded items is shown, mirroring what the explorer displays
after an expand-all. Representations are listed below the element they
target, after its children.
"""

from typing import Dict, Iterable, List, Set

from modelexplorer.domain.tree_models import EditingContext, ModelElement, RepresentationMetadata

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_explorer_tree(editing_context: EditingContext, expanded: Iterable[str]) -> List[str]:
    """
    Render the documents of an editing context as ASCII lines.

    Args:
        editing_context: Workspace to render.
        expanded: Ids of the expanded tree items.

    Returns:
        List[str]: Visual lines of the tree, one per displayed item.
    """
    expanded_ids = set(expanded)
    representations: Dict[str, List[RepresentationMetadata]] = {}
    for representation in editing_context.representations:
        representations.setdefault(representation.target_object_id, []).append(representation)

    lines: List[str] = []
    total = len(editing_context.documents)
    for i, document in enumerate(editing_context.documents):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{connector}{document.name or document.id}")

        if document.id in expanded_ids:
            new_prefix = "    " if is_last else "│   "
            _render_elements(document.contents, [], expanded_ids, representations, lines, new_prefix)

    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_elements(
        elements: List[ModelElement],
        attached: List[RepresentationMetadata],
        expanded_ids: Set[str],
        representations: Dict[str, List[RepresentationMetadata]],
        lines: List[str],
        prefix: str,
) -> None:
    """
    Recursively append elements, then the representations attached to their
    owner, using standard ASCII connectors (├──, └──).
    """
    entries: List[object] = [*elements, *attached]
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        # Scenario A: Representation leaf
        if isinstance(entry, RepresentationMetadata):
            kind = f" [{entry.kind}]" if entry.kind else ""
            lines.append(f"{prefix}{connector}{entry.label or entry.id}{kind}")
            continue

        # Scenario B: Model element, expanded or collapsed
        if isinstance(entry, ModelElement):
            lines.append(f"{prefix}{connector}{entry.label or entry.id}")
            if entry.id in expanded_ids:
                new_prefix = prefix + ("    " if is_last else "│   ")
                _render_elements(
                    entry.children,
                    representations.get(entry.id, []),
                    expanded_ids,
                    representations,
                    lines,
                    new_prefix,
                )
