"""Predicate filtering over TreeNode forests.

A node survives when it matches directly (search predicate AND type filter)
or when any descendant survives. Ancestors of a match are returned expanded
and keep only their surviving children, so the result is the minimal subtree
that leads to every match. A directly matching container with no surviving
descendants keeps its original children.

Inputs are never mutated: survivors are shallow copies made with
``dataclasses.replace``. The walk is an explicit post-order stack.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Collection, Iterator
from dataclasses import replace

from datascope.search.options import SearchMode, SearchOptions
from datascope.tree.nodes import TreeNode, ValueType, format_number
from datascope.tree.paths import get_path_string

__all__ = ["advanced_search_nodes", "search_nodes"]

logger = logging.getLogger(__name__)

Predicate = Callable[[TreeNode], bool]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _prune(nodes: list[TreeNode], matches: Predicate) -> list[TreeNode]:
    result: list[TreeNode] = []
    # Each frame: (owner node or None for the top level, child iterator, survivors)
    stack: list[tuple[TreeNode | None, Iterator[TreeNode], list[TreeNode]]] = [
        (None, iter(nodes), result)
    ]

    while stack:
        owner, pending, kept = stack[-1]
        node = next(pending, None)
        if node is not None:
            if node.children:
                stack.append((node, iter(node.children), []))
            elif matches(node):
                kept.append(replace(node))
            continue

        stack.pop()
        if owner is None:
            continue
        parent_kept = stack[-1][2]
        if kept:
            parent_kept.append(replace(owner, children=kept, is_expanded=True))
        elif matches(owner):
            parent_kept.append(replace(owner))

    return result


def _type_ok(node: TreeNode, type_filter: Collection[ValueType] | None) -> bool:
    return not type_filter or node.type in type_filter


def search_nodes(
    nodes: list[TreeNode],
    search_term: str,
    type_filter: Collection[ValueType] | None = None,
) -> list[TreeNode]:
    """Case-insensitive substring search over keys, string values and numbers.

    Args:
        nodes:       Output of ``build_tree`` (or a previous search).
        search_term: Substring to look for. Empty matches every node.
        type_filter: Restrict direct matches to these types.

    Returns:
        The pruned forest. When both ``search_term`` and ``type_filter`` are
        empty, ``nodes`` itself is returned.
    """
    if not search_term and not type_filter:
        return nodes

    needle = search_term.lower()

    def matches(node: TreeNode) -> bool:
        if not _type_ok(node, type_filter):
            return False
        if not search_term or needle in node.key.lower():
            return True
        if isinstance(node.value, str):
            return needle in node.value.lower()
        if _is_number(node.value):
            return needle in format_number(node.value)
        return False

    return _prune(nodes, matches)


def _flags(options: SearchOptions) -> int:
    return 0 if options.case_sensitive else re.IGNORECASE


def _text_predicate(options: SearchOptions) -> Predicate:
    if options.whole_word:
        word = re.compile(rf"\b{re.escape(options.search_term)}\b", _flags(options))

        def whole_word(node: TreeNode) -> bool:
            if word.search(node.key):
                return True
            return isinstance(node.value, str) and word.search(node.value) is not None

        return whole_word

    def fold(text: str) -> str:
        return text if options.case_sensitive else text.lower()

    needle = fold(options.search_term)

    def substring(node: TreeNode) -> bool:
        if needle in fold(node.key):
            return True
        if isinstance(node.value, str):
            return needle in fold(node.value)
        if _is_number(node.value):
            return needle in format_number(node.value)
        return False

    return substring


def _regex_predicate(options: SearchOptions) -> Predicate:
    try:
        pattern = re.compile(options.search_term, _flags(options))
    except re.error as exc:
        logger.warning("invalid search pattern %r: %s", options.search_term, exc)
        return lambda node: False

    def regex(node: TreeNode) -> bool:
        if pattern.search(node.key):
            return True
        if isinstance(node.value, str):
            return pattern.search(node.value) is not None
        if _is_number(node.value):
            return pattern.search(format_number(node.value)) is not None
        return False

    return regex


def _path_predicate(options: SearchOptions) -> Predicate:
    if options.case_sensitive:
        return lambda node: options.search_term in get_path_string(node.path, "dot")
    needle = options.search_term.lower()
    return lambda node: needle in get_path_string(node.path, "dot").lower()


_PREDICATES: dict[SearchMode, Callable[[SearchOptions], Predicate]] = {
    SearchMode.TEXT: _text_predicate,
    SearchMode.REGEX: _regex_predicate,
    SearchMode.PATH: _path_predicate,
}


def advanced_search_nodes(nodes: list[TreeNode], options: SearchOptions) -> list[TreeNode]:
    """Search with an explicit mode, case sensitivity and whole-word matching.

    Pruning and expansion behave exactly as in ``search_nodes``. An invalid
    regular expression matches nothing and is logged at WARNING.

    Args:
        nodes:   Output of ``build_tree``.
        options: Search configuration.

    Returns:
        The pruned forest, or ``nodes`` itself when the term and the type
        filter are both empty.
    """
    if not options.search_term and not options.type_filter:
        return nodes

    term_matches = (
        _PREDICATES[options.search_mode](options) if options.search_term else None
    )

    def matches(node: TreeNode) -> bool:
        if not _type_ok(node, options.type_filter):
            return False
        return term_matches is None or term_matches(node)

    return _prune(nodes, matches)
