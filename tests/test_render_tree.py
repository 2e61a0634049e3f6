"""Tests for rendering namespace trees in both dialects."""

import re

from module_index.build_tree import build_tree
from module_index.namespace_tree import Namespace
from module_index.output_format import OutputFormat
from module_index.path_policy import PathPolicy
from module_index.render_tree import render_tree

PATHS = ["a/b/c.js", "a/d.js", "e.js"]

COFFEE_LEAF_RE = re.compile(r'^(\s*)(\S+): require "([^"]*)"$')
COFFEE_NS_RE = re.compile(r"^(\s*)(\S+):$")
JS_LEAF_RE = re.compile(r'"([^"]+)": require\("([^"]*)"\)')


def test_render_tree_coffee() -> None:
    """Verify the indentation-significant dialect."""
    policy = PathPolicy(output_format=OutputFormat.COFFEE)
    body = render_tree(build_tree(PATHS, policy), policy)
    assert body == (
        "  a:\n"
        "    b:\n"
        '      c: require "a/b/c"\n'
        '    d: require "a/d"\n'
        '  e: require "e"'
    )


def test_render_tree_js() -> None:
    """Verify the brace-delimited dialect, without trailing separators."""
    policy = PathPolicy(output_format=OutputFormat.JS)
    body = render_tree(build_tree(PATHS, policy), policy)
    assert body == (
        '  "a": {\n'
        '    "b": {\n'
        '      "c": require("a/b/c")\n'
        "    },\n"
        '    "d": require("a/d")\n'
        "  },\n"
        '  "e": require("e")'
    )


def test_render_tree_indent_unit() -> None:
    """Verify that the indentation unit is repeated once per depth."""
    policy = PathPolicy(indent_unit="\t", output_format=OutputFormat.COFFEE)
    body = render_tree(build_tree(["a/b.js"], policy), policy)
    assert body == '\ta:\n\t\tb: require "a/b"'


def test_render_tree_empty() -> None:
    """Verify that an empty tree renders to an empty body."""
    assert render_tree(Namespace(), PathPolicy()) == ""


def test_render_tree_deterministic() -> None:
    """Verify that rendering the same input twice is byte-identical."""
    paths = ["lib/a.js", "lib/sub/b.js", "lib/sub/c.js", "main.js"]
    policy = PathPolicy(path_prefix="./")
    first = render_tree(build_tree(paths, policy), policy)
    second = render_tree(build_tree(paths, policy), policy)
    assert first == second


def _coffee_pairs(body: str) -> set[tuple[tuple[str, ...], str]]:
    """Parse dialect A output back into (path, reference) pairs."""
    stack: list[str] = []
    pairs = set()
    for line in body.splitlines():
        leaf = COFFEE_LEAF_RE.match(line)
        if leaf:
            depth = len(leaf.group(1)) // 2
            pairs.add(((*stack[: depth - 1], leaf.group(2)), leaf.group(3)))
            continue
        ns = COFFEE_NS_RE.match(line)
        assert ns, line
        depth = len(ns.group(1)) // 2
        stack[depth - 1 :] = [ns.group(2)]
    return pairs


def _js_pairs(body: str) -> set[tuple[tuple[str, ...], str]]:
    """Parse dialect B output back into (path, reference) pairs."""
    stack: list[str] = []
    pairs = set()
    for raw in body.splitlines():
        line = raw.strip().rstrip(",")
        if line == "}":
            stack.pop()
        elif line.endswith("{"):
            stack.append(line.split('"')[1])
        else:
            match = JS_LEAF_RE.fullmatch(line)
            assert match, line
            pairs.add(((*stack, match.group(1)), match.group(2)))
    return pairs


def test_dialects_describe_same_leaves() -> None:
    """Verify that both dialects carry the same name/reference pairs."""
    paths = ["a/b/c.js", "a/b/d.js", "a/e.js", "f/g/h.js", "i.js"]
    coffee = PathPolicy(output_format=OutputFormat.COFFEE)
    js = PathPolicy(output_format=OutputFormat.JS)
    tree = build_tree(paths, coffee)
    expected = set(tree.iter_aliases())

    assert _coffee_pairs(render_tree(tree, coffee)) == expected
    assert _js_pairs(render_tree(tree, js)) == expected
