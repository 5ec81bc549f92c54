"""Tests for renaming the variables of one scope."""

from __future__ import annotations

from jsunmangle.name_pool import NamePool
from jsunmangle.options import UnmangleOptions, keep_names
from jsunmangle.renamer import rename_scope
from jsunmangle.report import RenameReport
from jsunmangle.scope import analyze


def test_non_static_scopes_are_left_alone(parse, pool):
    tree = parse("function f(a) { eval('a'); }")
    manager = analyze(tree)
    assert rename_scope(manager.scopes[1], UnmangleOptions(), pool) == 0
    assert tree.body[0].params[0].name == "a"


def test_most_used_variables_are_allocated_first(parse, pool):
    tree = parse("function f(a, b) { b; b; b; a; }")
    report = RenameReport()
    rename_scope(analyze(tree).scopes[1], UnmangleOptions(), pool, report)
    assert [entry.original for entry in report.records] == ["b", "a"]
    assert report.records[0].sites == 4


def test_every_site_receives_the_new_name(parse, pool):
    tree = parse("function f(a) { a = a + 1; return a; }")
    rename_scope(analyze(tree).scopes[1], UnmangleOptions(), pool)
    function = tree.body[0]
    name = function.params[0].name
    assert len(name) > 2
    assignment = function.body.body[0].expression
    assert assignment.left.name == name
    assert assignment.right.left.name == name
    assert function.body.body[1].argument.name == name


def test_tainted_and_implicit_variables_are_kept(parse, pool):
    tree = parse("function f(a, b) { with (o) { a; } b; arguments; }")
    report = RenameReport()
    rename_scope(analyze(tree).scopes[1], UnmangleOptions(), pool, report)
    function = tree.body[0]
    assert function.params[0].name == "a"
    assert function.params[1].name != "b"
    assert [entry.original for entry in report.records] == ["b"]


def test_rename_predicate_vetoes_sites(parse, pool):
    tree = parse("function f(a, b) { return a + b; }")
    options = UnmangleOptions(should_rename=keep_names("a"))
    rename_scope(analyze(tree).scopes[1], options, pool)
    function = tree.body[0]
    assert function.params[0].name == "a"
    assert function.body.body[0].argument.left.name == "a"
    assert function.params[1].name != "b"
    assert function.body.body[0].argument.right.name == function.params[1].name


def test_kept_names_are_not_handed_out_again(parse):
    tree = parse("function f(a, river) { return a + river; }")
    rename_scope(analyze(tree).scopes[1], UnmangleOptions(), NamePool(["river", "willow"], seed=0))
    function = tree.body[0]
    assert function.params[0].name == "willow"
    assert function.params[1].name == "river"
