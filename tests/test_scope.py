"""Tests for the scope analyzer."""

from __future__ import annotations

import pytest

from jsunmangle.scope import (
    BLOCK,
    CATCH,
    FUNCTION,
    FUNCTION_EXPRESSION_NAME,
    GLOBAL,
    MODULE,
    WITH,
    analyze,
)


def _names(scope):
    return [variable.name for variable in scope.variables]


def test_global_scope_is_dynamic_and_functions_are_static(parse):
    manager = analyze(parse("var a; function f(b) { var c; }"))
    global_scope, function_scope = manager.scopes
    assert global_scope.type == GLOBAL
    assert not global_scope.is_static()
    assert _names(global_scope) == ["a", "f"]
    assert function_scope.type == FUNCTION
    assert function_scope.is_static()
    assert _names(function_scope) == ["arguments", "b", "c"]
    assert function_scope.set["arguments"].identifiers == []


def test_references_resolve_to_the_nearest_binding(parse):
    tree = parse("function f(a) { function g() { return a; } }")
    manager = analyze(tree)
    outer, inner = manager.scopes[1], manager.scopes[2]
    variable = outer.set["a"]
    assert len(variable.references) == 1
    reference = variable.references[0]
    assert reference.from_scope is inner
    assert reference.resolved is variable
    assert [ref.identifier.name for ref in inner.through] == ["a"]
    assert outer.through == []


def test_implicit_globals_pass_through(parse):
    manager = analyze(parse("function f(a) { foo = 1; a = 2; }"))
    function_scope = manager.scopes[1]
    assert [ref.identifier.name for ref in function_scope.through] == ["foo"]
    assert "foo" not in function_scope.set


def test_with_statement_taints_reached_variables(parse):
    manager = analyze(parse("function f(a, b) { with (o) { a; } b; }"))
    function_scope = manager.scopes[1]
    assert function_scope.set["a"].tainted
    assert not function_scope.set["b"].tainted
    assert function_scope.taints == {"a"}
    with_scope = next(scope for scope in manager.scopes if scope.type == WITH)
    assert not with_scope.is_static()


def test_direct_eval_marks_the_scope_chain_dynamic(parse):
    manager = analyze(parse("function f() { function g() { eval('x'); } function h() {} }"))
    by_name = {scope.block.id.name: scope for scope in manager.scopes if scope.type == FUNCTION}
    assert not by_name["g"].is_static()
    assert not by_name["f"].is_static()
    assert by_name["h"].is_static()


def test_named_function_expression_gets_its_own_scope(parse):
    tree = parse("(function a() { a(); });")
    manager = analyze(tree)
    assert [scope.type for scope in manager.scopes] == [GLOBAL, FUNCTION_EXPRESSION_NAME, FUNCTION]
    name_scope, function_scope = manager.scopes[1], manager.scopes[2]
    assert name_scope.function_expression_scope
    assert function_scope.upper is name_scope
    assert len(name_scope.set["a"].references) == 1


def test_let_binds_in_block_and_var_hoists(parse):
    tree = parse("function f() { { let a = 1; var b = 2; } }")
    manager = analyze(tree)
    function_scope = manager.scopes[1]
    block_scope = manager.scopes[2]
    assert block_scope.type == BLOCK
    assert _names(block_scope) == ["a"]
    assert "b" in function_scope.set
    assert block_scope.variable_scope is function_scope


def test_sloppy_block_function_hoists_to_function(parse):
    manager = analyze(parse("function f() { { function g() {} } g(); }"))
    function_scope = manager.scopes[1]
    assert len(function_scope.set["g"].references) == 1


def test_strict_block_function_stays_in_block(parse):
    manager = analyze(parse("function f() { 'use strict'; { function g() {} } }"))
    function_scope = manager.scopes[1]
    assert function_scope.is_strict
    assert "g" not in function_scope.set
    assert all(scope.is_strict for scope in manager.scopes[1:])


def test_directive_detection_can_use_raw_literals(parse):
    tree = parse("function f() { 'use strict'; }")
    assert analyze(tree, directive=False).scopes[1].is_strict
    assert not analyze(parse("function f() { 'use asm'; }")).scopes[1].is_strict


def test_catch_parameter_lives_in_catch_scope(parse):
    manager = analyze(parse("function f() { try {} catch (e) { e; } }"))
    catch_scope = next(scope for scope in manager.scopes if scope.type == CATCH)
    assert _names(catch_scope) == ["e"]
    assert len(catch_scope.set["e"].references) == 1


def test_declarator_init_adds_write_reference(parse):
    tree = parse("function f() { var a = 1, b; }")
    function_scope = analyze(tree).scopes[1]
    a = function_scope.set["a"]
    assert len(a.identifiers) == 1
    assert a.references[0].identifier is a.identifiers[0]
    assert function_scope.set["b"].references == []


def test_member_properties_and_labels_are_not_references(parse):
    tree = parse("function f(a) { x: for (;;) { a.b; a[c]; break x; } }")
    function_scope = analyze(tree).scopes[1]
    assert len(function_scope.set["a"].references) == 2
    assert [ref.identifier.name for ref in function_scope.through] == ["c"]


def test_shorthand_property_keys_are_detached(parse):
    tree = parse("function f(a) { return {a}; }")
    manager = analyze(tree)
    prop = tree.body[0].body.body[0].argument.properties[0]
    assert prop.key is not prop.value
    assert prop.key.name == "a"
    assert manager.shorthand_properties == [prop]
    assert manager.scopes[1].set["a"].references[0].identifier is prop.value


def test_module_specifiers_are_detached(parse_module):
    tree = parse_module("import { a } from 'x'; export { a };")
    manager = analyze(tree)
    module_scope = manager.scopes[1]
    assert module_scope.type == MODULE
    assert module_scope.is_static()
    assert module_scope.is_strict
    import_specifier = tree.body[0].specifiers[0]
    export_specifier = tree.body[1].specifiers[0]
    assert import_specifier.imported is not import_specifier.local
    assert export_specifier.exported is not export_specifier.local
    assert len(module_scope.set["a"].references) == 1


def test_destructuring_declarator_records_each_site_once(parse):
    tree = parse("function f(o, k) { var {x = o, [k]: y} = o; }")
    function_scope = analyze(tree).scopes[1]
    assert len(function_scope.set["o"].references) == 2
    assert len(function_scope.set["k"].references) == 1
    assert len(function_scope.set["x"].references) == 1
    assert len(function_scope.set["y"].references) == 1


def test_exported_declarations_are_tainted(parse_module):
    source = "export function a() {} export const b = 1, {c} = {}; export default class d {} let e;"
    module_scope = analyze(parse_module(source)).scopes[1]
    assert module_scope.taints == {"a", "b", "c", "d"}
    assert all(module_scope.set[name].tainted for name in "abcd")
    assert not module_scope.set["e"].tainted


def test_analyze_rejects_non_programs(parse):
    with pytest.raises(TypeError):
        analyze(parse("a;").body[0])


def test_closed_scope_rejects_new_references(parse):
    tree = parse("function f(a) {}")
    function_scope = analyze(tree).scopes[1]
    with pytest.raises(RuntimeError):
        function_scope._reference(tree.body[0].params[0])
