"""Scope analysis for ESTree programs.

The analyzer walks a parsed program once, builds the tree of lexical scopes
and resolves every identifier reference against it.  The result mirrors what
the unmangler needs from each scope:

* the variables declared in it together with their declaration and
  reference sites,
* the references that leave the scope unresolved (``through``),
* the names that must never be reused because a dynamic construct (``with``)
  can reach them (``taints``),
* whether the scope is static, i.e. free of ``with`` and direct ``eval``.

Block scoping follows ES2015: ``let``/``const``/``class`` bind in the nearest
block, ``var`` in the nearest function.  Function declarations inside blocks
bind in the block only in strict code; sloppy code hoists them to the
function so that references outside the block keep resolving.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from esprima import Syntax

from .traverse import iter_child_nodes

LOG = logging.getLogger(__name__)

GLOBAL = "global"
MODULE = "module"
FUNCTION = "function"
FUNCTION_EXPRESSION_NAME = "function-expression-name"
CATCH = "catch"
WITH = "with"
BLOCK = "block"
SWITCH = "switch"
FOR = "for"
CLASS = "class"

_VARIABLE_SCOPE_TYPES = {GLOBAL, MODULE, FUNCTION}


@dataclass(eq=False)
class Reference:
    """An identifier occurrence that reads or writes a binding."""

    identifier: Any
    from_scope: "Scope"
    resolved: Optional["Variable"] = None
    tainted: bool = False


@dataclass(eq=False)
class Variable:
    name: str
    scope: "Scope"
    identifiers: List[Any] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)
    tainted: bool = False


class Scope:
    """One lexical scope of the analysed program."""

    def __init__(self, manager: "ScopeManager", scope_type: str, upper: Optional["Scope"], block: Any) -> None:
        self.type = scope_type
        self.block = block
        self.upper = upper
        self.set: Dict[str, Variable] = {}
        self.variables: List[Variable] = []
        self.references: List[Reference] = []
        self.through: List[Reference] = []
        self.taints: set[str] = set()
        self.child_scopes: List[Scope] = []
        self.dynamic = scope_type in (GLOBAL, WITH)
        self.function_expression_scope = scope_type == FUNCTION_EXPRESSION_NAME
        self.variable_scope: Scope = self if scope_type in _VARIABLE_SCOPE_TYPES or upper is None else upper.variable_scope
        self.is_strict = _is_strict_scope(scope_type, block, upper, manager.directive)
        self._left: Optional[List[Reference]] = []
        if upper is not None:
            upper.child_scopes.append(self)
        manager._register(self)

    def __repr__(self) -> str:
        return f"<Scope {self.type} vars={[v.name for v in self.variables]!r}>"

    def is_static(self) -> bool:
        return not self.dynamic

    # -- construction helpers ---------------------------------------
    def _variable(self, name: str) -> Variable:
        variable = self.set.get(name)
        if variable is None:
            variable = Variable(name=name, scope=self)
            self.set[name] = variable
            self.variables.append(variable)
        return variable

    def _define(self, identifier: Any) -> None:
        variable = self._variable(identifier.name)
        if not any(existing is identifier for existing in variable.identifiers):
            variable.identifiers.append(identifier)

    def _add_implicit(self, name: str) -> None:
        self._variable(name)

    def _taint(self, name: str) -> None:
        variable = self.set.get(name)
        if variable is not None:
            variable.tainted = True
            self.taints.add(name)

    def _reference(self, identifier: Any) -> None:
        reference = Reference(identifier=identifier, from_scope=self)
        self.references.append(reference)
        if self._left is None:
            raise RuntimeError("reference added to a closed scope")
        self._left.append(reference)

    def _detect_eval(self) -> None:
        current: Optional[Scope] = self
        while current is not None:
            current.dynamic = True
            current = current.upper

    # -- closing ----------------------------------------------------
    def _resolve(self, reference: Reference) -> bool:
        variable = self.set.get(reference.identifier.name)
        if variable is None:
            return False
        variable.references.append(reference)
        reference.resolved = variable
        if reference.tainted:
            variable.tainted = True
            self.taints.add(variable.name)
        return True

    def _delegate_to_upper(self, reference: Reference) -> None:
        if self.upper is not None and self.upper._left is not None:
            self.upper._left.append(reference)
        self.through.append(reference)

    def _close(self) -> Optional["Scope"]:
        left = self._left or []
        if self.type == WITH:
            for reference in left:
                reference.tainted = True
                self._delegate_to_upper(reference)
        elif self.dynamic and self.type != GLOBAL:
            # Direct eval may introduce any binding at runtime, so nothing in
            # this scope or its ancestors is resolved statically.
            for reference in left:
                current: Optional[Scope] = self
                while current is not None:
                    current.through.append(reference)
                    current = current.upper
        else:
            for reference in left:
                if not self._resolve(reference):
                    self._delegate_to_upper(reference)
        self._left = None
        return self.upper


def _is_strict_scope(scope_type: str, block: Any, upper: Optional[Scope], directive: bool) -> bool:
    if upper is not None and upper.is_strict:
        return True
    if scope_type in (CLASS, MODULE):
        return True
    if scope_type not in (FUNCTION, GLOBAL):
        return False
    if scope_type == GLOBAL:
        body = block.body
    else:
        if block.body is None or block.body.type != Syntax.BlockStatement:
            return False
        body = block.body.body
    for statement in body or ():
        if statement.type != Syntax.ExpressionStatement:
            break
        if directive:
            if not isinstance(statement.directive, str):
                break
            if statement.directive == "use strict":
                return True
        else:
            expression = statement.expression
            if expression.type != Syntax.Literal or not isinstance(expression.value, str):
                break
            if expression.raw in ('"use strict"', "'use strict'"):
                return True
    return False


class ScopeManager:
    """Result of :func:`analyze`."""

    def __init__(self, directive: bool = True) -> None:
        self.directive = directive
        self.scopes: List[Scope] = []
        self.global_scope: Optional[Scope] = None
        self.shorthand_properties: List[Any] = []

    def _register(self, scope: Scope) -> None:
        self.scopes.append(scope)
        if scope.type == GLOBAL:
            self.global_scope = scope


def _detached_identifier(identifier: Any) -> Any:
    clone = identifier.__class__.__new__(identifier.__class__)
    clone.__dict__.update(vars(identifier))
    return clone


def _binding_identifiers(pattern: Any) -> Iterator[Any]:
    """Yield the identifiers bound by *pattern*, skipping defaults and keys."""

    stack = [pattern]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        kind = node.type
        if kind == Syntax.Identifier:
            yield node
        elif kind == Syntax.ObjectPattern:
            for prop in reversed(node.properties):
                stack.append(prop.argument if prop.type == Syntax.RestElement else prop.value)
        elif kind == Syntax.ArrayPattern:
            stack.extend(reversed(node.elements))
        elif kind == Syntax.AssignmentPattern:
            stack.append(node.left)
        elif kind == Syntax.RestElement:
            stack.append(node.argument)


def _declared_identifiers(declaration: Any) -> Iterator[Any]:
    if declaration.type == Syntax.VariableDeclaration:
        for declarator in declaration.declarations:
            yield from _binding_identifiers(declarator.id)
    elif declaration.type in (Syntax.FunctionDeclaration, Syntax.ClassDeclaration) and declaration.id is not None:
        yield declaration.id


class _Referencer:
    """Visitor populating a :class:`ScopeManager`."""

    def __init__(self, manager: ScopeManager) -> None:
        self._manager = manager
        self._current: Optional[Scope] = None

    # -- dispatch ---------------------------------------------------
    def visit(self, node: Any) -> None:
        if node is None:
            return
        method = getattr(self, f"visit_{node.type}", None)
        if method is not None:
            method(node)
        else:
            self._visit_children(node)

    def _visit_children(self, node: Any) -> None:
        for child in iter_child_nodes(node):
            self.visit(child)

    # -- scope helpers ----------------------------------------------
    @property
    def current(self) -> Scope:
        if self._current is None:
            raise RuntimeError("scope stack is empty")
        return self._current

    def _nest(self, scope_type: str, block: Any) -> Scope:
        self._current = Scope(self._manager, scope_type, self._current, block)
        return self._current

    def _close(self) -> None:
        self._current = self.current._close()

    def _visit_pattern(self, pattern: Any, callback: Callable[[Any], None]) -> None:
        kind = pattern.type
        if kind == Syntax.Identifier:
            callback(pattern)
        elif kind == Syntax.ObjectPattern:
            for prop in pattern.properties:
                if prop.type == Syntax.RestElement:
                    self._visit_pattern(prop.argument, callback)
                    continue
                self._record_shorthand(prop)
                if prop.computed:
                    self.visit(prop.key)
                self._visit_pattern(prop.value, callback)
        elif kind == Syntax.ArrayPattern:
            for element in pattern.elements:
                if element is not None:
                    self._visit_pattern(element, callback)
        elif kind == Syntax.AssignmentPattern:
            self._visit_pattern(pattern.left, callback)
            self.visit(pattern.right)
        elif kind == Syntax.RestElement:
            self._visit_pattern(pattern.argument, callback)
        else:
            # Member expressions as assignment targets.
            self.visit(pattern)

    def _definer(self, scope: Scope) -> Callable[[Any], None]:
        return scope._define

    def _referencer(self) -> Callable[[Any], None]:
        return lambda identifier: self.current._reference(identifier)

    def _record_shorthand(self, prop: Any) -> None:
        if not prop.shorthand:
            return
        self._manager.shorthand_properties.append(prop)

    # -- program & functions ----------------------------------------
    def visit_Program(self, node: Any) -> None:
        self._nest(GLOBAL, node)
        module = node.sourceType == "module"
        if module:
            self._nest(MODULE, node)
        self._visit_children(node)
        if module:
            self._close()
        self._close()

    def visit_FunctionDeclaration(self, node: Any) -> None:
        if node.id is not None:
            target = self.current if self.current.is_strict else self.current.variable_scope
            target._define(node.id)
        self._visit_function(node)

    def visit_FunctionExpression(self, node: Any) -> None:
        self._visit_function(node)

    def visit_ArrowFunctionExpression(self, node: Any) -> None:
        self._visit_function(node)

    def _visit_function(self, node: Any) -> None:
        named_expression = node.type == Syntax.FunctionExpression and node.id is not None
        if named_expression:
            self._nest(FUNCTION_EXPRESSION_NAME, node)._define(node.id)

        scope = self._nest(FUNCTION, node)
        if node.type != Syntax.ArrowFunctionExpression:
            scope._add_implicit("arguments")
        for param in node.params or ():
            self._visit_pattern(param, self._definer(scope))

        body = node.body
        if body is not None and body.type == Syntax.BlockStatement:
            self._visit_children(body)
        else:
            self.visit(body)
        self._close()

        if named_expression:
            self._close()

    # -- classes ----------------------------------------------------
    def visit_ClassDeclaration(self, node: Any) -> None:
        if node.id is not None:
            self.current._define(node.id)
        self._visit_class(node)

    def visit_ClassExpression(self, node: Any) -> None:
        self._visit_class(node)

    def _visit_class(self, node: Any) -> None:
        self.visit(node.superClass)
        scope = self._nest(CLASS, node)
        if node.type == Syntax.ClassExpression and node.id is not None:
            scope._define(node.id)
        self.visit(node.body)
        self._close()

    def visit_MethodDefinition(self, node: Any) -> None:
        if node.computed:
            self.visit(node.key)
        self.visit(node.value)

    def visit_Property(self, node: Any) -> None:
        self._record_shorthand(node)
        if node.computed:
            self.visit(node.key)
        self.visit(node.value)

    # -- declarations -----------------------------------------------
    def visit_VariableDeclaration(self, node: Any) -> None:
        target = self.current.variable_scope if node.kind == "var" else self.current
        for declarator in node.declarations:
            self._visit_pattern(declarator.id, self._definer(target))
            if declarator.init is not None:
                for identifier in _binding_identifiers(declarator.id):
                    self.current._reference(identifier)
                self.visit(declarator.init)

    def visit_ImportDeclaration(self, node: Any) -> None:
        for specifier in node.specifiers:
            if specifier.type == Syntax.ImportSpecifier and specifier.imported is specifier.local:
                specifier.imported = _detached_identifier(specifier.local)
            self.current._define(specifier.local)

    def _visit_exported_declaration(self, declaration: Any) -> None:
        self.visit(declaration)
        # Exported bindings are part of the module interface.
        for identifier in _declared_identifiers(declaration):
            self.current._taint(identifier.name)

    def visit_ExportNamedDeclaration(self, node: Any) -> None:
        if node.declaration is not None:
            self._visit_exported_declaration(node.declaration)
            return
        for specifier in node.specifiers:
            if specifier.exported is specifier.local:
                specifier.exported = _detached_identifier(specifier.local)
            if node.source is None:
                self.visit(specifier.local)

    def visit_ExportDefaultDeclaration(self, node: Any) -> None:
        self._visit_exported_declaration(node.declaration)

    def visit_ExportAllDeclaration(self, node: Any) -> None:
        return None

    def visit_CatchClause(self, node: Any) -> None:
        scope = self._nest(CATCH, node)
        if node.param is not None:
            self._visit_pattern(node.param, self._definer(scope))
        self.visit(node.body)
        self._close()

    # -- statements -------------------------------------------------
    def visit_BlockStatement(self, node: Any) -> None:
        self._nest(BLOCK, node)
        self._visit_children(node)
        self._close()

    def visit_SwitchStatement(self, node: Any) -> None:
        self.visit(node.discriminant)
        self._nest(SWITCH, node)
        for case in node.cases:
            self.visit(case)
        self._close()

    def visit_WithStatement(self, node: Any) -> None:
        self.visit(node.object)
        self._nest(WITH, node)
        self.visit(node.body)
        self._close()

    def visit_ForStatement(self, node: Any) -> None:
        lexical = node.init is not None and node.init.type == Syntax.VariableDeclaration and node.init.kind != "var"
        if lexical:
            self._nest(FOR, node)
        self.visit(node.init)
        self.visit(node.test)
        self.visit(node.update)
        self.visit(node.body)
        if lexical:
            self._close()

    def visit_ForInStatement(self, node: Any) -> None:
        left = node.left
        self.visit(node.right)
        if left.type == Syntax.VariableDeclaration:
            lexical = left.kind != "var"
            if lexical:
                self._nest(FOR, node)
            self.visit_VariableDeclaration(left)
            for declarator in left.declarations:
                if declarator.init is None:
                    for identifier in _binding_identifiers(declarator.id):
                        self.current._reference(identifier)
            self.visit(node.body)
            if lexical:
                self._close()
            return
        self._visit_pattern(left, self._referencer())
        self.visit(node.body)

    visit_ForOfStatement = visit_ForInStatement

    def visit_LabeledStatement(self, node: Any) -> None:
        self.visit(node.body)

    def visit_BreakStatement(self, node: Any) -> None:
        return None

    visit_ContinueStatement = visit_BreakStatement

    # -- expressions ------------------------------------------------
    def visit_Identifier(self, node: Any) -> None:
        self.current._reference(node)

    def visit_AssignmentExpression(self, node: Any) -> None:
        self._visit_pattern(node.left, self._referencer())
        self.visit(node.right)

    def visit_CallExpression(self, node: Any) -> None:
        callee = node.callee
        if callee is not None and callee.type == Syntax.Identifier and callee.name == "eval":
            self.current._detect_eval()
        self._visit_children(node)

    def visit_MemberExpression(self, node: Any) -> None:
        self.visit(node.object)
        if node.computed:
            self.visit(node.property)

    def visit_MetaProperty(self, node: Any) -> None:
        return None


def analyze(tree: Any, directive: bool = True) -> ScopeManager:
    """Build the scope tree for *tree* and resolve all references."""

    if tree is None or tree.type != Syntax.Program:
        raise TypeError("analyze() expects an ESTree Program node")
    manager = ScopeManager(directive=directive)
    _Referencer(manager).visit(tree)
    LOG.debug("analysed %d scopes", len(manager.scopes))
    return manager


__all__ = [
    "Reference",
    "Variable",
    "Scope",
    "ScopeManager",
    "analyze",
    "GLOBAL",
    "MODULE",
    "FUNCTION",
    "FUNCTION_EXPRESSION_NAME",
    "CATCH",
    "WITH",
    "BLOCK",
    "SWITCH",
    "FOR",
    "CLASS",
]
