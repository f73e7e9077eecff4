# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for converting type annotations into PropTypes validators."""

import pytest

from proptypegen.compiler.convert import convert, convert_list_to_props, convert_to_prop_types, wrap_is_required
from proptypegen.model.expressions import (
    ArrayLiteral,
    Call,
    IsRequired,
    MemberRef,
    ObjectLiteral,
    PropertyAssignment,
)
from proptypegen.model.types import (
    ArrayType,
    BooleanKeyword,
    FunctionType,
    Identifier,
    IndexSignature,
    IntersectionType,
    LiteralType,
    LiteralValue,
    MethodSignature,
    NumberKeyword,
    OtherType,
    ParenthesizedType,
    PropertySignature,
    QualifiedName,
    StringKeyword,
    SymbolKeyword,
    TypeLiteral,
    TypeReference,
    UnionType,
)

# ###############
# Test Helpers
# ###############


def _ref(name: str) -> TypeReference:
    """Build a type reference from a dotted name."""
    parts = name.split(".")
    type_name: Identifier | QualifiedName = Identifier(name=parts[0])
    for part in parts[1:]:
        type_name = QualifiedName(left=type_name, right=Identifier(name=part))
    return TypeReference(type_name=type_name)


def _prop(name: str, type_annotation=None, optional: bool | None = None) -> PropertySignature:
    return PropertySignature(key=Identifier(name=name), type_annotation=type_annotation, optional=optional)


def _literal(value: bool | int | float | str) -> LiteralType:
    return LiteralType(literal=LiteralValue(value=value))


def _member(name: str) -> MemberRef:
    return MemberRef(name=name)


# ###############
# Keywords and Functions
# ###############


class TestKeywords:
    @pytest.mark.parametrize(
        ("type_node", "expected"),
        [
            (StringKeyword(), "string"),
            (NumberKeyword(), "number"),
            (BooleanKeyword(), "bool"),
            (SymbolKeyword(), "symbol"),
        ],
    )
    def test_primitive_keywords(self, type_node, expected: str) -> None:
        assert convert(type_node, "React") == _member(expected)

    def test_primitive_ignores_alias(self) -> None:
        assert convert(StringKeyword(), "R") == convert(StringKeyword(), "React")

    def test_function_type(self) -> None:
        assert convert(FunctionType(), "React") == _member("func")

    def test_unhandled_kind_returns_none(self) -> None:
        assert convert(OtherType(description="any"), "React") is None


class TestParentheses:
    def test_single_parentheses_are_removed(self) -> None:
        assert convert(ParenthesizedType(type_annotation=StringKeyword()), "React") == _member("string")

    def test_parenthesized_function(self) -> None:
        assert convert(ParenthesizedType(type_annotation=FunctionType()), "React") == _member("func")

    def test_only_one_level_is_removed(self) -> None:
        nested = ParenthesizedType(type_annotation=ParenthesizedType(type_annotation=StringKeyword()))
        assert convert(nested, "React") is None

    def test_nested_parentheses_inside_union_member(self) -> None:
        union = ParenthesizedType(
            type_annotation=UnionType(types=[ParenthesizedType(type_annotation=NumberKeyword()), StringKeyword()])
        )
        assert convert(union, "React") == Call(
            factory="oneOfType", args=[ArrayLiteral(elements=[_member("number"), _member("string")])]
        )


# ###############
# Type References
# ###############


class TestTypeReferences:
    def test_unknown_reference_is_dropped(self) -> None:
        assert convert(_ref("CustomType"), "React") is None

    def test_qualified_node(self) -> None:
        assert convert(_ref("React.ReactNode"), "React") == _member("node")

    def test_jsx_element(self) -> None:
        assert convert(_ref("JSX.Element"), "React") == _member("element")

    def test_ref_ignores_type_arguments(self) -> None:
        ref = TypeReference(type_name=Identifier(name="Ref"), type_arguments=[StringKeyword()])
        assert convert(ref, "React") == Call(
            factory="oneOfType",
            args=[ArrayLiteral(elements=[_member("string"), _member("func"), _member("object")])],
        )

    def test_mouse_event_handler(self) -> None:
        assert convert(_ref("React.MouseEventHandler"), "React") == _member("func")

    def test_mouse_event(self) -> None:
        assert convert(_ref("React.MouseEvent"), "React") == _member("object")

    def test_alias_is_honoured(self) -> None:
        assert convert(_ref("MyAlias.ReactNode"), "MyAlias") == _member("node")

    def test_other_alias_does_not_match(self) -> None:
        assert convert(_ref("MyAlias.ReactNode"), "Preact") is None

    def test_injected_name_resolver(self) -> None:
        calls: list[str] = []

        def resolve(name) -> str:
            calls.append(name.name)
            return "ReactNode"

        assert convert(_ref("Anything"), "React", resolve_name=resolve) == _member("node")
        assert calls == ["Anything"]


# ###############
# Arrays
# ###############


class TestArrays:
    def test_array_of_string(self) -> None:
        assert convert(ArrayType(element_type=StringKeyword()), "React") == Call(
            factory="arrayOf", args=[_member("string")]
        )

    def test_array_of_unknown_falls_back_to_array(self) -> None:
        assert convert(ArrayType(element_type=_ref("Custom")), "React") == _member("array")

    def test_array_of_arrays(self) -> None:
        nested = ArrayType(element_type=ArrayType(element_type=NumberKeyword()))
        assert convert(nested, "React") == Call(
            factory="arrayOf", args=[Call(factory="arrayOf", args=[_member("number")])]
        )


# ###############
# Type Literals
# ###############


class TestTypeLiterals:
    def test_empty_literal_is_object(self) -> None:
        assert convert(TypeLiteral(), "React") == _member("object")

    def test_index_signature_is_object_of(self) -> None:
        literal = TypeLiteral(members=[IndexSignature(type_annotation=StringKeyword())])
        assert convert(literal, "React") == Call(factory="objectOf", args=[_member("string")])

    def test_unconvertible_index_signature_is_dropped(self) -> None:
        literal = TypeLiteral(members=[IndexSignature(type_annotation=_ref("Custom"))])
        assert convert(literal, "React") is None

    def test_untyped_index_signature_is_dropped(self) -> None:
        assert convert(TypeLiteral(members=[IndexSignature()]), "React") is None

    def test_shape(self) -> None:
        literal = TypeLiteral(members=[_prop("foo", StringKeyword())])
        foo = PropertyAssignment(key=Identifier(name="foo"), value=IsRequired(validator=_member("string")))
        assert convert(literal, "React") == Call(factory="shape", args=[ObjectLiteral(properties=[foo])])

    def test_shape_drops_non_property_members(self) -> None:
        literal = TypeLiteral(
            members=[
                _prop("foo", NumberKeyword(), optional=True),
                IndexSignature(type_annotation=StringKeyword()),
                MethodSignature(key=Identifier(name="bar")),
            ]
        )
        assert convert(literal, "React") == Call(
            factory="shape",
            args=[ObjectLiteral(properties=[PropertyAssignment(key=Identifier(name="foo"), value=_member("number"))])],
        )

    def test_single_method_member_is_empty_shape(self) -> None:
        literal = TypeLiteral(members=[MethodSignature(key=Identifier(name="bar"))])
        assert convert(literal, "React") == Call(factory="shape", args=[ObjectLiteral(properties=[])])


# ###############
# Unions and Intersections
# ###############


class TestUnions:
    def test_all_literals_is_one_of(self) -> None:
        union = UnionType(types=[_literal("a"), _literal("b")])
        assert convert(union, "React") == Call(
            factory="oneOf", args=[ArrayLiteral(elements=[LiteralValue(value="a"), LiteralValue(value="b")])]
        )

    def test_mixed_literal_kinds(self) -> None:
        union = UnionType(types=[_literal(1), _literal(True)])
        result = convert(union, "React")
        assert isinstance(result, Call)
        assert result.args == [ArrayLiteral(elements=[LiteralValue(value=1), LiteralValue(value=True)])]

    def test_mixed_union_is_one_of_type(self) -> None:
        union = UnionType(types=[StringKeyword(), _ref("Custom"), NumberKeyword()])
        assert convert(union, "React") == Call(
            factory="oneOfType", args=[ArrayLiteral(elements=[_member("string"), _member("number")])]
        )

    def test_literal_and_keyword_union_drops_literal(self) -> None:
        union = UnionType(types=[_literal("a"), StringKeyword()])
        assert convert(union, "React") == Call(factory="oneOfType", args=[ArrayLiteral(elements=[_member("string")])])

    def test_union_with_nothing_convertible(self) -> None:
        assert convert(UnionType(types=[_ref("A"), _ref("B")]), "React") is None

    def test_empty_union(self) -> None:
        assert convert(UnionType(), "React") is None

    def test_intersection_behaves_like_union(self) -> None:
        intersection = IntersectionType(types=[TypeLiteral(), _ref("React.ReactNode")])
        assert convert(intersection, "React") == Call(
            factory="oneOfType", args=[ArrayLiteral(elements=[_member("object"), _member("node")])]
        )


# ###############
# Required Wrapper
# ###############


class TestWrapIsRequired:
    def test_optional_is_unchanged(self) -> None:
        assert wrap_is_required(_member("string"), True) == _member("string")

    def test_not_optional_is_required(self) -> None:
        assert wrap_is_required(_member("string"), False) == IsRequired(validator=_member("string"))

    def test_missing_flag_is_required(self) -> None:
        assert wrap_is_required(_member("string")) == IsRequired(validator=_member("string"))
        assert wrap_is_required(_member("string"), None) == IsRequired(validator=_member("string"))


# ###############
# Property Lists
# ###############


class TestConvertListToProps:
    def test_skips_untyped_and_unsupported(self) -> None:
        props = convert_list_to_props(
            [_prop("a"), _prop("b", _ref("Custom")), _prop("c", BooleanKeyword(), optional=True)],
            "React",
        )
        assert props == [PropertyAssignment(key=Identifier(name="c"), value=_member("bool"))]

    def test_preserves_literal_keys(self) -> None:
        key = LiteralValue(value="aria-label")
        props = convert_list_to_props([PropertySignature(key=key, type_annotation=StringKeyword())], "React")
        assert props[0].key == key

    def test_is_deterministic(self) -> None:
        properties = [_prop("a", StringKeyword()), _prop("b", ArrayType(element_type=_ref("React.ReactNode")))]
        assert convert_list_to_props(properties, "React") == convert_list_to_props(properties, "React")

    def test_optional_only_changes_the_wrapper(self) -> None:
        required = convert_list_to_props([_prop("a", FunctionType(), optional=False)], "React")[0]
        optional = convert_list_to_props([_prop("a", FunctionType(), optional=True)], "React")[0]
        assert required.value == IsRequired(validator=optional.value)


class TestConvertToPropTypes:
    def test_end_to_end(self) -> None:
        types = {
            "Props": [
                _prop("label", StringKeyword(), optional=False),
                _prop("onClick", FunctionType(), optional=True),
                _prop("items", ArrayType(element_type=StringKeyword()), optional=False),
            ]
        }
        assert convert_to_prop_types(types, ["Props"], "React") == [
            PropertyAssignment(key=Identifier(name="label"), value=IsRequired(validator=_member("string"))),
            PropertyAssignment(key=Identifier(name="onClick"), value=_member("func")),
            PropertyAssignment(
                key=Identifier(name="items"),
                value=IsRequired(validator=Call(factory="arrayOf", args=[_member("string")])),
            ),
        ]

    def test_groups_are_concatenated_in_selection_order(self) -> None:
        types = {
            "Base": [_prop("a", StringKeyword())],
            "Props": [_prop("b", NumberKeyword())],
        }
        props = convert_to_prop_types(types, ["Props", "Base"], "React")
        assert [p.key for p in props] == [Identifier(name="b"), Identifier(name="a")]

    def test_missing_names_are_skipped(self) -> None:
        types = {"Props": [_prop("a", StringKeyword())]}
        assert len(convert_to_prop_types(types, ["Missing", "Props"], "React")) == 1

    def test_empty_group_is_allowed(self) -> None:
        assert convert_to_prop_types({"Props": []}, ["Props"], "React") == []

    def test_inputs_are_not_mutated(self) -> None:
        properties = [_prop("a", StringKeyword())]
        types = {"Props": properties}
        convert_to_prop_types(types, ["Props"], "React")
        assert types == {"Props": [_prop("a", StringKeyword())]}
