"""Test locating @param tags in comment blocks."""

from __future__ import annotations

import pytest

from paramdoc.description import DescriptionFactory
from paramdoc.docblock import collect_params, find_param_tags
from paramdoc.errors import InvalidArgument, TagError, TypeSyntaxError
from paramdoc.resolver import TypeResolver
from paramdoc.typeexpr import Context

DOCBLOCK = """\
/**
 * Add two numbers.
 *
 * @param int $a the first
 *     operand
 * @param int $b
 * @return int
 */
"""


class TestFindParamTags:
    def test_bodies(self):
        found = find_param_tags(DOCBLOCK)
        assert [occ.body for occ in found] == ["int $a the first\n     operand", "int $b"]

    def test_start_position(self):
        occ = find_param_tags(DOCBLOCK)[0]
        assert occ.span.start.line == 4
        assert occ.span.start.column == 11
        assert DOCBLOCK[occ.span.start.offset :].startswith("int $a the first")

    def test_span_covers_continuation(self):
        occ = find_param_tags(DOCBLOCK)[0]
        assert occ.span.end.line == 5
        assert occ.span.end.column == 15

    def test_next_tag_ends_body(self):
        occ = find_param_tags(DOCBLOCK)[1]
        assert occ.span.start.line == occ.span.end.line == 6

    def test_single_line_block(self):
        found = find_param_tags("/** @param string $s the input */")
        assert [occ.body for occ in found] == ["string $s the input"]

    def test_blank_line_ends_body(self):
        source = "/**\n * @param int $x value\n *\n * trailing text\n */"
        assert [occ.body for occ in find_param_tags(source)] == ["int $x value"]

    def test_block_end_ends_body(self):
        source = "/**\n * @param int $x value\n */\nfunction f($x) {}\n"
        assert [occ.body for occ in find_param_tags(source)] == ["int $x value"]

    def test_hash_comments(self):
        source = "# @param int $x value\n# more\n"
        assert [occ.body for occ in find_param_tags(source)] == ["int $x value\n more"]

    def test_similar_tag_names_ignored(self):
        assert find_param_tags("/** @parameter int $x */") == []

    def test_empty_tag_found(self):
        found = find_param_tags("/**\n * @param\n */")
        assert [occ.body for occ in found] == [""]

    def test_no_tags(self):
        assert find_param_tags("plain text\n") == []


class TestCollectParams:
    def test_parsed_in_order(self):
        found = collect_params(DOCBLOCK, TypeResolver(), DescriptionFactory())
        assert [occ.param.variable_name for occ in found] == ["a", "b"]
        assert str(found[0].param.description) == "the first\noperand"

    def test_context_used(self):
        source = "/** @param Foo $f */"
        found = collect_params(source, TypeResolver(), DescriptionFactory(), Context("App"))
        assert str(found[0].param.declared_type) == "\\App\\Foo"

    def test_type_error_position(self):
        source = " * @param int[ $x"
        with pytest.raises(TagError) as exc_info:
            collect_params(source, TypeResolver(), DescriptionFactory())
        err = exc_info.value
        assert err.message == "expected ']'"
        assert err.span.start.line == 1
        assert err.span.start.column == 15
        assert isinstance(err.__cause__, TypeSyntaxError)

    def test_empty_body_error(self):
        source = "/**\n * @param\n */"
        with pytest.raises(TagError) as exc_info:
            collect_params(source, TypeResolver(), DescriptionFactory())
        err = exc_info.value
        assert err.message == "tag body must not be empty"
        assert err.span.start.line == 2
        assert isinstance(err.__cause__, InvalidArgument)

    def test_first_error_wins(self):
        source = "/**\n * @param int[ $x\n * @param\n */"
        with pytest.raises(TagError) as exc_info:
            collect_params(source, TypeResolver(), DescriptionFactory())
        assert exc_info.value.span.start.line == 2
