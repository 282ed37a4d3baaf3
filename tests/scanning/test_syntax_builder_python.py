"""Tests for converting Python sources into the neutral tree."""

import textwrap

import pytest

from cognitive_analysis.exceptions import ParsingError, UnsupportedLanguageError
from cognitive_analysis.metrics import MetricName
from cognitive_analysis.scanning import SyntaxTreeBuilder, get_supported_languages
from cognitive_analysis.traversal import NodeKind, traverse

pytestmark = pytest.mark.skipif(
    "python" not in get_supported_languages(), reason="tree-sitter-python not installed"
)

CART = textwrap.dedent(
    '''\
    class Cart:
        def total(self, items, discount=0):
            """Sum the item prices."""
            result = 0
            for item in items:
                if item.price > 0:
                    if discount:
                        result += item.price - discount
                    else:
                        result += item.price
            if result > 100:
                return result * 0.9
            elif result > 50:
                return result
            return self.round(result)

        def sorted_items(self, items):
            return sorted(items, key=lambda entry: entry.name)

        @staticmethod
        def empty():
            pass


    def helper(value, *args, **kwargs):
        def inner():
            if value:
                return 1
        return inner
    '''
)


@pytest.fixture
def builder():
    return SyntaxTreeBuilder()


@pytest.fixture
def cart_methods(builder):
    tree = builder.build(CART, "python", namespace="shop.cart")
    return {m.method_name: m for m in traverse(tree).methods}


class TestPythonConversion:
    def test_root_is_namespace(self, builder):
        tree = builder.build("x = 1\n", "python", namespace="pkg.mod")
        assert tree.kind is NodeKind.NAMESPACE
        assert tree.name == "pkg.mod"

    def test_methods_and_functions_found(self, builder):
        tree = builder.build(CART, "python", namespace="shop.cart")
        identities = [m.identity for m in traverse(tree).methods]
        assert identities == [
            ("shop.cart.Cart", "total"),
            ("shop.cart.Cart", "sorted_items"),
            ("shop.cart.Cart", "empty"),
            ("shop.cart", "helper"),
        ]

    def test_total_counts(self, cart_methods):
        total = cart_methods["total"]
        assert total.line == 2
        assert total.count(MetricName.LINE_COUNT) == 14
        assert total.count(MetricName.ARG_COUNT) == 2
        assert total.count(MetricName.VARIABLE_COUNT) == 2
        assert total.count(MetricName.PROPERTY_CALL_COUNT) == 1
        assert total.count(MetricName.IF_COUNT) == 3
        assert total.count(MetricName.IF_NESTING_LEVEL) == 2
        assert total.count(MetricName.ELSE_COUNT) == 2
        assert total.count(MetricName.RETURN_COUNT) == 3

    def test_total_cyclomatic(self, cart_methods):
        # for, three ifs and one elif
        assert cart_methods["total"].cyclomatic.complexity == 6

    def test_lambda_is_measured_separately(self, cart_methods):
        sorted_items = cart_methods["sorted_items"]
        assert sorted_items.count(MetricName.ARG_COUNT) == 1
        assert sorted_items.count(MetricName.PROPERTY_CALL_COUNT) == 0
        assert sorted_items.count(MetricName.RETURN_COUNT) == 1

    def test_static_method_without_receiver(self, cart_methods):
        assert cart_methods["empty"].count(MetricName.ARG_COUNT) == 0

    def test_nested_function_stays_out(self, cart_methods):
        helper = cart_methods["helper"]
        assert helper.count(MetricName.ARG_COUNT) == 3
        assert helper.count(MetricName.IF_COUNT) == 0
        assert helper.count(MetricName.RETURN_COUNT) == 1
        assert "inner" not in cart_methods

    def test_ignore_markers(self, builder):
        source = textwrap.dedent(
            '''\
            # @cognitive-ignore
            def generated():
                return 1


            class Generated:
                """Produced by a tool. @cognitive-ignore"""

                def run(self):
                    return 1


            class Kept:
                def counted(self):
                    pass

                def skipped(self):
                    """Legacy. @cognitive-ignore"""
                    pass
            '''
        )
        result = traverse(builder.build(source, "python", namespace="gen"))
        assert [m.identity for m in result.methods] == [("gen.Kept", "counted")]
        assert result.ignored == ["gen::generated", "gen.Generated", "gen.Kept::skipped"]

    def test_else_of_loop_is_not_counted(self, builder):
        source = textwrap.dedent(
            """\
            def scan(values):
                for value in values:
                    if value:
                        break
                else:
                    return None
                return value
            """
        )
        method = traverse(builder.build(source, "python", namespace="m")).methods[0]
        assert method.count(MetricName.ELSE_COUNT) == 0
        assert method.count(MetricName.IF_COUNT) == 1

    def test_syntax_error(self, builder):
        with pytest.raises(ParsingError) as exc_info:
            builder.build("def broken(:\n    pass\n", "python")
        assert "syntax error" in str(exc_info.value)

    def test_unknown_language(self, builder):
        with pytest.raises(UnsupportedLanguageError):
            builder.build("puts 1", "ruby")
