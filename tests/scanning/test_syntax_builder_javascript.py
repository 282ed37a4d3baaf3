"""Tests for converting JavaScript sources into the neutral tree."""

import textwrap

import pytest

from cognitive_analysis.exceptions import ParsingError
from cognitive_analysis.metrics import MetricName
from cognitive_analysis.scanning import SyntaxTreeBuilder, get_supported_languages
from cognitive_analysis.traversal import traverse

pytestmark = pytest.mark.skipif(
    "javascript" not in get_supported_languages(),
    reason="tree-sitter-javascript not installed",
)

CART = textwrap.dedent(
    """\
    class Cart {
      /** @cognitive-ignore */
      legacy() {
        return 1;
      }

      total(items, discount = 0) {
        let result = 0;
        for (const item of items) {
          if (item.price > 0 && discount) {
            result += item.price - discount;
          } else if (item.price > 0) {
            result += item.price;
          } else {
            continue;
          }
        }
        return result;
      }

      doubled = (values) => values.map((v) => v * 2);
    }

    export const format = (value) => value.toFixed(2);

    function helper(a, ...rest) {
      return a + rest.length;
    }
    """
)


@pytest.fixture
def result():
    tree = SyntaxTreeBuilder().build(CART, "javascript", namespace="shop.cart")
    return traverse(tree)


@pytest.fixture
def methods(result):
    return {m.method_name: m for m in result.methods}


class TestJavaScriptConversion:
    def test_routines_found(self, result):
        assert [m.identity for m in result.methods] == [
            ("shop.cart.Cart", "total"),
            ("shop.cart.Cart", "doubled"),
            ("shop.cart", "format"),
            ("shop.cart", "helper"),
        ]

    def test_ignore_marker(self, result):
        assert result.ignored == ["shop.cart.Cart::legacy"]

    def test_total_counts(self, methods):
        total = methods["total"]
        assert total.line == 7
        assert total.count(MetricName.LINE_COUNT) == 13
        assert total.count(MetricName.ARG_COUNT) == 2
        assert total.count(MetricName.VARIABLE_COUNT) == 2
        assert total.count(MetricName.PROPERTY_CALL_COUNT) == 1
        assert total.count(MetricName.IF_COUNT) == 1
        assert total.count(MetricName.IF_NESTING_LEVEL) == 1
        assert total.count(MetricName.ELSE_COUNT) == 2
        assert total.count(MetricName.RETURN_COUNT) == 1

    def test_total_cyclomatic(self, methods):
        # for-of, if, &&, else if
        assert methods["total"].cyclomatic.complexity == 5

    def test_arrow_field_is_a_routine(self, methods):
        doubled = methods["doubled"]
        assert doubled.count(MetricName.ARG_COUNT) == 1
        assert doubled.count(MetricName.LINE_COUNT) == 1

    def test_rest_parameter(self, methods):
        helper = methods["helper"]
        assert helper.count(MetricName.ARG_COUNT) == 2
        assert helper.count(MetricName.PROPERTY_CALL_COUNT) == 1

    def test_syntax_error(self):
        with pytest.raises(ParsingError):
            SyntaxTreeBuilder().build("function (", "javascript")

    def test_object_literal_methods_are_not_reported(self):
        source = textwrap.dedent(
            """\
            const handlers = {
              open(path) {
                return path;
              },
            };

            function run() {
              return { stop() { return 0; } };
            }
            """
        )
        tree = SyntaxTreeBuilder().build(source, "javascript", namespace="app")
        assert [m.identity for m in traverse(tree).methods] == [("app", "run")]
