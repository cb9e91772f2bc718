"""Tests for logiclens.analysis.counter."""

import pytest

from logiclens.analysis.counter import RULES, count
from logiclens.analysis.preprocessor import sanitize
from logiclens.models import PRIMITIVE_FIELDS


class TestConditionals:
    """if / else if / else are counted as distinct constructs."""

    def test_example_source(self, example_source):
        stats = count(sanitize(example_source))
        assert stats.if_ == 1
        assert stats.else_if == 1
        assert stats.for_ == 1
        assert stats.else_ == 0
        assert stats.total == 3

    def test_plain_else(self):
        stats = count("if (a) { } else { }")
        assert (stats.if_, stats.else_if, stats.else_) == (1, 0, 1)

    def test_chain(self):
        stats = count("if (a) {} else if (b) {} else if (c) {} else {}")
        assert (stats.if_, stats.else_if, stats.else_) == (1, 2, 1)

    def test_whitespace_variants(self):
        stats = count("if(a){}\nelse\n\tif  (b){}")
        assert stats.if_ == 1
        assert stats.else_if == 1

    def test_if_without_paren_not_counted(self):
        assert count("if x: pass").if_ == 0

    @pytest.mark.parametrize("text", ["elseif (x)", "notif (x)", "iffy(x)", "endif(x)"])
    def test_word_boundaries(self, text):
        stats = count(text)
        assert stats.if_ == 0
        assert stats.else_if == 0
        assert stats.else_ == 0

    def test_switch(self):
        assert count("switch (k) { case 1: break; }").switch == 1


class TestLoops:
    """for / while / do are keyword matched."""

    def test_for_and_while(self):
        stats = count("for (;;) {} while (x) {}")
        assert stats.for_ == 1
        assert stats.while_ == 1

    def test_do_while_counts_both(self):
        stats = count("do { x++; } while (x < 3);")
        assert stats.do_while == 1
        assert stats.while_ == 1

    def test_bare_do_token_counted(self):
        """Any standalone do token counts, not only do/while pairs."""
        assert count("obj.do();").do_while == 1

    def test_do_inside_word_not_counted(self):
        assert count("done(); undo(); doWork();").do_while == 0

    def test_foreach_not_for(self):
        assert count("items.forEach(fn)").for_ == 0


class TestOperators:
    """Ternary and logical operators are matched by symbol."""

    def test_logical(self):
        stats = count("if (a && b || c && d) {}")
        assert stats.logical_and == 2
        assert stats.logical_or == 1

    def test_ternary(self):
        assert count("y = a ? b : c;").ternary == 1

    def test_every_question_mark_counts(self):
        """Optional chaining and nullish coalescing are counted too."""
        assert count("a?.b ?? c").ternary == 3

    def test_bitwise_not_logical(self):
        stats = count("x = a & b | c;")
        assert stats.logical_and == 0
        assert stats.logical_or == 0


class TestCounterSet:
    """Shape of the counting result."""

    def test_total_is_sum_of_primitives(self, js_source):
        stats = count(sanitize(js_source))
        assert stats.total == stats.primitive_sum()

    def test_score_left_at_zero(self, example_source):
        assert count(example_source).complexity_score == 0.0

    def test_empty_text(self):
        stats = count("")
        assert stats.total == 0
        assert all(getattr(stats, name) == 0 for name in PRIMITIVE_FIELDS)

    def test_counts_raw_text_as_given(self):
        """count does not sanitize, callers do."""
        assert count('"if (x)"').if_ == 1
        assert count(sanitize('"if (x)"')).if_ == 0

    def test_rules_cover_every_primitive(self):
        assert tuple(rule.field for rule in RULES) == PRIMITIVE_FIELDS

    def test_non_negative(self, js_source):
        stats = count(sanitize(js_source))
        assert all(getattr(stats, name) >= 0 for name in PRIMITIVE_FIELDS)

    def test_mixed_source(self, js_source):
        stats = count(sanitize(js_source))
        assert stats.if_ == 1
        assert stats.else_if == 1
        assert stats.else_ == 1
        assert stats.for_ == 1
        assert stats.while_ == 1
        assert stats.do_while == 0
        assert stats.switch == 1
        assert stats.ternary == 1
        assert stats.logical_and == 1
        assert stats.logical_or == 1
        assert stats.total == 9
