"""
Tests for the avalanche-effect test.

Covers:
  - Character flipping rules
  - Bit-difference counting
  - Perturbation pairs per line and aggregate statistics
  - EmptyInputSet guard
"""

import pytest

from hashlab.analysis.avalanche import (
    APPEND,
    FLIP_FIRST,
    analyze_avalanche,
    bit_difference,
    flip_char,
    perturb_line,
    summarize_pairs,
)
from hashlab.hashing.simple_hash import simple_hash
from hashlab.utils.errors import EmptyInputSet


class TestFlipChar:

    def test_z_wraps(self):
        assert flip_char("z") == "a"

    def test_upper_z_wraps(self):
        assert flip_char("Z") == "A"

    def test_next_code_point(self):
        assert flip_char("m") == "n"
        assert flip_char("test") == "uest"
        assert flip_char("9") == ":"

    def test_other_position(self):
        assert flip_char("abc", 2) == "abd"

    def test_empty(self):
        assert flip_char("") == "a"

    def test_skips_surrogate_block(self):
        assert flip_char("\ud7ffabc") == "\ue000abc"
        flip_char("\ud7ffabc").encode("utf-8")

    def test_last_code_point_wraps(self):
        assert flip_char("\U0010ffff") == "\x00"


class TestBitDifference:

    def test_same_value(self):
        for a in (0, 1, 127, 255):
            assert bit_difference(a, a) == 0

    def test_all_bits(self):
        assert bit_difference(0, 255) == 8

    def test_known(self):
        assert bit_difference(0b1010, 0b0101) == 4
        assert bit_difference(0b1000_0000, 0) == 1

    def test_range_and_symmetry(self):
        for a in range(0, 256, 7):
            for b in range(0, 256, 11):
                d = bit_difference(a, b)
                assert 0 <= d <= 8
                assert d == bit_difference(b, a)
                assert d == bin(a ^ b).count("1")


class TestPerturbLine:

    def test_two_pairs(self):
        pairs = perturb_line("test", simple_hash)
        assert [p.kind for p in pairs] == [FLIP_FIRST, APPEND]
        assert pairs[0].modified == "uest"
        assert pairs[1].modified == "testx"

    def test_pair_fields(self):
        for p in perturb_line("test", simple_hash):
            assert p.original == "test"
            assert p.original_hash == simple_hash("test")
            assert p.modified_hash == simple_hash(p.modified)
            assert p.bit_difference == bit_difference(p.original_hash, p.modified_hash)
            assert 0 <= p.bit_difference <= 8

    def test_empty_line_only_appends(self):
        pairs = perturb_line("", simple_hash)
        assert len(pairs) == 1
        assert pairs[0].kind == APPEND
        assert pairs[0].modified == "x"

    def test_custom_append_char(self):
        pairs = perturb_line("ab", simple_hash, append_char="!")
        assert pairs[1].modified == "ab!"


class TestAnalyzeAvalanche:

    def test_length_hash_aggregates(self):
        """len(): flipping keeps length (0 bits), appending 2→3 flips 1 bit."""
        report = analyze_avalanche(["ab"], hash_fn=len)
        assert report.total_tests == 2
        assert report.total_bits_changed == 1
        assert report.average_bits_changed == pytest.approx(0.5)
        assert report.percentage == pytest.approx(6.25)
        assert report.bit_difference_counts[:2] == (1, 1)
        assert sum(report.bit_difference_counts) == 2
        assert report.bit_flip_rates[0] == pytest.approx(0.5)
        assert all(r == 0 for r in report.bit_flip_rates[1:])
        assert report.hash_name == "len"

    def test_blank_lines_skipped(self):
        report = analyze_avalanche(["", "   ", "Hello", "\t", "World"], simple_hash)
        assert report.total_tests == 4
        assert {p.original for p in report.pairs} == {"Hello", "World"}

    def test_untrimmed_line_is_perturbed(self):
        report = analyze_avalanche([" ab"], simple_hash)
        assert report.pairs[0].modified == "!ab"
        assert report.pairs[1].modified == " abx"

    def test_statistics_consistent(self):
        lines = [f"word{i}" for i in range(300)]
        report = analyze_avalanche(lines, simple_hash)
        assert report.total_tests == 600
        assert report.total_bits_changed == sum(p.bit_difference for p in report.pairs)
        assert report.average_bits_changed == pytest.approx(report.total_bits_changed / 600)
        assert report.percentage == pytest.approx(report.average_bits_changed / 8 * 100)
        assert 0 <= report.average_bits_changed <= 8
        assert len(report.bit_difference_counts) == 9
        assert len(report.bit_flip_rates) == 8
        # Mean of per-bit flip rates × 8 equals the average bits changed
        assert sum(report.bit_flip_rates) == pytest.approx(report.average_bits_changed)

    def test_pairs_in_input_order(self):
        report = analyze_avalanche(["a", "b"], simple_hash)
        assert [p.original for p in report.pairs] == ["a", "a", "b", "b"]

    def test_to_frame(self):
        df = analyze_avalanche(["Hello"], simple_hash).to_frame()
        assert len(df) == 2
        assert "bit_difference" in df.columns

    def test_empty_raises(self):
        with pytest.raises(EmptyInputSet):
            analyze_avalanche([], simple_hash)

    def test_only_blank_raises(self):
        with pytest.raises(EmptyInputSet):
            analyze_avalanche(["", "  "], simple_hash)

    def test_summarize_empty_raises(self):
        with pytest.raises(EmptyInputSet):
            summarize_pairs([])
