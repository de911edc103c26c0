"""Tests for the word_scramble package.

TEST INTEGRITY DIRECTIVE:
Never remove, disable, or work around a failing test without review.
A failing test means the implementation is wrong, the expectation is wrong,
or the rules changed. Find out which before touching the test.
"""
