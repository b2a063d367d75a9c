# topmark:header:start
#
#   project      : KeySeq
#   file         : test_properties_slow.py
#   file_relpath : tests/test_properties_slow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Heavier property checks for windowing, run with more hypothesis examples."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from keyseq.ops import grouping
from tests.strategies_keyseq import s_list

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(deadline=None, max_examples=300)
@given(seq=s_list(max_size=60), parts=st.integers(min_value=1, max_value=12))
def test_split_evenly_covers_the_source(seq: list[int], parts: int) -> None:
    groups = grouping.split_evenly(seq, parts)
    assert len(groups) <= parts
    assert [v for group in groups for v in group] == seq
    assert all(group for group in groups)


@settings(deadline=None, max_examples=300)
@given(seq=s_list(max_size=60), size=st.integers(min_value=1, max_value=8))
def test_slide_windows_match_list_slices(seq: list[int], size: int) -> None:
    windows = grouping.slide(seq, size)
    if not seq:
        assert windows == [[]]
    elif len(seq) < size:
        assert windows == [seq]
    else:
        assert windows == [seq[i : i + size] for i in range(len(seq) - size + 1)]
