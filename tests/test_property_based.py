from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdbook_git.errors import ResolutionError
from mdbook_git.markup.annotate import COMMENT_MARKER, comment_out_unselected
from mdbook_git.markup.ranges import parse_range, parse_range_expr, selects
from mdbook_git.markup.rewrite import rewrite

_line_text = st.text(alphabet=st.characters(exclude_characters="\r\n", exclude_categories=("Cs",)), max_size=12)
_single_expr = st.one_of(
    st.integers(0, 50).map(str),
    st.just(":"),
    st.integers(0, 50).map(lambda n: f"{n}:"),
    st.integers(0, 50).map(lambda n: f":{n}"),
    st.tuples(st.integers(0, 50), st.integers(0, 50)).map(lambda p: f"{p[0]}:{p[1]}"),
)
_garbage_expr = st.from_regex(r"(?:[a-z]{1,4}|[0-9]+:[0-9]+:[0-9]+)?", fullmatch=True)


@pytest.mark.unit
@given(st.integers(0, 200), st.integers(1, 200))
def test_closed_open_range_selects_exactly_its_interval(start: int, width: int) -> None:
    end = start + width
    r = parse_range(f"{start}:{end}")
    assert r is not None
    assert [i for i in range(end + 5) if i in r] == list(range(start, end))


@pytest.mark.unit
@given(st.lists(_single_expr, min_size=1, max_size=5), st.lists(_garbage_expr, max_size=5), st.randoms())
def test_malformed_array_entries_never_invalidate_valid_ones(valid: list[str], garbage: list[str], rnd) -> None:
    entries = valid + garbage
    rnd.shuffle(entries)
    parsed = parse_range_expr("[" + ",".join(entries) + "]")
    expected = tuple(parse_range(e) for e in entries if parse_range(e) is not None)
    assert parsed == expected
    assert len(parsed) == len(valid)


@pytest.mark.unit
@given(st.lists(_line_text, min_size=1, max_size=20), st.lists(_single_expr, min_size=1, max_size=3))
def test_annotation_is_idempotent_and_preserves_line_count(lines: list[str], exprs: list[str]) -> None:
    text = "\n".join(lines) + "\n"
    ranges = tuple(parse_range(e) for e in exprs)
    once = comment_out_unselected(text, ranges)
    assert comment_out_unselected(once, ranges) == once
    out_lines = once.split("\n")
    assert len(out_lines) == len(lines)
    for index, (before, after) in enumerate(zip(lines, out_lines)):
        if selects(ranges, index) or before.startswith(COMMENT_MARKER):
            assert after == before
        else:
            assert after == COMMENT_MARKER + before


class _NothingResolves:
    def fetch_file(self, revision: str, path: str) -> str:
        raise ResolutionError("missing")

    def fetch_patch(self, old: str, new: str, path: str, context_lines: int | None = None) -> str:
        raise ResolutionError("missing")


@pytest.mark.unit
@given(st.text(max_size=40), st.text(max_size=40), st.sampled_from(["show a:b", "diff a b c -h", "show a:b:1:2", "bogus"]))
def test_failed_tokens_round_trip_byte_for_byte(prefix: str, suffix: str, body: str) -> None:
    text = f"{prefix}{{{{ #git {body} }}}}{suffix}"
    assert rewrite(text, _NothingResolves()) == text
