"""
Property-based tests for merging the two extraction passes.

**Property: Merged lists are capped, ordered and repeat-free**
*For any* pair of point or image lists, the merged list holds at most five
entries, never repeats an entry, keeps the preferred source first, and
merging a merged list again changes nothing.
"""

from hypothesis import given, settings, strategies as st

from presenter.content.merge import merge_images, merge_points
from presenter.content.models import MAX_IMAGES, MAX_POINTS


words = st.text(alphabet="abcdefghijklmnop ", min_size=1, max_size=30).filter(lambda s: s.strip())
point_lists = st.lists(words, max_size=10)
url_lists = st.lists(
    st.integers(min_value=0, max_value=12).map(lambda i: f"https://example.com/{i}.png"),
    max_size=10,
)


def dedupe(items):
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


class TestMergePointsProperties:

    @given(point_lists, point_lists)
    @settings(max_examples=100)
    def test_capped_and_repeat_free(self, markdown_points, html_points):
        merged = merge_points(markdown_points, html_points)

        assert len(merged) <= MAX_POINTS
        assert len(merged) == len(set(merged))

    @given(point_lists, point_lists)
    @settings(max_examples=100)
    def test_preferred_source_comes_first(self, markdown_points, html_points):
        merged = merge_points(markdown_points, html_points)
        preferred = dedupe(markdown_points)[:MAX_POINTS]

        assert merged[:len(preferred)] == preferred

    @given(point_lists, point_lists)
    @settings(max_examples=100)
    def test_only_source_points_kept(self, markdown_points, html_points):
        merged = merge_points(markdown_points, html_points)
        assert set(merged) <= set(markdown_points) | set(html_points)

    @given(point_lists)
    @settings(max_examples=100)
    def test_idempotent(self, points):
        once = merge_points(points)
        assert merge_points(once) == once


class TestMergeImagesProperties:

    @given(url_lists, url_lists)
    @settings(max_examples=100)
    def test_first_seen_order(self, markdown_images, html_images):
        merged = merge_images(markdown_images, html_images)
        assert merged == dedupe(markdown_images + html_images)[:MAX_IMAGES]
