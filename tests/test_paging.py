"""Tests for PageRequest and Page."""
import pytest

from app.domain.exceptions import InvalidArgumentError
from app.domain.repositories.paging import Page, PageRequest


class TestPageRequest:

    def test_offset(self):
        assert PageRequest(page=2, size=10, sort_by="name").offset == 20

    @pytest.mark.parametrize("page, size, sort_by", [
        (-1, 10, "name"),
        (0, 0, "name"),
        (0, -5, "name"),
        (0, 10, ""),
        (0, 10, "  "),
    ])
    def test_rejects_invalid(self, page, size, sort_by):
        with pytest.raises(InvalidArgumentError):
            PageRequest(page=page, size=size, sort_by=sort_by)


class TestPage:

    @pytest.mark.parametrize("total, size, pages", [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (3, 3, 1),
    ])
    def test_total_pages(self, total, size, pages):
        assert Page(content=[], page=0, size=size, total_elements=total).total_pages == pages

    def test_map_keeps_metadata(self):
        page = Page(content=[1, 2, 3], page=1, size=3, total_elements=7)
        mapped = page.map(str)
        assert mapped.content == ["1", "2", "3"]
        assert (mapped.page, mapped.size, mapped.total_elements, mapped.total_pages) == (1, 3, 7, 3)
