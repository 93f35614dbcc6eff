from motoparts.utils.pagination import (
    ELLIPSIS,
    clamp_page,
    count_pages,
    page_after_delete,
    page_numbers,
    slice_page,
)


def test_count_pages_never_below_one():
    assert count_pages(0, 10) == 1
    assert count_pages(10, 10) == 1
    assert count_pages(11, 10) == 2
    assert count_pages(5, 0) == 1


def test_clamp_page():
    assert clamp_page(0, 5) == 1
    assert clamp_page(9, 5) == 5
    assert clamp_page("3", 5) == 3
    assert clamp_page("x", 5) == 1


def test_page_numbers_all_pages_when_they_fit():
    assert page_numbers(2, 4) == [1, 2, 3, 4]


def test_page_numbers_window_with_ellipses():
    assert page_numbers(6, 10) == [1, ELLIPSIS, 5, 6, 7, ELLIPSIS, 10]
    assert page_numbers(1, 10) == [1, 2, 3, 4, ELLIPSIS, 10]
    assert page_numbers(10, 10) == [1, ELLIPSIS, 7, 8, 9, 10]


def test_deleting_last_row_moves_back_a_page():
    assert page_after_delete(3, 1) == 2
    assert page_after_delete(3, 4) == 3
    assert page_after_delete(1, 1) == 1


def test_slice_page_clamps_out_of_range_pages():
    items = list(range(25))

    assert slice_page(items, 3, 10) == list(range(20, 25))
    assert slice_page(items, 9, 10) == list(range(20, 25))
