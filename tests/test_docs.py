import pytest

from rustupcli.docs import DOC_PAGES, DocPage, doc_page_names, doc_url_for


def test_no_selection_opens_main_index():
    assert doc_url_for([]) == "index.html"


def test_book_selection():
    assert doc_url_for(["book"]) == "book/index.html"


def test_nomicon_selection():
    assert doc_url_for({"nomicon"}) == "nomicon/index.html"


def test_names_keep_source_order():
    names = doc_page_names()
    assert names[0] == "alloc"
    assert names[-1] == "embedded-book"
    assert names.index("unstable-book") < names.index("embedded-book")


def test_names_are_unique():
    names = doc_page_names()
    assert len(names) == len(set(names))


@pytest.mark.parametrize("name", doc_page_names())
def test_each_page_path_is_under_its_name(name):
    assert doc_url_for([name]) == f"{name}/index.html"


def test_first_in_table_order_wins():
    names = doc_page_names()
    assert doc_url_for([names[5], names[2]]) == DOC_PAGES[2].path


def test_names_match_pages():
    assert doc_page_names() == [page.name for page in DOC_PAGES]
    assert all(isinstance(page, DocPage) and page.help for page in DOC_PAGES)


def test_unknown_page_rejected():
    with pytest.raises(ValueError, match="bogus"):
        doc_url_for(["bogus"])


def test_unknown_page_rejected_even_with_known():
    with pytest.raises(ValueError):
        doc_url_for(["std", "not-a-page"])