import pytest

from dshomework.browser import BrowserHistory, HistoryError, main, run_commands


def test_new_history_is_empty():
    browser = BrowserHistory()
    assert browser.current == ""
    with pytest.raises(HistoryError, match="Cannot go back"):
        browser.back()
    with pytest.raises(HistoryError, match="Cannot go forward"):
        browser.forward()


def test_back_and_forward_move_between_pages():
    browser = BrowserHistory()
    browser.visit("a.com")
    browser.visit("b.com")
    browser.visit("c.com")
    assert browser.back() == "b.com"
    assert browser.back() == "a.com"
    assert browser.forward() == "b.com"
    assert browser.current == "b.com"


def test_visit_clears_forward_history():
    browser = BrowserHistory()
    browser.visit("a.com")
    browser.visit("b.com")
    browser.back()
    browser.visit("c.com")
    with pytest.raises(HistoryError):
        browser.forward()
    assert browser.back() == "a.com"


def test_first_page_has_nothing_behind_it():
    browser = BrowserHistory()
    browser.visit("a.com")
    with pytest.raises(HistoryError):
        browser.back()
    assert browser.current == "a.com"


def test_run_commands_report():
    script = "visit a.com\nvisit b.com\nback\nforward\nforward\njump\n"
    assert run_commands(script) == [
        "Visited: a.com",
        "Visited: b.com",
        "Went back to: a.com",
        "Went forward to: b.com",
        "Cannot go forward",
        "Unknown command: jump",
    ]


def test_visit_keeps_whole_line_as_url():
    assert run_commands("visit my home page\nback\n") == [
        "Visited: my home page",
        "Cannot go back",
    ]


def test_main_writes_report(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("visit x.org\nback\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "Visited: x.org\nCannot go back\n"


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 1