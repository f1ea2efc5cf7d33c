import io

import pytest

from servercore.progressbar import ProgressBar, set_output_state

INITIAL = "[" + " " * 50 + "] 0%\r["


@pytest.fixture(autouse=True)
def _restore_output():
    set_output_state(True)
    yield
    set_output_state(True)


def test_initial_drawing():
    stream = io.StringIO()
    ProgressBar(10, stream)
    assert stream.getvalue() == INITIAL


def test_full_bar_after_all_rows():
    stream = io.StringIO()
    bar = ProgressBar(50, stream)
    for _ in range(50):
        bar.step()
    assert stream.getvalue().endswith("\r[" + "*" * 50 + "] 100%  \r[")


def test_no_redraw_when_bar_does_not_grow():
    stream = io.StringIO()
    bar = ProgressBar(200, stream)
    bar.step()
    assert stream.getvalue() == INITIAL


def test_redraw_count_matches_bar_width():
    stream = io.StringIO()
    bar = ProgressBar(100, stream)
    for _ in range(100):
        bar.step()
    assert stream.getvalue().count("%  \r[") == 50


def test_redraws_only_grow():
    stream = io.StringIO()
    bar = ProgressBar(7, stream)
    for _ in range(7):
        bar.step()
    frames = stream.getvalue()[len(INITIAL):].split("\r[")
    stars = [frame.count("*") for frame in frames if "]" in frame]
    assert stars == sorted(stars)
    assert len(set(stars)) == len(stars)


def test_zero_rows_step_does_nothing():
    stream = io.StringIO()
    bar = ProgressBar(0, stream)
    bar.step()
    assert stream.getvalue() == INITIAL


def test_close_writes_single_newline():
    stream = io.StringIO()
    bar = ProgressBar(3, stream)
    bar.close()
    bar.close()
    assert stream.getvalue() == INITIAL + "\n"


def test_context_manager_closes():
    stream = io.StringIO()
    with ProgressBar(1, stream) as bar:
        bar.step()
    assert stream.getvalue().endswith("\n")
    assert stream.getvalue().count("\n") == 1


def test_output_disabled_writes_nothing():
    set_output_state(False)
    stream = io.StringIO()
    with ProgressBar(4, stream) as bar:
        for _ in range(4):
            bar.step()
    assert stream.getvalue() == ""