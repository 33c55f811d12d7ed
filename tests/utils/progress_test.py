from regtag.utils.progress import ProgressReporter


def test_disabled_reporter_counts_matches() -> None:
    with ProgressReporter(3, enabled=False) as progress:
        progress.update(True)
        progress.update(False)
        progress.update(True)
        assert progress.progress_bar is None
    assert progress.matched == 2


def test_reporter_needs_a_terminal(capsys) -> None:
    # stderr is captured, so the bar stays off even when enabled
    with ProgressReporter(1) as progress:
        progress.update(True)
    assert not progress.enabled
    assert capsys.readouterr().err == ""
