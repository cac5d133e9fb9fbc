# tests/conftest.py
import pysubs2
import pytest

from jpsubs_core.io.runner import PassRunner


@pytest.fixture
def capture_log():
    lines = []
    def cb(msg: str):
        lines.append(msg)
    return lines, cb


@pytest.fixture
def make_subs():
    """
    Build a pysubs2.SSAFile from (text, start_ms, end_ms[, style[, comment]]) tuples.
    """
    def _make(rows):
        subs = pysubs2.SSAFile()
        for row in rows:
            text, start, end = row[:3]
            style = row[3] if len(row) > 3 else 'Default'
            comment = row[4] if len(row) > 4 else False
            subs.append(pysubs2.SSAEvent(
                start=start,
                end=end,
                text=text,
                style=style,
                type='Comment' if comment else 'Dialogue',
            ))
        return subs
    return _make


@pytest.fixture
def runner(capture_log):
    """PassRunner in compact mode writing into capture_log."""
    _, log_cb = capture_log
    return PassRunner({'log_compact': True}, log_cb)
