"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from datastar_sse.main import app
from datastar_sse.utils.sse import sse_headers


@pytest.fixture
def client():
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def parse_frame():
    """Split a frame into (event, [data lines]) for assertions."""

    def _parse(frame: str):
        assert frame.endswith("\n\n"), "SSE frame must end with a blank line"
        event = None
        data = []
        for line in frame[:-2].split("\n"):
            if line.startswith("event: "):
                event = line[len("event: "):]
            elif line.startswith("data: "):
                data.append(line[len("data: "):])
        return event, data

    return _parse


@pytest.fixture
def sample_fragment():
    """Two-line HTML fragment."""
    return '<div id="a">A</div>\n<div id="b">B</div>'


@pytest.fixture
def sample_script():
    """Script split over several lines, with CRLF endings."""
    return "const el = document.getElementById('a');\r\nel.remove();"


@pytest.fixture
def sse_header_names():
    """Names of the recommended headers, in order."""
    return [name for name, _ in sse_headers()]
