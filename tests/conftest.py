import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

VIDEO_ID = "dQw4w9WgXcQ"
API_KEY = "TEST_API_KEY"

REASONS = {200: "OK", 403: "Forbidden", 404: "Not Found", 500: "Internal Server Error"}


def make_response(text="", status=200, json_data=None):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 400
    resp.reason = REASONS.get(status, "")
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = json_data
    return resp


def player_json(tracks):
    return {"captions": {"playerCaptionsTracklistRenderer": {"captionTracks": tracks}}}


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def watch_page():
    return f'<html><script>var ytcfg = {{"INNERTUBE_API_KEY":"{API_KEY}"}};</script></html>'
