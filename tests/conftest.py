from unittest.mock import MagicMock
from unittest.mock import patch

import pytest


def make_response(status_code=200, body=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def mock_post():
    with patch("v4hooks.fetcher.requests.post") as post:
        yield post


@pytest.fixture
def pools_response():
    def build(hooks):
        return make_response(body={"data": {"pools": [{"hooks": h} for h in hooks]}})
    return build
