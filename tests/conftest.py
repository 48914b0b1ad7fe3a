from collections.abc import Iterator

import pytest

from mathsmith.ui.cli import state


@pytest.fixture(autouse=True)
def _fresh_cli_state() -> Iterator[None]:
    token = state._STATE_VAR.set(None)
    yield
    state._STATE_VAR.reset(token)
