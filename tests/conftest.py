import io

import pytest
from django.core.management import call_command


@pytest.fixture
def run_command():
    def _run(*args, **kwargs):
        out = io.StringIO()
        call_command(*args, stdout=out, **kwargs)
        return out.getvalue()
    return _run
