"""Unit test configuration.

Unit tests run without network access; the identity provider, navigator
and clock are replaced by the doubles in ``tests/fixtures/fakes.py``.
"""

import pytest


pytestmark = pytest.mark.unit
