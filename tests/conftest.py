from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared settings fixtures mirroring typical project configuration.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def components_settings() -> Dict[str, Any]:
    """
    Project settings that alias custom components to native tags.

    Returns:
        Dict[str, Any]: Settings nested under the 'jsx-a11y' namespace.
    """
    return {
        "jsx-a11y": {
            "components": {
                "CustomInput": "input",
                "CustomLabel": "label",
                "Title": "h1",
                "Heading": "h2",
                "Image": "img",
            },
        },
    }


@pytest.fixture
def attributes_settings() -> Dict[str, Any]:
    """Project settings that accept both 'htmlFor' and 'for' as label pointers."""
    return {
        "jsx-a11y": {
            "attributes": {
                "for": ["htmlFor", "for"],
            },
        },
    }
