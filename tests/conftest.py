from __future__ import annotations

import json

import pytest

from builders import FIXTURES, build_document, outlet
from codebehind.models import GenericNode, IBDocument


@pytest.fixture
def label_document() -> IBDocument:
    """One custom label with an outlet pointing at itself."""
    label = GenericNode(id=5, class_tag="IBUILabel")
    return build_document(
        nodes=[label],
        custom_classes={5: "MyLabel"},
        approved=["MyLabel"],
        connections=[outlet(1, "titleLabel", label, label)],
    )


@pytest.fixture
def fixture_json() -> dict:
    with (FIXTURES / "main_window.json").open(encoding="utf-8") as fh:
        return json.load(fh)
