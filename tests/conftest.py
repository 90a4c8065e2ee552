from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

import pytest

from resx_to_json.models import INVARIANT_CULTURE, Culture, ResourceBundle

RESX_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
"""


def render_resx(values: dict[str, str]) -> str:
    lines = [RESX_HEADER]
    for name, value in values.items():
        lines.append(
            f"  <data name={quoteattr(name)} xml:space=\"preserve\">\n"
            f"    <value>{escape(value)}</value>\n"
            "  </data>\n"
        )
    lines.append("</root>\n")
    return "".join(lines)


@pytest.fixture
def write_resx():
    """Write a .resx file containing ``values`` and return its path."""

    def _write(path: Path, values: dict[str, str]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_resx(values), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def messages_bundle():
    """Bundle with an invariant and a French culture"""
    bundle = ResourceBundle(base_name="Messages")
    bundle.add_values(INVARIANT_CULTURE, {"Hello": "Hi", "Bye": "Goodbye"})
    bundle.add_values(Culture.parse("fr"), {"Hello": "Salut"})
    return bundle
