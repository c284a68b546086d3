# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from markup_cleaner.api import app
from markup_cleaner.dom import parse, serialize
from markup_cleaner.pipeline import NormalizationPipeline


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def pipeline() -> NormalizationPipeline:
    """Fresh pipeline instance."""
    return NormalizationPipeline()


@pytest.fixture
def run_step():
    """Parse markup, apply one step function and serialize the result."""

    def _run(step, markup: str, with_soup: bool = True) -> str:
        soup, root = parse(markup)
        if with_soup:
            step(soup, root)
        else:
            step(root)
        return serialize(root)

    return _run


@pytest.fixture
def google_docs_html() -> str:
    """Markup as pasted from a Google Docs document."""
    return """
    <meta charset="utf-8">
    <b style="font-weight:normal;" id="docs-internal-guid-1a2b3c">
      <p dir="ltr" style="line-height:1.38;margin-top:0pt"><span style="font-size:11pt;font-weight:700">H1: Opening Hours</span></p>
      <p dir="ltr" style="line-height:1.38"><span style="font-size:11pt;font-weight:400">Call 0412 345 678 or email info@example.com.au</span></p>
      <!-- docs comment -->
      <ul style="margin-top:0;margin-bottom:0">
        <li dir="ltr" style="list-style-type:disc" aria-level="1"><p dir="ltr" role="presentation"><span style="font-weight:400">Monday: 9am to 5pm</span></p></li>
        <li dir="ltr" aria-level="1"><p dir="ltr" role="presentation"><span style="font-style:italic">Closed on public holidays</span></p></li>
      </ul>
      <p dir="ltr"><span style="font-size:11pt"></span></p>
      <br>
    </b>
    """
