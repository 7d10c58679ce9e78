"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root and tests dir (for the fixtures package) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from wikimark.core import Transliterator
from wikimark.rendering import PresentationBridge
from fixtures import WIKI_DOCUMENT, MARKDOWN_DOCUMENT


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "known_limitation: documents lossy or surprising output kept on purpose")


# ============================================================================
# Renderer Fixtures
# ============================================================================


class RecordingRenderer:
    """Stand-in renderer that remembers what it was asked to render."""

    def __init__(self):
        self.calls = []

    def __call__(self, text):
        self.calls.append(text)
        return f"<rendered>{text}</rendered>"


@pytest.fixture
def recording_renderer():
    """Create a renderer that records its inputs."""
    return RecordingRenderer()


@pytest.fixture
def recording_bridge(recording_renderer):
    """Create a presentation bridge around the recording renderer."""
    return PresentationBridge(renderer=recording_renderer)


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    """Directory the engine writes into."""
    return tmp_path / "out"


@pytest.fixture
def engine(output_dir):
    """Create a conversion engine writing into a temporary directory."""
    return Transliterator(output_dir=str(output_dir))


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def wiki_file(tmp_path):
    """Create a temporary Wiki markup file."""
    file_path = tmp_path / "ticket.jira"
    file_path.write_text(WIKI_DOCUMENT, encoding="utf-8")
    return file_path


@pytest.fixture
def markdown_file(tmp_path):
    """Create a temporary Markdown file."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(MARKDOWN_DOCUMENT, encoding="utf-8")
    return file_path


@pytest.fixture
def docs_dir(tmp_path):
    """Create a directory with one file of each markup plus an unsupported one."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "ticket.jira").write_text(WIKI_DOCUMENT, encoding="utf-8")
    (docs / "notes.md").write_text(MARKDOWN_DOCUMENT, encoding="utf-8")
    (docs / "ignored.txt").write_text("not converted", encoding="utf-8")
    return docs
