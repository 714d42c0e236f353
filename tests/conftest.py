"""Pytest configuration and shared fixtures for the orgwriter test suite."""

import logging
import os
from typing import Generator

import pytest

from orgwriter.ast import Document, FootnoteDefinition, FootnoteTable, Headline, Paragraph, Text

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_document() -> Document:
    """Small document with a tagged headline, body text and one footnote."""
    return Document(
        children=[
            Headline(
                level=1,
                status="TODO",
                priority="A",
                title=[Text(content="Plan")],
                tags=["work"],
                children=[Paragraph(children=[Text(content="Body")])],
            )
        ],
        footnotes=FootnoteTable(
            definitions=[FootnoteDefinition(name="1", children=[Paragraph(children=[Text(content="Note")])])]
        ),
    )


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Restore root logger level and handlers after a test reconfigures them."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    try:
        yield root
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)
