"""
Shared test fixtures and sample documents for gray-matter tests.

Sample documents are module-level constants so they can be reused
across unit and integration tests; fixtures build fresh parsers so no
test sees fence changes made by another.
"""

import pytest

from gray_matter import Matter

# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------
YAML_POST = """\
---
title: Hello, world
tags:
  - intro
  - meta
draft: false
# editor: vim
---
First paragraph.

<!-- more -->

Rest of the post.
"""

TOML_POST = """\
+++
title = "Hello, world"
weight = 3
ratio = 0.25
+++
Body text.
"""

JSON_POST = """\
---
{"title": "Hello, world", "weight": 3}
---
Body text.
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def yaml_matter() -> Matter:
    return Matter("yaml")


@pytest.fixture
def toml_matter() -> Matter:
    return Matter("toml")


@pytest.fixture
def json_matter() -> Matter:
    return Matter("json")


@pytest.fixture
def sample_posts() -> dict[str, str]:
    return {"yaml": YAML_POST, "toml": TOML_POST, "json": JSON_POST}


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (whole documents, several engines)",
    )
