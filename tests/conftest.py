# tests/conftest.py
"""
Shared fixtures.

Every test runs against an isolated workspace (tmp_path/.folio) so a
developer's own .folio/config.yaml never leaks into results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from folio.core.paths import FolioPaths
from folio.logging.logger import reset_logging

CYBERSECURITY_101 = """\
---
title: "Cybersecurity 101"
description: "A primer on the fundamentals of keeping systems safe."
author: "editorial"
publishDate: 2024-05-01
categories:
  - Guides
  - Cybersecurity
tags:
  - Cybersecurity
  - Security Fundamentals
heroImage: /images/cybersecurity-101.png
flags:
  toc: true
---

# Cybersecurity 101

Security starts with understanding **what** you are protecting.

```python
def authenticate(user):
    ...
```
"""

PYTHON_PROJECTS = """\
---
title: Python Project Ideas
author: editorial
publishDate: 2024-06-12T09:30:00Z
categories: [Guides, Python]
tags: [Python, Projects, Beginners]
draft: false
---
## Ideas

- Task manager CLI
- Web scraper
"""


@pytest.fixture(autouse=True)
def isolated_workspace(tmp_path: Path):
    FolioPaths.set_workspace(tmp_path / ".folio")
    yield tmp_path / ".folio"
    FolioPaths.reset()
    reset_logging()


@pytest.fixture
def cybersecurity_text() -> str:
    return CYBERSECURITY_101


@pytest.fixture
def python_projects_text() -> str:
    return PYTHON_PROJECTS


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[..., Path]:
    """Write a document under tmp_path/content and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / "content" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_dir(write_doc, cybersecurity_text, python_projects_text) -> Path:
    """A content directory holding the two sample articles."""
    first = write_doc("cybersecurity-101.md", cybersecurity_text)
    write_doc("guides/python-project-ideas.md", python_projects_text)
    return first.parent
