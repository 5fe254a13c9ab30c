# tests/conftest.py
"""
Common test fixtures for Emilio CLI.
"""
import pytest
from loguru import logger

from emilio.config import AppConfig, config_manager
from emilio.core.registry import registry
from emilio.components.generation.models import CodeFile, StructuredDocument
from emilio.components.generation.parser import parse_response

# Keep test output free of log lines
logger.remove()


SCENARIO_A = (
    "### 4.1. Header Block\nHi\n"
    "### 4.2. Project Structure\nTree\n"
    "### 4.3. Code Files\n```html:index.html\n<h1>Hi</h1>\n```\n"
    "### 4.4. Notes\nDone"
)

FULL_RESPONSE = """Here is your project.

### 4.1. Header Block
**Landing Page** built with HTML + CSS + JS.

### 4.2. Project Structure
```
.
├── index.html
├── style.css
└── app.js
```

### 4.3. Code Files (Full & Unabridged)

```html:index.html
<!DOCTYPE html>
<html>
<head>
  <link rel="stylesheet" href="./style.css">
</head>
<body>
  <h1>Hello</h1>
  <script src="/app.js"></script>
  <script src="missing.js"></script>
</body>
</html>
```

```css:style.css
body { color: #333; }
```

```javascript:app.js
console.log("ready");
```

### 4.4. Notes
Open index.html in a browser.
"""

NO_CODE_RESPONSE = (
    "### 4.1. Header Block\nNothing\n"
    "### 4.3. Code Files\nSorry, no code today.\n"
    "### 4.4. Notes\nNone"
)


@pytest.fixture(autouse=True)
def clean_registry():
    """Give every test a fresh service registry."""
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def scenario_a_text():
    return SCENARIO_A


@pytest.fixture
def full_response():
    return FULL_RESPONSE


@pytest.fixture
def no_code_response():
    return NO_CODE_RESPONSE


@pytest.fixture
def document(full_response):
    """The parsed three-file project."""
    return parse_response(full_response)


@pytest.fixture
def headless_document():
    """A project without an entry file."""
    return StructuredDocument(
        header="Widget",
        files=[
            CodeFile(name="main.dart", lang="dart", content="void main() {}"),
            CodeFile(name="pubspec.yaml", lang="yaml", content="name: widget"),
        ],
    )


@pytest.fixture
def response_file(tmp_path, full_response):
    """A saved response on disk."""
    path = tmp_path / "response.md"
    path.write_text(full_response, encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the global config manager at a throwaway file."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setattr(config_manager, "config_file", tmp_path / "config" / "config.toml")
    monkeypatch.setattr(config_manager, "_config", AppConfig())
    return config_manager
