"""Declaration file parser.

A declaration file holds many endpoint notations, either as plain text
(one per line, ``#`` starts a comment line) or as YAML (a list of
notations, or a mapping of name to notation).
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

from .base import Endpoint
from .detect import detect_format
from .endpoint import parse_endpoint
from .errors import DeclarationFileError, ParseError

logger = logging.getLogger(__name__)


class Declaration(BaseModel):
    """One notation read from a file, with where it came from."""

    source: str  # line number for text files, key or index for YAML
    notation: str


class DeclarationResult(BaseModel):
    """Outcome of parsing a single declaration."""

    declaration: Declaration
    endpoint: Endpoint | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_declarations(file_path: Path, fmt: str = "auto") -> list[Declaration]:
    """Read the notations in a declaration file without parsing them."""
    if fmt == "auto":
        fmt = detect_format(file_path)

    text = file_path.read_text(encoding="utf-8")
    if fmt == "yaml":
        return _load_yaml(text)
    return _load_text(text)


def parse_declarations(file_path: Path, fmt: str = "auto") -> list[DeclarationResult]:
    """Parse every declaration in a file.

    A failing declaration is reported on its own result and does not
    stop the remaining ones.
    """
    results = []
    for declaration in load_declarations(file_path, fmt):
        try:
            endpoint = parse_endpoint(declaration.notation)
        except ParseError as e:
            logger.warning("Declaration %s in %s failed: %s", declaration.source, file_path, e)
            results.append(DeclarationResult(declaration=declaration, error=str(e)))
            continue
        results.append(DeclarationResult(declaration=declaration, endpoint=endpoint))
    return results


def _load_text(text: str) -> list[Declaration]:
    declarations = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        declarations.append(Declaration(source=str(lineno), notation=stripped))
    return declarations


def _load_yaml(text: str) -> list[Declaration]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeclarationFileError(f"Invalid YAML: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        items = [(str(key), value) for key, value in data.items()]
    elif isinstance(data, list):
        items = [(str(index), value) for index, value in enumerate(data)]
    else:
        raise DeclarationFileError(f"Expected a YAML list or mapping of notations, got {type(data).__name__}")

    for source, value in items:
        if not isinstance(value, str):
            raise DeclarationFileError(f"Declaration {source} is not a string: {value!r}")
    return [Declaration(source=source, notation=value.strip()) for source, value in items]
