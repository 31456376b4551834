"""Loading of packaged YAML templates with an optional directory override."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml


class TemplateError(ValueError):
    """Raised when a template file is missing or malformed."""


def load_yaml(templates_path: Path | None, resource_name: str) -> dict[str, Any]:
    """
    Load a YAML mapping from `templates_path` or from the packaged templates.

    Args:
        templates_path: Directory overriding the packaged templates, or None
        resource_name: File name inside the templates directory

    Returns:
        Parsed mapping

    Raises:
        TemplateError: If the file does not exist, is not valid YAML, or is
            not a YAML mapping
    """
    try:
        if templates_path:
            file_path = templates_path / resource_name
            if not file_path.exists():
                raise TemplateError(f"Template not found: {file_path}")
            with file_path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        else:
            resource = resources.files("currygen.templates").joinpath(resource_name)
            with resource.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise TemplateError(f"Packaged template not found: {resource_name}") from exc
    except yaml.YAMLError as exc:
        raise TemplateError(f"Template {resource_name} is not valid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TemplateError(f"Template {resource_name} must contain a mapping")
    return data


def as_path(templates_path: str | Path | None) -> Path | None:
    return Path(templates_path) if templates_path else None
