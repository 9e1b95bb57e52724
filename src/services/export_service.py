"""Render the prompt collection as a downloadable JSON, YAML or Markdown file."""
import json
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import yaml

from models.app_settings import AppSettings, ExportFormat
from models.category import Category
from models.prompt import Prompt
from schemas.app_settings import SettingsResponse
from schemas.category import CategoryResponse
from schemas.prompt import PromptResponse

EXPORT_VERSION = "1.0"
EXPORT_BASENAME = "spellbook"

MEDIA_TYPES: dict[str, str] = {
    "json": "application/json",
    "yaml": "application/yaml",
    "markdown": "text/markdown",
}
EXTENSIONS: dict[str, str] = {"json": "json", "yaml": "yaml", "markdown": "md"}


@dataclass
class ExportFile:
    """A rendered export ready to be sent as an attachment."""

    filename: str
    media_type: str
    content: str


def build_export_data(
    prompts: list[Prompt],
    categories: list[Category],
    settings: AppSettings,
    exported_at: datetime,
) -> dict[str, Any]:
    """Build the JSON-compatible export document (camelCase keys, ISO timestamps)."""
    return {
        "prompts": [
            PromptResponse.model_validate(p).model_dump(mode="json", by_alias=True)
            for p in prompts
        ],
        "categories": [
            CategoryResponse.model_validate(c).model_dump(mode="json", by_alias=True)
            for c in categories
        ],
        "settings": SettingsResponse.model_validate(settings).model_dump(
            mode="json", by_alias=True,
        ),
        "exportedAt": exported_at.isoformat(),
        "version": EXPORT_VERSION,
    }


def _code_fence(content: str) -> str:
    """Backtick fence longer than any backtick run in the content (at least three)."""
    longest = max((len(run) for run in re.findall(r"`+", content)), default=0)
    return "`" * max(3, longest + 1)


def render_markdown(prompts: list[Prompt], categories: list[Category]) -> str:
    """Human-readable export: one section per prompt, then the category list."""
    lines = ["# Spellbook Export", "", f"## Prompts ({len(prompts)})", ""]
    for prompt in prompts:
        lines.append(f"### {prompt.title}")
        if prompt.description:
            lines.append(prompt.description)
        if prompt.tags:
            lines.append(f"Tags: {', '.join(prompt.tags)}")
        fence = _code_fence(prompt.content)
        lines.extend([fence, prompt.content, fence, ""])
    lines.extend(["## Categories", ""])
    for category in categories:
        lines.append(f"- **{category.name}**: {category.description or 'No description'}")
    return "\n".join(lines) + "\n"


def export_collection(
    prompts: list[Prompt],
    categories: list[Category],
    settings: AppSettings,
    export_format: ExportFormat,
    exported_at: datetime,
) -> ExportFile:
    """
    Render prompts, categories and settings in the requested format.

    Args:
        prompts: Prompts to export (archived included).
        categories: Categories to export.
        settings: Current settings singleton.
        export_format: "json", "yaml" or "markdown".
        exported_at: Timestamp recorded in the export.

    Returns:
        ExportFile with filename, media type and rendered content.
    """
    if export_format == "markdown":
        content = render_markdown(prompts, categories)
    else:
        data = build_export_data(prompts, categories, settings, exported_at)
        if export_format == "yaml":
            content = yaml.safe_dump(
                data,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )
        else:
            content = json.dumps(data, indent=2, ensure_ascii=False)

    return ExportFile(
        filename=f"{EXPORT_BASENAME}.{EXTENSIONS[export_format]}",
        media_type=MEDIA_TYPES[export_format],
        content=content,
    )
