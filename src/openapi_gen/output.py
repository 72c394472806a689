"""Rendering, persistence and run statistics for generated documents."""

import json
from collections import Counter
from pathlib import Path

import yaml

from openapi_gen.errors import OutputWriteError
from openapi_gen.models import EnrichedRoute

NEXT_STEPS = (
    "Review {output}",
    "Configure Mintlify to use this spec",
    "Run: npx mintlify dev (to preview docs locally)",
)


class _NoAliasDumper(yaml.SafeDumper):
    """Safe dumper that writes repeated sub-schemas out in full."""

    def ignore_aliases(self, data):
        return True


def detect_output_format(file_path: Path) -> str:
    """Return 'yaml' for .yaml/.yml paths, otherwise 'json'."""
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def render_document(doc: dict, fmt: str = "json") -> str:
    """Serialise a document, preserving key insertion order."""
    if fmt == "yaml":
        return yaml.dump(
            doc,
            Dumper=_NoAliasDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=120,
        )
    return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"


def write_document(doc: dict, file_path: Path, fmt: str = "json") -> None:
    """Write the rendered document, creating parent directories as needed."""
    content = render_document(doc, fmt)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {file_path}: {e}") from e


def tag_counts(routes: list[EnrichedRoute]) -> list[tuple[str, int]]:
    """Endpoint count per tag, largest first; ties keep first-seen order."""
    return Counter(r.tag for r in routes).most_common()


def format_statistics(routes: list[EnrichedRoute], doc: dict, output: Path, top: int = 10) -> str:
    """Build the human-readable summary printed after a run."""
    lines = [
        "Statistics:",
        f"  Total endpoints: {len(routes)}",
        f"  Categories: {len(doc['tags'])}",
    ]
    counts = tag_counts(routes)[:top]
    if counts:
        lines.append("  Top categories:")
        lines.extend(f"    - {tag}: {count} endpoints" for tag, count in counts)

    lines.append("")
    lines.append("Next steps:")
    lines.extend(
        f"  {i}. {step.format(output=output)}" for i, step in enumerate(NEXT_STEPS, start=1)
    )
    return "\n".join(lines)
