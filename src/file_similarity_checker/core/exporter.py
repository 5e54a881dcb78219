"""Rendering of similarity results as text, JSON or CSV."""

import csv
import io
import json

from .auto_selector import recommend
from .models import ApplicationConfig, SimilarityResult

OUTPUT_FORMATS = ("text", "json", "csv")


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KB", "MB"):
        if value < 1024:
            return f"{value:.2f} {unit}"
        value /= 1024
    return f"{value:.2f} GB"


def summarize(result: SimilarityResult, config: ApplicationConfig | None = None) -> dict:
    """Summary counters shared by the text and JSON formats."""
    config = config or ApplicationConfig()
    return {
        "total_files": result.total_file_count,
        "groups_found": len(result.groups),
        "grouped_files": result.grouped_file_count,
        "ungrouped_files": len(result.ungrouped_files),
        "potential_space_savings": result.potential_space_savings,
        "content_threshold": config.content_threshold,
        "name_threshold": config.name_threshold,
    }


def format_text(
    result: SimilarityResult,
    show_ungrouped: bool = False,
    config: ApplicationConfig | None = None,
) -> str:
    """Human-readable report with a recommendation per group."""
    lines = []

    if not result.groups:
        lines.append("No similar file groups found.")
    for group in result.groups:
        lines.append(
            f"Group {group.id} [{group.similarity_type.value}] "
            f"(similarity: {group.similarity_score:.0%}):"
        )
        for file in group.files:
            lines.append(f"  - {file.path} ({_format_size(file.size)})")
        keep = recommend(group)
        if keep:
            lines.append(f"  Recommended to keep: {keep.name}")
        lines.append("")

    if show_ungrouped and result.ungrouped_files:
        lines.append("Ungrouped files:")
        for file in result.ungrouped_files:
            lines.append(f"  - {file.path}")
        lines.append("")

    summary = summarize(result, config)
    lines.append("Summary:")
    lines.append(f"  Total files: {summary['total_files']}")
    lines.append(f"  Groups found: {summary['groups_found']}")
    lines.append(f"  Ungrouped files: {summary['ungrouped_files']}")
    lines.append(f"  Potential space savings: {_format_size(summary['potential_space_savings'])}")
    lines.append(
        f"  Threshold used: content > {summary['content_threshold']:.0%}, "
        f"name > {summary['name_threshold']:.0%}"
    )
    return "\n".join(lines) + "\n"


def format_json(
    result: SimilarityResult,
    show_ungrouped: bool = False,
    config: ApplicationConfig | None = None,
) -> str:
    """JSON document with groups, optional ungrouped files and a summary."""
    exclude = None if show_ungrouped else {"ungrouped_files"}
    output = result.model_dump(mode="json", exclude=exclude)
    output["summary"] = summarize(result, config)
    return json.dumps(output, indent=2) + "\n"


def format_csv(result: SimilarityResult, show_ungrouped: bool = False) -> str:
    """One row per file: group columns are empty for ungrouped files."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["group_id", "file_path", "similarity_type", "similarity", "status"])

    for group in result.groups:
        for file in group.files:
            writer.writerow(
                [
                    group.id,
                    file.path,
                    group.similarity_type.value,
                    f"{group.similarity_score:.2f}",
                    "grouped",
                ]
            )

    if show_ungrouped:
        for file in result.ungrouped_files:
            writer.writerow(["", file.path, "", "", "ungrouped"])

    return buffer.getvalue()


def format_result(
    result: SimilarityResult,
    output_format: str,
    show_ungrouped: bool = False,
    config: ApplicationConfig | None = None,
) -> str:
    """
    Render a result in the requested format.

    Args:
        result: Grouping result to render
        output_format: One of "text", "json" or "csv"
        show_ungrouped: Include files that matched nothing
        config: Thresholds reported in the summary, defaults to ApplicationConfig()

    Returns:
        The rendered document

    Raises:
        ValueError: If the format is unknown
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")
    if output_format == "csv":
        return format_csv(result, show_ungrouped)
    if output_format == "json":
        return format_json(result, show_ungrouped, config)
    return format_text(result, show_ungrouped, config)
