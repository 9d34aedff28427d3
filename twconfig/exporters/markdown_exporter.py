import json
from datetime import datetime
from typing import List
from .base_exporter import BaseExporter
from ..models.descriptor import thaw
from ..models.inspection import InspectionResult

class MarkdownExporter(BaseExporter):
    """Generate markdown format inspection reports."""

    async def export(self, result: InspectionResult) -> None:
        filename = f"twconfig_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.md"
        output_file = await self._write(filename, self._render(self.render, result))
        result.exported_files.append(output_file)

    async def get_summary(self, result: InspectionResult) -> str:
        return (
            f"{len(result.content.files)} content file(s), "
            f"{len(result.warnings)} warning(s)"
        )

    def render(self, result: InspectionResult) -> str:
        descriptor = result.descriptor
        lines: List[str] = ["# Descriptor Inspection Report", ""]
        lines.append(f"- **Source:** `{descriptor.source or 'in-memory'}`")
        lines.append(f"- **Content base directory:** `{result.content.base_dir}`")
        lines.append(f"- **Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("")

        lines.extend(["## Content", ""])
        if descriptor.content_globs:
            lines.extend(["| Glob | Matched files |", "|---|---|"])
            for pattern in descriptor.content_globs:
                count = result.content.matches_per_glob.get(pattern)
                lines.append(f"| `{pattern}` | {'excluded' if count is None else count} |")
        else:
            lines.append("_No content globs declared._")
        lines.append("")

        lines.extend(["## Theme Extensions", ""])
        if descriptor.theme_extensions:
            lines.append("```json")
            lines.append(json.dumps(thaw(descriptor.theme_extensions), indent=2, default=str))
            lines.append("```")
        else:
            lines.append("_Default theme, no extensions._")
        lines.append("")

        lines.extend(["## Plugins", ""])
        if result.plugins:
            lines.extend(["| # | Handle | Package |", "|---|---|---|"])
            for index, (handle, plugin) in enumerate(zip(descriptor.plugins, result.plugins), start=1):
                lines.append(f"| {index} | `{handle.name}` | `{plugin.package}` |")
        else:
            lines.append("_No plugins._")
        lines.append("")

        lines.extend(["## Diagnostics", ""])
        if result.diagnostics:
            for diagnostic in result.diagnostics:
                lines.append(f"- **{diagnostic.level}** `{diagnostic.field}`: {diagnostic.message}")
        else:
            lines.append("No issues found.")
        lines.append("")

        lines.extend(["## Files", ""])
        for relative in result.content.relative_files():
            lines.append(f"- `{relative}`")
        if not result.content.files:
            lines.append("_No files matched._")

        return "\n".join(lines) + "\n"
