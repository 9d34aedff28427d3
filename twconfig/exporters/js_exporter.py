"""Exporter that writes the descriptor as a ``tailwind.config.js`` module."""
import json
from typing import Any, List
from .base_exporter import BaseExporter
from ..models.descriptor import thaw
from ..models.inspection import InspectionResult

INDENT = "  "

class JSExporter(BaseExporter):
    """Write the CommonJS config module read by the CSS generation engine."""

    FILENAME = "tailwind.config.js"

    async def export(self, result: InspectionResult) -> None:
        output_file = await self._write(self.FILENAME, self._render(self.render, result))
        result.exported_files.append(output_file)

    async def get_summary(self, result: InspectionResult) -> str:
        if not self.output_file:
            return "No config module generated"
        return f"Config module with {len(result.plugins)} plugin(s) saved to {self.output_file}"

    def render(self, result: InspectionResult) -> str:
        descriptor = result.descriptor
        lines = [
            "/** @type {import('tailwindcss').Config} */",
            "module.exports = {",
        ]
        lines.extend(self._render_list("content", [json.dumps(g) for g in descriptor.content_globs]))
        lines.append(f"{INDENT}theme: {{")
        extend = self._render_value(thaw(descriptor.theme_extensions), depth=2)
        lines.append(f"{INDENT * 2}extend: {extend},")
        lines.append(f"{INDENT}}},")
        lines.extend(self._render_list("plugins", [
            plugin.require_expression(handle.options)
            for handle, plugin in zip(descriptor.plugins, result.plugins)
        ]))
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _render_list(key: str, items: List[str]) -> List[str]:
        if not items:
            return [f"{INDENT}{key}: [],"]
        return [f"{INDENT}{key}: ["] + [f"{INDENT * 2}{item}," for item in items] + [f"{INDENT}],"]

    @staticmethod
    def _render_value(value: Any, depth: int) -> str:
        if isinstance(value, dict) and not value:
            return "{}"
        rendered = json.dumps(value, indent=len(INDENT), ensure_ascii=False)
        # JSON is a valid JS expression; shift nested lines to the property's depth
        return rendered.replace("\n", "\n" + INDENT * depth)
