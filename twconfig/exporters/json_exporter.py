import json
from typing import Dict
from datetime import datetime
from .base_exporter import BaseExporter
from ..models.inspection import InspectionResult

class JSONExporter(BaseExporter):
    """JSON implementation of the inspection exporter."""

    async def export(self, result: InspectionResult) -> None:
        """Write the normalized descriptor, resolved content and diagnostics as JSON."""
        report_data = {
            "generated_at": datetime.now().isoformat(),
            **result.to_dict(),
            "summary": await self.get_summary(result)
        }
        filename = f"twconfig_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        output_file = await self._write(filename, json.dumps(report_data, indent=2, default=str))
        result.exported_files.append(output_file)

    async def get_summary(self, result: InspectionResult) -> Dict:
        level_counts: Dict[str, int] = {}
        for diagnostic in result.diagnostics:
            level_counts[diagnostic.level] = level_counts.get(diagnostic.level, 0) + 1

        return {
            "content_globs": len(result.descriptor.content_globs),
            "content_files": len(result.content.files),
            "plugins": len(result.plugins),
            "diagnostics": level_counts
        }
