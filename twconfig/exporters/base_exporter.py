from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Optional
import aiofiles
from ..models.inspection import InspectionResult
from ..utils.exceptions import ExportError

class BaseExporter(ABC):
    """Abstract base class for inspection result exporters."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_file: Optional[Path] = None

    @abstractmethod
    async def export(self, result: InspectionResult) -> None:
        """Render the inspection result and write it to the output directory."""
        pass

    @abstractmethod
    async def get_summary(self, result: InspectionResult) -> Any:
        """Get a summary of what was exported."""
        pass

    def _render(self, render: Callable[[InspectionResult], str], result: InspectionResult) -> str:
        try:
            return render(result)
        except (TypeError, ValueError) as e:
            raise ExportError(f"Failed to render {self.__class__.__name__} output: {str(e)}")

    async def _write(self, filename: str, content: str) -> Path:
        output_file = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(output_file, mode='w', encoding='utf-8') as f:
                await f.write(content)
        except OSError as e:
            raise ExportError(f"Failed to write {output_file}: {str(e)}")
        self.output_file = output_file
        return output_file
