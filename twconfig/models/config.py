from dataclasses import dataclass
from pathlib import Path

@dataclass
class ToolSettings:
    """Runtime settings for the twconfig tool itself."""
    descriptor_path: Path
    base_dir: Path
    output_dir: Path
    log_level: str = "INFO"
    export_formats: list[str] = None

    def __post_init__(self):
        self.descriptor_path = Path(self.descriptor_path)
        self.base_dir = Path(self.base_dir).resolve()
        self.output_dir = Path(self.output_dir).resolve()
        self.log_level = self.log_level.upper()
        if self.export_formats is None:
            self.export_formats = ["js", "json"]
