from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from .content import ContentResolution
from .descriptor import ConfigurationDescriptor
from .plugin import Plugin

@dataclass
class Diagnostic:
    """A non-fatal finding about a loaded descriptor."""
    level: str
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"level": self.level, "field": self.field, "message": self.message}

@dataclass
class InspectionResult:
    """Outcome of loading and inspecting a descriptor."""
    descriptor: ConfigurationDescriptor
    plugins: List[Plugin]
    content: ContentResolution
    diagnostics: List[Diagnostic] = field(default_factory=list)
    exported_files: List[Path] = field(default_factory=list)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == "WARNING"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "descriptor_source": str(self.descriptor.source) if self.descriptor.source else None,
            "descriptor": self.descriptor.to_dict(),
            "plugins": [
                {"handle": handle.name, "plugin": plugin.name, "package": plugin.package}
                for handle, plugin in zip(self.descriptor.plugins, self.plugins)
            ],
            "content": {
                "base_dir": str(self.content.base_dir),
                "files": self.content.relative_files(),
                "matches_per_glob": dict(self.content.matches_per_glob),
                "unmatched_globs": list(self.content.unmatched_globs),
                "skipped_files": [str(path) for path in self.content.skipped_files],
            },
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
