from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

@dataclass
class ContentResolution:
    """Files discovered by expanding a descriptor's content globs."""
    base_dir: Path
    files: List[Path] = field(default_factory=list)
    matches_per_glob: Dict[str, int] = field(default_factory=dict)
    unmatched_globs: List[str] = field(default_factory=list)
    skipped_files: List[Path] = field(default_factory=list)

    def relative_files(self) -> List[str]:
        relative = []
        for path in self.files:
            try:
                relative.append(str(path.relative_to(self.base_dir)))
            except ValueError:
                relative.append(str(path))
        return relative
