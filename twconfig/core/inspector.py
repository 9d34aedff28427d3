import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Union
from ..exporters import EXPORTERS
from ..models.config import ToolSettings
from ..models.content import ContentResolution
from ..models.descriptor import ConfigurationDescriptor
from ..models.inspection import Diagnostic, InspectionResult
from ..models.plugin import Plugin, PluginRegistry, default_registry
from ..services.content_service import ContentService
from ..utils.config_loader import DescriptorLoader

class Inspector:
    """Loads a descriptor, resolves its plugins and content, and runs the exporters."""

    def __init__(self, settings: ToolSettings, registry: Optional[PluginRegistry] = None):
        """
        Initialize the inspector.

        Args:
            settings: Tool settings (paths, export formats)
            registry: Plugin registry; the built-in plugins are used when omitted
        """
        self.settings = settings
        self.registry = registry or default_registry()
        self.content_service = ContentService(base_dir=settings.base_dir)
        self.exporters = [EXPORTERS[fmt](output_dir=settings.output_dir) for fmt in settings.export_formats]
        self.logger = logging.getLogger("twconfig.inspector")

    async def run(self, path: Optional[Union[str, Path]] = None) -> InspectionResult:
        """Inspect the descriptor at ``path`` (or the configured descriptor path)."""
        start_time = time.time()
        path = Path(path) if path is not None else self.settings.descriptor_path
        self.logger.info(f"Inspecting descriptor {path}")

        descriptor = DescriptorLoader.load(path, registry=self.registry)
        plugins = self.resolve_plugins(descriptor)
        content = await self.content_service.resolve(descriptor)

        result = InspectionResult(descriptor=descriptor, plugins=plugins, content=content)
        result.diagnostics = self.diagnose(descriptor, plugins, content)
        for diagnostic in result.diagnostics:
            self.logger.log(getattr(logging, diagnostic.level), f"{diagnostic.field}: {diagnostic.message}")

        export_start_time = time.time()
        for exporter in self.exporters:
            await exporter.export(result)
            summary = await exporter.get_summary(result)
            self.logger.info(f"Export generated using {exporter.__class__.__name__}. {summary}")
        export_time = time.time() - export_start_time

        total_time = time.time() - start_time
        self.logger.info(f"Export time: {export_time:.2f} seconds")
        self.logger.info(f"Total inspection time: {total_time:.2f} seconds")
        return result

    def resolve_plugins(self, descriptor: ConfigurationDescriptor) -> List[Plugin]:
        return [
            self.registry.resolve(handle.name, field=f"plugins[{index}]")
            for index, handle in enumerate(descriptor.plugins)
        ]

    @staticmethod
    def diagnose(
        descriptor: ConfigurationDescriptor,
        plugins: List[Plugin],
        content: ContentResolution
    ) -> List[Diagnostic]:
        """Collect non-fatal findings that point at a likely misconfiguration."""
        diagnostics = []

        if descriptor.is_degenerate:
            diagnostics.append(Diagnostic(
                "WARNING", "content",
                "No content globs declared; no class usage will be discovered and the stylesheet will be empty"
            ))

        for index, pattern in enumerate(descriptor.content_globs):
            if pattern in content.unmatched_globs:
                diagnostics.append(Diagnostic("WARNING", f"content[{index}]", f"Glob '{pattern}' matched no files"))

        if content.skipped_files:
            diagnostics.append(Diagnostic(
                "INFO", "content",
                f"{len(content.skipped_files)} matched file(s) are not text and will not be scanned"
            ))

        seen: Dict[str, int] = {}
        for index, plugin in enumerate(plugins):
            if plugin.name in seen:
                diagnostics.append(Diagnostic(
                    "WARNING", f"plugins[{index}]",
                    f"Plugin '{plugin.name}' is already loaded by plugins[{seen[plugin.name]}]"
                ))
            else:
                seen[plugin.name] = index

        return diagnostics
