import codecs
import logging
from pathlib import Path
from typing import Set
import aiofiles
import chardet
from ..models.content import ContentResolution
from ..models.descriptor import ConfigurationDescriptor
from ..utils.exceptions import FileAccessError
from ..utils.globbing import glob_paths, split_negated

class ContentService:
    """Resolves descriptor content globs to the template files the engine will scan."""

    SNIFF_BYTES = 1024
    MIN_ENCODING_CONFIDENCE = 0.5

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir).resolve()
        self.logger = logging.getLogger("twconfig.content_service")

    async def resolve(self, descriptor: ConfigurationDescriptor) -> ContentResolution:
        """
        Expand every content glob against the base directory.

        Raises:
            FileAccessError: If the base directory is missing or cannot be scanned
        """
        if not self.base_dir.is_dir():
            raise FileAccessError(f"Content base directory does not exist or is not a directory: {self.base_dir}")

        resolution = ContentResolution(base_dir=self.base_dir)
        includes, excludes = split_negated(descriptor.content_globs)

        try:
            excluded: Set[Path] = set()
            for pattern in excludes:
                excluded.update(glob_paths(self.base_dir, pattern))

            candidates: Set[Path] = set()
            for pattern in includes:
                matches = [
                    path for path in glob_paths(self.base_dir, pattern)
                    if path.is_file() and path not in excluded
                ]
                resolution.matches_per_glob[pattern] = len(matches)
                if not matches:
                    self.logger.warning(f"Content glob matched no files: {pattern}")
                    resolution.unmatched_globs.append(pattern)
                candidates.update(matches)
        except OSError as e:
            self.logger.error(f"Error scanning content directory: {str(e)}")
            raise FileAccessError(f"Failed to scan content directory: {str(e)}")

        for path in sorted(candidates):
            if await self._is_text_file(path):
                resolution.files.append(path)
            else:
                resolution.skipped_files.append(path)

        self.logger.info(
            f"Content resolution complete. Files: {len(resolution.files)}, "
            f"Skipped: {len(resolution.skipped_files)}, Unmatched globs: {len(resolution.unmatched_globs)}"
        )
        return resolution

    async def _is_text_file(self, path: Path) -> bool:
        """Check the head of a file to decide whether the engine can scan it as text."""
        try:
            async with aiofiles.open(path, mode='rb') as f:
                sample = await f.read(self.SNIFF_BYTES)
        except OSError as e:
            self.logger.error(f"Error reading file {path}: {str(e)}")
            return False

        if not sample:
            return True
        if b"\x00" in sample:
            self.logger.debug(f"Skipping binary file: {path}")
            return False

        try:
            # Incremental decoding tolerates a multibyte sequence cut at the sample boundary
            codecs.getincrementaldecoder("utf-8")().decode(sample, final=False)
            return True
        except UnicodeDecodeError:
            pass

        detected = chardet.detect(sample)
        encoding = detected.get("encoding")
        confidence = detected.get("confidence") or 0.0
        if encoding and confidence >= self.MIN_ENCODING_CONFIDENCE:
            self.logger.debug(f"Detected {encoding} encoding for {path} (confidence {confidence:.2f})")
            return True

        self.logger.debug(f"Skipping undecodable file: {path}")
        return False
