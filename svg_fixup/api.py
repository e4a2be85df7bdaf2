"""High-level API for fixing SVG strings and files.

Example:
    >>> from svg_fixup import SVGFixer
    >>> fixer = SVGFixer(verify=True)
    >>> result = fixer.fix_file("export.svg", "export_fixed.svg")
    >>> result.applied
    ['svg-prefixes', 'scripts']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from svg_fixup.config import Config
from svg_fixup.exceptions import FixupIOError, SVGFixupError, SVGParseError, UnknownPassError
from svg_fixup.fixup import PASS_NAMES, FixupPass, fixup_with_passes, get_passes
from svg_fixup.svg.parser import parse_svg_string

logger = logging.getLogger(__name__)


@dataclass
class FixupResult:
    """Outcome of fixing one document."""

    success: bool
    output: str | None = None
    input_path: Path | None = None
    output_path: Path | None = None
    applied: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applied)


class SVGFixer:
    """Run the fixup pipeline over strings and files.

    Args:
        passes: Names of passes to run, in any order. Defaults to the
            passes enabled by ``config``.
        verify: Parse the fixed document and fail if it is not well-formed.
        log_level: Level for the ``svg_fixup`` logger.
        config: Settings; loaded from the default location when omitted.
    """

    def __init__(
        self,
        passes: list[str] | None = None,
        verify: bool | None = None,
        log_level: str | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config if config is not None else Config.load()
        self.verify = self.config.verify if verify is None else verify

        names = self.config.enabled_passes if passes is None else passes
        try:
            self.passes: list[FixupPass] = get_passes(names)
        except KeyError as e:
            raise UnknownPassError(sorted(set(names).difference(PASS_NAMES))) from e

        logging.getLogger("svg_fixup").setLevel(log_level or self.config.log_level)

    def fix_string(self, svg_string: str) -> FixupResult:
        """Fix a document held in memory.

        Raises:
            SVGParseError: If verification is on and the output does not parse.
        """
        fixed, applied = fixup_with_passes(svg_string, self.passes)
        for name in applied:
            logger.debug("Pass %s changed the document", name)

        result = FixupResult(success=True, output=fixed, applied=applied)
        if self.verify:
            try:
                parse_svg_string(fixed)
            except SVGParseError as e:
                logger.warning("Fixed document does not parse: %s", e)
                raise
        return result

    def fix_file(
        self,
        input_path: Path | str,
        output_path: Path | str | None = None,
    ) -> FixupResult:
        """Fix an SVG file, writing to ``output_path`` (in place if omitted).

        Errors are reported in the result instead of raised.
        """
        input_path = Path(input_path)
        output_path = Path(output_path) if output_path is not None else input_path

        try:
            svg_string = self._read(input_path)
            result = self.fix_string(svg_string)
            if result.changed or output_path != input_path:
                self._write(output_path, result.output or "")
        except SVGFixupError as e:
            logger.warning("Failed to fix %s: %s", input_path, e)
            return FixupResult(
                success=False,
                input_path=input_path,
                output_path=output_path,
                errors=[str(e)],
            )

        result.input_path = input_path
        result.output_path = output_path
        if not result.changed:
            result.warnings.append("No fixes applied")
        logger.info("Fixed %s -> %s (%s)", input_path, output_path, ", ".join(result.applied) or "unchanged")
        return result

    @staticmethod
    def _read(path: Path) -> str:
        try:
            # newline="" keeps CRLF line endings untouched
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FixupIOError(path, details={"error": str(e)}) from e

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise FixupIOError(path, details={"error": str(e)}) from e
