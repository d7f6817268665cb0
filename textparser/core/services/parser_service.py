"""Parser service - public entry points for template based extraction."""

import logging
from typing import Optional

from ..matching.compiler import compile_template
from ..matching.extractor import DEFAULT_TIMEOUT, extract
from ..matching.normalizer import normalize
from ..models.extraction import ExtractionResult
from ..models.template import MatchMode, Template
from .template_repository import TemplateRepository

logger = logging.getLogger(__name__)


class TextParser:
    """Extracts placeholder values from text using templates."""

    def __init__(
        self,
        repository: TemplateRepository,
        mode: MatchMode = MatchMode.WHOLE_TEXT,
        strict: bool = False,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        """Initialize parser.

        Args:
            repository: Template repository.
            mode: Default matching mode.
            strict: Reject malformed placeholders instead of matching them
                literally.
            timeout: Seconds allowed per pattern search before a template
                counts as not matching.
        """
        self._repository = repository
        self._mode = mode
        self._strict = strict
        self._timeout = timeout

    def parse_text(
        self,
        text: str,
        template_content: str,
        mode: Optional[MatchMode] = None,
        source: str = "<string>",
    ) -> Optional[ExtractionResult]:
        """Parse text against template content.

        Args:
            text: Input text.
            template_content: Template text with ``{%Name%}`` placeholders.
            mode: Matching mode, defaults to the configured one.
            source: Template label for logs and the result.

        Returns:
            Extracted values, or None if the template did not match.
        """
        mode = mode or self._mode
        compiled = compile_template(
            template_content, mode, strict=self._strict, source=source
        )
        result = extract(
            normalize(text, mode), compiled, source=source, timeout=self._timeout
        )

        if result is not None:
            logger.info(f"Matched {source}: {len(result)} values")
        return result

    def parse_template(
        self, text: str, template: Template
    ) -> Optional[ExtractionResult]:
        """Parse text against a loaded template."""
        return self.parse_text(
            text, template.content, mode=template.mode, source=template.source
        )

    def parse_by_template(
        self, text: str, template_path: str, mode: Optional[MatchMode] = None
    ) -> Optional[ExtractionResult]:
        """Parse text against a template file.

        Raises:
            OSError: If the template cannot be read.
        """
        template = self._repository.load(template_path, mode or self._mode)
        return self.parse_template(text, template)

    def parse_by_templates_dir(
        self,
        text: str,
        templates_dir: str,
        find_matching_template: bool = True,
        mode: Optional[MatchMode] = None,
    ) -> Optional[ExtractionResult]:
        """Parse text with templates from a directory.

        With ``find_matching_template`` only the most similar template is
        tried and there is no fallback when it fails. Otherwise every template
        is tried in listing order and the first match wins.

        Args:
            text: Input text.
            templates_dir: Templates directory.
            find_matching_template: Try only the best ranked template.
            mode: Matching mode, defaults to the configured one.

        Returns:
            First successful extraction, or None.
        """
        mode = mode or self._mode

        if find_matching_template:
            best = self._repository.find_best_match(templates_dir, text, mode)
            templates = [best] if best else []
        else:
            templates = self._repository.list_templates(templates_dir, mode)

        for template in templates:
            result = self.parse_template(text, template)
            if result is not None:
                return result

        logger.info(f"No template in {templates_dir} matched")
        return None
