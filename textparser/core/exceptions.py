"""Errors raised by the parsing core."""


class TemplateSyntaxError(ValueError):
    """Placeholder syntax in a template could not be recognized."""

    def __init__(self, source: str, fragment: str):
        self.source = source
        self.fragment = fragment
        super().__init__(f"Malformed placeholder in {source}: {fragment!r}")
