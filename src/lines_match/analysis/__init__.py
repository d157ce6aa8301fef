"""Template inspection and result presentation for lines-match commands."""

from lines_match.analysis.template_inspector import (
    TemplateLine,
    TemplateLineKind,
    describe_line,
    describe_template,
)

__all__ = ["TemplateLine", "TemplateLineKind", "describe_line", "describe_template"]
