"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich), for scripts (``--quiet``,
bare values) or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from surisign.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, mirrored from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display. JSON wins over quiet, quiet over verbose."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        from surisign.output.renderers import render_quiet

        return render_quiet(result)

    from surisign.output.renderers import render_result

    return render_result(result, verbose=settings.verbose)
