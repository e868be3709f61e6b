"""Plain-text rendering of a graded run."""

from coreason_coderunner.models import GradingResult


def _indent(text: str, prefix: str = "      ") -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def render_report(result: GradingResult) -> str:
    """
    Render the output of a run, any error, then its test results.
    """
    sections = [result.output] if result.output else []
    if result.error is not None:
        sections.append(f"Error: {result.error}")
    if not sections:
        sections = ["No output"]

    if result.verdicts:
        lines = ["Test Results"]
        for verdict in result.verdicts:
            lines.append(f"[{'PASS' if verdict.passed else 'FAIL'}] {verdict.name}")
            if not verdict.passed:
                lines.append("    expected:")
                lines.append(_indent(verdict.expected))
                lines.append("    actual:")
                lines.append(_indent(verdict.actual))
        if result.all_passed:
            lines.append("All tests passed!")
        sections.append("\n".join(lines))

    return "\n\n".join(sections)
