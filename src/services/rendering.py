"""Render a LookupResult as display text."""

from domain.model.translation import LookupResult
from port.formatter import Formatter

NO_RESULT_MESSAGE = "  没有对应的翻译"
TRANSLATION_HEADER = "  翻译结果："
SMART_RESULT_HEADER = "  智能结果："

INDENT = "    "
ENTRY_SEPARATOR = "    "


def render(result: LookupResult, fmt: Formatter) -> str:
    """Render a decoded result.

    Output is either the single no-result line, or a translation section
    (header, then source/target line pairs in input order) followed by the
    smart result section or one empty line.
    """
    if not result.has_translation:
        return fmt.red(NO_RESULT_MESSAGE)

    lines = [fmt.cyan(TRANSLATION_HEADER)]
    for sentence in result.iter_sentences():
        lines.append(INDENT + fmt.underline(sentence.source))
        lines.append(INDENT + sentence.target)

    if result.smart_result is not None:
        # Upstream entries carry trailing "\r\n" and empty placeholders
        entries = [e.strip() for e in result.smart_result.entries if e.strip()]
        lines.append("")
        lines.append(fmt.yellow(SMART_RESULT_HEADER))
        lines.append(INDENT + ENTRY_SEPARATOR.join(entries))
    else:
        lines.append("")

    return "\n".join(lines)
