"""Reference page composition.

Pages are produced as lightweight markup meant for a markdown-to-manpage
converter: `# ` and `#### ` headings, `**bold**` and `_emphasis_`. Exactly one
blank line separates sections and every page ends with a single newline.
"""

from __future__ import annotations

from .categories import see_also_pages
from .classifier import classify
from .collector import collect_arguments
from .constants import (
    ARG_TEXT_DYNAMIC_VALUE,
    ARG_TEXT_SIGNED_INT,
    ARG_TEXT_UNSIGNED_INT,
    ENV_DPRC,
    ENV_DPRC_DESCRIPTION,
    ENV_SOCK_PATH,
    ENV_SOCK_PATH_DESCRIPTION,
    HEADING,
    HELP_INDENT,
    MAN_SECTION,
    PROGRAM_TAGLINE,
    PROJECT_MAN_SECTION,
    REPORTING_BUGS,
    SECTION_ARGUMENTS,
    SECTION_ENVIRONMENT,
    SECTION_NAME,
    SECTION_OPTIONS,
    SECTION_REPORTING_BUGS,
    SECTION_SEE_ALSO,
    SECTION_SYNOPSIS,
    SUBHEADING,
    SYNOPSIS_CONTINUATION,
    TITLE_UNDERLINE_CHAR,
)
from .models import ArgumentEntry, GrammarNode, NodeKind, PageSettings
from .synopsis import SyntaxMode, render_option, render_synopsis

_ARGUMENT_TEXT_BY_KIND = {
    NodeKind.UNSIGNED_INT: ARG_TEXT_UNSIGNED_INT,
    NodeKind.SIGNED_INT: ARG_TEXT_SIGNED_INT,
    NodeKind.DYNAMIC_VALUE: ARG_TEXT_DYNAMIC_VALUE,
}


def render_program_page(options: GrammarNode, settings: PageSettings) -> str:
    """Render the program overview page from the program option nodes."""
    title = f'{settings.program.upper()} {MAN_SECTION} "{settings.project} {settings.version}"'
    tagline = PROGRAM_TAGLINE.format(project=settings.project)
    lines = _title_lines(title)
    lines += _section(SECTION_NAME)
    lines += [f"**{settings.program}** -- {tagline}", ""]

    lines += _section(SECTION_SYNOPSIS)
    lines.append(f"**{settings.program}**")
    for option in options.children:
        lines += render_option(option, SyntaxMode.SYNOPSIS)
    lines += [SYNOPSIS_CONTINUATION, ""]

    lines += _section(SECTION_OPTIONS)
    for option in options.children:
        lines += render_option(option, SyntaxMode.OPTION)

    lines += _section(SECTION_ENVIRONMENT)
    lines += [f"{SUBHEADING}**{ENV_DPRC}**", "", ENV_DPRC_DESCRIPTION, ""]
    lines += [
        f"{SUBHEADING}**{ENV_SOCK_PATH}**",
        "",
        ENV_SOCK_PATH_DESCRIPTION.format(sock_path=settings.sock_path),
        "",
    ]

    lines += _section(SECTION_SEE_ALSO)
    lines += [f"**{settings.project}**({PROJECT_MAN_SECTION})", ""]

    lines += _section(SECTION_REPORTING_BUGS)
    lines.append(
        REPORTING_BUGS.format(project=settings.project, bug_tracker=settings.bug_tracker)
    )
    return _join(lines)


def render_page_header(name: str, help_text: str | None, settings: PageSettings) -> list[str]:
    """Return the title and NAME section lines of a command page."""
    program = settings.program
    title = f'{program.upper()}-{name} {MAN_SECTION} "{settings.project} {settings.version}"'
    lines = _title_lines(title)
    lines += _section(SECTION_NAME)
    lines += [f"**{program}-{name}** -- {help_text or ''}", ""]
    return lines


def render_group_page(
    name: str,
    group: GrammarNode,
    settings: PageSettings,
    help_text: str | None = None,
    *,
    with_header: bool = False,
) -> str:
    """Render the page of a command group.

    group is the alternation whose children are the command variants sharing
    the group name. Each variant gets one synopsis line; arguments are
    collected across all variants with the first occurrence of an identifier
    winning.

    The page opens with the manual title and NAME section, or with a plain
    `# <name>` heading and the group help when with_header is set.
    """
    if with_header:
        lines = _section(name)
        group_help = group_help_text(group)
        if group_help is not None:
            lines += [group_help, ""]
    else:
        lines = render_page_header(name, help_text, settings)

    lines += _section(SECTION_SYNOPSIS)
    for variant in group.children:
        lines.append(f"**{name}**{render_synopsis(variant)}")
        variant_help = _variant_help_text(variant)
        if variant_help is not None:
            lines.append(f"{HELP_INDENT}{variant_help}")
        lines.append("")

    entries: list[ArgumentEntry] = []
    for variant in group.children:
        collect_arguments(variant, entries)

    lines += _section(SECTION_ARGUMENTS)
    for entry in entries:
        lines += _argument_lines(entry)

    lines += _section(SECTION_SEE_ALSO)
    lines.append(_see_also_line(settings.program, see_also_pages(name, entries)))
    return _join(lines)


def render_standalone_page(
    name: str,
    command: GrammarNode,
    settings: PageSettings,
    *,
    with_header: bool = False,
) -> str:
    """Render the page of a single command whose identifier is its full phrase."""
    if with_header:
        lines = _section(name)
        if command.help is not None:
            lines += [command.help, ""]
    else:
        lines = render_page_header(name, command.help, settings)

    lines += _section(SECTION_SYNOPSIS)
    head, sep, rest = command.node_id.partition(" ")
    lines += [f"**{head}**{sep}{rest}", ""]

    lines += _section(SECTION_SEE_ALSO)
    lines.append(_see_also_line(settings.program, []))
    return _join(lines)


def group_help_text(group: GrammarNode) -> str | None:
    """Return the help text of the first variant that has one."""
    for variant in group.children:
        if variant.help is not None:
            return variant.help
    return None


def _variant_help_text(variant: GrammarNode) -> str | None:
    if classify(variant) == NodeKind.SEQUENCE:
        if len(variant.children) >= 2:
            return variant.children[0].help
        return None
    return variant.help


def _argument_lines(entry: ArgumentEntry) -> list[str]:
    lines = [f"{SUBHEADING}_{entry.identifier}_", ""]
    body = entry.node.help
    if body is None:
        body = _ARGUMENT_TEXT_BY_KIND.get(classify(entry.node))
    if body is not None:
        lines += [body, ""]
    return lines


def _see_also_line(program: str, pages: list[str]) -> str:
    refs = [f"**{program}**({MAN_SECTION})"]
    refs += [f"**{program}-{page}**({MAN_SECTION})" for page in pages]
    return ", ".join(refs)


def _title_lines(title: str) -> list[str]:
    return [title, TITLE_UNDERLINE_CHAR * len(title), ""]


def _section(heading: str) -> list[str]:
    return [f"{HEADING}{heading}", ""]


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"
