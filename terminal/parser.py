"""Command line parsing.

A raw line is split into a command part and an optional output redirection
target, then the command part is tokenized with shell-like quoting.

Redirection is detected on the raw text before tokenization, so a `>` inside
quotes still counts as a redirection operator.
"""

from typing import Optional

from pydantic import BaseModel, Field

APPEND_OPERATOR = ">>"
WRITE_OPERATOR = ">"
QUOTE_CHARS = ('"', "'")


class CommandInvocation(BaseModel):
    """A parsed command line.

    Args:
        raw: The trimmed input line.
        tokens: Parsed tokens; the first one is the command name.
        redirect_target: Target of `>`/`>>` as typed, or None.
        append: True for `>>`, False for `>`.
    """

    raw: str
    tokens: list[str] = Field(default_factory=list)
    redirect_target: Optional[str] = None
    append: bool = False

    @property
    def name(self) -> str:
        """Lower-cased command name, or empty string for an empty line."""
        return self.tokens[0].lower() if self.tokens else ""

    @property
    def args(self) -> list[str]:
        """Tokens after the command name."""
        return self.tokens[1:]

    @property
    def redirects(self) -> bool:
        """Whether output should go to a file."""
        return self.redirect_target is not None


def split_redirection(line: str) -> tuple[str, Optional[str], bool]:
    """Separate an output redirection from the command text.

    `>>` is looked for before `>`. Only one target is supported: the target is
    the text between the first and second occurrence of the operator, so
    anything after a second operator is dropped.

    Args:
        line: The raw command line.

    Returns:
        Tuple of (command_part, target or None, append flag).
    """
    for operator, append in ((APPEND_OPERATOR, True), (WRITE_OPERATOR, False)):
        if operator in line:
            parts = line.split(operator)
            return parts[0].strip(), parts[1].strip(), append
    return line, None, False


def tokenize(command: str) -> list[str]:
    """Split a command into tokens, honouring single and double quotes.

    Quote characters toggle quoting and are not emitted; only the quote
    character that opened a quoted run closes it. Unquoted spaces separate
    tokens. An unterminated quote extends to the end of the line.

    Args:
        command: Command text without any redirection.

    Returns:
        List of tokens (empty for a blank command).
    """
    tokens = []
    current = ""
    quote_char = None

    for char in command:
        if char in QUOTE_CHARS and (quote_char is None or quote_char == char):
            quote_char = None if quote_char else char
            continue

        if char == " " and quote_char is None:
            if current:
                tokens.append(current)
                current = ""
            continue

        current += char

    if current:
        tokens.append(current)

    return tokens


def parse_command_line(line: str) -> CommandInvocation:
    """Parse a raw command line into a CommandInvocation.

    Args:
        line: The line as entered by the user.

    Returns:
        The parsed invocation.
    """
    raw = line.strip()
    command, target, append = split_redirection(raw)
    return CommandInvocation(
        raw=raw,
        tokens=tokenize(command),
        redirect_target=target,
        append=append,
    )
