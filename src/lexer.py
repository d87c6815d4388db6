"""
Lexical analysis for shell commands.

A line is scanned once, left to right. Outside quotes, blanks separate words
and a backslash takes the next character literally. Single quotes copy
everything up to the closing quote. Double quotes copy everything except
that \\, \\$ and \\" lose their backslash. Quoted and unquoted fragments that
touch are part of the same word.

An unquoted ``>``, ``1>`` or ``2>`` (``>>`` to append) ends the scan: the rest
of the line, trimmed, is taken literally as the target file.
"""
from command import Command, Redirect, Stream
from constants import BLANKS, DQUOTE_ESCAPES

FD_STREAMS = {"1": Stream.STDOUT, "2": Stream.STDERR}


def _scan_single(line: str, i: int, word: list[str]) -> int:
    """ Copy a single-quoted span starting after the quote; return the index after the close. """
    end = line.find("'", i)
    if end < 0:
        # unterminated: the quote runs to end of line
        word.append(line[i:])
        return len(line)
    word.append(line[i:end])
    return end + 1


def _scan_double(line: str, i: int, word: list[str]) -> int:
    """ Copy a double-quoted span starting after the quote; return the index after the close. """
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            return i + 1
        if ch == "\\":
            if i + 1 >= n:
                # lone trailing backslash is dropped
                return n
            nxt = line[i + 1]
            word.append(nxt if nxt in DQUOTE_ESCAPES else ch + nxt)
            i += 2
            continue
        word.append(ch)
        i += 1
    return n


def _fd_prefix(line: str, i: int, word: list[str]) -> Stream | None:
    """ Return the stream named by a bare digit word right before the '>' at line[i]. """
    if len(word) != 1 or word[0] not in FD_STREAMS:
        return None
    # the digit must be a whole unquoted word: `a1>f` and `'2'>f` are not fds
    if line[i - 1] != word[0]:
        return None
    if i >= 2 and line[i - 2] not in BLANKS:
        return None
    return FD_STREAMS[word[0]]


def _scan_redirect(line: str, i: int, word: list[str]) -> tuple[Redirect | None, bool]:
    """
    Handle the '>' at line[i].

    Returns the redirect (None when no target follows) and whether the pending
    word was consumed as a file descriptor.
    """
    stream = _fd_prefix(line, i, word)
    used_fd = stream is not None
    if stream is None:
        stream = Stream.STDOUT

    i += 1
    append = i < len(line) and line[i] == ">"
    if append:
        i += 1

    path = line[i:].strip()
    if not path:
        return None, used_fd
    return Redirect(stream, path, append), used_fd


def split_words(line: str) -> tuple[list[str], Redirect | None]:
    """ Split a line into words and an optional output redirection. """
    line = line.strip()
    words = []
    word = []   # fragments of the pending word
    redirect = None

    def flush():
        text = "".join(word)
        if text:
            words.append(text)
        word.clear()

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch in BLANKS:
            flush()
            i += 1
        elif ch == "\\":
            if i + 1 < n:
                word.append(line[i + 1])
            i += 2
        elif ch == "'":
            i = _scan_single(line, i + 1, word)
        elif ch == '"':
            i = _scan_double(line, i + 1, word)
        elif ch == ">":
            redirect, used_fd = _scan_redirect(line, i, word)
            if used_fd:
                word.clear()
            break
        else:
            word.append(ch)
            i += 1

    flush()
    return words, redirect


def tokenize(line: str) -> Command:
    words, redirect = split_words(line)
    return Command.from_words(words, redirect)
