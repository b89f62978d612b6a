"""Output buffer with indentation tracking."""


class Formatter:
    """Append-only output buffer plus an indentation depth.

    One formatter is created per stringify call and threaded through the
    traversal, so a stringifier can be reused safely.

    Args:
        indent_size: Spaces written per depth level
    """

    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size
        self.depth = 0
        self.length = 0
        self._chunks: list[str] = []

    def write(self, text: str, newline: bool = True, indent: bool = True) -> None:
        """Append a line (or a line fragment) to the buffer.

        Args:
            text: Content to write
            newline: Terminate the content with a line break
            indent: Prefix the content with the current indentation
        """
        indentation = " " * (self.indent_size * self.depth) if indent else ""
        chunk = indentation + text + ("\n" if newline else "")
        if chunk:
            self._chunks.append(chunk)
            self.length += len(chunk)

    def down(self) -> None:
        self.depth += 1

    def up(self) -> None:
        self.depth = max(0, self.depth - 1)

    def trim(self) -> None:
        """Drop the whitespace surrounding everything written so far.

        Used to pull inline text back onto the line of its opening tag.
        Leading whitespace is only ever removed once, from the final result.
        """
        while self._chunks:
            last = self._chunks[-1].rstrip()
            self.length -= len(self._chunks[-1]) - len(last)
            if last:
                self._chunks[-1] = last
                break
            self._chunks.pop()

    def getvalue(self) -> str:
        """Return the buffered output with surrounding whitespace removed."""
        return "".join(self._chunks).strip()
