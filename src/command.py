""" Command to be executed. """
import enum
from dataclasses import dataclass


class Stream(enum.Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(frozen=True)
class Redirect:
    """ Where one output stream of a command goes. """
    stream: Stream
    path: str
    append: bool = False   # True for >>

    def __post_init__(self):
        if not self.path:
            raise ValueError("redirect needs a target path")


@dataclass(frozen=True)
class Command:
    """ A parsed input line. """
    name: str
    args: tuple[str, ...] = ()
    redirect: Redirect | None = None

    def __post_init__(self):
        if not self.name and (self.args or self.redirect is not None):
            raise ValueError("a command without a name can have no arguments or redirect")

    @classmethod
    def blank(cls) -> "Command":
        return cls("")

    @classmethod
    def from_words(cls, words: list[str], redirect: Redirect | None = None) -> "Command":
        # a redirect with nothing to run is dropped along with the line
        if not words:
            return cls.blank()
        return cls(words[0], tuple(words[1:]), redirect)

    @property
    def is_blank(self) -> bool:
        return self.name == ""

    @property
    def target_path(self) -> str:
        return self.redirect.path if self.redirect else ""

    def redirects(self, stream: Stream) -> bool:
        return self.redirect is not None and self.redirect.stream is stream
