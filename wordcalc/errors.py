from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass
class CalcError(Exception):
    errmsg: str
    code: str = ""
    position: Optional[int] = None

    kind: ClassVar[str] = "Calculator error"

    def __str__(self) -> str:
        headline = f"[{self.kind}] {self.errmsg}"
        if not self.code or self.position is None:
            return headline
        print_start_idx = max(0, self.position - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.position + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                headline,
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.position - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class LexerError(CalcError):
    kind = "Lexer error"


class ParserError(CalcError):
    kind = "Parser error"
