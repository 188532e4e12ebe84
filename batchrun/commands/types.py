from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSpec:
    program: str
    arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.program:
            raise ValueError("program can't be empty")

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.arguments]

    @property
    def line(self) -> str:
        return " ".join(self.argv)


class CommandFileError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
