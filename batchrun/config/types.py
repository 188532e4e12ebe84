from dataclasses import dataclass

DEFAULT_CONCURRENCY = 20


@dataclass(frozen=True)
class RunConfig:
    concurrency: int = DEFAULT_CONCURRENCY
    verbose: bool = False
    rewrite: bool = False

    def __post_init__(self) -> None:
        # bool is an int subclass, reject it explicitly
        if isinstance(self.concurrency, bool) or not isinstance(self.concurrency, int):
            raise ConfigError(
                f"concurrency must be an integer, got {type(self.concurrency)}"
            )

        if self.concurrency < 1:
            raise ConfigError(f"concurrency must be at least 1, got {self.concurrency}")

        for name in ("verbose", "rewrite"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be a boolean, got {type(value)}")


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
