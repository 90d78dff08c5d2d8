class CommandSetError(Exception):
    """Base class for command set errors."""


class CommandNotInitializedError(CommandSetError, RuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"You cannot use a non initialized command: {name}")
        self.name = name
