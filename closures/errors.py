"""Errors"""


class InvalidArgumentError(ValueError):
    """Invalid argument given to a closure factory"""

    __slots__ = ("argument",)

    def __init__(self, argument: str, message: str | None = None) -> None:
        if message is None:
            message = f"invalid argument: {argument}"
        super().__init__(message)
        self.argument = argument

    def __reduce__(self):
        return (type(self), (self.argument, str(self)))


def require_callable(__func: object, argument: str = "fn"):
    """raise InvalidArgumentError unless __func is a defined callable"""

    if __func is None:
        raise InvalidArgumentError(argument, f"{argument} is not defined")
    if not callable(__func):
        raise InvalidArgumentError(argument, f"{argument} is not callable")
