"""Domain errors raised by the services.

Each error is a ``RuntimeError`` whose message starts with a stable text
code, so routers can map it to an HTTP status with
``handle_runtime_errors``.
"""


class ReactionsError(RuntimeError):
    code = "internal_error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(f"{self.code}: {detail}" if detail else self.code)


class TuitNotFoundError(ReactionsError):
    code = "tuit_not_found"


class DuplicateReactionError(ReactionsError):
    code = "reaction_exists"


class StoreUnavailableError(ReactionsError):
    code = "store_unavailable"
