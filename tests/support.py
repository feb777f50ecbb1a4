from kungfu import Error, Ok, Result
from pydantic import BaseModel, ConfigDict, Field


def ok_value(outcome: Result) -> object:
    match outcome:
        case Ok(value):
            return value
        case _:
            raise AssertionError(f"expected Ok, got {outcome!r}")


def error_value(outcome: Result) -> object:
    match outcome:
        case Error(error):
            return error
        case _:
            raise AssertionError(f"expected Error, got {outcome!r}")


class Recorder:
    """Callback that records every outcome it receives."""

    def __init__(self):
        self.outcomes = []

    def __call__(self, outcome):
        self.outcomes.append(outcome)

    @property
    def only(self):
        assert len(self.outcomes) == 1, f"expected one outcome, got {self.outcomes!r}"
        return self.outcomes[0]

    @property
    def value(self):
        return ok_value(self.only)

    @property
    def error(self):
        return error_value(self.only)


class Deferred:
    """Operation that completes only when told to."""

    def __init__(self):
        self.callbacks = []

    def __call__(self, callback):
        self.callbacks.append(callback)

    def complete(self, outcome):
        for callback in self.callbacks:
            callback(outcome)


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    avatar_image_url: str = Field(alias="avatarImageUrl")

    @property
    def primary_key(self) -> str:
        return f"user-{self.name}"


USER_JSON = b'{"name": "Ada", "avatarImageUrl": "https://img.example.com/ada.png"}'
