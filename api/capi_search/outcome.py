# Tagged success/failure values; the pipeline returns these instead of raising.
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import ValidationError

T = TypeVar("T")


class FetchError(Exception):
    kind = "error"


class TransportError(FetchError):
    kind = "transport"

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"request to {url} failed: {cause}")
        self.url = url
        self.cause = cause


class DeserializationError(FetchError):
    kind = "deserialization"

    def __init__(self, url: str, status_code: int | None, cause: BaseException):
        super().__init__(f"response from {url} (HTTP {status_code}) is not valid JSON: {cause}")
        self.url = url
        self.status_code = status_code
        self.cause = cause


@dataclass(frozen=True)
class Issue:
    loc: tuple[Union[str, int], ...]
    message: str
    kind: str = "value_error"

    @property
    def path(self) -> str:
        return ".".join(str(p) for p in self.loc) or "<root>"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ValidationFailed(FetchError):
    kind = "validation"

    def __init__(self, issues):
        self.issues: tuple[Issue, ...] = tuple(issues)
        super().__init__("; ".join(str(i) for i in self.issues) or "invalid payload")

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationFailed":
        return cls(
            Issue(loc=tuple(e["loc"]), message=e["msg"], kind=e["type"])
            for e in exc.errors()
        )

    @property
    def paths(self) -> list[str]:
        return [i.path for i in self.issues]


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    error: FetchError
    ok: Literal[False] = field(default=False, init=False)


FetchOutcome = Union[Success[T], Failure]


def describe(outcome: "FetchOutcome[Any]") -> str:
    if outcome.ok:
        return "ok"
    return f"{outcome.error.kind}: {outcome.error}"
