# sdk/models.py
from decimal import Decimal
from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# wire integers are 32-bit; prices fit a 96-bit decimal
INT32_MAX = 2**31 - 1
MAX_PRICE = Decimal("79228162514264337593543950335")


class Category(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=-INT32_MAX - 1, le=INT32_MAX)
    name: str = Field(min_length=1, max_length=50)
    description: str = Field("", max_length=200)


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=-INT32_MAX - 1, le=INT32_MAX)
    name: str = Field(min_length=1, max_length=100)
    price: Decimal = Field(gt=0, le=MAX_PRICE)
    stock: int = Field(ge=0, le=INT32_MAX)
    category: Category


class ErrorKind(str, Enum):
    MALFORMED_JSON = "MalformedJson"
    UNRECOGNIZED_SHAPE = "UnrecognizedShape"
    NOT_FOUND = "NotFound"
    TIMEOUT = "Timeout"
    SERVER_ERROR = "ServerError"
    HTTP_ERROR = "HttpError"
    NETWORK_UNREACHABLE = "NetworkUnreachable"


# one fixed template per kind, shown to the user as-is
USER_MESSAGES = {
    ErrorKind.MALFORMED_JSON: "The server sent a response that could not be read.",
    ErrorKind.UNRECOGNIZED_SHAPE: "The server response was not in a recognised product format.",
    ErrorKind.NOT_FOUND: "No products are available right now.",
    ErrorKind.TIMEOUT: "The server took too long to respond.",
    ErrorKind.SERVER_ERROR: "The server ran into a problem while loading products.",
    ErrorKind.HTTP_ERROR: "The server returned an unexpected response.",
    ErrorKind.NETWORK_UNREACHABLE: "Could not reach the product server. Check that it is running.",
}


class Success(BaseModel):
    """Products extracted from a response.

    ``count`` is the count the server reported (or ``len(items)`` when it
    reported none) and may disagree with ``len(items)``.
    """
    model_config = ConfigDict(frozen=True)

    items: Tuple[Product, ...] = ()
    count: int = 0
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


ParsedResult = Union[Success, Failure]
