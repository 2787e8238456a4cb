"""JSON request/response bodies for the four entities and the login pair.

Missing fields fall back to zero values and unknown fields are ignored, so a
partially filled body is stored as-is. Present fields must already have the
right JSON type: no string-to-number or bool-to-int coercion, no NaN or
infinities, and integers must fit the 32-bit INTEGER columns.
"""
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]
Text = Annotated[str, Field(strict=True)]
Amount = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore", allow_inf_nan=False)

    id: Int32 = 0

    def fields(self) -> dict:
        """Mutable column values, i.e. everything except the id."""
        return self.model_dump(exclude={"id"})


class UserAccountRecord(_Record):
    username: Text = ""
    name: Text = ""
    pin: Int32 = 0


class BankAccountRecord(_Record):
    name: Text = ""
    ownerid: Int32 = 0


class BucketRecord(_Record):
    name: Text = ""
    ownerid: Int32 = 0


class LineItemRecord(_Record):
    title: Text = ""
    description: Text = ""
    amount: Amount = 0.0
    bucket: Int32 = 0
    bank: Int32 = 0
    ownerid: Int32 = 0


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Text = ""
    pin: Int32 = 0
