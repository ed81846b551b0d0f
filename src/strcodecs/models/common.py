from __future__ import annotations
from pydantic import BaseModel, Field, model_validator

class QueryPair(BaseModel):
    """One key/value field of a query string, copied out of the source."""
    key: str
    value: str = ""
    has_value: bool = False
    key_offset: int = Field(..., ge=0)
    value_offset: int = Field(-1, ge=-1)

    @model_validator(mode="after")
    def _absent_value_is_empty(self) -> "QueryPair":
        if not self.has_value and self.value:
            raise ValueError("value given for a field without '='")
        return self

class SizeReport(BaseModel):
    n: int = Field(..., ge=0)
    encode_len: int
    encode_strlen: int
    decode_len: int
