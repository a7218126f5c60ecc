"""
Pydantic models for student records.

A student carries a numeric class identifier, a name and a free-form
gender.  On the wire the identifier is called ``classId``; in Python it
is ``class_id``.  Both spellings are accepted on input, responses
always use ``classId``.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StudentBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    class_id: int = Field(..., alias="classId", examples=[5])
    name: str = Field(..., min_length=1, examples=["New Student"])
    gender: str = Field(..., min_length=1, examples=["female"])

    @field_validator("class_id", mode="before")
    @classmethod
    def reject_bool_ids(cls, v):
        # JSON true/false would otherwise be coerced to 1/0
        if isinstance(v, bool):
            raise ValueError("classId must be an integer")
        return v


class StudentCreate(StudentBase):
    """Schema for adding a student to the roster."""
    pass


class StudentRead(StudentBase):
    """Schema for reading a student from the API."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
