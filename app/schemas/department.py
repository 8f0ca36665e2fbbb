from pydantic import BaseModel, validator


class DepartmentIn(BaseModel):
    name: str
    url: str

    @validator("name", "url")
    def cannot_be_blank(cls, v: str):
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class DepartmentOut(BaseModel):
    id: int
    name: str
    url: str

    class Config:
        from_attributes = True
