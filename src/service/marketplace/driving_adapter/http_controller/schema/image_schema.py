from pydantic import BaseModel


class SampleImageResponse(BaseModel):
    id: int
    name: str
    url: str
    category: str
