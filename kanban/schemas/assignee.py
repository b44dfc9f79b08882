from pydantic import BaseModel

class AssigneeRead(BaseModel):
    id: str
    name: str
    email: str
    avatar_url: str
