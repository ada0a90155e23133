from pydantic import BaseModel


class Stats(BaseModel):
    total_units: int
    available_units: int
    total_users: int
    members: int
