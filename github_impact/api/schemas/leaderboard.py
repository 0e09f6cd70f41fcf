from pydantic import BaseModel


class LeaderboardUser(BaseModel):
    username: str
    score: int

    model_config = {"from_attributes": True}


class LeaderboardResponse(BaseModel):
    count: int
    users: list[LeaderboardUser]
